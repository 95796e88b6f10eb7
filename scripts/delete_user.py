"""Delete an account through the API from the command line."""

from __future__ import annotations

import argparse
import asyncio
import sys

from account_admin.interfaces.client import DeleteUserForm


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Delete a user account by username via POST /auth/delete/user.",
    )
    parser.add_argument("--username", required=True, help="Account to delete")
    parser.add_argument("--token", required=True, help="Bearer token of the caller")
    parser.add_argument(
        "--base-url",
        default=None,
        help="API base URL (default: API_BASE_URL setting)",
    )
    return parser.parse_args(argv)


def _print_notification(message: str, is_error: bool) -> None:
    print(message, file=sys.stderr if is_error else sys.stdout)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    form = DeleteUserForm(
        base_url=args.base_url,
        token=args.token,
        notify=_print_notification,
    )
    state = asyncio.run(form.submit(args.username))
    return 0 if state.ok else 1


if __name__ == "__main__":
    sys.exit(main())
