"""Utility script to create an initial user in the database."""

from __future__ import annotations

import argparse
from getpass import getpass

from sqlalchemy.exc import SQLAlchemyError

from account_admin.application.use_cases.users import create_user
from account_admin.domain.entities import ADMIN_ROLE_ALIAS, USER_ROLE_ALIAS
from account_admin.infrastructure.database import SessionLocal, initialize_database


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments for user creation."""

    parser = argparse.ArgumentParser(
        description="Create an initial user for the Account Admin API.",
    )
    parser.add_argument(
        "--username",
        default="admin",
        help="Username of the new account (default: admin)",
    )
    parser.add_argument(
        "--password",
        default=None,
        help="Account password. Prompted for interactively when omitted.",
    )
    parser.add_argument(
        "--role",
        choices=[ADMIN_ROLE_ALIAS, USER_ROLE_ALIAS],
        default=ADMIN_ROLE_ALIAS,
        help="Role assigned to the account (default: admin)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Create a user using the provided command line arguments."""

    args = parse_args(argv)

    password = args.password or getpass("Password: ")
    if not password:
        raise SystemExit("No valid password was provided.")

    initialize_database()

    session = SessionLocal()
    try:
        user = create_user(
            session,
            username=args.username,
            password=password,
            role_alias=args.role,
        )
    except ValueError as exc:
        session.rollback()
        raise SystemExit(f"Could not create the user: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Error saving the user to the database: {exc}") from exc
    else:
        print(
            "User created:\n"
            f"  ID: {user.id}\n"
            f"  Username: {user.username}\n"
            f"  Role: {user.role.alias}"
        )
    finally:
        session.close()


if __name__ == "__main__":
    main()
