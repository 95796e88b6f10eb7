"""Submit handler for the delete-user form.

The handler posts the entered username to ``/auth/delete/user`` and hands the
outcome to a ``notify`` callback instead of blocking the UI. The returned
:class:`FormState` lets the caller render the result as well.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

import httpx

from account_admin.config import get_settings

logger = logging.getLogger(__name__)

DELETE_USER_PATH = "/auth/delete/user"

Notifier = Callable[[str, bool], None]


@dataclass(frozen=True)
class FormState:
    """Outcome of a single form submission."""

    ok: bool
    message: str
    status_code: int | None = None


def _log_notification(message: str, is_error: bool) -> None:
    logger.log(logging.WARNING if is_error else logging.INFO, "%s", message)


class DeleteUserForm:
    """Bind the delete-user form to an API base URL and a notification sink."""

    def __init__(
        self,
        *,
        base_url: str | None = None,
        token: str | None = None,
        notify: Notifier | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 10.0,
    ) -> None:
        self.base_url = (base_url or get_settings().api_base_url).rstrip("/")
        self.token = token
        self.notify = notify or _log_notification
        self._transport = transport
        self._timeout = timeout
        self.state: FormState | None = None

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def submit(self, username: str) -> FormState:
        """Send the deletion request for ``username`` and report the outcome."""

        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                transport=self._transport,
                timeout=self._timeout,
            ) as client:
                response = await client.post(
                    DELETE_USER_PATH,
                    json={"username": username},
                    headers=self._headers(),
                )
            result = response.json()
        except Exception as exc:  # noqa: BLE001 - every failure is reported through notify
            logger.debug("Delete-user request for %s failed", username, exc_info=True)
            state = FormState(ok=False, message=f"An unexpected error occurred: {exc}")
        else:
            message = self._extract_message(result)
            if response.is_success:
                state = FormState(ok=True, message=message, status_code=response.status_code)
            else:
                state = FormState(
                    ok=False,
                    message=f"Error: {message}",
                    status_code=response.status_code,
                )

        self.state = state
        self.notify(state.message, not state.ok)
        return state

    @staticmethod
    def _extract_message(result: object) -> str:
        # Guard failures use FastAPI's ``detail`` key rather than ``message``.
        if isinstance(result, dict):
            message = result.get("message", result.get("detail"))
            if message is not None:
                return str(message)
        return str(result)
