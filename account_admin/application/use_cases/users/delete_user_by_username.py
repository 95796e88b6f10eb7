"""Use case for deleting an account identified by its username."""

import logging

from sqlalchemy.orm import Session

from account_admin.infrastructure.repositories import UserRepository

logger = logging.getLogger(__name__)

USERNAME_REQUIRED_MESSAGE = "Username is required"


class MissingUsernameError(ValueError):
    """Raised when the request carries no username."""

    def __init__(self) -> None:
        super().__init__(USERNAME_REQUIRED_MESSAGE)


class UserNotFoundError(LookupError):
    """Raised when no account matches the requested username."""

    def __init__(self, username: str) -> None:
        super().__init__(f"User {username} not found.")
        self.username = username


def delete_user_by_username(session: Session, username: str | None) -> str:
    """Hard-delete the account named ``username`` and return that username.

    Raises ``MissingUsernameError`` before touching the database when
    ``username`` is absent or empty, and ``UserNotFoundError`` when the delete
    matched no row. Persistence errors propagate unchanged.
    """

    if not username:
        raise MissingUsernameError()

    deleted = UserRepository(session).delete_by_username(username)
    if not deleted:
        raise UserNotFoundError(username)

    logger.info("Deleted user %s", username)
    return username
