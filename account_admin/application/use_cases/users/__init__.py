"""Use cases for managing users."""

from .authenticate_user import AuthenticationStatus, authenticate_user
from .create_user import create_user
from .delete_user_by_username import (
    MissingUsernameError,
    UserNotFoundError,
    delete_user_by_username,
)
from .record_login import record_login

__all__ = [
    "AuthenticationStatus",
    "MissingUsernameError",
    "UserNotFoundError",
    "authenticate_user",
    "create_user",
    "delete_user_by_username",
    "record_login",
]
