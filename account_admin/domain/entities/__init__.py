"""Domain entities exposed by the application."""

from .role import ADMIN_ROLE_ALIAS, USER_ROLE_ALIAS, Role
from .user import User

__all__ = [
    "ADMIN_ROLE_ALIAS",
    "USER_ROLE_ALIAS",
    "Role",
    "User",
]
