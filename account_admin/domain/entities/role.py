"""Domain entity representing a user role."""

from dataclasses import dataclass

ADMIN_ROLE_ALIAS = "admin"
USER_ROLE_ALIAS = "user"


@dataclass
class Role:
    """Core attributes describing a role that can be assigned to a user."""

    id: int | None
    name: str
    alias: str


__all__ = ["ADMIN_ROLE_ALIAS", "USER_ROLE_ALIAS", "Role"]
