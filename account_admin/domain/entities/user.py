"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime

from .role import ADMIN_ROLE_ALIAS, Role


@dataclass
class User:
    """Core attributes describing an account, keyed by its unique username."""

    id: int | None
    role: Role
    username: str
    password: str
    is_active: bool
    created_at: datetime | None
    last_login: datetime | None

    def has_role(self, alias: str) -> bool:
        """Return ``True`` when the user's role alias matches ``alias``."""

        return self.role.alias.lower() == alias.lower()

    def is_admin(self) -> bool:
        """Return ``True`` when the user is an administrator."""

        return self.has_role(ADMIN_ROLE_ALIAS)
