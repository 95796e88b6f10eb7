"""Use case for registering a new account."""

from sqlalchemy.orm import Session

from account_admin.domain.entities import USER_ROLE_ALIAS, User
from account_admin.infrastructure.repositories import RoleRepository, UserRepository
from account_admin.infrastructure.security import get_password_hash


def create_user(
    session: Session,
    *,
    username: str,
    password: str,
    role_alias: str = USER_ROLE_ALIAS,
    is_active: bool = True,
) -> User:
    """Create an account with a hashed password under the requested role."""

    username = (username or "").strip()
    if not username:
        raise ValueError("Username is required")
    if not password:
        raise ValueError("Password is required")

    repository = UserRepository(session)
    if repository.get_by_username(username) is not None:
        raise ValueError(f"User {username} already exists.")

    role = RoleRepository(session).get_or_create(role_alias)
    user = User(
        id=None,
        role=role,
        username=username,
        password=get_password_hash(password),
        is_active=is_active,
        created_at=None,
        last_login=None,
    )
    return repository.create(user)
