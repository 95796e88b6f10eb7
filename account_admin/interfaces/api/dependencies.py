"""FastAPI dependency utilities."""

import logging
from collections.abc import Callable

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from account_admin.config import get_settings
from account_admin.domain.entities import User
from account_admin.infrastructure.database import get_db
from account_admin.infrastructure.repositories import UserRepository
from account_admin.infrastructure.security import decode_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token")
logger = logging.getLogger(__name__)


def _credentials_exception() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )


def resolve_current_user(token: str, db: Session) -> User:
    """Resolve the authenticated user for the provided token."""

    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise _credentials_exception() from exc

    username = payload.get("sub")
    if not isinstance(username, str) or not username:
        raise _credentials_exception()

    user = UserRepository(db).get_by_username(username)
    if user is None:
        raise _credentials_exception()
    return user


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Return the authenticated user from the provided token."""

    return resolve_current_user(token, db)


def get_current_active_user(current_user: User = Depends(get_current_user)) -> User:
    """Ensure the authenticated user is active."""

    if not current_user.is_active:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Inactive user",
        )
    return current_user


def authorization(*, is_admin: bool | None = None) -> Callable[..., User]:
    """Build a dependency that checks the caller's privileges.

    ``is_admin=True`` admits administrators only, ``is_admin=False`` admits any
    active user. With ``None`` the requirement is read from
    ``Settings.delete_user_requires_admin`` on every request.
    """

    def dependency(current_user: User = Depends(get_current_active_user)) -> User:
        requires_admin = (
            get_settings().delete_user_requires_admin if is_admin is None else is_admin
        )
        if requires_admin and not current_user.is_admin():
            logger.warning(
                "User %s denied access to an administrator-only route",
                current_user.username,
            )
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Not authorized",
            )
        return current_user

    return dependency
