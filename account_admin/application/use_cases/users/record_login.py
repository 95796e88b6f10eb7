"""Use case for registering the last login of a user."""

from datetime import datetime, timezone

from sqlalchemy.orm import Session

from account_admin.infrastructure.repositories import UserRepository


def record_login(session: Session, user_id: int) -> None:
    """Persist the last login timestamp for the given user."""

    repository = UserRepository(session)
    user = repository.get(user_id)
    if not user:
        return

    # Stored naive, in UTC.
    user.last_login = datetime.now(timezone.utc).replace(tzinfo=None)
    repository.update(user)
