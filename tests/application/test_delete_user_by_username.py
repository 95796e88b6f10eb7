"""Unit tests for the delete-by-username use case and its repository call."""

from __future__ import annotations

import pytest
from sqlalchemy.exc import OperationalError

from account_admin.application.use_cases.users import (
    UserNotFoundError,
    create_user,
    delete_user_by_username,
)
from account_admin.infrastructure.repositories import UserRepository


def test_returns_deleted_username(db_session) -> None:
    create_user(db_session, username="alice", password="secret")

    assert delete_user_by_username(db_session, "alice") == "alice"
    assert UserRepository(db_session).get_by_username("alice") is None


@pytest.mark.parametrize("username", [None, ""])
def test_missing_username_raises_value_error(db_session, username) -> None:
    with pytest.raises(ValueError, match="Username is required"):
        delete_user_by_username(db_session, username)


def test_unknown_username_raises_not_found(db_session) -> None:
    with pytest.raises(UserNotFoundError) as exc_info:
        delete_user_by_username(db_session, "nobody")

    assert str(exc_info.value) == "User nobody not found."
    assert exc_info.value.username == "nobody"


def test_whitespace_username_is_not_trimmed(db_session) -> None:
    create_user(db_session, username="bob", password="secret")

    with pytest.raises(UserNotFoundError):
        delete_user_by_username(db_session, " bob ")
    assert UserRepository(db_session).get_by_username("bob") is not None


def test_delete_by_username_reports_row_count(db_session) -> None:
    create_user(db_session, username="carol", password="secret")
    repository = UserRepository(db_session)

    assert repository.delete_by_username("carol") == 1
    assert repository.delete_by_username("carol") == 0


def test_delete_by_username_rolls_back_on_database_error(db_session, monkeypatch) -> None:
    rolled_back: list[bool] = []

    def failing_execute(*args, **kwargs):
        raise OperationalError("DELETE FROM user", {}, Exception("database is locked"))

    monkeypatch.setattr(db_session, "execute", failing_execute)
    monkeypatch.setattr(db_session, "rollback", lambda: rolled_back.append(True))

    with pytest.raises(OperationalError):
        UserRepository(db_session).delete_by_username("dave")
    assert rolled_back == [True]


def test_create_user_rejects_duplicate_username(db_session) -> None:
    create_user(db_session, username="erin", password="secret")

    with pytest.raises(ValueError, match="already exists"):
        create_user(db_session, username="erin", password="other")
