"""Tests for the authentication token endpoint."""

from __future__ import annotations

from fastapi.testclient import TestClient

from account_admin.infrastructure.repositories import UserRepository
from tests.factories import DEFAULT_PASSWORD, add_user


def _login(client: TestClient, username: str, password: str):
    return client.post(
        "/auth/token",
        data={"username": username, "password": password},
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )


def test_login_returns_bearer_token_and_records_login(client: TestClient, db_session) -> None:
    add_user("admin", admin=True)

    response = _login(client, "admin", DEFAULT_PASSWORD)

    assert response.status_code == 200
    payload = response.json()
    assert payload["token_type"] == "bearer"
    assert payload["role"] == "admin"
    assert payload["access_token"]
    assert UserRepository(db_session).get_by_username("admin").last_login is not None


def test_issued_token_authenticates_current_user(client: TestClient) -> None:
    add_user("walter")
    token = _login(client, "walter", DEFAULT_PASSWORD).json()["access_token"]

    response = client.get("/users/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    assert response.json()["username"] == "walter"
    assert response.json()["role"]["alias"] == "user"


def test_wrong_password_is_rejected(client: TestClient) -> None:
    add_user("peggy")

    response = _login(client, "peggy", "not-the-password")

    assert response.status_code == 401
    assert response.json()["detail"] == "Incorrect username or password"


def test_unknown_username_is_rejected(client: TestClient) -> None:
    response = _login(client, "ghost", DEFAULT_PASSWORD)

    assert response.status_code == 401


def test_inactive_user_cannot_log_in(client: TestClient) -> None:
    add_user("trent", is_active=False)

    response = _login(client, "trent", DEFAULT_PASSWORD)

    assert response.status_code == 403
    assert response.json()["detail"] == "Inactive user"
