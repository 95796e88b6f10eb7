"""Shared fixtures: a throwaway SQLite database and an application client."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import pytest

TEST_DB_PATH = Path(tempfile.gettempdir()) / "account_admin_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"
os.environ.pop("DELETE_USER_REQUIRES_ADMIN", None)

from account_admin.config import reset_settings_cache  # noqa: E402

reset_settings_cache()

from fastapi.testclient import TestClient  # noqa: E402

from account_admin.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from account_admin.main import create_app  # noqa: E402


@pytest.fixture(autouse=True)
def reset_database():
    """Ensure the test database starts from a clean state for each test."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def app():
    return create_app()


@pytest.fixture()
def client(app):
    """Return a test client bound to a clean application instance."""

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def db_session():
    with SessionLocal() as session:
        yield session


@pytest.fixture()
def allow_non_admin_deletes(monkeypatch):
    """Relax the delete route so any authenticated user may call it."""

    monkeypatch.setenv("DELETE_USER_REQUIRES_ADMIN", "false")
    reset_settings_cache()
    yield
    reset_settings_cache()
