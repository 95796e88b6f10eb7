"""Database configuration and session management."""

from __future__ import annotations

from collections.abc import Generator

import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from account_admin.config import get_settings


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""


settings = get_settings()

logger = logging.getLogger(__name__)


def _build_engine_kwargs(database_url: str) -> dict:
    """Return engine options suited to the configured backend."""

    if database_url.startswith("sqlite"):
        # Sessions are handed across FastAPI's threadpool workers.
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}


def _normalize_database_url(raw_url: str) -> str:
    """Map legacy ``postgres://`` URLs to the SQLAlchemy dialect name."""

    if raw_url.startswith("postgres://"):
        logger.debug("Rewriting postgres:// database URL to postgresql+psycopg2://")
        return raw_url.replace("postgres://", "postgresql+psycopg2://", 1)
    return raw_url


database_url = _normalize_database_url(settings.database_url)
engine = create_engine(database_url, **_build_engine_kwargs(database_url))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def initialize_database() -> None:
    """Ensure all ORM models have corresponding database tables."""

    from account_admin.infrastructure import models  # noqa: F401  # ensure models are imported

    Base.metadata.create_all(bind=engine, checkfirst=True)


def get_db() -> Generator[Session, None, None]:
    """Yield a database session and close it afterwards."""

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
