"""Tests for settings loading."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from account_admin.config import Settings, get_settings, reset_settings_cache


def test_defaults_cover_optional_values(monkeypatch) -> None:
    monkeypatch.delenv("API_BASE_URL", raising=False)
    monkeypatch.delenv("DELETE_USER_REQUIRES_ADMIN", raising=False)

    settings = Settings(_env_file=None)

    assert settings.api_base_url == "http://localhost:4001"
    assert settings.delete_user_requires_admin is True
    assert settings.access_token_expire_minutes == 30


def test_environment_overrides_are_picked_up_after_cache_reset(monkeypatch) -> None:
    monkeypatch.setenv("API_BASE_URL", "https://accounts.example.com")
    reset_settings_cache()
    try:
        assert get_settings().api_base_url == "https://accounts.example.com"
    finally:
        monkeypatch.delenv("API_BASE_URL")
        reset_settings_cache()


def test_secret_key_is_required(monkeypatch) -> None:
    monkeypatch.delenv("SECRET_KEY", raising=False)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("http://a.example", ["http://a.example"]),
        ("http://a.example, http://b.example", ["http://a.example", "http://b.example"]),
        ('["http://a.example", "http://b.example"]', ["http://a.example", "http://b.example"]),
    ],
    ids=["single", "comma-separated", "json-array"],
)
def test_cors_origins_accepts_plain_and_json_lists(monkeypatch, raw, expected) -> None:
    monkeypatch.setenv("CORS_ORIGINS", raw)

    settings = Settings(_env_file=None)

    assert settings.cors_origins == expected
