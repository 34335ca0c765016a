"""Tests for Settings validation and derived values."""

import pytest
from pydantic import ValidationError

from teamauth.core.config import Settings

REQUIRED = {
    "database_url": "postgresql+asyncpg://u:p@localhost/db",
    "secret_key": "s3cret",
}


def test_defaults() -> None:
    settings = Settings(_env_file=None, **REQUIRED)
    assert settings.check_if_user_has_permission is True
    assert settings.cache_ttl_permissions == 900
    assert settings.cache_ttl_permission_keys == 30
    assert settings.communication_queue_workers == 1


def test_database_url_required(monkeypatch) -> None:
    monkeypatch.delenv("DATABASE_URL", raising=False)
    with pytest.raises(ValidationError, match="DATABASE_URL"):
        Settings(_env_file=None, secret_key="s3cret")


def test_secret_key_required(monkeypatch) -> None:
    monkeypatch.delenv("SECRET_KEY", raising=False)
    with pytest.raises(ValidationError, match="SECRET_KEY"):
        Settings(_env_file=None, database_url=REQUIRED["database_url"])


def test_queue_workers_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, communication_queue_workers=0, **REQUIRED)


def test_superadmin_email_list_is_normalized() -> None:
    settings = Settings(
        _env_file=None, superadmin_emails=" Root@Example.com, ,ops@example.com", **REQUIRED
    )
    assert settings.superadmin_email_list == ["root@example.com", "ops@example.com"]


def test_bypass_flag_from_env(monkeypatch) -> None:
    monkeypatch.setenv("BYPASS_SECURITY", "true")
    assert Settings(_env_file=None, **REQUIRED).bypass_security is True
