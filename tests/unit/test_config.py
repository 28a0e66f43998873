"""Settings validation (database driver, log level, Slack timeout)."""

import pytest
from pydantic import ValidationError

from app.core.config import Settings


def test_defaults_allow_running_without_database(monkeypatch) -> None:
    monkeypatch.delenv("DATABASE_URL", raising=False)
    settings = Settings(_env_file=None)
    assert settings.database_url == ""
    assert settings.workflows_enabled is True


def test_log_level_is_normalized() -> None:
    assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"


def test_invalid_log_level_is_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_level="chatty")


def test_database_url_must_use_asyncpg() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, database_url="postgresql://u:p@localhost/db")
    ok = Settings(_env_file=None, database_url="postgresql+asyncpg://u:p@localhost/db")
    assert ok.database_url.startswith("postgresql+asyncpg")


def test_slack_timeout_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, slack_timeout_seconds=0)
