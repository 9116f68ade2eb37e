"""
Test settings loading from the environment.

Verifies that every settings section reads its variables, applies defaults
and rejects invalid values.
"""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from order_core.settings import ApplicationSettings, DatabaseSettings, get_settings

ENV_KEYS = ("APP_NAME", "ENVIRONMENT", "LOG_LEVEL", "DB_DATABASE_URL", "DB_ECHO_SQL")


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """No inherited variables and no stray .env file."""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


def _collect_alias_map(model) -> dict[str, str]:
    """Return map: ENV_ALIAS -> field_name for a settings model."""
    return {
        field.alias: name
        for name, field in type(model).model_fields.items()
        if field.alias
    }


def test_defaults(clean_env):
    settings = get_settings()

    assert settings.app.app_name == "delivery-order-core"
    assert settings.app.environment == "development"
    assert settings.app.log_level == "INFO"
    assert settings.database.database_url == "sqlite+aiosqlite:///./orders.db"
    assert settings.database.echo_sql is False


def test_environment_variables(clean_env):
    clean_env.setenv("APP_NAME", "orders-eu")
    clean_env.setenv("ENVIRONMENT", "production")
    clean_env.setenv("LOG_LEVEL", "warning")
    clean_env.setenv("DB_DATABASE_URL", "postgresql+asyncpg://orders@db/orders")
    clean_env.setenv("DB_ECHO_SQL", "true")

    settings = get_settings()

    assert settings.app.app_name == "orders-eu"
    assert settings.app.environment == "production"
    assert settings.app.log_level == "WARNING"
    assert settings.database.database_url == "postgresql+asyncpg://orders@db/orders"
    assert settings.database.echo_sql is True


def test_dotenv_file(clean_env, tmp_path):
    (tmp_path / ".env").write_text("APP_NAME=from-dotenv\nDB_ECHO_SQL=1\nUNRELATED=x\n", encoding="utf-8")

    settings = get_settings()

    assert settings.app.app_name == "from-dotenv"
    assert settings.database.echo_sql is True


def test_settings_are_cached(clean_env):
    first = get_settings()
    clean_env.setenv("APP_NAME", "changed")

    assert get_settings() is first

    get_settings.cache_clear()
    assert get_settings().app.app_name == "changed"


@pytest.mark.parametrize("key,value", [("LOG_LEVEL", "LOUD"), ("ENVIRONMENT", "staging")])
def test_invalid_values(clean_env, key, value):
    clean_env.setenv(key, value)

    with pytest.raises(ValidationError):
        ApplicationSettings()


def test_every_alias_is_an_env_key(clean_env):
    aliases = _collect_alias_map(ApplicationSettings())

    assert set(aliases) == {"APP_NAME", "ENVIRONMENT", "LOG_LEVEL"}
    assert DatabaseSettings.model_config["env_prefix"] == "DB_"
