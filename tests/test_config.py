from __future__ import annotations

import pytest
from sqlalchemy.engine import make_url

from restaurant_db.config import (
    DEV_DATABASE_URL,
    ConfigError,
    Settings,
    normalize_database_url,
    safe_url,
)


def test_database_url_required_outside_development():
    with pytest.raises(ConfigError, match="DATABASE_URL"):
        Settings.from_env({})


def test_blank_database_url_counts_as_missing():
    with pytest.raises(ConfigError):
        Settings.from_env({"DATABASE_URL": "   ", "APP_ENV": "production"})


def test_development_default_url():
    settings = Settings.from_env({"APP_ENV": "development"})

    assert settings.is_development
    assert settings.database_url == DEV_DATABASE_URL


def test_explicit_url_wins_in_development():
    settings = Settings.from_env(
        {"APP_ENV": "Development", "DATABASE_URL": "sqlite:///dev.db"}
    )

    assert settings.database_url == "sqlite:///dev.db"
    assert settings.environment == "development"


def test_defaults():
    settings = Settings.from_env({"DATABASE_URL": "sqlite://"})

    assert settings.environment == "production"
    assert settings.echo_sql is False
    assert settings.pool_size == 5
    assert settings.log_level == "INFO"


def test_optional_settings_parsed():
    settings = Settings.from_env(
        {
            "DATABASE_URL": "sqlite://",
            "DB_ECHO": "true",
            "DB_POOL_SIZE": "12",
            "LOG_LEVEL": "debug",
        }
    )

    assert settings.echo_sql is True
    assert settings.pool_size == 12
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("raw", ["many", "0", "-3"])
def test_bad_pool_size(raw):
    with pytest.raises(ConfigError, match="DB_POOL_SIZE"):
        Settings.from_env({"DATABASE_URL": "sqlite://", "DB_POOL_SIZE": raw})


def test_bad_log_level():
    with pytest.raises(ConfigError, match="LOG_LEVEL"):
        Settings.from_env({"DATABASE_URL": "sqlite://", "LOG_LEVEL": "loud"})


# -------------------
# URL normalization
# -------------------
@pytest.mark.parametrize("scheme", ["postgres", "postgresql"])
def test_plain_postgres_urls_use_psycopg(scheme):
    url = make_url(normalize_database_url(f"{scheme}://chef:pw@db:5432/restaurant_db"))

    assert url.drivername == "postgresql+psycopg"
    assert url.username == "chef"
    assert url.password == "pw"
    assert url.host == "db"
    assert url.database == "restaurant_db"


def test_schema_query_becomes_search_path():
    url = make_url(
        normalize_database_url("postgresql://chef@localhost:5433/restaurant_db?schema=public")
    )

    assert "schema" not in url.query
    assert url.query["options"] == "-csearch_path=public"


def test_explicit_driver_and_sqlite_untouched():
    assert (
        normalize_database_url("postgresql+asyncpg://chef@db/restaurant_db")
        == "postgresql+asyncpg://chef@db/restaurant_db"
    )
    assert normalize_database_url("sqlite:///orders.db") == "sqlite:///orders.db"


def test_invalid_url():
    with pytest.raises(ConfigError, match="Invalid DATABASE_URL"):
        normalize_database_url("not a url")


def test_safe_url_masks_password():
    shown = safe_url("postgresql+psycopg://chef:s3cret@db/restaurant_db")

    assert "s3cret" not in shown
    assert "chef:***@db" in shown
