# restaurant_db/config.py
from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel
from sqlalchemy.engine import URL, make_url

# Load .env locally (safe in prod too; real env vars win)
load_dotenv()


# Only used when APP_ENV=development. Never a production fallback.
DEV_DATABASE_URL = "postgresql+psycopg://postgres@localhost:5433/restaurant_db"

_TRUTHY = {"1", "true", "yes", "on"}


class ConfigError(RuntimeError):
    """Raised when the environment does not describe a usable configuration."""


# -------------------
# Config (env-driven)
# -------------------
class Settings(BaseModel):
    database_url: str
    environment: str = "production"
    echo_sql: bool = False
    pool_size: int = 5
    log_level: str = "INFO"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ

        environment = (env.get("APP_ENV") or "production").strip().lower()
        raw_url = (env.get("DATABASE_URL") or "").strip()
        if not raw_url:
            if environment != "development":
                raise ConfigError(
                    "DATABASE_URL is not set. Set it, or set APP_ENV=development "
                    f"to use the local default ({DEV_DATABASE_URL})."
                )
            raw_url = DEV_DATABASE_URL

        return cls(
            database_url=normalize_database_url(raw_url),
            environment=environment,
            echo_sql=(env.get("DB_ECHO") or "").strip().lower() in _TRUTHY,
            pool_size=_int_setting(env, "DB_POOL_SIZE", 5),
            log_level=_log_level_setting(env),
        )


def _log_level_setting(env: Mapping[str, str]) -> str:
    level = (env.get("LOG_LEVEL") or "INFO").strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"LOG_LEVEL {level!r} is not a logging level")
    return level


def _int_setting(env: Mapping[str, str], name: str, default: int) -> int:
    raw = (env.get(name) or "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None
    if value < 1:
        raise ConfigError(f"{name} must be positive, got {value}")
    return value


def normalize_database_url(raw: str) -> str:
    """Turn a libpq/Prisma style URL into one SQLAlchemy can open with psycopg.

    ``postgres://`` and ``postgresql://`` select the psycopg driver, and a
    ``?schema=name`` query parameter becomes ``options=-csearch_path=name``.
    Other URLs (sqlite, explicit drivers) pass through untouched.
    """
    try:
        url = make_url(raw)
    except Exception as e:
        raise ConfigError(f"Invalid DATABASE_URL: {e}") from e

    if url.drivername in {"postgres", "postgresql"}:
        url = url.set(drivername="postgresql+psycopg")

    if url.get_backend_name() == "postgresql" and "schema" in url.query:
        schema = url.query["schema"]
        if isinstance(schema, tuple):
            schema = schema[-1]
        url = url.difference_update_query(["schema"])
        if schema and "options" not in url.query:
            url = url.update_query_dict({"options": f"-csearch_path={schema}"})

    return url.render_as_string(hide_password=False)


def safe_url(url: str | URL) -> str:
    """URL with the password masked, for log lines."""
    return make_url(url).render_as_string(hide_password=True)
