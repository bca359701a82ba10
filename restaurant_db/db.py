# restaurant_db/db.py
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from .config import Settings, safe_url

logger = logging.getLogger(__name__)


Base = declarative_base()


def make_engine(url: str, echo: bool = False, pool_size: int = 5) -> Engine:
    kwargs = {"echo": echo, "pool_pre_ping": True}
    if make_url(url).get_backend_name() != "sqlite":
        kwargs["pool_size"] = pool_size
    return create_engine(url, **kwargs)


class Database:
    """The application's connection pool plus a session factory.

    Built once at startup and passed to whatever needs storage; call
    ``dispose()`` (or use it as a context manager) on shutdown.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self.session_factory = sessionmaker(bind=engine, expire_on_commit=False)

    @classmethod
    def from_url(cls, url: str, echo: bool = False, pool_size: int = 5) -> "Database":
        logger.info("Opening database pool for %s", safe_url(url))
        return cls(make_engine(url, echo=echo, pool_size=pool_size))

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls.from_url(
            settings.database_url,
            echo=settings.echo_sql,
            pool_size=settings.pool_size,
        )

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Session that commits on success and rolls back on error."""
        db = self.session_factory()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def dispose(self) -> None:
        self.engine.dispose()

    def __enter__(self) -> "Database":
        return self

    def __exit__(self, *exc) -> None:
        self.dispose()
