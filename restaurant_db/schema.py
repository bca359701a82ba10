# restaurant_db/schema.py
"""Startup schema bootstrap.

Creates the ``orders`` and ``users`` tables when they are missing and seeds a
default administrator the first time ``users`` is empty. Every step runs on
its own pooled connection and transaction, one after the other; the first
failure is logged and re-raised unchanged, with no retry.
"""
from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import func, insert, select

from .auth import hash_password
from .config import Settings
from .db import Database
from .models import Order, Role, User

logger = logging.getLogger(__name__)

DEFAULT_ADMIN_USERNAME = "admin"
DEFAULT_ADMIN_PASSWORD = "admin0617"


def initialize(database: Database) -> bool:
    """Ensure both tables exist and seed the admin user into an empty ``users``.

    Returns True when the admin row was inserted by this call.
    """
    engine = database.engine
    try:
        with engine.begin() as conn:
            Order.__table__.create(conn, checkfirst=True)
        logger.info("Orders table initialized successfully")

        with engine.begin() as conn:
            User.__table__.create(conn, checkfirst=True)
        logger.info("Users table initialized successfully")

        with engine.connect() as conn:
            user_count = conn.execute(select(func.count()).select_from(User.__table__)).scalar_one()

        if user_count != 0:
            logger.debug("users has %d row(s); skipping admin seed", user_count)
            return False

        password_hash = hash_password(DEFAULT_ADMIN_PASSWORD)
        with engine.begin() as conn:
            conn.execute(
                insert(User.__table__).values(
                    username=DEFAULT_ADMIN_USERNAME,
                    password_hash=password_hash,
                    role=Role.ADMIN.value,
                )
            )
        logger.info("Default admin user created successfully")
        return True
    except Exception:
        logger.exception("Error initializing database")
        raise


def bootstrap(settings: Optional[Settings] = None) -> Database:
    """Build the pool from settings, initialize the schema, and hand the pool back.

    Callers must not issue order/user queries until this returns.
    """
    if settings is None:
        settings = Settings.from_env()

    database = Database.from_settings(settings)
    try:
        initialize(database)
    except Exception:
        database.dispose()
        raise
    return database
