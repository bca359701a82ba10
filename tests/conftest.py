from __future__ import annotations

import os

import pytest

from restaurant_db.db import Base, Database

TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "").strip()


@pytest.fixture(params=["sqlite", "postgresql"])
def database(request, tmp_path):
    """Empty database; PostgreSQL only when TEST_DATABASE_URL is set."""
    if request.param == "sqlite":
        db = Database.from_url(f"sqlite:///{tmp_path / 'restaurant.db'}")
    else:
        if not TEST_DATABASE_URL:
            pytest.skip("TEST_DATABASE_URL not set")
        db = Database.from_url(TEST_DATABASE_URL)
        Base.metadata.drop_all(db.engine)

    yield db

    if request.param == "postgresql":
        Base.metadata.drop_all(db.engine)
    db.dispose()


@pytest.fixture
def sqlite_url(tmp_path):
    return f"sqlite:///{tmp_path / 'restaurant.db'}"
