# restaurant_db/models.py
from __future__ import annotations

import enum
from typing import Any

from sqlalchemy import (
    JSON,
    CheckConstraint,
    Column,
    Date,
    DateTime,
    Integer,
    Numeric,
    String,
    Text,
    func,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import validates

from .db import Base


class Role(str, enum.Enum):
    ADMIN = "admin"
    READ_ONLY = "read_only"
    WRITE = "write"


_ROLE_VALUES = ", ".join(f"'{r.value}'" for r in Role)


class Order(Base):
    __tablename__ = "orders"
    id = Column(Integer, primary_key=True)
    customer_name = Column(String(255), nullable=False)
    address = Column(Text, nullable=False)
    phone = Column(String(50), nullable=True)
    delivery_date = Column(Date, nullable=False)
    delivery_time = Column(String(10), nullable=False)  # slot code, e.g. "18:30"
    payment_method = Column(String(50), nullable=False)
    items = Column(JSON().with_variant(JSONB(), "postgresql"), nullable=False)
    total = Column(Numeric(10, 2), nullable=False)
    status = Column(String(50), server_default="pending")
    created_at = Column(DateTime, server_default=func.current_timestamp())

    @validates("items")
    def _validate_items(self, key: str, value: Any) -> Any:
        # line items are a document, never a pre-serialized string
        if not isinstance(value, (list, dict)):
            raise ValueError(f"items must be a list or dict, got {type(value).__name__}")
        return value


class User(Base):
    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint(f"role IN ({_ROLE_VALUES})", name="users_role_check"),
    )
    id = Column(Integer, primary_key=True)
    username = Column(String(255), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(50), nullable=False)
    created_at = Column(DateTime, server_default=func.current_timestamp())
    updated_at = Column(
        DateTime,
        server_default=func.current_timestamp(),
        onupdate=func.current_timestamp(),
    )
