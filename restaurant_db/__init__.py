# restaurant_db/__init__.py
from .config import ConfigError, Settings
from .db import Base, Database
from .models import Order, Role, User
from .schema import bootstrap, initialize

__all__ = [
    "Base",
    "ConfigError",
    "Database",
    "Order",
    "Role",
    "Settings",
    "User",
    "bootstrap",
    "initialize",
]
