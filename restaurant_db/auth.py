# restaurant_db/auth.py
from __future__ import annotations

from passlib.context import CryptContext

BCRYPT_ROUNDS = 10

pwd = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=BCRYPT_ROUNDS)


def hash_password(p: str) -> str:
    return pwd.hash(p)


def verify_password(p: str, h: str) -> bool:
    return pwd.verify(p, h)
