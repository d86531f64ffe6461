"""User records and a SQL-backed store for them."""

from __future__ import annotations

from contextlib import closing
from dataclasses import dataclass
from datetime import datetime
from typing import Any

_INSERT_USER = """
INSERT INTO users (username, email, password_hash, bio)
VALUES (?, ?, ?, ?)
"""

_SELECT_TIMESTAMPS = "SELECT created_at, updated_at FROM users WHERE id = ?"


def _to_datetime(value: Any) -> datetime | None:
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


@dataclass
class User:
    """An account; the password hash is never serialised."""

    username: str = ""
    email: str = ""
    password_hash: bytes = b""
    bio: str = ""
    id: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "bio": self.bio,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }


class SQLUserStore:
    """Persists users through a DB-API connection using qmark parameters."""

    def __init__(self, db: Any) -> None:
        self._db = db

    def create_user(self, user: User) -> None:
        """Insert the user and fill in its id and timestamps from the database."""
        with closing(self._db.cursor()) as cursor:
            try:
                cursor.execute(
                    _INSERT_USER,
                    (user.username, user.email, user.password_hash, user.bio),
                )
                user_id = cursor.lastrowid
                cursor.execute(_SELECT_TIMESTAMPS, (user_id,))
                created_at, updated_at = cursor.fetchone()
            except BaseException:
                self._db.rollback()
                raise
            self._db.commit()
        user.id = user_id
        user.created_at = _to_datetime(created_at)
        user.updated_at = _to_datetime(updated_at)