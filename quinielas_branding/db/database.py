from __future__ import annotations

from typing import Optional

from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, sessionmaker

from ..config import get_settings

SQLITE_PRAGMAS = ("PRAGMA foreign_keys=ON;", "PRAGMA busy_timeout=30000;")


class Database:
    """Engine and session factory for the brand store."""

    def __init__(self, url: Optional[str] = None) -> None:
        self.url = url or get_settings().database_url
        connect_args = {"check_same_thread": False, "timeout": 30} if self.is_sqlite else {}
        self.engine = create_engine(self.url, connect_args=connect_args, pool_pre_ping=True)
        if self.is_sqlite:
            # Brands reference tenants; SQLite only enforces that with the pragma on.
            event.listen(self.engine, "connect", _apply_sqlite_pragmas)
        self._sessions = sessionmaker(bind=self.engine, autoflush=False)

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    def session(self) -> Session:
        return self._sessions()

    def dispose(self) -> None:
        self.engine.dispose()


def _apply_sqlite_pragmas(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    try:
        for pragma in SQLITE_PRAGMAS:
            cursor.execute(pragma)
    finally:
        cursor.close()


_database: Optional[Database] = None


def get_database() -> Database:
    global _database
    if _database is None:
        _database = Database()
    return _database


def reset_database() -> None:
    """Drop the shared database so the next call picks up refreshed settings."""
    global _database
    if _database is not None:
        _database.dispose()
    _database = None


__all__ = ["Database", "get_database", "reset_database"]
