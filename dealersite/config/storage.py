"""
Key-value storage for site configurations.

Two backends share the same small interface (``get``, ``set``, ``remove``,
``keys``): ``SQLiteStorage`` for durable storage and ``MemoryStorage`` for
previews and tests. Values are JSON strings; the store owns encoding.
"""

import logging
import sqlite3
from pathlib import Path
from typing import Iterator, Optional, Union

from ..exceptions import StorageReadError, StorageWriteError

logger = logging.getLogger(__name__)


class MemoryStorage:
    """Dict-backed storage that lives as long as the process."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> bool:
        return self._data.pop(key, None) is not None

    def keys(self) -> list[str]:
        return list(self._data)

    def close(self) -> None:
        pass

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())


class SQLiteStorage:
    """SQLite-backed durable key-value storage."""

    def __init__(self, db_path: Union[str, Path]):
        """
        Open (and create if needed) the storage database.

        Args:
            db_path: Database file path, or ":memory:"
        """
        self.db_path = db_path
        self._conn: Optional[sqlite3.Connection] = None
        self._init_db()

    def _init_db(self) -> None:
        """Initialize database connection and schema."""
        if str(self.db_path) != ":memory:":
            Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)

        self._conn = sqlite3.connect(str(self.db_path), check_same_thread=False)
        try:
            self._conn.execute(
                """
                CREATE TABLE IF NOT EXISTS kv_store (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TEXT DEFAULT CURRENT_TIMESTAMP
                )
                """
            )
            self._conn.commit()
        except sqlite3.Error as e:
            logger.error(f"Failed to create schema: {e}")
            raise
        logger.info(f"SQLiteStorage initialized: {self.db_path}")

    def get(self, key: str) -> Optional[str]:
        try:
            row = self._conn.execute(
                "SELECT value FROM kv_store WHERE key = ?", (key,)
            ).fetchone()
        except sqlite3.Error as e:
            raise StorageReadError(key, str(e)) from e
        return row[0] if row else None

    def set(self, key: str, value: str) -> None:
        try:
            self._conn.execute(
                """
                INSERT INTO kv_store (key, value, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
                """,
                (key, value),
            )
            self._conn.commit()
        except sqlite3.Error as e:
            self._conn.rollback()
            raise StorageWriteError("set", key, str(e)) from e

    def remove(self, key: str) -> bool:
        try:
            cursor = self._conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))
            self._conn.commit()
        except sqlite3.Error as e:
            self._conn.rollback()
            raise StorageWriteError("remove", key, str(e)) from e
        return cursor.rowcount > 0

    def keys(self) -> list[str]:
        try:
            rows = self._conn.execute("SELECT key FROM kv_store ORDER BY key").fetchall()
        except sqlite3.Error as e:
            raise StorageReadError("*", str(e)) from e
        return [row[0] for row in rows]

    def close(self) -> None:
        """Close database connection."""
        if self._conn:
            self._conn.close()
            self._conn = None

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __enter__(self) -> "SQLiteStorage":
        return self

    def __exit__(self, *args) -> None:
        self.close()


KeyValueStorage = Union[MemoryStorage, SQLiteStorage]
