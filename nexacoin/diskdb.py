"""A persistent, key-ordered byte store kept in a directory."""

from __future__ import annotations

import sqlite3
from pathlib import Path

from nexacoin.memorydb import DatabaseClosedError

_FILE_NAME = "store.sqlite"


class NotFoundError(LookupError):
    """No item matches the request."""

    def __init__(self, message: str = "item not found in database") -> None:
        super().__init__(message)


class DiskDatabase:
    """Byte keys and values on disk, iterated in bytewise key order."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.path.mkdir(parents=True, exist_ok=True)
        self._conn: sqlite3.Connection | None = sqlite3.connect(
            self.path / _FILE_NAME, isolation_level=None
        )
        self._conn.execute(
            "CREATE TABLE IF NOT EXISTS items (key BLOB PRIMARY KEY, value BLOB NOT NULL)"
        )

    def __enter__(self) -> DiskDatabase:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def _db(self) -> sqlite3.Connection:
        if self._conn is None:
            raise DatabaseClosedError()
        return self._conn

    def put(self, key: bytes, value: bytes) -> None:
        """Store value under key, replacing any earlier value."""
        self._db.execute(
            "INSERT OR REPLACE INTO items (key, value) VALUES (?, ?)",
            (bytes(key), bytes(value)),
        )

    def get(self, key: bytes) -> bytes:
        """Return the value stored under key."""
        row = self._db.execute(
            "SELECT value FROM items WHERE key = ?", (bytes(key),)
        ).fetchone()
        if row is None:
            raise NotFoundError()
        return bytes(row[0])

    def delete(self, key: bytes) -> None:
        """Remove key; a missing key is not an error."""
        self._db.execute("DELETE FROM items WHERE key = ?", (bytes(key),))

    def _ordered(self, descending: bool, limit: int) -> list[tuple[bytes, bytes]]:
        order = "DESC" if descending else "ASC"
        rows = self._db.execute(
            f"SELECT key, value FROM items ORDER BY key {order} LIMIT ?", (limit,)
        ).fetchall()
        return [(bytes(key), bytes(value)) for key, value in rows]

    def first(self) -> tuple[bytes, bytes]:
        """Return the item with the smallest key."""
        rows = self._ordered(descending=False, limit=1)
        if not rows:
            raise NotFoundError()
        return rows[0]

    def last(self) -> tuple[bytes, bytes]:
        """Return the item with the largest key."""
        rows = self._ordered(descending=True, limit=1)
        if not rows:
            raise NotFoundError()
        return rows[0]

    def previous(self) -> tuple[bytes, bytes]:
        """Return the item just before the last one."""
        rows = self._ordered(descending=True, limit=2)
        if not rows:
            raise NotFoundError("database is empty")
        if len(rows) == 1:
            raise NotFoundError("only one item in database")
        return rows[1]

    def close(self) -> None:
        """Close the store; later calls raise DatabaseClosedError."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None