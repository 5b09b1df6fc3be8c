"""A thread-safe in-memory key-value store."""

from __future__ import annotations

import threading


class DatabaseClosedError(Exception):
    """The database has been closed."""

    def __init__(self, message: str = "database closed") -> None:
        super().__init__(message)


class KeyNotFoundError(LookupError):
    """The key is not in the database."""

    def __init__(self, message: str = "not found") -> None:
        super().__init__(message)


class MemoryDatabase:
    """A key-value store held in a dictionary, guarded by a lock."""

    def __init__(self) -> None:
        self._items: dict[bytes, bytes] | None = {}
        self._lock = threading.RLock()

    def _open_items(self) -> dict[bytes, bytes]:
        if self._items is None:
            raise DatabaseClosedError()
        return self._items

    def close(self) -> None:
        """Drop every item; later calls raise DatabaseClosedError."""
        with self._lock:
            self._items = None

    def has(self, key: bytes) -> bool:
        """Tell whether key is present."""
        with self._lock:
            return bytes(key) in self._open_items()

    def get(self, key: bytes) -> bytes:
        """Return the value stored under key."""
        with self._lock:
            items = self._open_items()
            try:
                return items[bytes(key)]
            except KeyError:
                raise KeyNotFoundError() from None

    def put(self, key: bytes, value: bytes) -> None:
        """Store value under key, replacing any earlier value."""
        with self._lock:
            self._open_items()[bytes(key)] = bytes(value)

    def delete(self, key: bytes) -> None:
        """Remove key; a missing key is not an error."""
        with self._lock:
            self._open_items().pop(bytes(key), None)