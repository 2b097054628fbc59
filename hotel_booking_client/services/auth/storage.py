"""
Persistent key-value storage for authentication credentials.

Access is scoped: ``with storage.open() as handle`` acquires the backend and
releases it on exit, including when an operation inside the block fails.
"""

from __future__ import annotations

import sqlite3
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import ContextManager, Dict, Iterator, Optional

from ...config import get_settings
from ...core.exceptions import CredentialStorageError

ACCESS_TOKEN_KEY = "accessToken"
REFRESH_TOKEN_KEY = "refreshToken"
USER_ID_KEY = "userId"

CREDENTIAL_KEYS = (ACCESS_TOKEN_KEY, REFRESH_TOKEN_KEY, USER_ID_KEY)


class StorageHandle(ABC):
    """Open view onto a credential storage backend."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        ...

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        ...

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Delete ``key``. Removing a missing key is a no-op."""
        ...


class CredentialStorage(ABC):
    """Backend holding persisted credentials."""

    @abstractmethod
    def open(self) -> ContextManager[StorageHandle]:
        """Context manager yielding a handle for the duration of the block."""
        ...


class _DictHandle(StorageHandle):
    def __init__(self, items: Dict[str, str]) -> None:
        self._items = items

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class InMemoryCredentialStorage(CredentialStorage):
    """Process-local storage, used in tests and for ephemeral sessions."""

    def __init__(self, items: Optional[Dict[str, str]] = None) -> None:
        self.items: Dict[str, str] = dict(items or {})
        self.open_handles = 0

    @contextmanager
    def open(self) -> Iterator[StorageHandle]:
        self.open_handles += 1
        try:
            yield _DictHandle(self.items)
        finally:
            self.open_handles -= 1


class _SqliteHandle(StorageHandle):
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def get_item(self, key: str) -> Optional[str]:
        try:
            cur = self._conn.execute(
                "SELECT value FROM credentials WHERE key = ?", (key,)
            )
            row = cur.fetchone()
        except sqlite3.Error as e:
            raise CredentialStorageError(f"read of '{key}' failed: {e}") from e
        return row[0] if row else None

    def set_item(self, key: str, value: str) -> None:
        try:
            self._conn.execute(
                "INSERT OR REPLACE INTO credentials (key, value) VALUES (?, ?)",
                (key, value),
            )
            self._conn.commit()
        except sqlite3.Error as e:
            raise CredentialStorageError(f"write of '{key}' failed: {e}") from e

    def remove_item(self, key: str) -> None:
        try:
            self._conn.execute("DELETE FROM credentials WHERE key = ?", (key,))
            self._conn.commit()
        except sqlite3.Error as e:
            raise CredentialStorageError(f"delete of '{key}' failed: {e}") from e


class SqliteCredentialStorage(CredentialStorage):
    """Credentials persisted in a SQLite file."""

    def __init__(self, db_path: Optional[str] = None) -> None:
        self.db_path = db_path or get_settings().credentials_db_path

    @contextmanager
    def open(self) -> Iterator[StorageHandle]:
        try:
            conn = sqlite3.connect(self.db_path)
        except sqlite3.Error as e:
            raise CredentialStorageError(f"cannot open {self.db_path}: {e}") from e

        try:
            try:
                conn.execute(
                    """
                    CREATE TABLE IF NOT EXISTS credentials (
                        key TEXT PRIMARY KEY,
                        value TEXT NOT NULL
                    )
                    """
                )
                conn.commit()
            except sqlite3.Error as e:
                raise CredentialStorageError(f"cannot prepare {self.db_path}: {e}") from e
            yield _SqliteHandle(conn)
        finally:
            conn.close()
