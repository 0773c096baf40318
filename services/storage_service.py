"""
Local key-value storage for Burger Book application.

All user data (favorites, ratings, cooking sessions, notifications, stats and
user-added recipes) is kept on the device as JSON strings under fixed keys.
The SQLite backend keeps one table of key/value rows; blocking sqlite3 calls
run in a worker thread so the store can be awaited from the UI event loop.
"""

import asyncio
import json
import sqlite3
import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from utils import get_logger

logger = get_logger(__name__)


# Storage keys
FAVORITES_KEY = "favorites"
RATINGS_KEY = "userRatings"
COOKING_SESSIONS_KEY = "cookingSessions"
NOTIFICATIONS_KEY = "notifications"
USER_STATS_KEY = "userStats"
USER_RECIPES_KEY = "userRecipes"
SHOPPING_LIST_KEY = "shoppingList"


class StorageError(Exception):
    """Raised by a backend when a read or write cannot be completed"""


def format_bytes(size: int) -> str:
    """Human readable byte size"""
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


@dataclass
class StorageEntry:
    """Size details for one stored key"""
    key: str
    size_bytes: int
    item_count: Optional[int] = None  # set when the value is a JSON array


@dataclass
class StorageSummary:
    """What is currently kept on the device"""
    entries: List[StorageEntry] = field(default_factory=list)

    @property
    def total_bytes(self) -> int:
        return sum(entry.size_bytes for entry in self.entries)

    @property
    def total_size(self) -> str:
        return format_bytes(self.total_bytes)

    def get_entry(self, key: str) -> Optional[StorageEntry]:
        for entry in self.entries:
            if entry.key == key:
                return entry
        return None


class KeyValueStore(ABC):
    """Asynchronous string key-value store"""

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        ...

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        ...

    @abstractmethod
    async def remove(self, key: str) -> None:
        ...

    @abstractmethod
    async def clear(self) -> None:
        ...

    @abstractmethod
    async def get_all_keys(self) -> List[str]:
        ...

    async def get_storage_summary(self) -> StorageSummary:
        """Report byte size and item count for every stored key"""
        summary = StorageSummary()
        for key in sorted(await self.get_all_keys()):
            value = await self.get(key)
            if value is None:
                continue

            item_count = None
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    item_count = len(parsed)
            except json.JSONDecodeError:
                pass

            summary.entries.append(StorageEntry(
                key=key,
                size_bytes=len(value.encode('utf-8')),
                item_count=item_count
            ))
        return summary

    async def clear_app_data(self, preserve: Iterable[str] = ()) -> List[str]:
        """Remove every key except the preserved ones, returning removed keys"""
        keep = set(preserve)
        removed = []
        for key in await self.get_all_keys():
            if key not in keep:
                await self.remove(key)
                removed.append(key)
        logger.info(f"Cleared {len(removed)} stored keys (kept {len(keep)})")
        return removed


class MemoryKeyValueStore(KeyValueStore):
    """
    Dict-backed store for tests and throwaway sessions.

    ``fail_writes`` / ``fail_reads`` simulate an unavailable device store.
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})
        self.fail_writes = False
        self.fail_reads = False
        self.write_count = 0

    async def get(self, key: str) -> Optional[str]:
        await asyncio.sleep(0)
        if self.fail_reads:
            raise StorageError(f"Read failed for key '{key}'")
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        await asyncio.sleep(0)
        if self.fail_writes:
            raise StorageError(f"Write failed for key '{key}'")
        if not isinstance(value, str):
            raise StorageError(f"Value for key '{key}' must be a string")
        self._data[key] = value
        self.write_count += 1

    async def remove(self, key: str) -> None:
        await asyncio.sleep(0)
        if self.fail_writes:
            raise StorageError(f"Remove failed for key '{key}'")
        self._data.pop(key, None)

    async def clear(self) -> None:
        await asyncio.sleep(0)
        if self.fail_writes:
            raise StorageError("Clear failed")
        self._data.clear()

    async def get_all_keys(self) -> List[str]:
        await asyncio.sleep(0)
        return list(self._data.keys())

    def snapshot(self) -> Dict[str, str]:
        """Copy of the raw stored strings"""
        return dict(self._data)


class SQLiteKeyValueStore(KeyValueStore):
    """
    SQLite-backed key-value store.
    Uses WAL mode for file databases and a persistent connection for ":memory:".
    """

    def __init__(self, db_path: str = "burger_book.db"):
        self.db_path = db_path
        self._lock = threading.Lock()
        # Keep persistent connection for in-memory databases
        self._persistent_conn = None
        if db_path == ":memory:":
            self._persistent_conn = sqlite3.connect(db_path, check_same_thread=False)
        else:
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        self._initialize_schema()

    @contextmanager
    def get_connection(self):
        """Context manager for database connections with proper cleanup"""
        if self._persistent_conn:
            with self._lock:
                try:
                    yield self._persistent_conn
                except Exception as e:
                    self._persistent_conn.rollback()
                    logger.error(f"Storage error: {e}")
                    raise
        else:
            conn = None
            try:
                conn = sqlite3.connect(self.db_path, timeout=30.0)
                yield conn
            except Exception as e:
                if conn:
                    conn.rollback()
                logger.error(f"Storage error: {e}")
                raise
            finally:
                if conn:
                    conn.close()

    def _initialize_schema(self):
        with self.get_connection() as conn:
            if not self._persistent_conn:
                conn.execute("PRAGMA journal_mode=WAL")
            conn.execute("""
                CREATE TABLE IF NOT EXISTS kv_store (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """)
            conn.commit()
        logger.info(f"Key-value storage ready: {self.db_path}")

    def _get_sync(self, key: str) -> Optional[str]:
        with self.get_connection() as conn:
            row = conn.execute("SELECT value FROM kv_store WHERE key = ?", (key,)).fetchone()
            return row[0] if row else None

    def _set_sync(self, key: str, value: str) -> None:
        with self.get_connection() as conn:
            conn.execute("""
                INSERT INTO kv_store (key, value, updated_at) VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at
            """, (key, value, datetime.now().isoformat()))
            conn.commit()

    def _remove_sync(self, key: str) -> None:
        with self.get_connection() as conn:
            conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))
            conn.commit()

    def _clear_sync(self) -> None:
        with self.get_connection() as conn:
            conn.execute("DELETE FROM kv_store")
            conn.commit()

    def _keys_sync(self) -> List[str]:
        with self.get_connection() as conn:
            return [row[0] for row in conn.execute("SELECT key FROM kv_store ORDER BY key")]

    async def get(self, key: str) -> Optional[str]:
        return await asyncio.to_thread(self._get_sync, key)

    async def set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise StorageError(f"Value for key '{key}' must be a string")
        await asyncio.to_thread(self._set_sync, key, value)

    async def remove(self, key: str) -> None:
        await asyncio.to_thread(self._remove_sync, key)

    async def clear(self) -> None:
        await asyncio.to_thread(self._clear_sync)

    async def get_all_keys(self) -> List[str]:
        return await asyncio.to_thread(self._keys_sync)

    def close(self):
        if self._persistent_conn:
            self._persistent_conn.close()
            self._persistent_conn = None


def get_storage_service(storage_type: str = "sqlite", db_path: str = "burger_book.db") -> KeyValueStore:
    """Factory function to get a key-value store instance"""
    if storage_type == "memory":
        return MemoryKeyValueStore()
    return SQLiteKeyValueStore(db_path)
