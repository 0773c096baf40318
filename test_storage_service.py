#!/usr/bin/env python3
"""
Test script for local key-value storage.
Tests the memory and SQLite backends, storage summaries, clearing app data and
fail-soft persistence in the entity stores.
"""

import json
import sys
from pathlib import Path

import pytest

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

from services import (
    FavoritesService, MemoryKeyValueStore, RatingService, SQLiteKeyValueStore, StorageError,
    get_storage_service
)
from services.storage_service import FAVORITES_KEY, RATINGS_KEY, format_bytes


@pytest.mark.asyncio
async def test_memory_store_basic_operations():
    """Test get/set/remove/clear on the memory backend"""
    store = MemoryKeyValueStore()
    assert await store.get("missing") is None

    await store.set("a", "1")
    await store.set("b", "2")
    assert await store.get("a") == "1"
    assert sorted(await store.get_all_keys()) == ["a", "b"]

    await store.remove("a")
    await store.remove("a")
    assert await store.get("a") is None

    await store.clear()
    assert await store.get_all_keys() == []
    print("[OK] Memory store")


@pytest.mark.asyncio
async def test_sqlite_store_persists_across_instances(tmp_path):
    """Test values written to a database file survive a new store instance"""
    db_path = str(tmp_path / "burger_book.db")
    store = SQLiteKeyValueStore(db_path)
    await store.set(FAVORITES_KEY, "[]")
    await store.set(FAVORITES_KEY, '[{"id": "1"}]')
    await store.set(RATINGS_KEY, "[]")

    reopened = SQLiteKeyValueStore(db_path)
    assert await reopened.get(FAVORITES_KEY) == '[{"id": "1"}]'
    assert await reopened.get_all_keys() == [FAVORITES_KEY, RATINGS_KEY]

    await reopened.remove(RATINGS_KEY)
    assert await reopened.get(RATINGS_KEY) is None
    await reopened.clear()
    assert await reopened.get_all_keys() == []
    print("[OK] SQLite store persists")


@pytest.mark.asyncio
async def test_sqlite_memory_store(sample_recipes):
    """Test the in-memory SQLite backend behind a real store"""
    store = get_storage_service("sqlite", ":memory:")
    favorites = FavoritesService(store)
    await favorites.add_favorite(sample_recipes[0])

    reloaded = FavoritesService(store)
    await reloaded.load()
    assert reloaded.favorites == favorites.favorites
    store.close()
    print("[OK] SQLite in-memory store")


@pytest.mark.asyncio
async def test_stores_reject_non_string_values(tmp_path):
    """Test only strings can be stored"""
    for store in (MemoryKeyValueStore(), SQLiteKeyValueStore(str(tmp_path / "kv.db"))):
        with pytest.raises(StorageError):
            await store.set("key", {"not": "a string"})
    print("[OK] Non-string values rejected")


@pytest.mark.asyncio
async def test_failed_write_keeps_memory_and_reports(sample_recipes):
    """Test a failed write is reported but the in-memory change stays"""
    store = MemoryKeyValueStore()
    store.fail_writes = True
    reported = []

    favorites = FavoritesService(store, on_persist_error=lambda key, exc: reported.append((key, exc)))
    added = await favorites.add_favorite(sample_recipes[0])

    assert added, "Optimistic update still succeeds"
    assert favorites.is_favorite("1")
    assert isinstance(favorites.last_persist_error, StorageError)
    assert len(reported) == 1 and reported[0][0] == FAVORITES_KEY

    store.fail_writes = False
    assert await favorites.persist()
    assert favorites.last_persist_error is None
    assert json.loads(store.snapshot()[FAVORITES_KEY])[0]['id'] == "1"
    print("[OK] Failed write reported")


@pytest.mark.asyncio
async def test_failed_read_falls_back_to_defaults():
    """Test an unreadable store loads empty collections without raising"""
    store = MemoryKeyValueStore({RATINGS_KEY: '[{"recipe_id": "1", "rating": 5}]'})
    store.fail_reads = True

    ratings = RatingService(store)
    assert await ratings.load() == []
    assert ratings.loaded
    print("[OK] Failed read falls back")


@pytest.mark.asyncio
async def test_storage_summary():
    """Test byte sizes and item counts per key"""
    store = MemoryKeyValueStore({
        FAVORITES_KEY: json.dumps([{"id": "1"}, {"id": "2"}]),
        "userStats": json.dumps({"recipes_cooked": 1}),
        "userToken": "abc",
    })
    summary = await store.get_storage_summary()

    assert [entry.key for entry in summary.entries] == [FAVORITES_KEY, "userStats", "userToken"]
    assert summary.get_entry(FAVORITES_KEY).item_count == 2
    assert summary.get_entry("userStats").item_count is None
    assert summary.get_entry("userToken").size_bytes == 3
    assert summary.get_entry("missing") is None
    assert summary.total_bytes == sum(e.size_bytes for e in summary.entries)
    print("[OK] Storage summary")


@pytest.mark.asyncio
async def test_clear_app_data_preserves_login_keys():
    """Test clearing app data keeps the preserved keys"""
    store = MemoryKeyValueStore({FAVORITES_KEY: "[]", RATINGS_KEY: "[]", "userToken": "abc"})
    removed = await store.clear_app_data(preserve=["userToken"])

    assert sorted(removed) == sorted([FAVORITES_KEY, RATINGS_KEY])
    assert store.snapshot() == {"userToken": "abc"}
    print("[OK] Clear app data")


def test_format_bytes():
    """Test human readable sizes"""
    assert format_bytes(512) == "512 B"
    assert format_bytes(2048) == "2.0 KB"
    assert format_bytes(3 * 1024 * 1024) == "3.0 MB"
    print("[OK] Format bytes")


def test_storage_factory():
    """Test backend selection"""
    assert isinstance(get_storage_service("memory"), MemoryKeyValueStore)
    store = get_storage_service("sqlite", ":memory:")
    assert isinstance(store, SQLiteKeyValueStore)
    store.close()
    print("[OK] Storage factory")
