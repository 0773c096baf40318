#!/usr/bin/env python3
"""
Test script for configuration and storage selection.
"""

import sys
from pathlib import Path

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

from config.storage_config import StorageConfig, get_configured_storage, get_storage_info
from services import MemoryKeyValueStore, SQLiteKeyValueStore
from utils import Config


def test_config_from_environment(monkeypatch):
    """Test BURGER_* variables override the defaults"""
    monkeypatch.setenv("BURGER_STORAGE_TYPE", "Memory")
    monkeypatch.setenv("BURGER_POPULAR_THRESHOLD", "4.7")
    monkeypatch.setenv("BURGER_PERSIST_USER_RECIPES", "false")
    monkeypatch.setenv("BURGER_TIMER_TICK", "0.5")

    config = Config.from_environment()
    assert config.storage_type == "memory"
    assert config.popular_rating_threshold == 4.7
    assert not config.persist_user_recipes
    assert config.timer_tick_seconds == 0.5
    assert config.default_rating == 4.5
    print("[OK] Config from environment")


def test_memory_storage_selected(monkeypatch):
    """Test BURGER_STORAGE_TYPE=memory gives an in-memory store"""
    monkeypatch.setenv("BURGER_STORAGE_TYPE", "memory")
    assert isinstance(get_configured_storage(), MemoryKeyValueStore)
    assert get_storage_info()['location'] == 'Process memory'
    print("[OK] Memory storage selected")


def test_sqlite_storage_path_from_environment(monkeypatch, tmp_path):
    """Test the SQLite path comes from BURGER_STORAGE_PATH"""
    db_path = str(tmp_path / "kitchen.db")
    monkeypatch.setenv("BURGER_STORAGE_TYPE", "sqlite")
    monkeypatch.setenv("BURGER_STORAGE_PATH", db_path)

    config = StorageConfig.get_storage_config()
    assert config == {'type': 'sqlite', 'path': db_path, 'description': 'SQLite key-value storage'}

    store = get_configured_storage()
    assert isinstance(store, SQLiteKeyValueStore)
    assert store.db_path == db_path
    print("[OK] SQLite path from environment")
