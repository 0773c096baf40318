#!/usr/bin/env python3
"""
Test script for the favorites store.
Tests idempotent add/remove, image validation, toggling and reload from storage.
"""

import json
import sys
from pathlib import Path

import pytest

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

from models import Recipe
from services import FavoritesService, MemoryKeyValueStore
from services.storage_service import FAVORITES_KEY


@pytest.mark.asyncio
async def test_add_favorite_is_idempotent(storage, sample_recipes):
    """Test adding the same recipe twice keeps one entry"""
    favorites = FavoritesService(storage)
    await favorites.load()

    assert await favorites.add_favorite(sample_recipes[0])
    assert not await favorites.add_favorite(sample_recipes[0])

    assert len(favorites) == 1
    assert favorites.is_favorite("1")
    print("[OK] Add favorite is idempotent")


@pytest.mark.asyncio
async def test_duplicate_add_logs_warning(storage, sample_recipes, caplog):
    """Test a rejected add is loud, not silent"""
    favorites = FavoritesService(storage)
    await favorites.add_favorite(sample_recipes[0])
    await favorites.add_favorite(sample_recipes[0])
    assert "already a favorite" in caplog.text
    print("[OK] Duplicate add warns")


@pytest.mark.asyncio
async def test_remove_favorite_twice(storage, sample_recipes):
    """Test the second remove is a no-op"""
    favorites = FavoritesService(storage)
    await favorites.add_favorite(sample_recipes[0])
    await favorites.add_favorite(sample_recipes[1])

    assert await favorites.remove_favorite("1")
    assert not await favorites.remove_favorite("1")
    assert [r.id for r in favorites.favorites] == ["2"]
    print("[OK] Remove favorite twice")


@pytest.mark.asyncio
async def test_invalid_image_rejected(storage, user_recipe):
    """Test built-in recipes need a bundled image key and user recipes need a URI"""
    favorites = FavoritesService(storage)

    unknown_image = Recipe(id="9", name="Mystery", category="Classic", image="notBundled")
    assert not await favorites.add_favorite(unknown_image)

    no_id = Recipe(id="", name="Nameless", category="Classic", image="classic")
    assert not await favorites.add_favorite(no_id)

    assert await favorites.add_favorite(user_recipe)

    empty_uri = Recipe(id="user-2", name="Blank", category="Classic", image="", is_user_added=True)
    assert not await favorites.add_favorite(empty_uri)

    assert favorites.favorite_ids == {"user-1"}
    assert storage.write_count == 1, "Rejected adds must not write"
    print("[OK] Invalid favorites rejected")


@pytest.mark.asyncio
async def test_toggle_favorite(storage, sample_recipes):
    """Test toggle returns the new state"""
    favorites = FavoritesService(storage)
    assert await favorites.toggle_favorite(sample_recipes[1]) is True
    assert await favorites.toggle_favorite(sample_recipes[1]) is False
    assert len(favorites) == 0
    print("[OK] Toggle favorite")


@pytest.mark.asyncio
async def test_toggle_without_recipe(storage, caplog):
    """Test toggling nothing is rejected without a write"""
    favorites = FavoritesService(storage)
    assert await favorites.toggle_favorite(None) is False
    assert storage.write_count == 0
    assert "without a recipe" in caplog.text
    print("[OK] Toggle without recipe")


@pytest.mark.asyncio
async def test_favorites_round_trip(storage, sample_recipes, user_recipe):
    """Test a reload reproduces the same favorites in the same order"""
    favorites = FavoritesService(storage)
    for recipe in (sample_recipes[1], user_recipe, sample_recipes[0]):
        await favorites.add_favorite(recipe)

    reloaded = FavoritesService(storage)
    await reloaded.load()
    assert reloaded.favorites == favorites.favorites
    print("[OK] Favorites round trip")


@pytest.mark.asyncio
async def test_load_drops_stored_duplicates(sample_recipes):
    """Test duplicate ids in storage collapse to the first entry"""
    entry = sample_recipes[0].to_dict()
    storage = MemoryKeyValueStore({FAVORITES_KEY: json.dumps([entry, entry])})

    favorites = FavoritesService(storage)
    await favorites.load()
    assert len(favorites) == 1
    print("[OK] Stored duplicates dropped")


@pytest.mark.asyncio
async def test_malformed_favorites_start_empty():
    """Test corrupt stored favorites load as an empty list"""
    storage = MemoryKeyValueStore({FAVORITES_KEY: "{not json"})
    favorites = FavoritesService(storage)
    assert await favorites.load() == []
    print("[OK] Malformed favorites")


@pytest.mark.asyncio
async def test_clear_favorites(storage, sample_recipes):
    """Test clearing persists an empty list"""
    favorites = FavoritesService(storage)
    await favorites.add_favorite(sample_recipes[0])
    await favorites.clear_favorites()

    assert len(favorites) == 0
    assert json.loads(storage.snapshot()[FAVORITES_KEY]) == []
    print("[OK] Clear favorites")


@pytest.mark.asyncio
async def test_favorites_list_is_a_copy(storage, sample_recipes):
    """Test callers cannot change the store through the returned list"""
    favorites = FavoritesService(storage)
    await favorites.add_favorite(sample_recipes[0])
    favorites.favorites.clear()
    assert len(favorites) == 1
    print("[OK] Favorites list copied")
