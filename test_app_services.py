#!/usr/bin/env python3
"""
Test script for application wiring.
Tests that all stores share one storage, load together and can be wiped.
"""

import json
import sys
from pathlib import Path

import pytest

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

from models import UserStats
from services import create_app_services
from services.storage_service import USER_STATS_KEY
from utils import AsyncRunner, Config


def make_config(**overrides):
    return Config(storage_type="memory", log_file="logs/test.log", **overrides)


@pytest.mark.asyncio
async def test_services_load_from_shared_storage(storage):
    """Test a fresh install loads built-ins and seed notifications"""
    services = await create_app_services(storage=storage, config=make_config())

    assert len(services.recipes.all_recipes) == 14
    assert services.notifications.unread_count == 3
    assert len(services.favorites) == 0
    assert services.persist_errors() == {}
    print("[OK] Services loaded")


@pytest.mark.asyncio
async def test_services_reload_user_data(storage):
    """Test data written by one set of services is seen by the next"""
    services = await create_app_services(storage=storage, config=make_config())
    recipe = services.recipes.get_recipe_by_id("1")

    await services.favorites.add_favorite(recipe)
    await services.ratings.add_rating("1", 4)
    services.cooking.start_cooking(recipe)
    await services.cooking.complete_cooking(600)
    await services.stats.record_recipe_view()

    again = await create_app_services(storage=storage, config=make_config())
    assert again.favorites.is_favorite("1")
    assert again.ratings.get_user_rating("1") == 4
    assert again.cooking.has_cooked_recipe("1")
    assert again.stats.stats.recipes_cooked == 1
    assert again.stats.stats.burgers_viewed == 1
    print("[OK] Services reload")


@pytest.mark.asyncio
async def test_clear_user_data_keeps_login(storage):
    """Test wiping app data resets every store but keeps login keys"""
    await storage.set("userToken", "token")
    services = await create_app_services(storage=storage, config=make_config())
    recipe = services.recipes.get_recipe_by_id("2")
    await services.favorites.add_favorite(recipe)
    await services.ratings.add_rating("2", 5)
    services.cooking.start_cooking(recipe)
    await services.cooking.complete_cooking(600)
    await services.stats.record_recipe_view()
    await services.shopping_list.add_item("Brioche buns", category="Bread")
    await services.notifications.clear_all_notifications()

    await services.clear_user_data()

    assert len(services.favorites) == 0
    assert len(services.ratings) == 0
    assert services.cooking.cooking_sessions == []
    assert services.cooking.get_recipes_cooked() == 0
    assert services.stats.stats == UserStats()
    assert len(services.shopping_list) == 0
    assert len(services.notifications) == 8, "Seed notifications come back after a wipe"
    assert await storage.get("userToken") == "token"
    print("[OK] Clear user data")


@pytest.mark.asyncio
async def test_stats_count_from_zero_after_wipe(storage):
    """Test counters restart after a wipe instead of carrying old values"""
    services = await create_app_services(storage=storage, config=make_config())
    services.cooking.start_cooking(services.recipes.get_recipe_by_id("1"))
    await services.cooking.complete_cooking(600)

    await services.clear_user_data()
    await services.stats.record_recipe_view()

    assert services.stats.stats == UserStats(burgers_viewed=1)
    stored = json.loads(await storage.get(USER_STATS_KEY))
    assert stored == {'burgers_viewed': 1, 'recipes_cooked': 0, 'total_cook_time': 0}
    print("[OK] Stats restart after wipe")


@pytest.mark.asyncio
async def test_persist_errors_reported(storage):
    """Test failed writes show up per storage key and reach the callback"""
    reported = []
    services = await create_app_services(
        storage=storage, config=make_config(),
        on_persist_error=lambda key, exc: reported.append(key)
    )
    storage.fail_writes = True
    await services.ratings.add_rating("3", 5)

    assert list(services.persist_errors()) == ["userRatings"]
    assert reported == ["userRatings"]
    assert services.ratings.get_user_rating("3") == 5
    print("[OK] Persist errors reported")


@pytest.mark.asyncio
async def test_timer_uses_configured_tick(storage):
    """Test timers are built from the configured tick interval"""
    services = await create_app_services(storage=storage, config=make_config(timer_tick_seconds=0.5))
    timer = services.create_cooking_timer()
    assert timer.tick_seconds == 0.5
    assert timer.cooking_service is services.cooking
    print("[OK] Timer configuration")


def test_async_runner_runs_on_background_loop(storage):
    """Test synchronous callers can drive the stores through AsyncRunner"""
    runner = AsyncRunner()
    try:
        services = runner.run(create_app_services(storage=storage, config=make_config()), timeout=5)
        assert runner.is_running
        assert runner.run(services.ratings.add_rating("1", 3), timeout=5)
        assert services.ratings.get_user_rating("1") == 3
    finally:
        runner.close()
    assert not runner.is_running
    print("[OK] Async runner")
