#!/usr/bin/env python3
"""
Test script for the recipe catalogue.
Tests the built-in burgers, user-added recipes and their persistence.
"""

import sys
from pathlib import Path

import pytest

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

from data import BUILTIN_IMAGE_KEYS, get_builtin_recipes
from models import Recipe
from models.filter_models import ALL
from services import RecipeService


def test_builtin_catalogue_is_consistent():
    """Test every built-in recipe is complete and uses a bundled image"""
    recipes = get_builtin_recipes()
    ids = [r.id for r in recipes]

    assert len(recipes) == 14
    assert len(set(ids)) == len(ids), "Duplicate built-in ids"
    for recipe in recipes:
        assert recipe.image in BUILTIN_IMAGE_KEYS, f"{recipe.name} has no bundled image"
        assert recipe.ingredients and recipe.instructions
        assert recipe.cook_time_minutes > 0
        assert 0 < recipe.rating <= 5
        assert not recipe.is_user_added
    print("[OK] Built-in catalogue")


@pytest.mark.asyncio
async def test_add_user_recipe_assigns_id_and_persists(storage):
    """Test a user recipe gets an id and survives a reload"""
    recipes = RecipeService(storage)
    await recipes.load()

    stored = await recipes.add_recipe(Recipe(id="", name="Smash Stack", category="Classic",
                                             image="file:///smash.jpg", cook_time="8 mins"))
    assert stored.id.startswith("user-")
    assert stored.is_user_added
    assert recipes.all_recipes[-1].id == stored.id
    assert recipes.get_recipe_by_id(stored.id) == stored

    reloaded = RecipeService(storage)
    await reloaded.load()
    assert reloaded.user_recipes == [stored]
    assert len(reloaded.all_recipes) == 15
    print("[OK] User recipe persisted")


@pytest.mark.asyncio
async def test_add_recipe_validation(storage):
    """Test nameless, unknown difficulty and duplicate id recipes are rejected"""
    recipes = RecipeService(storage)

    assert await recipes.add_recipe(Recipe(id="", name="  ", category="Classic")) is None
    assert await recipes.add_recipe(Recipe(id="", name="Odd", category="Classic", difficulty="Extreme")) is None
    assert await recipes.add_recipe(Recipe(id="1", name="Clash", category="Classic")) is None
    assert recipes.user_recipes == []
    print("[OK] Recipe validation")


@pytest.mark.asyncio
async def test_recipes_not_persisted_when_disabled(storage):
    """Test persist=False keeps user recipes in memory only"""
    recipes = RecipeService(storage, persist=False)
    await recipes.load()
    await recipes.add_recipe(Recipe(id="", name="Temp Burger", category="Classic"))

    assert len(recipes.user_recipes) == 1
    assert storage.snapshot() == {}
    print("[OK] Non-persistent user recipes")


@pytest.mark.asyncio
async def test_remove_user_recipe_only(storage):
    """Test built-in recipes cannot be removed"""
    recipes = RecipeService(storage)
    stored = await recipes.add_recipe(Recipe(id="", name="Gone Soon", category="Classic"))

    assert not await recipes.remove_recipe("1")
    assert await recipes.remove_recipe(stored.id)
    assert recipes.get_recipe_by_id(stored.id) is None
    print("[OK] Remove user recipe")


@pytest.mark.asyncio
async def test_categories_include_user_categories(storage, sample_recipes):
    """Test categories list starts with All and includes new ones"""
    recipes = RecipeService(storage, builtin_recipes=sample_recipes)
    categories = recipes.categories()
    assert categories[0] == ALL
    assert "Beef" in categories
    assert categories.count(ALL) == 1
    print("[OK] Categories")


def test_recipe_from_dict_ignores_unknown_keys():
    """Test stored recipes with extra keys still load"""
    recipe = Recipe.from_dict({
        "id": 7, "name": "Legacy", "category": "BBQ", "rating": 4.66,
        "nutrition": {"calories": 700, "protein": 40}, "shoppingList": ["buns"]
    })
    assert recipe.id == "7"
    assert recipe.rating == 4.7
    assert recipe.nutrition.protein == 40
    print("[OK] Recipe from dict")
