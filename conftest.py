"""
Shared pytest fixtures for Burger Book tests.
"""

import sys
from pathlib import Path

import pytest

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

from models import Recipe
from services import MemoryKeyValueStore


@pytest.fixture
def storage():
    """Fresh in-memory key-value store"""
    return MemoryKeyValueStore()


@pytest.fixture
def sample_recipes():
    """Two beef burgers that differ in difficulty, cook time and rating"""
    return [
        Recipe(id="1", name="A", category="Beef", difficulty="Easy", cook_time="10 mins",
               rating=4.0, image="classic", ingredients=["Ground beef", "Cheddar cheese"]),
        Recipe(id="2", name="B", category="Beef", difficulty="Hard", cook_time="40 mins",
               rating=4.8, image="bbq", ingredients=["Ground beef", "Bacon strips"]),
    ]


@pytest.fixture
def user_recipe():
    """Recipe added by the user, with an image URI instead of a bundled key"""
    return Recipe(id="user-1", name="Backyard Smash", category="Classic", difficulty="Medium",
                  cook_time="12 mins", rating=0.0, image="file:///photos/smash.jpg",
                  is_user_added=True)
