"""
Recipe catalogue for Burger Book application.

Merges the immutable built-in burgers with recipes the user added. User-added
recipes are persisted under ``userRecipes`` so they survive restarts; set
``persist=False`` to keep them for the process lifetime only.
"""

import uuid
from typing import List, Optional

from data import get_builtin_recipes
from models import Recipe, Difficulty
from models.filter_models import CATEGORIES, ALL
from services.entity_store import EntityStore, PersistErrorHandler
from services.storage_service import KeyValueStore, USER_RECIPES_KEY
from utils import get_logger

logger = get_logger(__name__)


class RecipeService(EntityStore[Recipe]):
    """Built-in recipes followed by user-added recipes"""

    storage_key = USER_RECIPES_KEY
    entity_name = "user recipe"

    def __init__(self, storage: KeyValueStore,
                 on_persist_error: Optional[PersistErrorHandler] = None,
                 builtin_recipes: Optional[List[Recipe]] = None,
                 persist: bool = True):
        super().__init__(storage, on_persist_error)
        self.builtin_recipes = list(builtin_recipes) if builtin_recipes is not None else get_builtin_recipes()
        self.persist_user_recipes = persist

    def _decode(self, data) -> Recipe:
        recipe = Recipe.from_dict(data)
        recipe.is_user_added = True
        return recipe

    async def load(self) -> List[Recipe]:
        if not self.persist_user_recipes:
            self.loaded = True
            return self.items
        return await super().load()

    async def persist(self) -> bool:
        if not self.persist_user_recipes:
            return True
        return await super().persist()

    @property
    def user_recipes(self) -> List[Recipe]:
        return self.items

    @property
    def all_recipes(self) -> List[Recipe]:
        return self.builtin_recipes + self._items

    def get_recipe_by_id(self, recipe_id: str) -> Optional[Recipe]:
        for recipe in self.all_recipes:
            if recipe.id == recipe_id:
                return recipe
        return None

    def categories(self) -> List[str]:
        """Known categories plus any used by recipes, "All" first"""
        seen = list(CATEGORIES)
        for recipe in self.all_recipes:
            if recipe.category and recipe.category not in seen:
                seen.append(recipe.category)
        return [ALL] + [c for c in seen if c != ALL]

    async def add_recipe(self, recipe: Recipe) -> Optional[Recipe]:
        """Add a user recipe; returns the stored recipe or None when rejected"""
        if not recipe.name or not recipe.name.strip():
            logger.warning("Rejected user recipe without a name")
            return None

        if recipe.difficulty not in {d.value for d in Difficulty}:
            logger.warning(f"Rejected user recipe {recipe.name}: unknown difficulty '{recipe.difficulty}'")
            return None

        recipe_id = recipe.id or f"user-{uuid.uuid4().hex[:12]}"
        if self.get_recipe_by_id(recipe_id) is not None:
            logger.warning(f"Rejected user recipe {recipe.name}: id {recipe_id} already exists")
            return None

        stored = Recipe.from_dict({**recipe.to_dict(), 'id': recipe_id, 'is_user_added': True})
        await self._commit(self._items + [stored])
        logger.info(f"Added user recipe {stored.id} ({stored.name})")
        return stored

    async def remove_recipe(self, recipe_id: str) -> bool:
        """Remove a user-added recipe; built-in recipes cannot be removed"""
        if not any(recipe.id == recipe_id for recipe in self._items):
            return False
        await self._commit([recipe for recipe in self._items if recipe.id != recipe_id])
        return True
