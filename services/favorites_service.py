"""
Favorites store for Burger Book application.

Keeps the user's favorite recipes on the device. A recipe is stored at most
once; invalid or duplicate additions are rejected with a warning.
"""

from typing import Iterable, List, Optional, Set

from data import BUILTIN_IMAGE_KEYS
from models import Recipe
from services.entity_store import EntityStore, PersistErrorHandler
from services.storage_service import KeyValueStore, FAVORITES_KEY
from utils import get_logger

logger = get_logger(__name__)


class FavoritesService(EntityStore[Recipe]):
    """Set of favorite recipes keyed by recipe id, kept in insertion order"""

    storage_key = FAVORITES_KEY
    entity_name = "favorite"

    def __init__(self, storage: KeyValueStore,
                 on_persist_error: Optional[PersistErrorHandler] = None,
                 known_image_keys: Iterable[str] = BUILTIN_IMAGE_KEYS):
        super().__init__(storage, on_persist_error)
        self.known_image_keys = frozenset(known_image_keys)

    def _decode(self, data) -> Recipe:
        return Recipe.from_dict(data)

    def _parse(self, raw: str) -> List[Recipe]:
        # Drop duplicates a hand-edited or older store may contain
        unique: List[Recipe] = []
        seen: Set[str] = set()
        for recipe in super()._parse(raw):
            if recipe.id not in seen:
                seen.add(recipe.id)
                unique.append(recipe)
        return unique

    @property
    def favorites(self) -> List[Recipe]:
        return self.items

    @property
    def favorite_ids(self) -> Set[str]:
        return {recipe.id for recipe in self._items}

    def is_favorite(self, recipe_id: str) -> bool:
        return any(recipe.id == recipe_id for recipe in self._items)

    async def add_favorite(self, recipe: Recipe) -> bool:
        """Add a recipe; returns False when it was rejected or already present"""
        if recipe is None or not recipe.id:
            logger.warning("Rejected favorite without a recipe id")
            return False

        if not recipe.has_valid_image(self.known_image_keys):
            logger.warning(f"Rejected favorite {recipe.id} ({recipe.name}): invalid image reference '{recipe.image}'")
            return False

        if self.is_favorite(recipe.id):
            logger.warning(f"Recipe {recipe.id} is already a favorite")
            return False

        await self._commit(self._items + [recipe])
        logger.info(f"Added favorite {recipe.id} ({recipe.name})")
        return True

    async def remove_favorite(self, recipe_id: str) -> bool:
        """Remove a recipe; returns False when it was not a favorite"""
        if not self.is_favorite(recipe_id):
            return False

        await self._commit([recipe for recipe in self._items if recipe.id != recipe_id])
        logger.info(f"Removed favorite {recipe_id}")
        return True

    async def toggle_favorite(self, recipe: Recipe) -> bool:
        """Flip favorite state; returns the new state"""
        if recipe is None:
            logger.warning("Rejected favorite toggle without a recipe")
            return False
        if self.is_favorite(recipe.id):
            await self.remove_favorite(recipe.id)
            return False
        return await self.add_favorite(recipe)

    async def clear_favorites(self) -> None:
        await self._commit([])
        logger.info("Cleared all favorites")
