"""
Ratings store for Burger Book application.

One rating per recipe for the local user. Rating a recipe again replaces the
earlier entry in place.
"""

from typing import Optional

from models import Rating
from models.user_models import now_iso
from services.entity_store import EntityStore, PersistErrorHandler
from services.storage_service import KeyValueStore, RATINGS_KEY
from utils import get_logger

logger = get_logger(__name__)

MIN_RATING = 1
MAX_RATING = 5
DEFAULT_AVERAGE_RATING = 4.5


class RatingService(EntityStore[Rating]):
    """User ratings keyed by recipe id"""

    storage_key = RATINGS_KEY
    entity_name = "rating"

    def __init__(self, storage: KeyValueStore,
                 on_persist_error: Optional[PersistErrorHandler] = None,
                 default_rating: float = DEFAULT_AVERAGE_RATING):
        super().__init__(storage, on_persist_error)
        self.default_rating = default_rating

    def _decode(self, data) -> Rating:
        return Rating.from_dict(data)

    @property
    def ratings(self):
        return self.items

    def _find_index(self, recipe_id: str) -> int:
        for index, rating in enumerate(self._items):
            if rating.recipe_id == recipe_id:
                return index
        return -1

    async def add_rating(self, recipe_id: str, rating: int) -> bool:
        """Insert or replace the rating for a recipe"""
        if isinstance(rating, bool) or not isinstance(rating, int) or not MIN_RATING <= rating <= MAX_RATING:
            logger.warning(f"Rejected rating {rating!r} for recipe {recipe_id}: must be an integer 1-5")
            return False
        if not recipe_id:
            logger.warning("Rejected rating without a recipe id")
            return False

        new_rating = Rating(recipe_id=recipe_id, rating=rating, date=now_iso())
        updated = list(self._items)
        index = self._find_index(recipe_id)
        if index >= 0:
            updated[index] = new_rating
        else:
            updated.append(new_rating)

        await self._commit(updated)
        logger.info(f"Rated recipe {recipe_id}: {rating} stars")
        return True

    def get_user_rating(self, recipe_id: str) -> Optional[int]:
        index = self._find_index(recipe_id)
        return self._items[index].rating if index >= 0 else None

    def get_average_rating(self, recipe_id: str) -> float:
        """
        Rating shown on recipe cards.

        Only the local user's ratings exist on the device, so this is the user's
        own rating when present and the default otherwise.
        """
        user_rating = self.get_user_rating(recipe_id)
        return float(user_rating) if user_rating is not None else self.default_rating
