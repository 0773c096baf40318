"""
Usage statistics for Burger Book application.

Counters shown on the profile page: recipes viewed, recipes cooked and total
cooking time. Stored as one JSON object under the ``userStats`` key with the
same fail-soft persistence as the entity stores.
"""

import json
from typing import Optional

from models import CookingSession, UserStats
from services.entity_store import PersistErrorHandler
from services.storage_service import KeyValueStore, USER_STATS_KEY
from utils import get_logger, log_store_operation

logger = get_logger(__name__)


def format_cooking_time(total_seconds: int) -> str:
    """Format seconds as "Xh Ym", or "Ym" below one hour"""
    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def format_elapsed(seconds: int) -> str:
    """Timer display such as 1h 2m 3s, 4m 0s or 9s"""
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    secs = seconds % 60

    result = ""
    if hours > 0:
        result += f"{hours}h "
    if minutes > 0 or hours > 0:
        result += f"{minutes}m "
    result += f"{secs}s"
    return result


class StatsService:
    """Profile counters persisted under a single key"""

    storage_key = USER_STATS_KEY

    def __init__(self, storage: KeyValueStore,
                 on_persist_error: Optional[PersistErrorHandler] = None):
        self.storage = storage
        self.on_persist_error = on_persist_error
        self.last_persist_error: Optional[Exception] = None
        self._stats = UserStats()

    @property
    def stats(self) -> UserStats:
        return UserStats(**self._stats.to_dict())

    async def load(self) -> UserStats:
        """Read the counters; a missing key means a fresh start"""
        try:
            with log_store_operation(logger, "load", self.storage_key):
                raw = await self.storage.get(self.storage_key)
        except Exception:
            return self.stats

        if not raw:
            self._stats = UserStats()
            return self.stats
        try:
            self._stats = UserStats.from_dict(json.loads(raw))
        except (ValueError, TypeError, AttributeError) as e:
            logger.warning(f"Stored {self.storage_key} is malformed, resetting: {e}")
            self._stats = UserStats()
        return self.stats

    async def record_completed_session(self, session: CookingSession) -> UserStats:
        self._stats = UserStats(
            burgers_viewed=self._stats.burgers_viewed,
            recipes_cooked=self._stats.recipes_cooked + 1,
            total_cook_time=self._stats.total_cook_time + session.cooking_time
        )
        await self._persist()
        return self.stats

    async def record_recipe_view(self) -> UserStats:
        self._stats = UserStats(
            burgers_viewed=self._stats.burgers_viewed + 1,
            recipes_cooked=self._stats.recipes_cooked,
            total_cook_time=self._stats.total_cook_time
        )
        await self._persist()
        return self.stats

    async def reset(self) -> None:
        self._stats = UserStats()
        await self._persist()

    async def _persist(self) -> bool:
        try:
            with log_store_operation(logger, "save", self.storage_key):
                await self.storage.set(self.storage_key, json.dumps(self._stats.to_dict()))
        except Exception as e:
            self.last_persist_error = e
            if self.on_persist_error:
                self.on_persist_error(self.storage_key, e)
            return False
        self.last_persist_error = None
        return True
