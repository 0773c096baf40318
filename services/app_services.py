"""
Application service container for Burger Book.

All stores are constructed once at start-up and handed to the UI as one
object; nothing in the stores looks itself up globally.
"""

from dataclasses import dataclass
from typing import Dict, Optional

from services.cooking_service import CookingService, CookingTimer
from services.entity_store import PersistErrorHandler
from services.favorites_service import FavoritesService
from services.notification_service import NotificationService
from services.rating_service import RatingService
from services.recipe_service import RecipeService
from services.search_service import SearchService
from services.shopping_list_service import ShoppingListService
from services.stats_service import StatsService
from services.storage_service import KeyValueStore, get_storage_service
from utils import Config, get_config, get_logger

logger = get_logger(__name__)


@dataclass
class AppServices:
    """Stores and services shared by the UI tree"""
    config: Config
    storage: KeyValueStore
    recipes: RecipeService
    favorites: FavoritesService
    ratings: RatingService
    notifications: NotificationService
    stats: StatsService
    cooking: CookingService
    shopping_list: ShoppingListService
    search: SearchService

    def create_cooking_timer(self) -> CookingTimer:
        return CookingTimer(self.cooking, tick_seconds=self.config.timer_tick_seconds)

    def persist_errors(self) -> Dict[str, Exception]:
        """Storage keys whose most recent write failed"""
        stores = (self.recipes, self.favorites, self.ratings, self.notifications, self.stats, self.cooking,
                  self.shopping_list)
        return {
            store.storage_key: store.last_persist_error
            for store in stores if store.last_persist_error is not None
        }

    async def reload(self) -> None:
        """Hydrate every store from storage, one after another"""
        await self.recipes.load()
        await self.favorites.load()
        await self.ratings.load()
        await self.notifications.load()
        await self.stats.load()
        await self.cooking.load()
        await self.shopping_list.load()

    async def clear_user_data(self, preserve=("userToken", "userData")) -> None:
        """Wipe local user data (keeping login keys) and reload the stores"""
        await self.storage.clear_app_data(preserve=preserve)
        await self.reload()


async def create_app_services(storage: Optional[KeyValueStore] = None,
                              config: Optional[Config] = None,
                              on_persist_error: Optional[PersistErrorHandler] = None) -> AppServices:
    """Build and load all stores"""
    config = config or get_config()
    storage = storage or get_storage_service(config.storage_type, config.storage_path)

    stats = StatsService(storage, on_persist_error)
    services = AppServices(
        config=config,
        storage=storage,
        recipes=RecipeService(storage, on_persist_error, persist=config.persist_user_recipes),
        favorites=FavoritesService(storage, on_persist_error),
        ratings=RatingService(storage, on_persist_error, default_rating=config.default_rating),
        notifications=NotificationService(storage, on_persist_error),
        stats=stats,
        cooking=CookingService(storage, on_persist_error, stats_service=stats),
        shopping_list=ShoppingListService(storage, on_persist_error),
        search=SearchService(popular_threshold=config.popular_rating_threshold)
    )
    await services.reload()
    logger.info(f"Loaded {len(services.recipes.all_recipes)} recipes and user data")
    return services
