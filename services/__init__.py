"""
Services package for Burger Book application.

Contains the local key-value storage, the per-user data stores, the recipe
catalogue, the shopping list, and the filtering/sorting engine.
"""

from .storage_service import (
    KeyValueStore, MemoryKeyValueStore, SQLiteKeyValueStore, StorageError,
    StorageSummary, get_storage_service
)
from .entity_store import EntityStore
from .recipe_service import RecipeService
from .favorites_service import FavoritesService
from .rating_service import RatingService
from .notification_service import NotificationService
from .stats_service import StatsService, format_cooking_time, format_elapsed
from .shopping_list_service import ShoppingListService
from .cooking_service import CookingService, CookingTimer, CookingSessionError
from .search_service import (
    SearchService, get_search_service, filter_recipes, sort_recipes,
    has_active_filters, get_active_filter_count
)
from .app_services import AppServices, create_app_services

__all__ = [
    'KeyValueStore',
    'MemoryKeyValueStore',
    'SQLiteKeyValueStore',
    'StorageError',
    'StorageSummary',
    'get_storage_service',
    'EntityStore',
    'RecipeService',
    'FavoritesService',
    'RatingService',
    'NotificationService',
    'StatsService',
    'ShoppingListService',
    'format_cooking_time',
    'format_elapsed',
    'CookingService',
    'CookingTimer',
    'CookingSessionError',
    'SearchService',
    'get_search_service',
    'filter_recipes',
    'sort_recipes',
    'has_active_filters',
    'get_active_filter_count',
    'AppServices',
    'create_app_services'
]
