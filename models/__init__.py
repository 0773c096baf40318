"""
Data models for Burger Book application.

This module contains all data model classes including Recipe, filter and sort
options, and the per-user records kept in local storage.
"""

from .recipe_models import Recipe, NutritionData, Difficulty, parse_cook_time_minutes
from .filter_models import FilterOptions, SortOption, SortField, SortDirection
from .user_models import (
    Rating, CookingSession, CookingState, Notification, NotificationType, UserStats, ShoppingItem
)

__all__ = [
    'Recipe',
    'NutritionData',
    'Difficulty',
    'parse_cook_time_minutes',
    'FilterOptions',
    'SortOption',
    'SortField',
    'SortDirection',
    'Rating',
    'CookingSession',
    'CookingState',
    'Notification',
    'NotificationType',
    'UserStats',
    'ShoppingItem'
]
