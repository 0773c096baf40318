"""
Filter and sort option models for recipe browsing.

These are per-session UI state and are never written to local storage.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List


ALL = "All"
POPULAR = "Popular"
RECOMMENDED = "Recommended"

TOP_CATEGORIES = [ALL, POPULAR, RECOMMENDED]

CATEGORIES = [ALL, "Classic", "Gourmet", "Vegetarian", "Spicy", "BBQ", "Healthy"]

INGREDIENTS = [
    "Beef",
    "Chicken",
    "Plant-based",
    "Cheese",
    "Bacon",
    "Gluten-Free Bun",
    "Egg-free / Dairy-free",
]

DIFFICULTIES = ["Easy", "Medium", "Hard"]

UNDER_15 = "Under 15 minutes"
FROM_15_TO_30 = "15–30 minutes"
OVER_30 = "30+ minutes"

COOK_TIMES = [ALL, UNDER_15, FROM_15_TO_30, OVER_30]

POPULAR_RATING_THRESHOLD = 4.5


class SortField(Enum):
    """Fields recipes can be ordered by"""
    RATING = "rating"
    COOK_TIME = "cookTime"
    NAME = "name"
    FAVORITES = "favorites"  # ordered by rating, there is no favorite count


class SortDirection(Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass
class FilterOptions:
    """Filters chosen in the filter modal"""
    category: str = ALL
    ingredients: List[str] = field(default_factory=list)
    difficulty: List[str] = field(default_factory=list)
    cook_time: str = ALL
    favorites_only: bool = False

    def copy(self, **changes) -> 'FilterOptions':
        """Return a copy with the given fields replaced"""
        options = replace(self, **changes)
        options.ingredients = list(options.ingredients)
        options.difficulty = list(options.difficulty)
        return options


@dataclass
class SortOption:
    """Sort field and direction"""
    field: SortField = SortField.RATING
    direction: SortDirection = SortDirection.DESC

    def __post_init__(self):
        if isinstance(self.field, str):
            self.field = SortField(self.field)
        if isinstance(self.direction, str):
            self.direction = SortDirection(self.direction)

    @property
    def descending(self) -> bool:
        return self.direction == SortDirection.DESC


def default_filter_options() -> FilterOptions:
    return FilterOptions()


def default_sort_option() -> SortOption:
    return SortOption(SortField.RATING, SortDirection.DESC)
