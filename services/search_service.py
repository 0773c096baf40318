"""
Recipe filtering, search and sorting for Burger Book application.

Filtering runs entirely on the client over the materialized recipe list. Each
stage narrows the working set in a fixed order and keeps the input order of
the recipes that pass. Sorting is stable, so equal keys keep their filtered
order in both directions.
"""

from typing import Callable, Dict, List, Optional

from unidecode import unidecode

from models import Recipe, FilterOptions, SortOption, SortField
from models.filter_models import (
    ALL, POPULAR, RECOMMENDED, TOP_CATEGORIES, CATEGORIES, INGREDIENTS, DIFFICULTIES,
    COOK_TIMES, UNDER_15, FROM_15_TO_30, OVER_30, POPULAR_RATING_THRESHOLD,
    default_filter_options, default_sort_option,
)
from utils import get_logger

logger = get_logger(__name__)

FavoritePredicate = Callable[[str], bool]


def matches_cook_time_bucket(minutes: int, bucket: str) -> bool:
    """Classify cook time minutes into one of the filter buckets"""
    if bucket == UNDER_15:
        return minutes < 15
    if bucket == FROM_15_TO_30:
        return 15 <= minutes <= 30
    if bucket == OVER_30:
        return minutes > 30
    return True


def _matches_search(recipe: Recipe, query: str) -> bool:
    return (
        query in recipe.name.lower()
        or query in recipe.category.lower()
        or any(query in ingredient.lower() for ingredient in recipe.ingredients)
    )


def _has_any_ingredient(recipe: Recipe, selected: List[str]) -> bool:
    recipe_ingredients = [ingredient.lower() for ingredient in recipe.ingredients]
    return any(
        wanted.lower() in ingredient
        for wanted in selected
        for ingredient in recipe_ingredients
    )


def filter_recipes(recipes: List[Recipe], search_query: str, top_category: str,
                   options: FilterOptions, is_favorite: FavoritePredicate,
                   popular_threshold: float = POPULAR_RATING_THRESHOLD) -> List[Recipe]:
    """
    Apply every active filter to the recipe list.

    Stages, in order: top category (Popular, Recommended or an exact category),
    free-text search over name/category/ingredients, the filter modal's
    category (only under "All"), ingredients (any selected ingredient appears in
    any recipe ingredient), difficulty, cook-time bucket and favorites only.
    """
    filtered = list(recipes)

    # Top category tabs
    if top_category == POPULAR:
        filtered = [r for r in filtered if r.rating >= popular_threshold]
    elif top_category == RECOMMENDED:
        filtered = [r for r in filtered if r.is_recommended]
    elif top_category and top_category != ALL:
        filtered = [r for r in filtered if r.category == top_category]

    query = (search_query or "").strip().lower()
    if query:
        filtered = [r for r in filtered if _matches_search(r, query)]

    # Category from the filter modal
    if top_category == ALL and options.category and options.category != ALL:
        filtered = [r for r in filtered if r.category == options.category]

    if options.ingredients:
        filtered = [r for r in filtered if _has_any_ingredient(r, options.ingredients)]

    if options.difficulty:
        accepted = set(options.difficulty)
        filtered = [r for r in filtered if r.difficulty in accepted]

    if options.cook_time and options.cook_time != ALL:
        filtered = [r for r in filtered if matches_cook_time_bucket(r.cook_time_minutes, options.cook_time)]

    if options.favorites_only:
        filtered = [r for r in filtered if is_favorite(r.id)]

    return filtered


def _name_key(recipe: Recipe) -> str:
    # Accent-folded, case-insensitive so "Jalapeño" sorts with "Jalapeno"
    return unidecode(recipe.name).casefold()


def sort_recipes(recipes: List[Recipe], sort_option: SortOption) -> List[Recipe]:
    """Return a new list ordered by the sort option; the input is untouched"""
    if sort_option.field == SortField.NAME:
        key = _name_key
    elif sort_option.field == SortField.COOK_TIME:
        key = lambda r: r.cook_time_minutes
    elif sort_option.field in (SortField.RATING, SortField.FAVORITES):
        # There is no per-recipe favorite count, so "favorites" orders by rating
        key = lambda r: r.rating
    else:
        return list(recipes)

    return sorted(recipes, key=key, reverse=sort_option.descending)


def has_active_filters(options: FilterOptions) -> bool:
    return get_active_filter_count(options) > 0


def get_active_filter_count(options: FilterOptions) -> int:
    """Number of active modal filters (category is shown separately)"""
    count = 0
    if options.ingredients:
        count += 1
    if options.difficulty:
        count += 1
    if options.cook_time != ALL:
        count += 1
    if options.favorites_only:
        count += 1
    return count


class SearchService:
    """
    Browsing state for one UI session.

    Holds the search box text, selected top category, filter modal options and
    sort option, and recomputes results from them on demand.
    """

    def __init__(self, popular_threshold: float = POPULAR_RATING_THRESHOLD):
        self.popular_threshold = popular_threshold
        self.search_query = ""
        self.top_category = ALL
        self.filter_options = default_filter_options()
        self.sort_option = default_sort_option()

    def get_results(self, recipes: List[Recipe], is_favorite: FavoritePredicate) -> List[Recipe]:
        filtered = filter_recipes(
            recipes, self.search_query, self.top_category, self.filter_options,
            is_favorite, popular_threshold=self.popular_threshold
        )
        results = sort_recipes(filtered, self.sort_option)
        logger.debug(f"Browse results: {len(results)}/{len(recipes)} recipes")
        return results

    def set_search_query(self, query: Optional[str]) -> None:
        self.search_query = query or ""

    def set_top_category(self, category: str) -> None:
        if category not in TOP_CATEGORIES:
            logger.warning(f"Unknown top category '{category}', filtering by exact category")
        self.top_category = category

    def set_filter_options(self, options: FilterOptions) -> None:
        self.filter_options = options.copy()

    def set_sort_option(self, sort_option: SortOption) -> None:
        self.sort_option = sort_option

    def update_category_filter(self, category: str) -> None:
        self.filter_options = self.filter_options.copy(category=category)

    def reset_filters(self) -> None:
        self.filter_options = default_filter_options()
        self.sort_option = default_sort_option()

    @property
    def has_active_filters(self) -> bool:
        return has_active_filters(self.filter_options)

    @property
    def active_filter_count(self) -> int:
        return get_active_filter_count(self.filter_options)

    def get_filter_suggestions(self, recipes: Optional[List[Recipe]] = None) -> Dict[str, List[str]]:
        """Options for the filter modal, extended with categories found in the recipes"""
        categories = list(CATEGORIES)
        for recipe in recipes or []:
            if recipe.category and recipe.category not in categories:
                categories.append(recipe.category)

        return {
            'top_categories': list(TOP_CATEGORIES),
            'categories': categories,
            'ingredients': list(INGREDIENTS),
            'difficulties': list(DIFFICULTIES),
            'cook_times': list(COOK_TIMES)
        }


# Service factory function
def get_search_service(popular_threshold: float = POPULAR_RATING_THRESHOLD) -> SearchService:
    """Factory function to get search service instance"""
    return SearchService(popular_threshold)
