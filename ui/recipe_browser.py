"""
Recipe browsing UI for Burger Book application.

Category tabs, search box, filter and sort controls, recipe cards with favorite
toggles, and the recipe detail view with the rating widget. All reads come from
the injected stores; all writes go through their async operations on the
background loop.
"""

import streamlit as st
from typing import Optional

from models import Recipe, FilterOptions, SortOption, SortField, SortDirection
from models.filter_models import TOP_CATEGORIES
from services import AppServices
from utils import AsyncRunner, get_logger

logger = get_logger(__name__)


SORT_LABELS = {
    (SortField.RATING, SortDirection.DESC): "⭐ Rating: high to low",
    (SortField.RATING, SortDirection.ASC): "⭐ Rating: low to high",
    (SortField.COOK_TIME, SortDirection.ASC): "⏱️ Cook time: shortest",
    (SortField.COOK_TIME, SortDirection.DESC): "⏱️ Cook time: longest",
    (SortField.NAME, SortDirection.ASC): "🔤 Name: A-Z",
    (SortField.NAME, SortDirection.DESC): "🔤 Name: Z-A",
    (SortField.FAVORITES, SortDirection.DESC): "❤️ Most popular",
}


class RecipeBrowser:
    """
    Recipe browsing interface.

    Browsing state (query, category, filters, sort) lives in the session's
    SearchService; favorites and ratings are read from their stores.
    """

    def __init__(self, services: AppServices, runner: AsyncRunner):
        self.services = services
        self.runner = runner

        # Session state keys
        self.SELECTED_RECIPE_KEY = "selected_recipe_id"
        self.SEARCH_KEY = "recipe_search_query"

    def render_recipe_browser(self):
        """Render the main recipe browsing page"""
        st.header("🍔 Burger Recipes")

        search = self.services.search
        query = st.text_input(
            "🔍 Search burgers",
            value=search.search_query,
            placeholder="Search by name, category or ingredient...",
            key=self.SEARCH_KEY
        )
        search.set_search_query(query)

        top_category = st.radio(
            "Show", TOP_CATEGORIES,
            index=TOP_CATEGORIES.index(search.top_category) if search.top_category in TOP_CATEGORIES else 0,
            horizontal=True
        )
        search.set_top_category(top_category)

        self._render_filter_controls()

        recipes = search.get_results(self.services.recipes.all_recipes, self.services.favorites.is_favorite)
        st.caption(f"{len(recipes)} recipe(s)")

        if not recipes:
            st.info("No burgers match your filters. Try clearing some of them.")
            return

        for recipe in recipes:
            self._render_recipe_card(recipe)

    def _render_filter_controls(self):
        search = self.services.search
        suggestions = search.get_filter_suggestions(self.services.recipes.all_recipes)
        current = search.filter_options

        label = "🔧 Filters"
        if search.has_active_filters:
            label += f" ({search.active_filter_count} active)"

        with st.expander(label):
            col1, col2 = st.columns(2)

            with col1:
                categories = suggestions['categories']
                category = st.selectbox(
                    "Category", categories,
                    index=categories.index(current.category) if current.category in categories else 0,
                    disabled=search.top_category != "All",
                    help="Applies when the All tab is selected"
                )
                ingredients = st.multiselect("Ingredients", suggestions['ingredients'], default=current.ingredients)
                difficulty = st.multiselect("Difficulty", suggestions['difficulties'], default=current.difficulty)

            with col2:
                cook_times = suggestions['cook_times']
                cook_time = st.radio(
                    "Cook time", cook_times,
                    index=cook_times.index(current.cook_time) if current.cook_time in cook_times else 0
                )
                favorites_only = st.checkbox("❤️ Favorites only", value=current.favorites_only)

                sort_keys = list(SORT_LABELS.keys())
                current_sort = (search.sort_option.field, search.sort_option.direction)
                sort_key = st.selectbox(
                    "Sort by", sort_keys,
                    index=sort_keys.index(current_sort) if current_sort in sort_keys else 0,
                    format_func=lambda key: SORT_LABELS[key]
                )

            search.set_filter_options(FilterOptions(
                category=category,
                ingredients=ingredients,
                difficulty=difficulty,
                cook_time=cook_time,
                favorites_only=favorites_only
            ))
            search.set_sort_option(SortOption(*sort_key))

            if st.button("↺ Reset filters"):
                search.reset_filters()
                st.rerun()

    def _render_recipe_card(self, recipe: Recipe, key_prefix: str = "browse"):
        favorites = self.services.favorites
        is_favorite = favorites.is_favorite(recipe.id)

        with st.container(border=True):
            col1, col2, col3 = st.columns([5, 1, 1])
            with col1:
                badge = " ✅ cooked" if self.services.cooking.has_cooked_recipe(recipe.id) else ""
                st.markdown(f"**{recipe.name}**{badge}")
                st.caption(
                    f"{recipe.category} · {recipe.difficulty} · ⏱️ {recipe.cook_time} · ⭐ {recipe.rating}"
                )
            with col2:
                if st.button("❤️" if is_favorite else "🤍", key=f"{key_prefix}_fav_{recipe.id}",
                             help="Toggle favorite"):
                    added = self.runner.run(favorites.toggle_favorite(recipe))
                    if not added and not is_favorite:
                        st.warning("This recipe can't be added to favorites.")
                    st.rerun()
            with col3:
                if st.button("View", key=f"{key_prefix}_view_{recipe.id}"):
                    st.session_state[self.SELECTED_RECIPE_KEY] = recipe.id
                    self.runner.run(self.services.stats.record_recipe_view())
                    st.rerun()

    def render_favorites_page(self):
        """Render the favorites list"""
        st.header("❤️ Favorites")
        favorites = self.services.favorites.favorites

        if not favorites:
            st.info("You haven't saved any favorites yet.")
            return

        for recipe in favorites:
            self._render_recipe_card(recipe, key_prefix="favorites")

        if st.button("🗑️ Clear favorites"):
            self.runner.run(self.services.favorites.clear_favorites())
            st.rerun()

    def get_selected_recipe(self) -> Optional[Recipe]:
        recipe_id = st.session_state.get(self.SELECTED_RECIPE_KEY)
        if not recipe_id:
            return None
        return self.services.recipes.get_recipe_by_id(recipe_id)

    def render_recipe_details(self, recipe: Recipe):
        """Render a single recipe with rating controls"""
        if st.button("← Back to recipes"):
            st.session_state.pop(self.SELECTED_RECIPE_KEY, None)
            st.rerun()

        st.header(recipe.name)
        st.write(recipe.description)

        col1, col2, col3, col4 = st.columns(4)
        col1.metric("Cook time", recipe.cook_time)
        col2.metric("Difficulty", recipe.difficulty)
        col3.metric("Servings", recipe.servings)
        col4.metric("Rating", f"{self.services.ratings.get_average_rating(recipe.id):.1f}")

        st.subheader("Ingredients")
        st.markdown("\n".join(f"- {ingredient}" for ingredient in recipe.ingredients))

        st.subheader("Instructions")
        st.markdown("\n".join(f"{i}. {step}" for i, step in enumerate(recipe.instructions, 1)))

        self._render_rating_widget(recipe)

    def _render_rating_widget(self, recipe: Recipe):
        ratings = self.services.ratings
        current = ratings.get_user_rating(recipe.id)

        st.subheader("Your rating")
        value = st.select_slider(
            "Stars", options=[1, 2, 3, 4, 5], value=current or 5,
            format_func=lambda stars: "⭐" * stars, key=f"rating_{recipe.id}"
        )
        if st.button("Save rating", key=f"save_rating_{recipe.id}"):
            if self.runner.run(ratings.add_rating(recipe.id, value)):
                st.success(f"You've rated {recipe.name} {value} stars!")


def create_recipe_browser(services: AppServices, runner: AsyncRunner) -> RecipeBrowser:
    """Factory function to create recipe browser"""
    return RecipeBrowser(services, runner)
