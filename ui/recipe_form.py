"""
Add-a-burger form for Burger Book application.
"""

import streamlit as st

from models import Recipe
from models.filter_models import CATEGORIES, DIFFICULTIES, ALL
from services import AppServices
from utils import AsyncRunner, get_logger

logger = get_logger(__name__)


class RecipeFormInterface:
    """Form for user-added recipes"""

    def __init__(self, services: AppServices, runner: AsyncRunner):
        self.services = services
        self.runner = runner

    def render_add_recipe_form(self):
        st.header("➕ Add Your Burger")

        with st.form("add_recipe_form", clear_on_submit=True):
            name = st.text_input("Name")
            category = st.selectbox("Category", [c for c in CATEGORIES if c != ALL])
            description = st.text_area("Description")
            image = st.text_input("Image URL", placeholder="https://...")
            col1, col2 = st.columns(2)
            with col1:
                cook_minutes = st.number_input("Cook time (minutes)", min_value=1, max_value=240, value=15)
                difficulty = st.selectbox("Difficulty", DIFFICULTIES)
            with col2:
                servings = st.number_input("Servings", min_value=1, max_value=20, value=4)
                calories = st.number_input("Calories", min_value=0, max_value=3000, value=600)
            ingredients = st.text_area("Ingredients (one per line)")
            instructions = st.text_area("Instructions (one step per line)")

            submitted = st.form_submit_button("Save burger", type="primary")

        if not submitted:
            return

        recipe = Recipe(
            id="",
            name=name.strip(),
            category=category,
            description=description.strip(),
            image=image.strip(),
            ingredients=[line.strip() for line in ingredients.splitlines() if line.strip()],
            instructions=[line.strip() for line in instructions.splitlines() if line.strip()],
            cook_time=f"{int(cook_minutes)} mins",
            servings=int(servings),
            calories=int(calories),
            difficulty=difficulty,
            is_user_added=True
        )

        stored = self.runner.run(self.services.recipes.add_recipe(recipe))
        if stored:
            st.success(f"Added {stored.name}!")
        else:
            st.error("Please give your burger a name.")


def create_recipe_form_interface(services: AppServices, runner: AsyncRunner) -> RecipeFormInterface:
    """Factory function to create the add-recipe form"""
    return RecipeFormInterface(services, runner)
