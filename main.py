#!/usr/bin/env python3
"""
Burger Book - Main Application Entry Point

Browse, filter and cook burger recipes. Favorites, ratings, cooking history and
notifications are kept in local storage on this device.
"""

import sys
import streamlit as st
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

from config.storage_config import get_configured_storage, get_storage_info
from services import AppServices, create_app_services
from ui import (
    create_recipe_browser, create_cooking_timer_interface, create_notification_center,
    create_profile_interface, create_recipe_form_interface, create_shopping_list_interface
)
from utils import AsyncRunner, get_config, get_logger, setup_logging

logger = get_logger(__name__)

PAGES = ["Browse", "Favorites", "Cooking", "Add Burger", "Shopping List", "Notifications", "Profile"]


def get_runner_singleton() -> AsyncRunner:
    """Get the background event loop shared by this browser session"""
    if 'async_runner' not in st.session_state:
        st.session_state.async_runner = AsyncRunner()
    return st.session_state.async_runner


def get_services_singleton() -> AppServices:
    """Get the loaded stores for this browser session"""
    if 'app_services' not in st.session_state:
        runner = get_runner_singleton()
        storage = get_configured_storage()
        st.session_state.app_services = runner.run(create_app_services(storage=storage))
        info = get_storage_info()
        logger.info(f"Using {info['description']} at {info['path']}")
    return st.session_state.app_services


def main():
    """Main application entry point"""
    st.set_page_config(
        page_title="Burger Book",
        page_icon="🍔",
        layout="wide",
        initial_sidebar_state="expanded"
    )

    if 'logging_ready' not in st.session_state:
        setup_logging()
        st.session_state.logging_ready = True

    runner = get_runner_singleton()
    services = get_services_singleton()

    browser = create_recipe_browser(services, runner)
    cooking_ui = create_cooking_timer_interface(services, runner)
    notification_center = create_notification_center(services, runner)

    with st.sidebar:
        st.title("🍔 Burger Book")
        labels = {page: page for page in PAGES}
        labels["Notifications"] = notification_center.badge_label()
        if services.cooking.is_in_progress:
            labels["Cooking"] = "Cooking 🔥"
        # Widget state can only be set before the radio is drawn
        if 'pending_page' in st.session_state:
            st.session_state.current_page = st.session_state.pop('pending_page')
        page = st.radio("Navigate", PAGES, format_func=lambda p: labels[p], key="current_page")

        if get_config().debug_mode:
            st.caption(f"Storage: {get_storage_info()['description']}")

    for key, error in services.persist_errors().items():
        st.warning(f"Couldn't save {key}: {error}")

    # Leaving the cooking page stops the timer task
    previous_page = st.session_state.get('previous_page')
    if previous_page == "Cooking" and page != "Cooking":
        cooking_ui.shutdown()
    st.session_state.previous_page = page

    if page == "Browse":
        recipe = browser.get_selected_recipe()
        if recipe:
            browser.render_recipe_details(recipe)
            if st.button("👨‍🍳 Cook this burger", type="primary"):
                st.session_state.cooking_recipe_id = recipe.id
                st.session_state.pending_page = "Cooking"
                st.rerun()
        else:
            browser.render_recipe_browser()

    elif page == "Favorites":
        browser.render_favorites_page()

    elif page == "Cooking":
        render_cooking_page(services, cooking_ui)

    elif page == "Add Burger":
        create_recipe_form_interface(services, runner).render_add_recipe_form()

    elif page == "Shopping List":
        create_shopping_list_interface(services, runner).render_shopping_list_page()

    elif page == "Notifications":
        notification_center.render_notifications_page()

    elif page == "Profile":
        create_profile_interface(services, runner).render_profile_page()


def render_cooking_page(services: AppServices, cooking_ui):
    """Cook the selected recipe, or the one already in progress"""
    current = services.cooking.current_session
    recipe_id = current.recipe_id if current else st.session_state.get('cooking_recipe_id')

    recipes = services.recipes.all_recipes
    ids = [r.id for r in recipes]
    if not current:
        index = ids.index(recipe_id) if recipe_id in ids else 0
        selected = st.selectbox("Burger", recipes, index=index, format_func=lambda r: r.name)
        recipe_id = selected.id
        st.session_state.cooking_recipe_id = recipe_id

    recipe = services.recipes.get_recipe_by_id(recipe_id)
    if recipe is None:
        st.info("Pick a burger to start cooking.")
        return
    cooking_ui.render_cooking_timer(recipe)


if __name__ == "__main__":
    main()
