"""
Shopping list UI for Burger Book application.
"""

import streamlit as st

from models.user_models import SHOPPING_CATEGORIES
from services import AppServices
from utils import AsyncRunner, get_logger

logger = get_logger(__name__)


class ShoppingListInterface:
    """Add, tick off and clear grocery items"""

    def __init__(self, services: AppServices, runner: AsyncRunner):
        self.services = services
        self.runner = runner

    def render_shopping_list_page(self):
        store = self.services.shopping_list
        st.header("🛒 Shopping List")

        with st.form("add_shopping_item", clear_on_submit=True):
            col1, col2, col3 = st.columns([4, 2, 2])
            with col1:
                name = st.text_input("Item", placeholder="e.g. Brioche buns")
            with col2:
                quantity = st.text_input("Quantity", placeholder="1")
            with col3:
                category = st.selectbox("Category", SHOPPING_CATEGORIES)
            submitted = st.form_submit_button("➕ Add")

        if submitted:
            if self.runner.run(store.add_item(name, quantity, category)) is None:
                st.error("Please enter an item name.")
            else:
                st.rerun()

        items = store.shopping_list
        if not items:
            st.info("Your shopping list is empty.")
            return

        st.caption(f"{store.completed_count} of {len(items)} picked up")

        for item in items:
            col1, col2 = st.columns([8, 1])
            with col1:
                label = f"{item.icon} {item.name} ({item.quantity})"
                checked = st.checkbox(label, value=item.completed, key=f"shop_{item.id}")
                if checked != item.completed:
                    self.runner.run(store.toggle_item(item.id))
                    st.rerun()
            with col2:
                if st.button("🗑️", key=f"shop_delete_{item.id}", help="Remove"):
                    self.runner.run(store.delete_item(item.id))
                    st.rerun()

        if st.button("Clear completed", disabled=store.completed_count == 0):
            removed = self.runner.run(store.clear_completed())
            st.success(f"Removed {removed} item(s).")
            st.rerun()


def create_shopping_list_interface(services: AppServices, runner: AsyncRunner) -> ShoppingListInterface:
    """Factory function to create shopping list interface"""
    return ShoppingListInterface(services, runner)
