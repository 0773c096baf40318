"""
Profile and data storage UI for Burger Book application.

Shows cooking stats, the cooking history table and what is kept in local
storage, with actions to clear history or all app data.
"""

import streamlit as st
import pandas as pd
from typing import List

from models import CookingSession
from services import AppServices, format_elapsed
from utils import AsyncRunner, get_logger

logger = get_logger(__name__)


def build_history_frame(sessions: List[CookingSession]) -> pd.DataFrame:
    """Newest-first history table with per-session times down to the second"""
    df = pd.DataFrame([session.to_dict() for session in reversed(sessions)])
    df['date'] = pd.to_datetime(df['date']).dt.strftime('%Y-%m-%d %H:%M')
    df['cooking_time'] = df['cooking_time'].apply(format_elapsed)
    df = df.rename(columns={
        'recipe_name': 'Burger', 'cooking_time': 'Time', 'date': 'Date', 'completed': 'Completed'
    })
    return df[['Date', 'Burger', 'Time', 'Completed']]


class ProfileInterface:
    """Stats, cooking history and storage management"""

    def __init__(self, services: AppServices, runner: AsyncRunner):
        self.services = services
        self.runner = runner

    def render_profile_page(self):
        st.header("👤 My Kitchen")

        cooking = self.services.cooking
        stats = self.services.stats.stats

        col1, col2, col3, col4 = st.columns(4)
        col1.metric("Recipes cooked", cooking.get_recipes_cooked())
        col2.metric("Cooking time", cooking.get_total_cooking_time())
        col3.metric("Favorites", len(self.services.favorites))
        col4.metric("Burgers viewed", stats.burgers_viewed)

        self._render_cooking_history()
        self._render_storage()

    def _render_cooking_history(self):
        st.subheader("📜 Cooking history")
        sessions = self.services.cooking.cooking_sessions
        if not sessions:
            st.info("Nothing cooked yet. Pick a burger and start the timer!")
            return

        st.dataframe(build_history_frame(sessions), hide_index=True, use_container_width=True)

        if st.button("🗑️ Clear history"):
            self.runner.run(self.services.cooking.clear_history())
            st.rerun()

    def _render_storage(self):
        st.subheader("💾 Data storage")
        summary = self.runner.run(self.services.storage.get_storage_summary())

        if summary.entries:
            df = pd.DataFrame([
                {'Key': e.key, 'Items': e.item_count if e.item_count is not None else "", 'Bytes': e.size_bytes}
                for e in summary.entries
            ])
            st.dataframe(df, hide_index=True, use_container_width=True)
        st.caption(f"Total: {summary.total_size}")

        if st.button("⚠️ Clear all app data"):
            self.runner.run(self.services.clear_user_data())
            st.success("Local data cleared.")
            st.rerun()


def create_profile_interface(services: AppServices, runner: AsyncRunner) -> ProfileInterface:
    """Factory function to create profile interface"""
    return ProfileInterface(services, runner)
