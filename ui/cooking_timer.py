"""
Cooking timer UI for Burger Book application.

The timer's tick task runs on the background event loop, so it keeps counting
across Streamlit reruns; the page refreshes itself once a second while a
session is active.
"""

import time
import streamlit as st

from models import CookingState, Recipe
from services import AppServices, CookingSessionError, CookingTimer, format_elapsed
from utils import AsyncRunner, get_logger

logger = get_logger(__name__)


class CookingTimerInterface:
    """Start/pause/resume/complete/cancel controls with step navigation"""

    def __init__(self, services: AppServices, runner: AsyncRunner):
        self.services = services
        self.runner = runner

        # Session state keys
        self.TIMER_KEY = "cooking_timer"
        self.STEP_KEY = "cooking_step"

    def _get_timer(self) -> CookingTimer:
        if self.TIMER_KEY not in st.session_state:
            st.session_state[self.TIMER_KEY] = self.services.create_cooking_timer()
        return st.session_state[self.TIMER_KEY]

    def render_cooking_timer(self, recipe: Recipe):
        """Render the cooking page for a recipe"""
        timer = self._get_timer()
        cooking = self.services.cooking
        current = cooking.current_session

        st.header(f"👨‍🍳 Cooking: {recipe.name}")

        if current and current.recipe_id != recipe.id:
            st.warning(f"You're already cooking {current.recipe_name}.")

        st.metric("Elapsed", format_elapsed(timer.elapsed_seconds))

        col1, col2, col3 = st.columns(3)
        state = cooking.state

        with col1:
            if state not in (CookingState.ACTIVE, CookingState.PAUSED):
                if st.button("▶️ Start", type="primary"):
                    self._start(timer, recipe)
            elif state == CookingState.ACTIVE:
                if st.button("⏸️ Pause"):
                    self.runner.run(timer.pause())
                    st.rerun()
            else:
                if st.button("▶️ Resume"):
                    self.runner.run(timer.resume())
                    st.rerun()

        with col2:
            if cooking.is_in_progress and st.button("✅ Complete"):
                session = self.runner.run(timer.complete())
                if session:
                    st.success(f"You've cooked {session.recipe_name} in {format_elapsed(session.cooking_time)}!")
                    st.session_state.pop(self.STEP_KEY, None)

        with col3:
            if cooking.is_in_progress and st.button("✖️ Cancel"):
                self.runner.run(timer.cancel())
                st.session_state.pop(self.STEP_KEY, None)
                st.info("Cooking cancelled. Progress was not saved.")

        self._render_steps(recipe)

        if cooking.state == CookingState.ACTIVE:
            time.sleep(1)
            st.rerun()

    def _start(self, timer: CookingTimer, recipe: Recipe):
        try:
            self.runner.run(timer.start(recipe))
        except CookingSessionError as e:
            st.error(str(e))
            return
        st.session_state[self.STEP_KEY] = 0
        st.rerun()

    def _render_steps(self, recipe: Recipe):
        if not recipe.instructions:
            return

        step = st.session_state.get(self.STEP_KEY, 0)
        total = len(recipe.instructions)

        st.subheader(f"Step {step + 1} of {total}")
        st.write(recipe.instructions[step])

        col1, col2 = st.columns(2)
        with col1:
            if st.button("← Previous", disabled=step == 0):
                st.session_state[self.STEP_KEY] = step - 1
                st.rerun()
        with col2:
            if st.button("Next →", disabled=step >= total - 1):
                st.session_state[self.STEP_KEY] = step + 1
                st.rerun()

    def shutdown(self):
        """Stop ticking when the cooking page is left; an active session is paused"""
        timer = st.session_state.get(self.TIMER_KEY)
        if timer is None:
            return
        if self.services.cooking.state == CookingState.ACTIVE:
            self.runner.run(timer.pause())
        else:
            self.runner.run(timer.stop())


def create_cooking_timer_interface(services: AppServices, runner: AsyncRunner) -> CookingTimerInterface:
    """Factory function to create cooking timer interface"""
    return CookingTimerInterface(services, runner)
