"""
Cooking sessions for Burger Book application.

A single current session slot runs through
idle -> active <-> paused -> completed | cancelled.
Completed sessions are appended to the persisted history and counted in the
user stats; a cancelled session leaves no trace. Starting while a session is
active or paused is refused unless the caller asks to replace it.

CookingTimer drives the one-second tick on the event loop. Its tick task is
cancelled on pause, completion, cancellation and when the timer's context exits.
"""

import asyncio
import contextlib
from dataclasses import replace
from typing import List, Optional

from models import CookingSession, CookingState, Recipe
from models.user_models import now_iso
from services.entity_store import EntityStore, PersistErrorHandler
from services.stats_service import StatsService, format_cooking_time
from services.storage_service import KeyValueStore, COOKING_SESSIONS_KEY
from utils import get_logger

logger = get_logger(__name__)


class CookingSessionError(Exception):
    """Raised for an invalid cooking session transition"""


class CookingService(EntityStore[CookingSession]):
    """Current cooking session plus the history of completed sessions"""

    storage_key = COOKING_SESSIONS_KEY
    entity_name = "cooking session"

    def __init__(self, storage: KeyValueStore,
                 on_persist_error: Optional[PersistErrorHandler] = None,
                 stats_service: Optional[StatsService] = None):
        super().__init__(storage, on_persist_error)
        self.stats_service = stats_service
        self.state = CookingState.IDLE
        self._current: Optional[CookingSession] = None

    def _decode(self, data) -> CookingSession:
        return CookingSession.from_dict(data)

    @property
    def cooking_sessions(self) -> List[CookingSession]:
        return self.items

    @property
    def current_session(self) -> Optional[CookingSession]:
        return replace(self._current) if self._current else None

    @property
    def elapsed_seconds(self) -> int:
        return self._current.cooking_time if self._current else 0

    @property
    def is_in_progress(self) -> bool:
        return self.state in (CookingState.ACTIVE, CookingState.PAUSED)

    # State transitions

    def start_cooking(self, recipe: Recipe, replace_current: bool = False) -> CookingSession:
        if self.is_in_progress:
            if not replace_current:
                raise CookingSessionError(
                    f"Already cooking {self._current.recipe_name}; finish or cancel it first"
                )
            logger.warning(f"Discarding unfinished session for {self._current.recipe_name}")

        self._current = CookingSession(
            recipe_id=recipe.id,
            recipe_name=recipe.name,
            cooking_time=0,
            date=now_iso(),
            completed=False
        )
        self.state = CookingState.ACTIVE
        logger.info(f"Started cooking {recipe.name}")
        return self.current_session

    def pause(self) -> None:
        if self.state != CookingState.ACTIVE:
            raise CookingSessionError(f"Cannot pause from state {self.state.value}")
        self.state = CookingState.PAUSED

    def resume(self) -> None:
        if self.state != CookingState.PAUSED:
            raise CookingSessionError(f"Cannot resume from state {self.state.value}")
        self.state = CookingState.ACTIVE

    def tick(self, seconds: int = 1) -> int:
        """Advance the current session while it is active"""
        if self.state == CookingState.ACTIVE and self._current:
            self._current.cooking_time += seconds
        return self.elapsed_seconds

    async def complete_cooking(self, elapsed_seconds: Optional[int] = None) -> Optional[CookingSession]:
        """Move the current session into history; None when nothing is cooking"""
        if self._current is None:
            logger.warning("complete_cooking called with no current session")
            return None

        elapsed = self._current.cooking_time if elapsed_seconds is None else int(elapsed_seconds)
        if elapsed < 0:
            logger.warning(f"Negative cooking time {elapsed}s recorded as 0s")
            elapsed = 0

        completed = replace(self._current, cooking_time=elapsed, completed=True)
        self._current = None
        self.state = CookingState.COMPLETED

        await self._commit(self._items + [completed])
        logger.info(f"Completed {completed.recipe_name} in {elapsed}s")

        if self.stats_service:
            await self.stats_service.record_completed_session(completed)
        return completed

    def cancel_cooking(self) -> bool:
        """Drop the current session; False when there was nothing to cancel"""
        if self._current is None:
            return False
        logger.info(f"Cancelled cooking {self._current.recipe_name}")
        self._current = None
        self.state = CookingState.CANCELLED
        return True

    async def clear_history(self) -> None:
        await self._commit([])
        logger.info("Cleared cooking history")

    # Aggregates

    def has_cooked_recipe(self, recipe_id: str) -> bool:
        return any(s.recipe_id == recipe_id and s.completed for s in self._items)

    def get_sessions_for_recipe(self, recipe_id: str) -> List[CookingSession]:
        return [s for s in self._items if s.recipe_id == recipe_id]

    def get_total_cooking_seconds(self) -> int:
        return sum(s.cooking_time for s in self._items if s.completed)

    def get_total_cooking_time(self) -> str:
        return format_cooking_time(self.get_total_cooking_seconds())

    def get_recipes_cooked(self) -> int:
        return sum(1 for s in self._items if s.completed)


class CookingTimer:
    """
    Periodic tick for the current cooking session.

    Use as an async context manager so the tick task cannot outlive its owner:

        async with CookingTimer(cooking_service) as timer:
            await timer.start(recipe)
            ...
    """

    def __init__(self, cooking_service: CookingService, tick_seconds: float = 1.0):
        self.cooking_service = cooking_service
        self.tick_seconds = tick_seconds
        self._task: Optional[asyncio.Task] = None

    async def __aenter__(self) -> 'CookingTimer':
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.stop()

    @property
    def is_ticking(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def elapsed_seconds(self) -> int:
        return self.cooking_service.elapsed_seconds

    async def start(self, recipe: Recipe, replace_current: bool = False) -> CookingSession:
        await self._stop_ticking()
        session = self.cooking_service.start_cooking(recipe, replace_current=replace_current)
        self._start_ticking()
        return session

    async def pause(self) -> None:
        self.cooking_service.pause()
        await self._stop_ticking()

    async def resume(self) -> None:
        self.cooking_service.resume()
        self._start_ticking()

    async def complete(self, elapsed_seconds: Optional[int] = None) -> Optional[CookingSession]:
        await self._stop_ticking()
        return await self.cooking_service.complete_cooking(elapsed_seconds)

    async def cancel(self) -> bool:
        await self._stop_ticking()
        return self.cooking_service.cancel_cooking()

    async def stop(self) -> None:
        """Stop ticking without changing the session"""
        await self._stop_ticking()

    async def _run(self):
        while self.cooking_service.state == CookingState.ACTIVE:
            await asyncio.sleep(self.tick_seconds)
            self.cooking_service.tick(1)

    def _start_ticking(self):
        if self.is_ticking:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())

    async def _stop_ticking(self):
        task, self._task = self._task, None
        if task is None or task.done():
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
