"""
Background event loop for synchronous hosts.

Streamlit reruns the page script on a fresh thread for every interaction, so the
stores and the cooking timer live on one long-lived asyncio loop owned by a
daemon thread. Page code submits coroutines with ``AsyncRunner.run``.
"""

import asyncio
import threading
from typing import Any, Coroutine, Optional, TypeVar

from .logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class AsyncRunner:
    """Owns a single event loop running in a daemon thread"""

    _lock = threading.Lock()

    def __init__(self, name: str = "burger-book-loop"):
        self.loop = asyncio.new_event_loop()
        self._thread = threading.Thread(target=self._run_loop, name=name, daemon=True)
        self._thread.start()
        logger.debug(f"Started background event loop thread {name}")

    def _run_loop(self):
        asyncio.set_event_loop(self.loop)
        self.loop.run_forever()

    def run(self, coro: Coroutine[Any, Any, T], timeout: Optional[float] = None) -> T:
        """Run a coroutine on the background loop and wait for its result"""
        with self._lock:
            future = asyncio.run_coroutine_threadsafe(coro, self.loop)
        return future.result(timeout)

    def close(self):
        """Stop the loop and join the thread"""
        if self.loop.is_closed():
            return
        self.loop.call_soon_threadsafe(self.loop.stop)
        self._thread.join(timeout=5)
        self.loop.close()
        logger.debug("Background event loop closed")

    @property
    def is_running(self) -> bool:
        return self._thread.is_alive() and self.loop.is_running()
