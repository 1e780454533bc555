"""
Live search over a WebSocket: keystrokes in, debounced directory views out.
"""
from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, Optional

from alumni.config import SEARCH_DEBOUNCE_MS
from alumni.data.store import DirectoryStore
from alumni.debounce import Debouncer, Scheduler
from alumni.logging import get_logger
from alumni.reports.cards import project_view

logger = get_logger(__name__)

SendFn = Callable[[dict], Awaitable[Any]]


class SearchSession:
    """One client's query against the shared directory.

    Each recomputation forks the shared store, so a reload is picked up on
    the next keystroke and no two clients ever see each other's query.
    """

    def __init__(
        self,
        store: DirectoryStore,
        send: SendFn,
        delay: float = SEARCH_DEBOUNCE_MS / 1000,
        scheduler: Optional[Scheduler] = None,
    ) -> None:
        self.store = store
        self.query = ""
        self._send = send
        self._sends: set[asyncio.Task] = set()
        self._debouncer = Debouncer(delay, self._apply, scheduler)

    def current_view(self) -> dict:
        return project_view(self.store.fork().set_query(self.query))

    def on_input(self, text: str) -> None:
        self._debouncer(text)

    def close(self) -> None:
        self._debouncer.cancel()
        for task in self._sends:
            task.cancel()

    def _apply(self, query: str) -> None:
        self.query = query
        view = self.current_view()
        logger.debug("search_applied", query=query, count=view["count"])
        task = asyncio.get_running_loop().create_task(self._send(view))
        self._sends.add(task)
        task.add_done_callback(self._sent)

    def _sent(self, task: asyncio.Task) -> None:
        self._sends.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.warning("search_send_failed", query=self.query, error=str(exc) or exc.__class__.__name__)
