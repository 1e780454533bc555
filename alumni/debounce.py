"""
Single-slot debounce for search keystrokes.

Each call schedules the callback ``delay`` seconds out and cancels whatever
the previous call scheduled, so the callback runs once per quiet period with
the latest arguments.
"""
from __future__ import annotations

import asyncio
from typing import Any, Callable, Optional, Protocol


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> TimerHandle: ...


class Debouncer:
    """Callable wrapper holding at most one pending invocation."""

    def __init__(
        self,
        delay: float,
        callback: Callable[..., Any],
        scheduler: Optional[Scheduler] = None,
    ) -> None:
        if delay < 0:
            raise ValueError("delay must be non-negative")
        self.delay = delay
        self.callback = callback
        self._scheduler = scheduler
        self._handle: Optional[TimerHandle] = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def __call__(self, *args: Any) -> None:
        scheduler = self._scheduler or asyncio.get_running_loop()
        self.cancel()
        self._handle = scheduler.call_later(self.delay, self._fire, *args)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, *args: Any) -> None:
        self._handle = None
        self.callback(*args)
