"""Cancellable fixed-interval tick loop."""

from __future__ import annotations

import asyncio
import enum
import logging
from collections.abc import Awaitable, Callable

from lead_snake.config import TICK_INTERVAL_MS

logger = logging.getLogger(__name__)

TickCallback = Callable[[], Awaitable[None] | None]


class SchedulerState(enum.Enum):
    """Lifecycle states of a :class:`TickScheduler`."""

    STOPPED = "stopped"
    RUNNING = "running"


class TickScheduler:
    """Invoke a callback every ``interval_ms`` on the running event loop.

    Use as an async context manager so the periodic task is cancelled on
    every exit path::

        async with TickScheduler(session.tick):
            ...

    The callback may be a plain function or a coroutine function. A failing
    callback is logged and the loop keeps ticking. A stopped scheduler
    cannot be restarted.
    """

    def __init__(
        self,
        callback: TickCallback,
        interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive.")
        self.callback = callback
        self.interval_ms = interval_ms
        self.state = SchedulerState.STOPPED
        self.ticks = 0
        self._task: asyncio.Task | None = None
        self._stopped = False

    @property
    def running(self) -> bool:
        return self.state == SchedulerState.RUNNING

    def start(self) -> None:
        """Begin ticking. Must be called from within a running event loop."""
        if self._stopped:
            raise RuntimeError("A stopped scheduler cannot be restarted.")
        if self._task is not None:
            return
        self._task = asyncio.create_task(self._run())
        self.state = SchedulerState.RUNNING
        logger.info("Tick scheduler started (interval=%dms).", self.interval_ms)

    async def stop(self) -> None:
        """Cancel the periodic task and wait for it to finish."""
        self._stopped = True
        self.state = SchedulerState.STOPPED
        task, self._task = self._task, None
        if task is None:
            return
        if not task.done():
            task.cancel()
        await asyncio.gather(task, return_exceptions=True)
        logger.info("Tick scheduler stopped after %d ticks.", self.ticks)

    async def _run(self) -> None:
        interval = self.interval_ms / 1000.0
        try:
            while self.state == SchedulerState.RUNNING:
                await asyncio.sleep(interval)
                try:
                    result = self.callback()
                    if asyncio.iscoroutine(result):
                        await result
                except asyncio.CancelledError:
                    raise
                except Exception:
                    logger.exception("Tick callback failed.")
                self.ticks += 1
        except asyncio.CancelledError:
            logger.debug("Tick loop cancelled.")
            raise

    async def __aenter__(self) -> TickScheduler:
        self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.stop()
