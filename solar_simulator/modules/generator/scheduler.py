"""
Generator Module - Periodic Task

Runs a synchronous callback on a fixed period inside the event loop.
"""
import asyncio
import contextlib
from typing import Any, Callable

from solar_simulator.core.logging import bind_context, get_logger

logger = get_logger(__name__)


class PeriodicTask:
    """
    Cancellable fixed-period runner.

    The callback is synchronous, so cancellation can only land while the
    task sleeps between ticks, never in the middle of one. Drift and missed
    ticks are not compensated.
    """

    def __init__(self, callback: Callable[[], Any], interval: float, name: str = "periodic-task"):
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.callback = callback
        self.interval = interval
        self.name = name
        self.ticks = 0
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Schedule the loop on the running event loop."""
        if self.running:
            return
        self._task = asyncio.create_task(self._run(), name=self.name)
        logger.info("Periodic task started", task=self.name, interval=self.interval)

    async def stop(self) -> None:
        """Cancel future ticks and wait for the loop to exit."""
        if self._task is None:
            return
        task, self._task = self._task, None
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
        logger.info("Periodic task stopped", task=self.name, ticks=self.ticks)

    async def _run(self) -> None:
        bind_context(task=self.name)
        while True:
            await asyncio.sleep(self.interval)
            try:
                self.callback()
            except Exception:
                logger.exception("Periodic task tick failed", tick=self.ticks + 1)
            self.ticks += 1
