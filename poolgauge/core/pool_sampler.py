"""Asyncio sampler that drives a PoolExporter on the event loop.

For hosts that already run an event loop and would rather not spawn a
timer thread: build the exporter with ``interval=None`` and hand it to
``PoolSampler``.
"""

from __future__ import annotations

import asyncio
import contextlib
from typing import TYPE_CHECKING

from poolgauge.core.logging import logger

if TYPE_CHECKING:
    from poolgauge.core.pool_exporter import PoolExporter

_DEFAULT_INTERVAL: float = 10.0


class PoolSampler:
    """Periodically calls ``exporter.observe()`` from an asyncio task."""

    def __init__(self, exporter: PoolExporter, interval: float = _DEFAULT_INTERVAL) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self._exporter = exporter
        self._interval = interval
        self._task: asyncio.Task | None = None

    async def start(self) -> None:
        """Start the sampling task.  A second call while running is a no-op."""
        if self._task is not None:
            return
        self._task = asyncio.create_task(self._run())
        logger.debug(f"Pool sampler started (interval={self._interval}s)")

    async def stop(self) -> None:
        """Cancel the sampling task.  Safe to call before ``start()``."""
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
        logger.debug("Pool sampler stopped")

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            try:
                self._exporter.observe()
            except Exception as exc:
                asyncio.get_running_loop().call_exception_handler(
                    {"message": "Pool sample failed", "exception": exc}
                )
