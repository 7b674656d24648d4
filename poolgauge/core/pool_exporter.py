"""Pool exporter: samples a pool into gauge metrics on a timer.

The exporter reads the pool, pushes a ``PoolSnapshot`` into a
``PoolMetrics`` sink and, when given an interval, repeats that on a daemon
timer thread until ``stop()`` is called.  Hosts running an asyncio loop can
disable the thread (``interval=None``) and drive the exporter from
``PoolSampler`` instead.
"""

from __future__ import annotations

import threading
from dataclasses import fields
from typing import Any

from poolgauge.core.config import PoolExporterOptions
from poolgauge.core.exceptions import InvalidPoolError
from poolgauge.core.logging import logger
from poolgauge.core.pool_snapshot import PoolSnapshot
from poolgauge.core.protocols.pool import Pool
from poolgauge.core.protocols.pool_metrics import PoolMetrics


def _check_pool(pool: Any) -> None:
    if pool is None:
        raise InvalidPoolError("pool instance is required")
    # Protocol isinstance checks skip __getattr__ attributes on 3.12+.
    missing = [field.name for field in fields(PoolSnapshot) if not hasattr(pool, field.name)]
    if missing:
        raise InvalidPoolError(
            f"{type(pool).__name__} does not expose pool field(s): {', '.join(missing)}"
        )


class PoolExporter:
    """Publishes pool state into a PoolMetrics sink.

    One sample is taken synchronously during construction so the metrics
    reflect the pool before the first scrape.  ``observe()`` holds a
    per-exporter lock across the read and the write, so concurrent calls
    (timer thread vs. manual) never interleave a partial snapshot.
    """

    def __init__(
        self,
        pool: Pool,
        metrics: PoolMetrics,
        *,
        interval: float | None = None,
    ) -> None:
        """Bind *pool* to *metrics*.

        Args:
            pool: Object exposing the seven ``Pool`` attributes.
            metrics: Sink receiving each snapshot.
            interval: Sampling period in milliseconds, or ``None`` for
                manual ``observe()`` only.
        """
        _check_pool(pool)
        if interval is not None and interval <= 0:
            raise ValueError("interval must be a positive number of milliseconds or None")

        self._pool = pool
        self._metrics = metrics
        self._interval = interval
        self._lock = threading.Lock()
        self._stopped = threading.Event()
        self._thread: threading.Thread | None = None
        self._logger = logger.with_context(pool=type(pool).__name__)

        self.observe()

        if interval is not None:
            self._thread = threading.Thread(
                target=self._run,
                name=f"poolgauge-{type(pool).__name__}",
                daemon=True,
            )
            self._thread.start()
            self._logger.debug(f"Pool sampling every {interval} ms")

    @property
    def pool(self) -> Pool:
        return self._pool

    @property
    def metrics(self) -> PoolMetrics:
        return self._metrics

    @property
    def interval(self) -> float | None:
        return self._interval

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def observe(self) -> None:
        """Read the pool and push one snapshot.  Errors propagate to the caller."""
        with self._lock:
            self._metrics.update(PoolSnapshot.read(self._pool))

    def stop(self) -> None:
        """Cancel the timer thread.  Safe to call repeatedly or without a timer.

        Gauges stay registered and keep their last observed values.
        """
        self._stopped.set()
        thread, self._thread = self._thread, None
        if thread is None:
            return
        if thread is not threading.current_thread():
            thread.join()
        self._logger.debug("Pool sampling stopped")

    off = stop

    def __enter__(self) -> PoolExporter:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def _run(self) -> None:
        seconds = self._interval / 1000
        while not self._stopped.wait(seconds):
            try:
                self.observe()
            except Exception as exc:
                # Report through the host's thread error hook and keep sampling.
                threading.excepthook(
                    threading.ExceptHookArgs(
                        (type(exc), exc, exc.__traceback__, threading.current_thread())
                    )
                )


def create_pool_exporter(pool: Pool, **options: Any) -> PoolExporter:
    """Create an exporter publishing *pool* into a Prometheus registry.

    Keyword options are validated by ``PoolExporterOptions``.  Without a
    ``registry`` the process-wide ``prometheus_client.REGISTRY`` is used.

    Raises:
        InvalidPoolError: *pool* is ``None`` or lacks a pool field.
        DuplicateMetricError: a gauge name is already registered.
        pydantic.ValidationError: an option is invalid.
    """
    _check_pool(pool)
    opts = PoolExporterOptions(**options)
    metrics = opts.build_metrics()
    return PoolExporter(pool, metrics, interval=opts.interval)
