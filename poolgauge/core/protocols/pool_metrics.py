"""PoolMetrics protocol for pool gauge collection.

Abstracts gauge collection so the exporter depends on a protocol rather
than a concrete library.  Production uses Prometheus; tests inject a fake
that records snapshots in memory.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from poolgauge.core.pool_snapshot import PoolSnapshot


@runtime_checkable
class PoolMetrics(Protocol):
    """Protocol for pool metrics collection."""

    def update(self, snapshot: PoolSnapshot) -> None:
        """Push a snapshot of pool gauges from a single sampling tick."""
        ...
