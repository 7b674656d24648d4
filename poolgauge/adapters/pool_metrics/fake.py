"""Fake PoolMetrics for testing.

Records snapshots in memory so tests can assert on pool gauge values
without reaching into prometheus-client internals.
"""

from __future__ import annotations

from poolgauge.core.pool_snapshot import PoolSnapshot
from poolgauge.core.protocols.pool_metrics import PoolMetrics


class FakePoolMetrics(PoolMetrics):
    """In-memory spy implementing the PoolMetrics protocol.

    Usage:
        fake = FakePoolMetrics()
        exporter = PoolExporter(pool, fake, interval=None)
        assert fake.last_snapshot.size == 2
    """

    def __init__(self) -> None:
        self.snapshots: list[PoolSnapshot] = []

    def update(self, snapshot: PoolSnapshot) -> None:
        self.snapshots.append(snapshot)

    # -- test helpers --

    @property
    def last_snapshot(self) -> PoolSnapshot | None:
        return self.snapshots[-1] if self.snapshots else None

    @property
    def update_count(self) -> int:
        return len(self.snapshots)

    def clear(self) -> None:
        """Reset all recorded state."""
        self.snapshots.clear()
