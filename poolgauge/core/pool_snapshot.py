"""Point-in-time view of a pool's counters."""

from __future__ import annotations

from dataclasses import dataclass

from poolgauge.core.protocols.pool import Pool


@dataclass(frozen=True)
class PoolSnapshot:
    """Values read from a pool during one sampling tick.

    The pool's own invariants (``size == available + borrowed``,
    ``size <= max``) are not checked here.
    """

    min: int
    max: int
    size: int
    available: int
    borrowed: int
    pending: int
    spare_resource_capacity: int

    @classmethod
    def read(cls, pool: Pool) -> PoolSnapshot:
        """Read all seven fields from *pool*.  Errors from the pool propagate."""
        return cls(
            min=pool.min,
            max=pool.max,
            size=pool.size,
            available=pool.available,
            borrowed=pool.borrowed,
            pending=pool.pending,
            spare_resource_capacity=pool.spare_resource_capacity,
        )
