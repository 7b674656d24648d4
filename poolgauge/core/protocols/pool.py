"""Pool protocol describing the read surface the exporter samples.

Any object exposing these seven numeric attributes qualifies: plain
attributes, properties, or an adapter view over a library pool (see
``poolgauge.adapters.pool_views``).  Nothing else is ever called on it.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Pool(Protocol):
    """Protocol for a bounded pool of reusable resources."""

    min: int
    """Configured minimum pool size."""

    max: int
    """Configured maximum pool size."""

    size: int
    """Resources currently allocated (idle + borrowed)."""

    available: int
    """Idle resources ready to be handed out."""

    borrowed: int
    """Resources currently held by callers."""

    pending: int
    """Callers waiting for a resource."""

    spare_resource_capacity: int
    """Resources that could still be created before hitting ``max``."""
