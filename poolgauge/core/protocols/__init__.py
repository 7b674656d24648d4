"""Core protocols for dependency injection."""

from poolgauge.core.protocols.metrics_renderer import MetricsRenderer
from poolgauge.core.protocols.pool import Pool
from poolgauge.core.protocols.pool_metrics import PoolMetrics

__all__ = [
    "MetricsRenderer",
    "Pool",
    "PoolMetrics",
]
