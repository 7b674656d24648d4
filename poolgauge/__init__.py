"""Prometheus gauges for resource pool state.

Typical use:

    from prometheus_client import CollectorRegistry
    from poolgauge import create_pool_exporter

    registry = CollectorRegistry()
    exporter = create_pool_exporter(pool, registry=registry)
    ...
    exporter.stop()
"""

from poolgauge.core.exceptions import DuplicateMetricError, InvalidPoolError, PoolGaugeError
from poolgauge.core.pool_exporter import PoolExporter, create_pool_exporter
from poolgauge.core.pool_sampler import PoolSampler
from poolgauge.core.pool_snapshot import PoolSnapshot

__all__ = [
    "DuplicateMetricError",
    "InvalidPoolError",
    "PoolExporter",
    "PoolGaugeError",
    "PoolSampler",
    "PoolSnapshot",
    "create_pool_exporter",
]
