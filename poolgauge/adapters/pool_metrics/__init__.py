"""Pool metrics adapters."""

from poolgauge.adapters.pool_metrics.fake import FakePoolMetrics
from poolgauge.adapters.pool_metrics.prometheus import (
    PrometheusLabeledPoolMetrics,
    PrometheusPoolMetrics,
)

__all__ = ["PrometheusPoolMetrics", "PrometheusLabeledPoolMetrics", "FakePoolMetrics"]
