"""Metrics renderer adapters."""

from poolgauge.adapters.metrics_renderer.prometheus import PrometheusMetricsRenderer

__all__ = ["PrometheusMetricsRenderer"]
