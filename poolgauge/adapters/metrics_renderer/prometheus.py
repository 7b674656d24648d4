"""Prometheus implementation of the MetricsRenderer protocol.

Serializes every collector in a CollectorRegistry (the pool gauges and
anything else the host registered) for a scrape endpoint.  The classic
text format (``# HELP`` / ``# TYPE`` / sample lines) is the default;
``openmetrics=True`` switches to the OpenMetrics exposition, which ends
with ``# EOF``.
"""

from prometheus_client import CollectorRegistry, exposition
from prometheus_client.openmetrics import exposition as openmetrics_exposition

from poolgauge.core.protocols.metrics_renderer import MetricsRenderer


class PrometheusMetricsRenderer(MetricsRenderer):
    """Render all metrics in a shared CollectorRegistry."""

    def __init__(self, registry: CollectorRegistry, *, openmetrics: bool = False) -> None:
        self._registry = registry
        self._format = openmetrics_exposition if openmetrics else exposition

    @property
    def content_type(self) -> str:
        return self._format.CONTENT_TYPE_LATEST

    def generate(self) -> bytes:
        return self._format.generate_latest(self._registry)

    def render_text(self) -> str:
        return self.generate().decode("utf-8")
