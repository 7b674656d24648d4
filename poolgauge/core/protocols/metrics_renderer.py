"""MetricsRenderer protocol for serializing the registry a scraper reads.

PoolMetrics only writes gauges; rendering them is a separate concern so
the exporter never depends on an exposition format.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsRenderer(Protocol):
    """Protocol for rendering collected metrics into a scrapeable format."""

    @property
    def content_type(self) -> str:
        """MIME type for the serialized metrics output."""
        ...

    def generate(self) -> bytes:
        """Serialize all registered metrics into the wire format."""
        ...

    def render_text(self) -> str:
        """Same output as ``generate()``, decoded."""
        ...
