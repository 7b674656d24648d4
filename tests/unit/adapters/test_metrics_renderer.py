"""Unit tests for the Prometheus metrics renderer."""

from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry

from poolgauge import create_pool_exporter
from poolgauge.adapters.metrics_renderer import PrometheusMetricsRenderer
from poolgauge.core.fakes import FakePool
from poolgauge.core.protocols import MetricsRenderer


class TestPrometheusMetricsRenderer:
    def test_satisfies_protocol(self):
        assert isinstance(PrometheusMetricsRenderer(CollectorRegistry()), MetricsRenderer)

    def test_content_type_is_prometheus_format(self):
        renderer = PrometheusMetricsRenderer(CollectorRegistry())
        assert renderer.content_type == CONTENT_TYPE_LATEST

    def test_generate_contains_pool_gauges(self):
        registry = CollectorRegistry()
        create_pool_exporter(FakePool(), registry=registry, interval=None)

        output = PrometheusMetricsRenderer(registry).generate()

        assert isinstance(output, bytes)
        assert b"# TYPE pool_spare_resource_capacity_total gauge\n" in output
        assert b"pool_spare_resource_capacity_total 1.0\n" in output

    def test_empty_registry(self):
        assert PrometheusMetricsRenderer(CollectorRegistry()).generate() == b""

    def test_render_text_matches_generate(self):
        registry = CollectorRegistry()
        create_pool_exporter(FakePool(), registry=registry, mode="labeled", interval=None)
        renderer = PrometheusMetricsRenderer(registry)

        assert renderer.render_text() == renderer.generate().decode()
        assert 'pool_size_total{type="acquired"} 2.0' in renderer.render_text()

    def test_openmetrics_format(self):
        registry = CollectorRegistry()
        create_pool_exporter(FakePool(), registry=registry, interval=None)
        renderer = PrometheusMetricsRenderer(registry, openmetrics=True)

        text = renderer.render_text()
        assert renderer.content_type.startswith("application/openmetrics-text")
        assert "# TYPE pool_min_total gauge\n" in text
        assert text.endswith("# EOF\n")
