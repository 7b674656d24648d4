"""Unit tests for PoolExporterOptions."""

import pytest
from prometheus_client import REGISTRY, CollectorRegistry
from pydantic import ValidationError

from poolgauge.adapters.pool_metrics import PrometheusLabeledPoolMetrics, PrometheusPoolMetrics
from poolgauge.core.config import DEFAULT_INTERVAL_MS, PoolExporterOptions


class TestPoolExporterOptions:
    def test_defaults(self):
        opts = PoolExporterOptions()

        assert opts.interval == DEFAULT_INTERVAL_MS == 10_000
        assert opts.mode == "multi"
        assert opts.prefix == "pool_"
        assert opts.name == "pool_size_total"
        assert opts.labels == {}
        assert opts.target_registry is REGISTRY

    def test_interval_none_disables_timer(self):
        assert PoolExporterOptions(interval=None).interval is None

    @pytest.mark.parametrize("interval", [0, -1])
    def test_non_positive_interval(self, interval):
        with pytest.raises(ValidationError):
            PoolExporterOptions(interval=interval)

    def test_unknown_mode(self):
        with pytest.raises(ValidationError):
            PoolExporterOptions(mode="single")

    def test_reserved_label(self):
        with pytest.raises(ValidationError, match="reserved"):
            PoolExporterOptions(mode="labeled", labels={"type": "db"})

    def test_field_names(self):
        opts = PoolExporterOptions(borrowed_name="in_use_total")

        assert opts.field_names() == {
            "min": "min_total",
            "max": "max_total",
            "size": "size_total",
            "spare_resource_capacity": "spare_resource_capacity_total",
            "available": "available_total",
            "borrowed": "in_use_total",
            "pending": "pending_total",
        }

    def test_build_metrics_per_mode(self):
        registry = CollectorRegistry()

        multi = PoolExporterOptions(registry=registry).build_metrics()
        labeled = PoolExporterOptions(
            registry=registry, mode="labeled", name="labeled_pool_total"
        ).build_metrics()

        assert isinstance(multi, PrometheusPoolMetrics)
        assert isinstance(labeled, PrometheusLabeledPoolMetrics)
        assert multi._registry is registry
        assert labeled.metric_names == ["labeled_pool_total"]

    def test_registry_must_be_collector_registry(self):
        with pytest.raises(ValidationError):
            PoolExporterOptions(registry="default")

    def test_fractional_interval(self):
        assert PoolExporterOptions(interval=1500.5).interval == 1500.5

    def test_numeric_label_values(self):
        opts = PoolExporterOptions(mode="labeled", labels={"shard": 1, "region": "eu"})

        assert opts.labels == {"shard": 1, "region": "eu"}

    @pytest.mark.parametrize(
        "options",
        [
            {"mode": "labeled", "prefix": "db_"},
            {"mode": "labeled", "size_name": "in_use"},
            {"name": "my_pool_size_total"},
            {"mode": "multi", "labels": {"foo": "bar"}},
        ],
    )
    def test_options_from_other_mode(self, options):
        with pytest.raises(ValidationError, match="do not apply"):
            PoolExporterOptions(**options)
