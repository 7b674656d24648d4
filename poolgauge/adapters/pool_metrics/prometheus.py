"""Prometheus implementations of the PoolMetrics protocol.

Two layouts are supported:

* ``PrometheusPoolMetrics`` — one gauge per pool field
  (``pool_min_total``, ``pool_max_total``, ...).
* ``PrometheusLabeledPoolMetrics`` — a single gauge
  (``pool_size_total`` by default) with a ``type`` label per field plus
  any static labels supplied by the caller.

Gauges are built unregistered and then registered as a group.  If the
registry rejects one of them, the ones already registered by this adapter
are removed again before ``DuplicateMetricError`` is raised, so a failed
construction never leaves half a metric set behind.
"""

from __future__ import annotations

from collections.abc import Mapping

from prometheus_client import CollectorRegistry, Gauge

from poolgauge.core.exceptions import DuplicateMetricError
from poolgauge.core.logging import logger
from poolgauge.core.pool_snapshot import PoolSnapshot
from poolgauge.core.protocols.pool_metrics import PoolMetrics

DEFAULT_PREFIX = "pool_"

# (snapshot field, default name suffix, help text), in exposition order.
FIELD_GAUGES: tuple[tuple[str, str, str], ...] = (
    ("min", "min_total", "min size of the pool"),
    ("max", "max_total", "max size of the pool"),
    ("size", "size_total", "number of resources that are currently acquired"),
    (
        "spare_resource_capacity",
        "spare_resource_capacity_total",
        "number of resources the pool could create before hitting any limits",
    ),
    ("available", "available_total", "number of unused resources in the pool"),
    (
        "borrowed",
        "borrowed_total",
        "number of resources that are currently acquired by userland code",
    ),
    ("pending", "pending_total", "number of callers waiting to acquire a resource"),
)

DEFAULT_LABELED_NAME = "pool_size_total"
LABELED_HELP = "Size of the pool"
TYPE_LABEL = "type"

# Snapshot field -> value of the ``type`` label, in exposition order.
FIELD_TYPES: tuple[tuple[str, str], ...] = (
    ("min", "min"),
    ("max", "max"),
    ("size", "acquired"),
    ("spare_resource_capacity", "spare_capacity"),
    ("available", "available"),
    ("borrowed", "borrowed"),
    ("pending", "pending"),
)


def register_gauges(registry: CollectorRegistry, gauges: Mapping[str, Gauge]) -> None:
    """Register *gauges* (keyed by metric name) on *registry* all-or-nothing."""
    registered: list[Gauge] = []
    for name, gauge in gauges.items():
        try:
            registry.register(gauge)
        except ValueError as exc:
            for done in reversed(registered):
                registry.unregister(done)
            logger.with_context(metric=name).debug("Registry rejected gauge, rolled back")
            raise DuplicateMetricError(name, str(exc)) from exc
        registered.append(gauge)


class PrometheusPoolMetrics(PoolMetrics):
    """Prometheus-backed pool metrics, one gauge per pool field."""

    def __init__(
        self,
        registry: CollectorRegistry | None = None,
        *,
        prefix: str = DEFAULT_PREFIX,
        names: Mapping[str, str] | None = None,
    ) -> None:
        """Create and register the seven gauges.

        Args:
            registry: Target registry.  A private ``CollectorRegistry`` is
                created when omitted.
            prefix: Prepended to every gauge name.
            names: Optional overrides keyed by snapshot field
                (``{"size": "in_use_total"}``); missing keys keep their
                default suffix.
        """
        self._registry = registry or CollectorRegistry()
        overrides = dict(names or {})

        self._names: dict[str, str] = {
            field: f"{prefix}{overrides.get(field, suffix)}" for field, suffix, _ in FIELD_GAUGES
        }
        self._gauges: dict[str, Gauge] = {
            field: Gauge(self._names[field], help_text, registry=None)
            for field, _, help_text in FIELD_GAUGES
        }
        register_gauges(
            self._registry,
            {self._names[field]: gauge for field, gauge in self._gauges.items()},
        )

    @property
    def metric_names(self) -> list[str]:
        return list(self._names.values())

    # -- PoolMetrics protocol method --

    def update(self, snapshot: PoolSnapshot) -> None:
        for field, gauge in self._gauges.items():
            gauge.set(getattr(snapshot, field))


class PrometheusLabeledPoolMetrics(PoolMetrics):
    """Prometheus-backed pool metrics, one gauge labeled by ``type``."""

    def __init__(
        self,
        registry: CollectorRegistry | None = None,
        *,
        name: str = DEFAULT_LABELED_NAME,
        labels: Mapping[str, str | int | float] | None = None,
    ) -> None:
        self._registry = registry or CollectorRegistry()
        self._name = name
        # prometheus-client label values are strings.
        self._labels = {key: str(value) for key, value in (labels or {}).items()}

        self._gauge = Gauge(
            name,
            LABELED_HELP,
            [TYPE_LABEL, *self._labels],
            registry=None,
        )
        register_gauges(self._registry, {name: self._gauge})

    @property
    def metric_names(self) -> list[str]:
        return [self._name]

    # -- PoolMetrics protocol method --

    def update(self, snapshot: PoolSnapshot) -> None:
        for field, type_value in FIELD_TYPES:
            self._gauge.labels(type=type_value, **self._labels).set(getattr(snapshot, field))
