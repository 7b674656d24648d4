"""Exporter options.

``PoolExporterOptions`` validates the keyword arguments accepted by
``create_pool_exporter`` and knows how to build the matching
``PoolMetrics`` adapter.
"""

from __future__ import annotations

from typing import Literal

from prometheus_client import REGISTRY, CollectorRegistry
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from poolgauge.adapters.pool_metrics.prometheus import (
    DEFAULT_LABELED_NAME,
    DEFAULT_PREFIX,
    TYPE_LABEL,
    PrometheusLabeledPoolMetrics,
    PrometheusPoolMetrics,
)
from poolgauge.core.protocols.pool_metrics import PoolMetrics

DEFAULT_INTERVAL_MS = 10_000

_MULTI_OPTIONS = frozenset(
    {
        "prefix",
        "min_name",
        "max_name",
        "size_name",
        "spare_resource_capacity_name",
        "available_name",
        "borrowed_name",
        "pending_name",
    }
)
_LABELED_OPTIONS = frozenset({"name", "labels"})


class PoolExporterOptions(BaseModel):
    """Options for ``create_pool_exporter``.

    ``registry`` defaults to prometheus-client's process-wide ``REGISTRY``.
    ``interval`` is in milliseconds; ``None`` disables the timer so the
    caller drives ``observe()`` manually.  Options belonging to the other
    ``mode`` are rejected rather than ignored.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="forbid", frozen=True)

    registry: CollectorRegistry | None = None
    interval: float | None = Field(default=DEFAULT_INTERVAL_MS)
    mode: Literal["multi", "labeled"] = "multi"

    # Multi-metric mode
    prefix: str = DEFAULT_PREFIX
    min_name: str = "min_total"
    max_name: str = "max_total"
    size_name: str = "size_total"
    spare_resource_capacity_name: str = "spare_resource_capacity_total"
    available_name: str = "available_total"
    borrowed_name: str = "borrowed_total"
    pending_name: str = "pending_total"

    # Single-metric mode
    name: str = DEFAULT_LABELED_NAME
    labels: dict[str, str | int | float] = Field(default_factory=dict)

    @field_validator("interval")
    @classmethod
    def _positive_interval(cls, value: float | None) -> float | None:
        if value is not None and value <= 0:
            raise ValueError("interval must be a positive number of milliseconds or None")
        return value

    @field_validator("labels")
    @classmethod
    def _no_reserved_label(
        cls, value: dict[str, str | int | float]
    ) -> dict[str, str | int | float]:
        if TYPE_LABEL in value:
            raise ValueError(f"'{TYPE_LABEL}' is reserved for the pool field label")
        return value

    @model_validator(mode="after")
    def _options_match_mode(self) -> PoolExporterOptions:
        foreign = _MULTI_OPTIONS if self.mode == "labeled" else _LABELED_OPTIONS
        stray = sorted(foreign & self.model_fields_set)
        if stray:
            raise ValueError(f"option(s) {', '.join(stray)} do not apply to mode='{self.mode}'")
        return self

    @property
    def target_registry(self) -> CollectorRegistry:
        return self.registry if self.registry is not None else REGISTRY

    def field_names(self) -> dict[str, str]:
        """Per-field gauge name suffixes for multi-metric mode."""
        return {
            "min": self.min_name,
            "max": self.max_name,
            "size": self.size_name,
            "spare_resource_capacity": self.spare_resource_capacity_name,
            "available": self.available_name,
            "borrowed": self.borrowed_name,
            "pending": self.pending_name,
        }

    def build_metrics(self) -> PoolMetrics:
        """Create and register the gauges for the configured mode."""
        if self.mode == "labeled":
            return PrometheusLabeledPoolMetrics(
                self.target_registry,
                name=self.name,
                labels=self.labels,
            )
        return PrometheusPoolMetrics(
            self.target_registry,
            prefix=self.prefix,
            names=self.field_names(),
        )
