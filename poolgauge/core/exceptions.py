"""Exceptions raised by poolgauge.

All of them derive from ``ValueError`` as well as ``PoolGaugeError`` so
callers that already guard prometheus-client's ``ValueError`` keep working.
"""


class PoolGaugeError(Exception):
    """Base class for poolgauge errors."""


class InvalidPoolError(PoolGaugeError, ValueError):
    """Raised when the pool handed to an exporter is missing or mis-shaped."""


class DuplicateMetricError(PoolGaugeError, ValueError):
    """Raised when the registry already holds a metric with the same name."""

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name
