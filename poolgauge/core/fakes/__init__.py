"""In-memory fakes for testing."""

from poolgauge.core.fakes.pool import BrokenPool, FakePool

__all__ = ["BrokenPool", "FakePool"]
