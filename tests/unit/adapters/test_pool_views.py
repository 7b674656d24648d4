"""Unit tests for pool view adapters."""

from prometheus_client import CollectorRegistry, generate_latest

from poolgauge import create_pool_exporter
from poolgauge.adapters.pool_views import SQLAlchemyPoolView
from poolgauge.core.protocols import Pool


class FakeQueuePool:
    """Minimal stand-in for a SQLAlchemy QueuePool."""

    def __init__(self, size: int = 5, checkedout: int = 2, checkedin: int = 1, overflow: int = 0):
        self._size = size
        self._checkedout = checkedout
        self._checkedin = checkedin
        self._overflow = overflow

    def size(self) -> int:
        return self._size

    def checkedout(self) -> int:
        return self._checkedout

    def checkedin(self) -> int:
        return self._checkedin

    def overflow(self) -> int:
        return self._overflow


class TestSQLAlchemyPoolView:
    def test_satisfies_pool_protocol(self):
        assert isinstance(SQLAlchemyPoolView(FakeQueuePool()), Pool)

    def test_field_mapping(self):
        view = SQLAlchemyPoolView(FakeQueuePool(size=5, checkedout=2, checkedin=1), max_overflow=10)

        assert view.min == 0
        assert view.max == 15
        assert view.size == 3
        assert view.available == 1
        assert view.borrowed == 2
        assert view.pending == 0
        assert view.spare_resource_capacity == 12

    def test_spare_capacity_never_negative(self):
        view = SQLAlchemyPoolView(FakeQueuePool(size=2, checkedout=3, checkedin=0, overflow=1))

        assert view.spare_resource_capacity == 0

    def test_exports_through_exporter(self):
        queue_pool = FakeQueuePool(size=5, checkedout=2, checkedin=1)
        registry = CollectorRegistry()
        exporter = create_pool_exporter(
            SQLAlchemyPoolView(queue_pool, max_overflow=5), registry=registry, interval=None
        )

        queue_pool._checkedout = 4
        exporter.observe()

        output = generate_latest(registry).decode()
        assert "pool_max_total 10.0" in output
        assert "pool_borrowed_total 4.0" in output
        assert "pool_size_total 5.0" in output
        assert "pool_spare_resource_capacity_total 5.0" in output
