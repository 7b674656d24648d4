"""Pool view over a SQLAlchemy ``QueuePool``.

SQLAlchemy reports its pool through methods (``size()``, ``checkedin()``,
``checkedout()``, ``overflow()``) and keeps ``max_overflow`` private, so
the caller passes the engine's configured value explicitly.  QueuePool has
no public counter for blocked callers; ``pending`` is always 0.
"""

from typing import Any


class SQLAlchemyPoolView:
    """Read-only ``Pool`` view of a SQLAlchemy-style connection pool.

    Usage:
        view = SQLAlchemyPoolView(engine.pool, max_overflow=10)
        exporter = create_pool_exporter(view, registry=registry)
    """

    pending = 0

    def __init__(self, pool: Any, *, max_overflow: int = 0) -> None:
        self._pool = pool
        self._max_overflow = max_overflow

    @property
    def min(self) -> int:
        return 0

    @property
    def max(self) -> int:
        return self._pool.size() + self._max_overflow

    @property
    def size(self) -> int:
        return self._pool.checkedin() + self._pool.checkedout()

    @property
    def available(self) -> int:
        return self._pool.checkedin()

    @property
    def borrowed(self) -> int:
        return self._pool.checkedout()

    @property
    def spare_resource_capacity(self) -> int:
        return max(self.max - self.size, 0)
