"""Fake pools for testing.

``FakePool`` holds plain attributes that tests mutate between samples.
``BrokenPool`` can be flipped into a state where every read raises.
"""

from __future__ import annotations


class FakePool:
    """Minimal stand-in for a generic resource pool.

    Usage:
        pool = FakePool(min=2, max=3, size=2)
        pool.acquire(3)
        assert pool.borrowed == 3
    """

    def __init__(
        self,
        *,
        min: int = 2,
        max: int = 3,
        size: int = 2,
        available: int = 0,
        borrowed: int = 0,
        pending: int = 0,
        spare_resource_capacity: int | None = None,
    ) -> None:
        self.min = min
        self.max = max
        self.size = size
        self.available = available
        self.borrowed = borrowed
        self.pending = pending
        self.spare_resource_capacity = (
            max - size if spare_resource_capacity is None else spare_resource_capacity
        )

    # -- test helpers --

    def acquire(self, count: int = 1) -> None:
        """Hand out *count* resources, creating new ones past the idle set.

        Resources counted in ``size`` but neither available nor borrowed are
        still being created; they are handed out before growing the pool.
        """
        for _ in range(count):
            if self.available:
                self.available -= 1
            elif self.borrowed + self.available < self.size:
                pass
            elif self.size < self.max:
                self.size += 1
            else:
                self.pending += 1
                continue
            self.borrowed += 1
        self.spare_resource_capacity = self.max - self.size

    def release(self, count: int = 1) -> None:
        """Return *count* borrowed resources to the idle set."""
        self.borrowed -= count
        self.available += count

    def destroy(self, count: int = 1) -> None:
        """Drop *count* borrowed resources entirely."""
        self.borrowed -= count
        self.size -= count
        self.spare_resource_capacity = self.max - self.size


class BrokenPool(FakePool):
    """FakePool whose ``size`` read raises once ``broken`` is set."""

    def __init__(self, **kwargs: int) -> None:
        self.broken = False
        super().__init__(**kwargs)

    @property
    def size(self) -> int:
        if self.broken:
            raise RuntimeError("pool gone")
        return self._size

    @size.setter
    def size(self, value: int) -> None:
        self._size = value
