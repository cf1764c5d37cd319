"""A container of floating point values with sorted access."""

from __future__ import annotations

import heapq
from typing import Iterable


class OrderedVector:
    """Values kept sorted ascending on demand.

    New values are collected unsorted and merged into the sorted part only when
    ordered access is asked for, which suits repeated add-then-read use.
    """

    __slots__ = ("_data", "_ordered")

    def __init__(self, values: Iterable[float] = ()) -> None:
        self._data: list[float] = []
        self._ordered = 0
        self.extend(values)
        self._order()

    def append(self, value: float) -> None:
        """Add one value."""
        self._data.append(float(value))

    def extend(self, values: Iterable[float]) -> None:
        """Add a number of values."""
        self._data.extend(float(v) for v in values)

    def _order(self) -> None:
        if self._ordered == len(self._data):
            return
        head = self._data[: self._ordered]
        tail = sorted(self._data[self._ordered:])
        self._data = list(heapq.merge(head, tail))
        self._ordered = len(self._data)

    def ordered(self) -> tuple[float, ...]:
        """All values, sorted ascending."""
        self._order()
        return tuple(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def __repr__(self) -> str:
        return f"OrderedVector({list(self.ordered())!r})"