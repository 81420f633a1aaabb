"""A growable sequence that tracks a power-of-two style capacity."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

DEFAULT_CAPACITY = 4


class DynamicArray:
    """An ordered collection whose capacity doubles as elements are added."""

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._items: list[Any] = []
        self._capacity = capacity or DEFAULT_CAPACITY

    @property
    def capacity(self) -> int:
        """The number of slots currently reserved."""
        return self._capacity

    def _reserve(self, additional: int) -> None:
        needed = len(self._items) + additional
        if needed > self._capacity:
            capacity = self._capacity or 1
            while capacity < needed:
                capacity <<= 1
            self._capacity = capacity

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range for size {len(self._items)}")

    def add_at(self, element: Any, index: int) -> None:
        """Insert ``element`` before position ``index`` (0..len inclusive)."""
        if not 0 <= index <= len(self._items):
            raise IndexError(f"index {index} out of range for size {len(self._items)}")
        self._reserve(1)
        self._items.insert(index, element)

    def add_first(self, element: Any) -> None:
        """Insert ``element`` at the front."""
        self.add_at(element, 0)

    def add_last(self, element: Any) -> None:
        """Append ``element`` at the end."""
        self.add_at(element, len(self._items))

    def set(self, element: Any, index: int) -> None:
        """Replace the element at ``index``."""
        self._check_index(index)
        self._items[index] = element

    def remove_at(self, index: int) -> Any:
        """Remove and return the element at ``index``."""
        self._check_index(index)
        return self._items.pop(index)

    def remove_first(self) -> Any:
        """Remove and return the first element."""
        return self.remove_at(0)

    def remove_last(self) -> Any:
        """Remove and return the last element."""
        return self.remove_at(len(self._items) - 1)

    def get(self, index: int) -> Any:
        """Return the element at ``index``."""
        self._check_index(index)
        return self._items[index]

    def clear(self) -> None:
        """Drop every element and reset the capacity to the default."""
        self._items.clear()
        self._capacity = DEFAULT_CAPACITY

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"DynamicArray({self._items!r}, capacity={self._capacity})"