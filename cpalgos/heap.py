"""A binary min-heap."""

from __future__ import annotations


class MinHeap:
    """Binary min-heap stored in a list."""

    def __init__(self):
        self._items = []

    def push(self, value) -> None:
        items = self._items
        items.append(value)
        i = len(items) - 1
        while i and items[i] < items[(parent := (i - 1) // 2)]:
            items[i], items[parent] = items[parent], items[i]
            i = parent

    def top(self):
        """Return the smallest value without removing it."""
        if not self._items:
            raise IndexError("top of empty heap")
        return self._items[0]

    def pop(self):
        """Remove and return the smallest value."""
        items = self._items
        if not items:
            raise IndexError("pop from empty heap")
        items[0], items[-1] = items[-1], items[0]
        value = items.pop()
        size = len(items)
        i = 0
        while (left := 2 * i + 1) < size:
            right = left + 1
            child = right if right < size and items[right] < items[left] else left
            if not items[child] < items[i]:
                break
            items[i], items[child] = items[child], items[i]
            i = child
        return value

    def __len__(self):
        return len(self._items)