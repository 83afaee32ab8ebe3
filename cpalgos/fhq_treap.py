"""A split/merge (rotation-free) treap storing a multiset of ordered keys."""

from __future__ import annotations

import random

from .avl import _iter_keys, _kth, _predecessor, _rank, _resize, _size, _successor


class _Node:
    __slots__ = ("key", "priority", "left", "right", "size")
    count = 1

    def __init__(self, key, priority):
        self.key = key
        self.priority = priority
        self.left = None
        self.right = None
        self.size = 1


def _split(node, key, inclusive):
    """Split into (keys below key, the rest); `inclusive` moves keys equal to key left."""
    if node is None:
        return None, None
    goes_left = node.key <= key if inclusive else node.key < key
    if goes_left:
        low, high = _split(node.right, key, inclusive)
        node.right = low
        _resize(node)
        return node, high
    low, high = _split(node.left, key, inclusive)
    node.left = high
    _resize(node)
    return low, node


def _merge(low, high):
    if low is None:
        return high
    if high is None:
        return low
    if low.priority >= high.priority:
        low.right = _merge(low.right, high)
        _resize(low)
        return low
    high.left = _merge(low, high.left)
    _resize(high)
    return high


class FHQTreap:
    """Treap maintained only by split and merge; equal keys are separate nodes."""

    def __init__(self, seed=None):
        self._rng = random.Random(seed)
        self._root = None

    def insert(self, key) -> None:
        low, high = _split(self._root, key, True)
        self._root = _merge(_merge(low, _Node(key, self._rng.random())), high)

    def remove(self, key) -> bool:
        """Remove one occurrence of key; return whether one was present."""
        at_most, above = _split(self._root, key, True)
        below, equal = _split(at_most, key, False)
        removed = equal is not None
        if removed:
            equal = _merge(equal.left, equal.right)
        self._root = _merge(_merge(below, equal), above)
        return removed

    def rank(self, key) -> int:
        return _rank(self._root, key)

    def kth(self, k):
        return _kth(self._root, k)

    def predecessor(self, key):
        return _predecessor(self._root, key)

    def successor(self, key):
        return _successor(self._root, key)

    def __len__(self):
        return _size(self._root)

    def __iter__(self):
        return _iter_keys(self._root)