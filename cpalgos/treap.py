"""A rotation-based treap storing a multiset of ordered keys."""

from __future__ import annotations

import random

from .avl import (
    _iter_keys,
    _kth,
    _predecessor,
    _rank,
    _resize,
    _rotate_left,
    _rotate_right,
    _size,
    _successor,
)


class _Node:
    __slots__ = ("key", "priority", "count", "left", "right", "size")

    def __init__(self, key, priority):
        self.key = key
        self.priority = priority
        self.count = 1
        self.left = None
        self.right = None
        self.size = 1


def _insert(node, key, priority):
    if node is None:
        return _Node(key, priority)
    if key == node.key:
        node.count += 1
    elif key < node.key:
        node.left = _insert(node.left, key, priority)
        if node.left.priority > node.priority:
            node = _rotate_right(node, _resize)
    else:
        node.right = _insert(node.right, key, priority)
        if node.right.priority > node.priority:
            node = _rotate_left(node, _resize)
    _resize(node)
    return node


def _remove(node, key):
    if node is None:
        return None, False
    if key == node.key:
        if node.count > 1:
            node.count -= 1
        elif node.left is None or node.right is None:
            return node.left or node.right, True
        elif node.left.priority > node.right.priority:
            node = _rotate_right(node, _resize)
            node.right, _ = _remove(node.right, key)
        else:
            node = _rotate_left(node, _resize)
            node.left, _ = _remove(node.left, key)
        _resize(node)
        return node, True
    if key < node.key:
        node.left, removed = _remove(node.left, key)
    else:
        node.right, removed = _remove(node.right, key)
    _resize(node)
    return node, removed


class Treap:
    """Binary search tree kept balanced by random heap priorities."""

    def __init__(self, seed=None):
        self._rng = random.Random(seed)
        self._root = None

    def insert(self, key) -> None:
        self._root = _insert(self._root, key, self._rng.random())

    def remove(self, key) -> bool:
        """Remove one occurrence of key; return whether one was present."""
        self._root, removed = _remove(self._root, key)
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