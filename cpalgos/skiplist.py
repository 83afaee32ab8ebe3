"""An indexable skip list storing a multiset of ordered keys."""

from __future__ import annotations

import random

MAX_LEVEL = 20


class _Node:
    __slots__ = ("key", "count", "forward", "width")

    def __init__(self, key, height, count=1):
        self.key = key
        self.count = count
        self.forward = [None] * height
        # width[i]: total multiplicity of keys after this node up to and including forward[i]
        self.width = [0] * height


class SkipList:
    """Probabilistic ordered multiset with rank and order-statistic queries."""

    def __init__(self, seed=None):
        self._rng = random.Random(seed)
        self._head = _Node(None, MAX_LEVEL, 0)
        self._len = 0

    def _random_height(self):
        height = 1
        while height < MAX_LEVEL and self._rng.random() < 0.5:
            height += 1
        return height

    def _descend(self, key):
        """Per level, the last node with a key below key and the count up to it."""
        update = [self._head] * MAX_LEVEL
        positions = [0] * MAX_LEVEL
        node = self._head
        pos = 0
        for level in reversed(range(MAX_LEVEL)):
            while (nxt := node.forward[level]) is not None and nxt.key < key:
                pos += node.width[level]
                node = nxt
            update[level] = node
            positions[level] = pos
        return update, positions

    def insert(self, key) -> None:
        update, positions = self._descend(key)
        self._len += 1
        candidate = update[0].forward[0]
        if candidate is not None and candidate.key == key:
            candidate.count += 1
            for level, node in enumerate(update):
                if node.forward[level] is not None:
                    node.width[level] += 1
            return
        height = self._random_height()
        new = _Node(key, height)
        pos = positions[0]
        for level, node in enumerate(update):
            if level < height:
                new.forward[level] = node.forward[level]
                new.width[level] = positions[level] + node.width[level] - pos
                node.forward[level] = new
                node.width[level] = pos - positions[level] + 1
            elif node.forward[level] is not None:
                node.width[level] += 1

    def remove(self, key) -> bool:
        """Remove one occurrence of key; return whether one was present."""
        update, _ = self._descend(key)
        candidate = update[0].forward[0]
        if candidate is None or candidate.key != key:
            return False
        self._len -= 1
        if candidate.count > 1:
            candidate.count -= 1
            for level, node in enumerate(update):
                if node.forward[level] is not None:
                    node.width[level] -= 1
            return True
        for level, node in enumerate(update):
            if node.forward[level] is candidate:
                node.width[level] += candidate.width[level] - 1
                node.forward[level] = candidate.forward[level]
            elif node.forward[level] is not None:
                node.width[level] -= 1
        return True

    def rank(self, key) -> int:
        """One plus the number of stored keys smaller than key."""
        _, positions = self._descend(key)
        return positions[0] + 1

    def kth(self, k):
        """The k-th smallest key, counting from 1."""
        if not 1 <= k <= self._len:
            raise IndexError("rank out of range")
        node = self._head
        pos = 0
        for level in reversed(range(MAX_LEVEL)):
            while (nxt := node.forward[level]) is not None and pos + node.width[level] < k:
                pos += node.width[level]
                node = nxt
        return node.forward[0].key

    def predecessor(self, key):
        """The largest key smaller than key, or None."""
        update, _ = self._descend(key)
        node = update[0]
        return None if node is self._head else node.key

    def successor(self, key):
        """The smallest key greater than key, or None."""
        node = self._head
        for level in reversed(range(MAX_LEVEL)):
            while (nxt := node.forward[level]) is not None and nxt.key <= key:
                node = nxt
        nxt = node.forward[0]
        return None if nxt is None else nxt.key

    def __len__(self):
        return self._len

    def __iter__(self):
        node = self._head.forward[0]
        while node is not None:
            for _ in range(node.count):
                yield node.key
            node = node.forward[0]