"""A scapegoat tree with lazy deletion storing a multiset of ordered keys."""

from __future__ import annotations


class _Node:
    __slots__ = ("key", "count", "left", "right", "size", "live")

    def __init__(self, key):
        self.key = key
        self.count = 1
        self.left = None
        self.right = None
        self.size = 1
        self.live = 1


def _size(node):
    return node.size if node else 0


def _live(node):
    return node.live if node else 0


def _update(node):
    node.size = _size(node.left) + _size(node.right) + node.count
    node.live = _live(node.left) + _live(node.right) + (1 if node.count else 0)


def _live_nodes(node):
    stack, result = [], []
    while stack or node:
        while node:
            stack.append(node)
            node = node.left
        node = stack.pop()
        if node.count:
            result.append(node)
        node = node.right
    return result


def _build(nodes, lo, hi):
    if lo >= hi:
        return None
    mid = (lo + hi - 1) // 2
    node = nodes[mid]
    node.left = _build(nodes, lo, mid)
    node.right = _build(nodes, mid + 1, hi)
    _update(node)
    return node


class ScapegoatTree:
    """Search tree that rebuilds the highest unbalanced subtree after each update."""

    def __init__(self, alpha=0.7):
        if not 0.5 <= alpha < 1:
            raise ValueError("alpha must lie in [0.5, 1)")
        self._alpha = alpha
        self._root = None
        self._scapegoat = None

    def _is_balanced(self, node):
        return max(_live(node.left), _live(node.right)) <= node.live * self._alpha

    def _mark(self, node, parent):
        _update(node)
        if not self._is_balanced(node):
            self._scapegoat = (node, parent)

    def _rebuild(self):
        if self._scapegoat is not None:
            node, parent = self._scapegoat
            nodes = _live_nodes(node)
            fresh = _build(nodes, 0, len(nodes))
            if parent is None:
                self._root = fresh
            elif parent.left is node:
                parent.left = fresh
            else:
                parent.right = fresh
        self._scapegoat = None

    def _insert(self, node, key, parent):
        if node is None:
            node = _Node(key)
        elif node.key == key:
            node.count += 1
        elif node.key < key:
            node.right = self._insert(node.right, key, node)
        else:
            node.left = self._insert(node.left, key, node)
        self._mark(node, parent)
        return node

    def _remove(self, node, key, parent):
        if node is None:
            return False
        if node.key == key:
            removed = node.count > 0
            if removed:
                node.count -= 1
        elif node.key < key:
            removed = self._remove(node.right, key, node)
        else:
            removed = self._remove(node.left, key, node)
        self._mark(node, parent)
        return removed

    def insert(self, key) -> None:
        self._scapegoat = None
        self._root = self._insert(self._root, key, None)
        self._rebuild()

    def remove(self, key) -> bool:
        """Remove one occurrence of key; return whether one was present."""
        self._scapegoat = None
        removed = self._remove(self._root, key, None)
        self._rebuild()
        return removed

    def rank(self, key) -> int:
        """One plus the number of stored keys smaller than key."""
        result = 0
        node = self._root
        while node:
            if node.key < key:
                result += _size(node.left) + node.count
                node = node.right
            else:
                node = node.left
        return result + 1

    def _count_at_most(self, key):
        result = 0
        node = self._root
        while node:
            if node.key <= key:
                result += _size(node.left) + node.count
                node = node.right
            else:
                node = node.left
        return result

    def kth(self, k):
        """The k-th smallest key, counting from 1."""
        if not 1 <= k <= len(self):
            raise IndexError("rank out of range")
        node = self._root
        while True:
            left = _size(node.left)
            if k <= left:
                node = node.left
            elif k > left + node.count:
                k -= left + node.count
                node = node.right
            else:
                return node.key

    def predecessor(self, key):
        """The largest key smaller than key, or None."""
        r = self.rank(key)
        return self.kth(r - 1) if r > 1 else None

    def successor(self, key):
        """The smallest key greater than key, or None."""
        c = self._count_at_most(key)
        return self.kth(c + 1) if c < len(self) else None

    def __len__(self):
        return _size(self._root)

    def __iter__(self):
        for node in _live_nodes(self._root):
            for _ in range(node.count):
                yield node.key