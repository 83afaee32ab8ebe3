"""An AVL tree storing a multiset of ordered keys."""

from __future__ import annotations

from itertools import repeat


class _Node:
    __slots__ = ("key", "count", "left", "right", "height", "size")

    def __init__(self, key):
        self.key = key
        self.count = 1
        self.left = None
        self.right = None
        self.height = 1
        self.size = 1


def _height(node):
    return node.height if node else 0


def _size(node):
    return node.size if node else 0


def _resize(node):
    node.size = _size(node.left) + _size(node.right) + node.count


def _update(node):
    node.height = max(_height(node.left), _height(node.right)) + 1
    _resize(node)


def _rotate_left(node, update=_update):
    r = node.right
    node.right = r.left
    r.left = node
    update(node)
    update(r)
    return r


def _rotate_right(node, update=_update):
    l = node.left
    node.left = l.right
    l.right = node
    update(node)
    update(l)
    return l


def _rank(root, key):
    """One plus the number of keys below key in a size-annotated tree."""
    result = 0
    node = root
    while node:
        if node.key < key:
            result += _size(node.left) + node.count
            node = node.right
        else:
            node = node.left
    return result + 1


def _kth(root, k):
    """The k-th smallest key (from 1) of a size-annotated tree."""
    if not 1 <= k <= _size(root):
        raise IndexError("rank out of range")
    node = root
    while True:
        left = _size(node.left)
        if k <= left:
            node = node.left
        elif k > left + node.count:
            k -= left + node.count
            node = node.right
        else:
            return node.key


def _predecessor(root, key):
    best = None
    node = root
    while node:
        if node.key < key:
            best = node.key
            node = node.right
        else:
            node = node.left
    return best


def _successor(root, key):
    best = None
    node = root
    while node:
        if node.key > key:
            best = node.key
            node = node.left
        else:
            node = node.right
    return best


def _iter_keys(root):
    stack = []
    node = root
    while stack or node:
        while node:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield from repeat(node.key, node.count)
        node = node.right


def _balance(node):
    lh, rh = _height(node.left), _height(node.right)
    if lh - rh > 1:
        if _height(node.left.right) > _height(node.left.left):
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if rh - lh > 1:
        if _height(node.right.left) > _height(node.right.right):
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _insert(node, key):
    if node is None:
        return _Node(key)
    if key == node.key:
        node.count += 1
    elif node.key < key:
        node.right = _insert(node.right, key)
    else:
        node.left = _insert(node.left, key)
    _update(node)
    return _balance(node)


def _pop_max(node):
    """Detach the rightmost node; return (remaining subtree, detached node)."""
    if node.right is None:
        return node.left, node
    rest, top = _pop_max(node.right)
    node.right = rest
    _update(node)
    return _balance(node), top


def _remove(node, key):
    if node is None:
        return None, False
    if key != node.key:
        if node.key < key:
            node.right, removed = _remove(node.right, key)
        else:
            node.left, removed = _remove(node.left, key)
        _update(node)
        return _balance(node), removed
    if node.count > 1:
        node.count -= 1
        _update(node)
        return node, True
    if node.left is None:
        return node.right, True
    if node.right is None:
        return node.left, True
    rest, top = _pop_max(node.left)
    top.left = rest
    top.right = node.right
    _update(top)
    return _balance(top), True


class AVLTree:
    """Height-balanced search tree; duplicates are counted in place."""

    def __init__(self):
        self._root = None

    def insert(self, key) -> None:
        self._root = _insert(self._root, key)

    def remove(self, key) -> bool:
        """Remove one occurrence of key; return whether one was present."""
        self._root, removed = _remove(self._root, key)
        return removed

    def rank(self, key) -> int:
        """One plus the number of stored keys smaller than key."""
        return _rank(self._root, key)

    def kth(self, k):
        """The k-th smallest key, counting from 1."""
        return _kth(self._root, k)

    def predecessor(self, key):
        """The largest key smaller than key, or None."""
        return _predecessor(self._root, key)

    def successor(self, key):
        """The smallest key greater than key, or None."""
        return _successor(self._root, key)

    def __len__(self):
        return _size(self._root)

    def __iter__(self):
        return _iter_keys(self._root)