"""A splay tree storing a multiset of ordered keys."""

from __future__ import annotations


class _Node:
    __slots__ = ("key", "count", "left", "right", "size")

    def __init__(self, key):
        self.key = key
        self.count = 1
        self.left = None
        self.right = None
        self.size = 1


def _size(node):
    return node.size if node else 0


def _update(node):
    node.size = _size(node.left) + _size(node.right) + node.count


def _rotate_left(node):
    r = node.right
    node.right = r.left
    r.left = node
    _update(node)
    _update(r)
    return r


def _rotate_right(node):
    l = node.left
    node.left = l.right
    l.right = node
    _update(node)
    _update(l)
    return l


def _lift(parent, child):
    """Rotate child above parent and return child."""
    return _rotate_right(parent) if parent.left is child else _rotate_left(parent)


def _replace_child(parent, old, new):
    if parent.left is old:
        parent.left = new
    else:
        parent.right = new


def _splay(root, key):
    """Bring the node holding key, or the last node on its search path, to the root."""
    if root is None:
        return None
    path = []
    node = root
    while True:
        path.append(node)
        if key < node.key and node.left is not None:
            node = node.left
        elif key > node.key and node.right is not None:
            node = node.right
        else:
            break
    x = path.pop()
    while path:
        p = path.pop()
        if not path:
            x = _lift(p, x)
            break
        g = path.pop()
        if (g.left is p) == (p.left is x):
            _lift(g, p)
            x = _lift(p, x)
        else:
            _replace_child(g, p, _lift(p, x))
            x = _lift(g, x)
        if path:
            _replace_child(path[-1], g, x)
    return x


class SplayTree:
    """Self-adjusting search tree; every access splays the touched key to the root."""

    def __init__(self):
        self._root = None

    def insert(self, key) -> None:
        if self._root is None:
            self._root = _Node(key)
            return
        root = _splay(self._root, key)
        if root.key == key:
            root.count += 1
            _update(root)
            self._root = root
            return
        node = _Node(key)
        if key < root.key:
            node.left = root.left
            node.right = root
            root.left = None
        else:
            node.right = root.right
            node.left = root
            root.right = None
        _update(root)
        _update(node)
        self._root = node

    def remove(self, key) -> bool:
        """Remove one occurrence of key; return whether one was present."""
        root = _splay(self._root, key)
        self._root = root
        if root is None or root.key != key:
            return False
        if root.count > 1:
            root.count -= 1
            _update(root)
            return True
        if root.left is None:
            self._root = root.right
        else:
            left = _splay(root.left, key)
            left.right = root.right
            _update(left)
            self._root = left
        return True

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
        self._root = _splay(self._root, key)
        return result + 1

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
                break
        self._root = _splay(self._root, node.key)
        return node.key

    def predecessor(self, key):
        """The largest key smaller than key, or None."""
        best = None
        node = self._root
        while node:
            if node.key < key:
                best = node.key
                node = node.right
            else:
                node = node.left
        if best is not None:
            self._root = _splay(self._root, best)
        return best

    def successor(self, key):
        """The smallest key greater than key, or None."""
        best = None
        node = self._root
        while node:
            if node.key > key:
                best = node.key
                node = node.left
            else:
                node = node.right
        if best is not None:
            self._root = _splay(self._root, best)
        return best

    def __len__(self):
        return _size(self._root)

    def __iter__(self):
        stack = []
        node = self._root
        while stack or node:
            while node:
                stack.append(node)
                node = node.left
            node = stack.pop()
            for _ in range(node.count):
                yield node.key
            node = node.right