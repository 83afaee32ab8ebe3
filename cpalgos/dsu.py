"""Disjoint-set union with path compression."""

from __future__ import annotations


class DisjointSet:
    """Union-find over the elements 0..size-1."""

    def __init__(self, size):
        if size < 0:
            raise ValueError("size must be non-negative")
        self._parent = list(range(size))

    def __len__(self):
        return len(self._parent)

    def find(self, u):
        """Return the representative of u's set."""
        parent = self._parent
        root = u
        while parent[root] != root:
            root = parent[root]
        while parent[u] != root:
            parent[u], u = root, parent[u]
        return root

    def union(self, u, v):
        """Merge the sets of u and v; return True if they were separate."""
        ru, rv = self.find(u), self.find(v)
        if ru == rv:
            return False
        self._parent[ru] = rv
        return True