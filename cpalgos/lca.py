"""Lowest common ancestor queries on rooted trees (adjacency lists, 0-indexed)."""

from __future__ import annotations

from cpalgos.dsu import DisjointSet


def _bfs_parents(graph, root):
    n = len(graph)
    parent = [-1] * n
    depth = [0] * n
    order = [root]
    seen = [False] * n
    seen[root] = True
    for u in order:
        for v in graph[u]:
            if not seen[v]:
                seen[v] = True
                parent[v] = u
                depth[v] = depth[u] + 1
                order.append(v)
    return parent, depth, order


class BinaryLiftingLCA:
    """LCA by binary lifting."""

    def __init__(self, graph, root):
        parent, self._depth, _ = _bfs_parents(graph, root)
        n = len(graph)
        self._levels = max(1, n.bit_length())
        first = [root if p == -1 else p for p in parent]
        self._up = [first]
        for _ in range(1, self._levels):
            prev = self._up[-1]
            self._up.append([prev[prev[u]] for u in range(n)])

    def lca(self, u, v):
        depth = self._depth
        if depth[u] < depth[v]:
            u, v = v, u
        for k in reversed(range(self._levels)):
            w = self._up[k][u]
            if depth[w] >= depth[v]:
                u = w
        if u == v:
            return u
        for k in reversed(range(self._levels)):
            if self._up[k][u] != self._up[k][v]:
                u, v = self._up[k][u], self._up[k][v]
        return self._up[0][u]


class HeavyLightDecomposition:
    """Heavy-light decomposition supporting LCA queries."""

    def __init__(self, graph, root):
        parent, depth, order = _bfs_parents(graph, root)
        n = len(graph)
        size = [1] * n
        heavy = [-1] * n
        for u in reversed(order):
            p = parent[u]
            if p != -1:
                size[p] += size[u]
        for u in order:
            children = [v for v in graph[u] if v != parent[u]]
            if children:
                heavy[u] = max(children, key=lambda c: size[c])
        top = [0] * n
        for u in order:
            p = parent[u]
            top[u] = top[p] if p != -1 and heavy[p] == u else u
        self._parent, self._depth, self._top = parent, depth, top

    def lca(self, u, v):
        top, depth, parent = self._top, self._depth, self._parent
        while top[u] != top[v]:
            if depth[top[u]] < depth[top[v]]:
                u, v = v, u
            u = parent[top[u]]
        return u if depth[u] < depth[v] else v


def tarjan_lca(graph, root, queries):
    """Answer a list of (u, v) LCA queries offline; returns answers in order."""
    n = len(graph)
    pending = [[] for _ in range(n)]
    for i, (u, v) in enumerate(queries):
        pending[u].append((v, i))
        pending[v].append((u, i))
    answers = [None] * len(queries)
    dsu = DisjointSet(n)
    ancestor = list(range(n))
    visited = [False] * n
    visited[root] = True
    stack = [(root, iter(graph[root]))]
    while stack:
        u, children = stack[-1]
        child = next((v for v in children if not visited[v]), None)
        if child is not None:
            visited[child] = True
            stack.append((child, iter(graph[child])))
            continue
        stack.pop()
        for v, i in pending[u]:
            if visited[v] and (v == u or answers[i] is None):
                answers[i] = ancestor[dsu.find(v)]
        if stack:
            p = stack[-1][0]
            dsu.union(u, p)
            ancestor[dsu.find(p)] = p
    return answers