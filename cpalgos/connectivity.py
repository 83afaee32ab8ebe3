"""Tarjan-based connectivity analyses on adjacency-list graphs (0-indexed)."""

from __future__ import annotations

import sys
from contextlib import contextmanager


@contextmanager
def _deep_recursion(n):
    old = sys.getrecursionlimit()
    sys.setrecursionlimit(max(old, 4 * n + 1000))
    try:
        yield
    finally:
        sys.setrecursionlimit(old)


class _Clock:
    """Discovery times and low-links shared by the searches below."""

    def __init__(self, n):
        self.dfn = [-1] * n
        self.low = [0] * n
        self._next = 0

    def stamp(self, u):
        self.dfn[u] = self.low[u] = self._next
        self._next += 1

    def seen(self, u):
        return self.dfn[u] != -1

    def pull(self, u, value):
        self.low[u] = min(self.low[u], value)


def _search_all(clock, start):
    n = len(clock.dfn)
    with _deep_recursion(n):
        for s in range(n):
            if not clock.seen(s):
                start(s)


def _pop_through(stack, target):
    component = []
    while True:
        w = stack.pop()
        component.append(w)
        if w == target:
            return component


def articulation_points(graph):
    """Return the sorted list of cut vertices of an undirected graph."""
    clock = _Clock(len(graph))
    cut = set()

    def visit(u, root):
        clock.stamp(u)
        children = 0
        for v in graph[u]:
            if not clock.seen(v):
                visit(v, root)
                clock.pull(u, clock.low[v])
                if clock.low[v] >= clock.dfn[u]:
                    children += 1
                    if u != root or children > 1:
                        cut.add(u)
            else:
                clock.pull(u, clock.dfn[v])

    _search_all(clock, lambda s: visit(s, s))
    return sorted(cut)


def bridges(graph):
    """Return the bridges of an undirected multigraph as sorted (min, max) pairs."""
    clock = _Clock(len(graph))
    found = []

    def visit(u, parent):
        clock.stamp(u)
        parent_edge_seen = False
        for v in graph[u]:
            if not clock.seen(v):
                visit(v, u)
                clock.pull(u, clock.low[v])
                if clock.low[v] > clock.dfn[u]:
                    found.append((min(u, v), max(u, v)))
            elif v != parent or parent_edge_seen:
                clock.pull(u, clock.dfn[v])
            else:
                parent_edge_seen = True

    _search_all(clock, lambda s: visit(s, -1))
    return sorted(found)


def _stack_components(graph, undirected):
    """Components closed off when a vertex's low-link equals its own time."""
    clock = _Clock(len(graph))
    on_stack = [False] * len(graph)
    stack = []
    components = []

    def visit(u, parent):
        clock.stamp(u)
        stack.append(u)
        on_stack[u] = True
        parent_edge_seen = False
        for v in graph[u]:
            if not clock.seen(v):
                visit(v, u)
                clock.pull(u, clock.low[v])
            elif on_stack[v] and (not undirected or v != parent or parent_edge_seen):
                clock.pull(u, clock.dfn[v])
            elif undirected:
                parent_edge_seen = True
        if clock.dfn[u] == clock.low[u]:
            component = _pop_through(stack, u)
            for w in component:
                on_stack[w] = False
            components.append(component)

    _search_all(clock, lambda s: visit(s, -1))
    return components


def edge_biconnected_components(graph):
    """Return the 2-edge-connected components of an undirected graph."""
    return _stack_components(graph, undirected=True)


def strongly_connected_components(graph):
    """Return the strongly connected components of a directed graph."""
    return _stack_components(graph, undirected=False)


def vertex_biconnected_components(graph):
    """Return the vertex-biconnected components; self-loops are ignored."""
    adj = [[v for v in neighbours if v != u] for u, neighbours in enumerate(graph)]
    clock = _Clock(len(adj))
    stack = []
    components = []

    def visit(u, root):
        clock.stamp(u)
        stack.append(u)
        if u == root and not adj[u]:
            components.append([u])
            return
        for v in adj[u]:
            if not clock.seen(v):
                visit(v, root)
                clock.pull(u, clock.low[v])
                if clock.dfn[u] > clock.low[v]:
                    continue
                component = _pop_through(stack, v)
                component.append(u)
                components.append(component)
            else:
                clock.pull(u, clock.dfn[v])

    _search_all(clock, lambda s: visit(s, s))
    return components