"""Depth-first traversal and tree diameter."""

from __future__ import annotations


def dfs_order(graph, start):
    """Visit order of an iterative stack-based DFS over a directed adjacency mapping or list."""
    visited = set()
    order = []
    stack = [start]
    while stack:
        u = stack.pop()
        if u in visited:
            continue
        visited.add(u)
        order.append(u)
        stack.extend(v for v in graph[u] if v not in visited)
    return order


def farthest_node(graph, root):
    """Return (node, distance) of the node farthest from root in a weighted tree.

    graph[u] is a list of (neighbour, weight) pairs.
    """
    dist = {root: 0}
    best = root
    stack = [root]
    while stack:
        u = stack.pop()
        if dist[u] > dist[best]:
            best = u
        for v, w in graph[u]:
            if v not in dist:
                dist[v] = dist[u] + w
                stack.append(v)
    return best, dist[best]


def tree_diameter(graph):
    """Return (length, end_a, end_b) of a longest path in a weighted tree with non-negative weights."""
    if not graph:
        raise ValueError("empty graph")
    first = next(iter(graph)) if isinstance(graph, dict) else 0
    a, _ = farthest_node(graph, first)
    b, length = farthest_node(graph, a)
    return length, a, b