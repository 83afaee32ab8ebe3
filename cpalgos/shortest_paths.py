"""Shortest and longest path algorithms on weighted graphs."""

from __future__ import annotations

import heapq
from collections import deque

UNREACHED = 10**9


class NegativeCycleError(ValueError):
    """The graph contains a negative cycle."""


class PositiveCycleError(ValueError):
    """The graph contains a positive cycle reachable from the source."""


def bellman_ford(n, edges):
    """Potentials for nodes 1..n over edges (u, v, w) meaning dist[u] <= dist[v] + w.

    A virtual source 0 is joined to every node with weight 0. Returns the
    list of distances for nodes 1..n, or raises NegativeCycleError.
    """
    relax = [(v, u, w) for u, v, w in edges]
    relax.extend((0, i, 0) for i in range(1, n + 1))
    dist = [UNREACHED] * (n + 1)
    dist[0] = 0
    for _ in range(n):
        changed = False
        for u, v, w in relax:
            if dist[v] > dist[u] + w:
                dist[v] = dist[u] + w
                changed = True
        if not changed:
            break
    if any(dist[v] > dist[u] + w for u, v, w in relax):
        raise NegativeCycleError("negative cycle detected")
    return dist[1:]


def solve_difference_constraints(n, constraints):
    """Solve x_u - x_v <= w for each (u, v, w) over variables 1..n.

    Returns one solution as a list, or raises NegativeCycleError if none exists.
    """
    return bellman_ford(n, constraints)


def spfa_longest(graph, dist, source):
    """Relax longest paths from source in place in dist.

    graph is a list of adjacency lists of (node, weight). Returns dist,
    or raises PositiveCycleError if a node is relaxed n times.
    """
    n = len(graph)
    if len(dist) != n:
        raise ValueError("dist must have one entry per node")
    queue = deque([(source, 0)])
    while queue:
        u, count = queue.popleft()
        if count >= n:
            raise PositiveCycleError("positive cycle detected")
        for v, w in graph[u]:
            if dist[v] < dist[u] + w:
                dist[v] = dist[u] + w
                queue.append((v, count + 1))
    return dist


def congruence_reachable_count(h, x, y, z):
    """Count floors 1..h reachable from floor 1 with steps of x, y or z."""
    if min(h, x, y, z) <= 0:
        raise ValueError("arguments must be positive")
    dist = [h] * x
    dist[0] = 0
    heap = [(0, 0)]
    while heap:
        d, u = heapq.heappop(heap)
        if d > dist[u]:
            continue
        for step in (y, z):
            v = (u + step) % x
            if dist[v] > d + step:
                dist[v] = d + step
                heapq.heappush(heap, (dist[v], v))
    return sum((h - 1 - d) // x + 1 for d in dist if h - 1 >= d)