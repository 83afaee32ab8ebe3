"""Minimum and strictly second-minimum spanning trees."""

from __future__ import annotations

from cpalgos.dsu import DisjointSet


def minimum_spanning_tree(n, edges):
    """Kruskal over nodes 0..n-1 and edges (u, v, w); returns (total_weight, chosen_edges)."""
    dsu = DisjointSet(n)
    chosen = [e for e in sorted(edges, key=lambda e: e[2]) if dsu.union(e[0], e[1])]
    return sum(w for _, _, w in chosen), chosen


def strict_second_mst_weight(n, edges):
    """Weight of a spanning tree strictly heavier than the minimum but otherwise minimal.

    Raises ValueError if no such tree exists.
    """
    total, chosen = minimum_spanning_tree(n, edges)
    tree = [[] for _ in range(n)]
    for u, v, w in chosen:
        tree[u].append((v, w))
        tree[v].append((u, w))
    chosen_ids = {id(e) for e in chosen}
    best = None
    for edge in edges:
        if id(edge) in chosen_ids:
            continue
        u, v, w = edge
        if u == v:
            continue
        below = _max_below(tree, u, v, w)
        if below is not None:
            diff = w - below
            best = diff if best is None else min(best, diff)
    if best is None:
        raise ValueError("no strictly larger spanning tree exists")
    return total + best


def _max_below(tree, src, dst, limit):
    """Largest edge weight < limit on the tree path src-dst, or None."""
    prev = {src: (None, None)}
    stack = [src]
    while stack:
        u = stack.pop()
        if u == dst:
            break
        for v, w in tree[u]:
            if v not in prev:
                prev[v] = (u, w)
                stack.append(v)
    if dst not in prev:
        return None
    best = None
    node = dst
    while node != src:
        node, w = prev[node]
        if w < limit and (best is None or w > best):
            best = w
    return best