"""Distinct colour counts in every subtree via small-to-large (sack) merging."""

from __future__ import annotations


def distinct_colors_in_subtrees(graph, colors, root=0):
    """For each node of a tree, the number of distinct colours in its subtree."""
    n = len(graph)
    colors = list(colors)
    if len(colors) != n:
        raise ValueError("one colour per node is required")
    if not 0 <= root < n:
        raise IndexError("root out of range")
    parent = [-1] * n
    seen = [False] * n
    seen[root] = True
    children = [[] for _ in range(n)]
    order = [root]
    for u in order:
        for v in graph[u]:
            if not seen[v]:
                seen[v] = True
                parent[v] = u
                children[u].append(v)
                order.append(v)
    if len(order) != n:
        raise ValueError("graph is not connected")

    size = [1] * n
    for u in reversed(order):
        if parent[u] != -1:
            size[parent[u]] += size[u]
    heavy = [-1] * n
    for u in range(n):
        for v in children[u]:
            if heavy[u] == -1 or size[heavy[u]] < size[v]:
                heavy[u] = v

    start = [0] * n
    euler = []
    stack = [root]
    while stack:
        u = stack.pop()
        start[u] = len(euler)
        euler.append(u)
        stack.extend(reversed(children[u]))

    counts = {}
    distinct = 0
    answer = [0] * n

    def add(node):
        nonlocal distinct
        c = colors[node]
        counts[c] = counts.get(c, 0) + 1
        if counts[c] == 1:
            distinct += 1

    def drop(node):
        nonlocal distinct
        c = colors[node]
        counts[c] -= 1
        if counts[c] == 0:
            distinct -= 1

    frames = [(root, False, False)]
    while frames:
        u, keep, merging = frames.pop()
        light = [v for v in children[u] if v != heavy[u]]
        if not merging:
            frames.append((u, keep, True))
            if heavy[u] != -1:
                frames.append((heavy[u], True, False))
            frames.extend((v, False, False) for v in light)
            continue
        add(u)
        for v in light:
            for w in euler[start[v]:start[v] + size[v]]:
                add(w)
        answer[u] = distinct
        if not keep:
            for w in euler[start[u]:start[u] + size[u]]:
                drop(w)
    return answer