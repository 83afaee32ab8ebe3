"""0/1 knapsack with reconstruction, and knapsack over a dependency forest."""

from __future__ import annotations


def knapsack_01(values, weights, capacity):
    """Best total value within capacity; returns (value, ascending indices of chosen items)."""
    values = list(values)
    weights = list(weights)
    if len(values) != len(weights):
        raise ValueError("values and weights must have the same length")
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    if any(w < 0 for w in weights):
        raise ValueError("weights must be non-negative")
    row = [0] * (capacity + 1)
    taken = []
    for value, weight in zip(values, weights):
        prev = row
        row = list(prev)
        took = [False] * (capacity + 1)
        for j in range(weight, capacity + 1):
            candidate = prev[j - weight] + value
            if candidate > row[j]:
                row[j] = candidate
                took[j] = True
        taken.append(took)
    chosen = []
    j = capacity
    for i in reversed(range(len(values))):
        if taken[i][j]:
            chosen.append(i)
            j -= weights[i]
    chosen.reverse()
    return row[capacity], chosen


def dependent_knapsack(budget, items):
    """Maximise sum of cost*importance within budget, where an item needs its parent bought.

    items holds (cost, importance, parent) with parent None or the 0-based index
    of another item.
    """
    if budget < 0:
        raise ValueError("budget must be non-negative")
    items = list(items)
    n = len(items)
    # node 0 is a virtual root; item i is node i + 1
    children = [[] for _ in range(n + 1)]
    cost = [0]
    value = [0]
    for i, (c, importance, parent) in enumerate(items):
        if c < 0:
            raise ValueError("costs must be non-negative")
        if parent is None:
            node_parent = 0
        elif 0 <= parent < n and parent != i:
            node_parent = parent + 1
        else:
            raise ValueError(f"invalid parent for item {i}: {parent!r}")
        children[node_parent].append(i + 1)
        cost.append(c)
        value.append(c * importance)
    order = [0]
    for u in order:
        order.extend(children[u])
    if len(order) != n + 1:
        raise ValueError("parent links form a cycle")
    tables = {}
    for u in reversed(order):
        c = cost[u]
        row = [value[u] if i >= c else 0 for i in range(budget + 1)]
        for v in children[u]:
            child = tables.pop(v)
            for i in range(budget, c - 1, -1):
                row[i] = max(row[i], max(row[j] + child[i - j] for j in range(c, i + 1)))
        tables[u] = row
    return tables[0][budget]