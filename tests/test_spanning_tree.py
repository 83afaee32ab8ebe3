import itertools

import pytest

from cpalgos.dsu import DisjointSet
from cpalgos.spanning_tree import minimum_spanning_tree, strict_second_mst_weight

EDGES = [(0, 1, 1), (1, 2, 2), (2, 3, 3), (3, 0, 4), (0, 2, 2), (1, 3, 5)]


def _tree_weights(n, edges):
    weights = []
    for combo in itertools.combinations(edges, n - 1):
        d = DisjointSet(n)
        if all(d.union(u, v) for u, v, _ in combo):
            weights.append(sum(w for *_, w in combo))
    return sorted(set(weights))


def test_mst_weight_brute_force():
    total, chosen = minimum_spanning_tree(4, EDGES)
    assert total == _tree_weights(4, EDGES)[0]
    assert len(chosen) == 3


def test_second_mst_brute_force():
    assert strict_second_mst_weight(4, EDGES) == _tree_weights(4, EDGES)[1]


def test_no_second_tree():
    with pytest.raises(ValueError):
        strict_second_mst_weight(2, [(0, 1, 3)])


def test_equal_weight_alternative_is_not_strict():
    edges = [(0, 1, 1), (1, 2, 1), (0, 2, 1)]
    with pytest.raises(ValueError):
        strict_second_mst_weight(3, edges)