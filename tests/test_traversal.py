import pytest

from cpalgos.traversal import dfs_order, farthest_node, tree_diameter


def test_dfs_visits_reachable_once():
    g = {1: [2, 3], 2: [4], 3: [4], 4: [1]}
    order = dfs_order(g, 1)
    assert order[0] == 1
    assert sorted(order) == [1, 2, 3, 4]


def test_dfs_last_pushed_first():
    assert dfs_order([[1, 2], [], []], 0) == [0, 2, 1]


def _tree():
    g = [[] for _ in range(5)]
    for u, v, w in [(0, 1, 2), (1, 2, 3), (1, 3, 4), (0, 4, 1)]:
        g[u].append((v, w))
        g[v].append((u, w))
    return g


def test_farthest_node():
    assert farthest_node(_tree(), 0) == (3, 6)


def test_diameter_matches_brute_force():
    g = _tree()
    length, a, b = tree_diameter(g)
    best = max(farthest_node(g, s)[1] for s in range(5))
    assert length == best
    assert farthest_node(g, a) == (b, length)


def test_diameter_empty():
    with pytest.raises(ValueError):
        tree_diameter([])