import pytest
from hypothesis import given, strategies as st

from cpalgos.small_to_large import distinct_colors_in_subtrees


def _tree(parents):
    graph = [[] for _ in range(len(parents) + 1)]
    for child, p in enumerate(parents, start=1):
        graph[child].append(p)
        graph[p].append(child)
    return graph


def test_single_node():
    assert distinct_colors_in_subtrees([[]], ["red"], 0) == [1]


def test_uniform_colour():
    graph = _tree([0, 0, 1, 1, 2])
    assert distinct_colors_in_subtrees(graph, [7] * 6, 0) == [1] * 6


def test_path_with_distinct_colours():
    graph = _tree([0, 1, 2, 3])
    assert distinct_colors_in_subtrees(graph, [1, 2, 3, 4, 5], 0) == [5, 4, 3, 2, 1]


def test_colour_count_mismatch():
    with pytest.raises(ValueError):
        distinct_colors_in_subtrees(_tree([0]), [1], 0)


def test_disconnected_graph():
    with pytest.raises(ValueError):
        distinct_colors_in_subtrees([[1], [0], []], [1, 2, 3], 0)


@given(st.data())
def test_matches_subtree_sets(data):
    n = data.draw(st.integers(1, 25))
    parents = [data.draw(st.integers(0, i - 1)) for i in range(1, n)]
    colors = data.draw(st.lists(st.integers(0, 4), min_size=n, max_size=n))
    graph = _tree(parents)
    result = distinct_colors_in_subtrees(graph, colors, 0)
    assert result[0] == len(set(colors))
    subtree = [{colors[u]} for u in range(n)]
    for child in reversed(range(1, n)):
        subtree[parents[child - 1]] |= subtree[child]
    assert result == [len(s) for s in subtree]