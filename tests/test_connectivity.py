from cpalgos.connectivity import (
    articulation_points,
    bridges,
    edge_biconnected_components,
    strongly_connected_components,
    vertex_biconnected_components,
)


def _undirected(n, edges):
    g = [[] for _ in range(n)]
    for u, v in edges:
        g[u].append(v)
        g[v].append(u)
    return g


# Two triangles joined by the edge 2-3.
BOWTIE = _undirected(6, [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 5), (5, 3)])


def test_articulation_points():
    assert articulation_points(BOWTIE) == [2, 3]


def test_bridges():
    assert bridges(BOWTIE) == [(2, 3)]


def test_multi_edge_is_not_bridge():
    assert bridges(_undirected(2, [(0, 1), (0, 1)])) == []


def test_edcc_partition():
    comps = edge_biconnected_components(BOWTIE)
    assert sorted(sorted(c) for c in comps) == [[0, 1, 2], [3, 4, 5]]


def test_scc():
    g = [[1], [2], [0, 3], []]
    comps = strongly_connected_components(g)
    assert sorted(sorted(c) for c in comps) == [[0, 1, 2], [3]]


def test_vdcc_with_isolated_and_self_loop():
    g = BOWTIE + [[6]]
    comps = vertex_biconnected_components(g)
    assert sorted(sorted(c) for c in comps) == [[0, 1, 2], [2, 3], [3, 4, 5], [6]]


def test_path_all_inner_nodes_cut():
    g = _undirected(4, [(0, 1), (1, 2), (2, 3)])
    assert articulation_points(g) == [1, 2]
    assert len(bridges(g)) == 3