import pytest

from dskit.mst import (
    NO_EDGE,
    MstEdge,
    SpanningTree,
    kruskal_edges,
    kruskal_matrix,
    prim_list,
    prim_matrix,
)
from dskit.weighted import WeightedGraph

EDGES = [(0, 1, 4), (0, 2, 1), (1, 2, 2), (1, 3, 5), (2, 3, 8), (3, 4, 3), (2, 4, 9)]
COUNT = 5


def _graph(count, edges):
    graph = WeightedGraph(count)
    for u, v, w in edges:
        graph.add_edge(u, v, w)
    return graph


def _matrix(count, edges):
    grid = [[NO_EDGE] * count for _ in range(count)]
    for i in range(count):
        grid[i][i] = 0
    for u, v, w in edges:
        grid[u][v] = grid[v][u] = w
    return grid


def _connects_all(tree, count):
    groups = [{v} for v in range(count)]
    for edge in tree:
        a = next(g for g in groups if edge.u in g)
        b = next(g for g in groups if edge.v in g)
        if a is b:
            return False
        groups.remove(b)
        a |= b
    return len(groups) == 1


def test_prim_matrix_triangle():
    graph = _graph(3, [(0, 1, 1), (1, 2, 2), (0, 2, 3)])
    assert list(prim_matrix(graph).edges) == [MstEdge(0, 1, 1), MstEdge(1, 2, 2)]


def test_prim_list_matches_matrix_without_repeated_edges():
    graph = _graph(COUNT, EDGES)
    assert prim_list(graph) == prim_matrix(graph)


def test_all_algorithms_agree_on_weight():
    graph = _graph(COUNT, EDGES)
    weights = {
        kruskal_edges(COUNT, EDGES).weight,
        kruskal_matrix(_matrix(COUNT, EDGES)).weight,
        prim_matrix(graph).weight,
        prim_list(graph).weight,
    }
    assert weights == {11}


@pytest.mark.parametrize(
    "build",
    [
        lambda: kruskal_edges(COUNT, EDGES),
        lambda: kruskal_matrix(_matrix(COUNT, EDGES)),
        lambda: prim_matrix(_graph(COUNT, EDGES)),
        lambda: prim_list(_graph(COUNT, EDGES)),
    ],
)
def test_result_is_spanning_tree(build):
    tree = build()
    assert len(tree) == COUNT - 1
    assert _connects_all(tree, COUNT)
    assert tree.weight == sum(edge.weight for edge in tree)
    graph = _graph(COUNT, EDGES)
    assert all(graph.weight(e.u, e.v) == e.weight for e in tree)


def test_kruskal_edges_keeps_orientation_and_order():
    tree = kruskal_edges(3, [(2, 0, 5), (1, 2, 4)])
    assert tree.edges == (MstEdge(1, 2, 4), MstEdge(2, 0, 5))


def test_kruskal_edges_ignores_limit_weights():
    assert kruskal_edges(2, [(0, 1, 999)]).edges == ()


def test_kruskal_edges_disconnected_gives_forest():
    tree = kruskal_edges(4, [(0, 1, 1), (2, 3, 1)])
    assert tree.edges == (MstEdge(0, 1, 1), MstEdge(2, 3, 1))


def test_kruskal_edges_skips_cycle_edge():
    tree = kruskal_edges(3, [(0, 1, 1), (1, 2, 1), (0, 2, 1)])
    assert tree.edges == (MstEdge(0, 1, 1), MstEdge(1, 2, 1))


def test_kruskal_edges_rejects_out_of_range_vertex():
    with pytest.raises(ValueError):
        kruskal_edges(2, [(0, 5, 1)])


def test_kruskal_matrix_does_not_modify_input():
    grid = _matrix(COUNT, EDGES)
    snapshot = [list(row) for row in grid]
    kruskal_matrix(grid)
    assert grid == snapshot


def test_kruskal_matrix_rejects_non_square():
    with pytest.raises(ValueError):
        kruskal_matrix([[0, 1], [1]])


def test_kruskal_matrix_all_no_edge():
    assert kruskal_matrix([[NO_EDGE, NO_EDGE], [NO_EDGE, NO_EDGE]]).edges == ()


def test_prim_single_vertex_is_empty():
    assert prim_matrix(WeightedGraph(1)) == SpanningTree(())


def test_prim_rejects_disconnected_graph():
    graph = _graph(3, [(0, 1, 2)])
    with pytest.raises(ValueError):
        prim_matrix(graph)
    with pytest.raises(ValueError):
        prim_list(graph)