import pytest

from dskit.traversal import Graph


def _sample() -> Graph:
    graph = Graph(6)
    for a, b in [(0, 1), (0, 2), (1, 3), (2, 4)]:
        graph.add_edge(a, b)
    return graph


def test_neighbors_most_recent_first():
    graph = Graph(3)
    graph.add_edge(0, 1)
    graph.add_edge(0, 2)
    assert graph.neighbors(0) == [2, 1]
    assert graph.neighbors(1) == [0]
    assert graph.neighbors(2) == [0]


def test_self_loop_listed_twice():
    graph = Graph(2)
    graph.add_edge(1, 1)
    assert graph.neighbors(1) == [1, 1]


def test_bfs_order():
    assert _sample().bfs(0) == [0, 2, 1, 4, 3]


def test_dfs_order():
    assert _sample().dfs(0) == [0, 2, 4, 1, 3]


def test_traversals_cover_component_once():
    graph = _sample()
    bfs = graph.bfs(0)
    dfs = graph.dfs(0)
    assert set(bfs) == set(dfs) == {0, 1, 2, 3, 4}
    assert len(bfs) == len(set(bfs))
    assert len(dfs) == len(set(dfs))
    assert bfs[0] == dfs[0] == 0


def test_isolated_vertex_reaches_only_itself():
    graph = _sample()
    assert graph.bfs(5) == [5]
    assert graph.dfs(5) == [5]


def test_path_graph_orders_agree():
    graph = Graph(4)
    for a in range(3):
        graph.add_edge(a, a + 1)
    assert graph.bfs(0) == [0, 1, 2, 3]
    assert graph.dfs(0) == [0, 1, 2, 3]


def test_repeated_traversals_are_independent():
    graph = _sample()
    first_bfs = graph.bfs(0)
    second_bfs = graph.bfs(0)
    assert first_bfs == [0, 2, 1, 4, 3]
    assert second_bfs == [0, 2, 1, 4, 3]
    first_dfs = graph.dfs(3)
    second_dfs = graph.dfs(3)
    assert first_dfs == [3, 1, 0, 2, 4]
    assert second_dfs == [3, 1, 0, 2, 4]


def test_first_neighbor_visited_second():
    graph = _sample()
    assert graph.bfs(3)[1] == graph.neighbors(3)[0]
    assert graph.dfs(3)[1] == graph.neighbors(3)[0]


@pytest.mark.parametrize("vertex", [-1, 6, 100])
def test_out_of_range_vertex_raises(vertex):
    graph = _sample()
    with pytest.raises(ValueError):
        graph.bfs(vertex)
    with pytest.raises(ValueError):
        graph.dfs(vertex)
    with pytest.raises(ValueError):
        graph.neighbors(vertex)
    with pytest.raises(ValueError):
        graph.add_edge(0, vertex)


def test_negative_size_raises():
    with pytest.raises(ValueError):
        Graph(-1)