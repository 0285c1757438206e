import math

import pytest

from dskit.shortest import dijkstra_list, dijkstra_matrix
from dskit.weighted import WeightedGraph, letter_to_index


def _sample() -> WeightedGraph:
    graph = WeightedGraph(5)
    for a, b, w in [("A", "B", 4), ("A", "C", 1), ("C", "B", 2), ("B", "D", 5)]:
        graph.add_edge(letter_to_index(a), letter_to_index(b), w)
    return graph


def test_matrix_distances():
    result = dijkstra_matrix(_sample(), 0)
    assert result.distances[:4] == (0, 3, 1, 8)
    assert math.isinf(result.distances[4])


def test_matrix_path():
    result = dijkstra_matrix(_sample(), 0)
    assert result.path_to(3) == [0, 2, 1, 3]


def test_list_agrees_with_matrix():
    graph = _sample()
    for start in range(graph.vertices):
        matrix = dijkstra_matrix(graph, start)
        listed = dijkstra_list(graph, start)
        assert matrix.distances == listed.distances
        assert matrix.parents == listed.parents


@pytest.mark.parametrize("solver", [dijkstra_matrix, dijkstra_list])
def test_path_to_start_is_start(solver):
    result = solver(_sample(), 2)
    assert result.distances[2] == 0
    assert result.path_to(2) == [2]


@pytest.mark.parametrize("solver", [dijkstra_matrix, dijkstra_list])
def test_unreachable_raises(solver):
    result = solver(_sample(), 0)
    with pytest.raises(ValueError):
        result.path_to(4)


@pytest.mark.parametrize("solver", [dijkstra_matrix, dijkstra_list])
def test_path_weights_sum_to_distance(solver):
    graph = _sample()
    result = solver(graph, 3)
    for dest in range(4):
        path = result.path_to(dest)
        assert path[0] == 3 and path[-1] == dest
        total = sum(graph.weight(a, b) for a, b in zip(path, path[1:]))
        assert total == result.distances[dest]


@pytest.mark.parametrize("solver", [dijkstra_matrix, dijkstra_list])
def test_no_edge_can_shorten_a_distance(solver):
    graph = _sample()
    result = solver(graph, 1)
    for u in range(graph.vertices):
        for v, w in graph.adjacent(u):
            assert result.distances[v] <= result.distances[u] + w


def test_zero_weight_is_no_edge_in_matrix_only():
    graph = WeightedGraph(2)
    graph.add_edge(0, 1, 0)
    assert math.isinf(dijkstra_matrix(graph, 0).distances[1])
    assert dijkstra_list(graph, 0).distances[1] == 0


@pytest.mark.parametrize("solver", [dijkstra_matrix, dijkstra_list])
def test_bad_start_raises(solver):
    with pytest.raises(ValueError):
        solver(_sample(), 5)


def test_bad_destination_raises():
    result = dijkstra_matrix(_sample(), 0)
    with pytest.raises(ValueError):
        result.path_to(9)