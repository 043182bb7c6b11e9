import pytest

from algosolve.graphs import count_components, dfs_order, kevin_bacon

SQUARE = {1: [2, 3], 2: [1, 4], 3: [1, 4], 4: [2, 3]}


def test_components_example():
    edges = [(1, 2), (2, 5), (5, 1), (3, 4), (4, 6)]
    assert count_components(6, edges) == 2


@pytest.mark.parametrize("n", [1, 4, 10])
def test_no_edges_means_every_vertex_alone(n):
    assert count_components(n, []) == n


@pytest.mark.parametrize("n", [2, 5, 30])
def test_chain_is_one_component(n):
    edges = [(v, v + 1) for v in range(1, n)]
    assert count_components(n, edges) == 1
    assert count_components(n, edges[:-1]) == 2


def test_components_rejects_unknown_vertex():
    with pytest.raises(ValueError):
        count_components(3, [(1, 4)])


def test_kevin_bacon_example():
    edges = [(1, 3), (1, 4), (4, 5), (4, 3), (3, 2)]
    assert kevin_bacon(5, edges) == 3


@pytest.mark.parametrize("centre", [1, 3, 6])
def test_star_centre_wins(centre):
    edges = [(centre, v) for v in range(1, 7) if v != centre]
    assert kevin_bacon(6, edges) == centre


def test_tie_goes_to_smallest_number():
    edges = [(u, v) for u in range(1, 5) for v in range(u + 1, 5)]
    assert kevin_bacon(4, edges) == 1


def test_kevin_bacon_disconnected_rejected():
    with pytest.raises(ValueError):
        kevin_bacon(3, [(1, 2)])


def test_dfs_example_graph():
    assert dfs_order(SQUARE, 1) == [1, 2, 4, 3]


@pytest.mark.parametrize("start", [1, 2, 3, 4])
def test_dfs_visits_each_vertex_once(start):
    order = dfs_order(SQUARE, start)
    assert order[0] == start
    assert sorted(order) == [1, 2, 3, 4]


def test_dfs_ignores_unreachable_vertices():
    graph = {1: [2], 2: [1], 3: [4], 4: [3]}
    assert sorted(dfs_order(graph, 3)) == [3, 4]


def test_dfs_sorts_neighbours_regardless_of_input_order():
    shuffled = {vertex: list(reversed(nbrs)) for vertex, nbrs in SQUARE.items()}
    assert dfs_order(shuffled, 1) == dfs_order(SQUARE, 1)


def test_dfs_handles_long_paths():
    n = 5000
    graph = {v: [v - 1, v + 1] for v in range(2, n)}
    graph[1] = [2]
    graph[n] = [n - 1]
    assert dfs_order(graph, 1) == list(range(1, n + 1))