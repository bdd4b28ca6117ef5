import pytest

from adtlab.dfs_graph import NIL, UNDEF, Digraph, GraphError


def _grid(n=35):
    graph = Digraph(n)
    for i in range(1, n):
        if i % 7 != 0:
            graph.add_edge(i, i + 1)
        if i <= 28:
            graph.add_edge(i, i + 7)
    graph.add_edge(9, 31)
    graph.add_edge(17, 13)
    graph.add_arc(14, 33)
    return graph


def _arcs(n):
    graph = Digraph(n)
    for u, v in [(1, 2), (2, 3), (3, 1), (3, 4), (4, 5), (5, 4), (2, 6)]:
        graph.add_arc(u, v)
    return graph


def test_new_graph_is_empty():
    graph = Digraph(4)
    assert graph.order() == 4
    assert graph.size() == 0
    assert all(graph.neighbors(u) == [] for u in range(1, 5))
    assert all(graph.discover(u) == UNDEF for u in range(1, 5))
    assert all(graph.finish(u) == UNDEF for u in range(1, 5))
    assert all(graph.parent(u) == NIL for u in range(1, 5))


def test_neighbours_are_sorted_and_unique():
    graph = Digraph(5)
    for v in [4, 2, 5, 2, 3]:
        graph.add_arc(1, v)
    assert graph.neighbors(1) == [2, 3, 4, 5]
    assert graph.size() == 4


def test_size_counts_arcs():
    graph = _arcs(6)
    assert graph.size() == sum(len(graph.neighbors(u)) for u in range(1, 7))


def test_repeated_arc_keeps_size():
    graph = _grid()
    before = graph.size()
    graph.add_arc(14, 33)
    assert graph.size() == before


def test_repeated_edge_lowers_size():
    graph = Digraph(3)
    graph.add_edge(1, 2)
    before = graph.size()
    graph.add_edge(1, 2)
    assert graph.size() == before - 1


def test_edge_is_symmetric():
    graph = _grid()
    assert 31 in graph.neighbors(9)
    assert 9 in graph.neighbors(31)
    assert 33 in graph.neighbors(14)
    assert 14 not in graph.neighbors(33)


def test_str_format():
    graph = Digraph(3)
    graph.add_arc(1, 3)
    graph.add_arc(1, 2)
    assert str(graph) == "1: 2 3 \n2: \n3: \n"


def test_dfs_on_chain():
    graph = Digraph(3)
    graph.add_arc(1, 2)
    graph.add_arc(2, 3)
    assert graph.dfs([1, 2, 3]) == [1, 2, 3]
    assert graph.discover(3) == 3
    assert graph.finish(1) == 6
    assert graph.parent(3) == 2
    assert graph.parent(1) == NIL


def test_dfs_times_are_a_permutation():
    graph = _grid()
    graph.dfs(range(1, 36))
    times = [graph.discover(u) for u in range(1, 36)] + [graph.finish(u) for u in range(1, 36)]
    assert sorted(times) == list(range(1, 71))


def test_dfs_returns_decreasing_finish_order():
    graph = _arcs(6)
    result = graph.dfs(range(1, 7))
    assert sorted(result) == list(range(1, 7))
    finishes = [graph.finish(u) for u in result]
    assert finishes == sorted(finishes, reverse=True)


def test_dfs_parenthesis_property():
    graph = _arcs(6)
    graph.dfs(range(1, 7))
    for u in range(1, 7):
        p = graph.parent(u)
        assert graph.discover(u) < graph.finish(u)
        if p != NIL:
            assert graph.discover(p) < graph.discover(u)
            assert graph.finish(u) < graph.finish(p)
            assert u in graph.neighbors(p)


def test_dfs_follows_given_order():
    graph = _arcs(6)
    graph.dfs([6, 5, 4, 3, 2, 1])
    assert graph.discover(6) == 1
    assert graph.parent(6) == NIL


def test_dfs_wrong_length_raises():
    with pytest.raises(GraphError):
        _arcs(6).dfs([1, 2, 3])


def test_dfs_out_of_bound_vertex_raises():
    with pytest.raises(GraphError):
        _arcs(3).dfs([1, 2, 9])


def test_transpose_reverses_every_arc():
    graph = _arcs(6)
    reversed_graph = graph.transpose()
    assert reversed_graph.size() == graph.size()
    for u in range(1, 7):
        for v in graph.neighbors(u):
            assert u in reversed_graph.neighbors(v)
        for v in reversed_graph.neighbors(u):
            assert u in graph.neighbors(v)


def test_transpose_twice_restores_graph():
    graph = _grid()
    assert str(graph.transpose().transpose()) == str(graph)


def test_copy_matches_and_is_independent():
    graph = _grid()
    graph.dfs(range(1, 36))
    duplicate = graph.copy()
    assert str(duplicate) == str(graph)
    assert duplicate.size() == graph.size()
    assert duplicate.order() == graph.order()
    assert [duplicate.finish(u) for u in range(1, 36)] == [graph.finish(u) for u in range(1, 36)]
    duplicate.add_arc(1, 35)
    assert 35 not in graph.neighbors(1)
    assert duplicate.size() == graph.size() + 1


@pytest.mark.parametrize("vertex", [0, 4, -1])
def test_out_of_bound_access_raises(vertex):
    graph = Digraph(3)
    with pytest.raises(GraphError):
        graph.parent(vertex)
    with pytest.raises(GraphError):
        graph.add_arc(1, vertex)