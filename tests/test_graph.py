import pytest

from weightgraph.graph import Edge, Graph


def test_edge_fields():
    e = Edge(1, 5)
    assert e.destination == 1
    assert e.weight == 5
    assert e.source is None


def test_edge_with_source():
    e = Edge(3, 7, source=2)
    assert (e.source, e.destination, e.weight) == (2, 3, 7)


def test_graph_functionality():
    g = Graph(5)
    g.add_edge(0, 1, 10)
    g.add_edge(1, 2, 20)
    g.add_edge(2, 3, 30)
    g.add_edge(3, 4, 40)
    g.remove_edge(1, 2)

    assert g.has_edge(0, 1)
    assert not g.has_edge(1, 2)
    assert g.has_edge(2, 3)
    assert g.has_edge(3, 4)
    assert not g.has_edge(4, 0)

    counts = [sum(g.has_edge(v, i) for i in range(5)) for v in range(5)]
    assert counts == [1, 1, 1, 2, 1]


def test_num_vertices():
    assert Graph(5).num_vertices == 5
    assert Graph(0).num_vertices == 0


def test_negative_vertex_count_rejected():
    with pytest.raises(ValueError):
        Graph(-2)


def test_edge_weight():
    g = Graph(3)
    g.add_edge(0, 1, 10)
    assert g.edge_weight(0, 1) == 10
    assert g.edge_weight(1, 0) == 10
    assert g.edge_weight(0, 2) is None


def test_adjacent_vertices_newest_first():
    g = Graph(4)
    g.add_edge(0, 1, 1)
    g.add_edge(0, 2, 1)
    g.add_edge(0, 3, 1)
    assert g.adjacent_vertices(0) == [3, 2, 1]
    assert g.adjacent_vertices(1) == [0]


def test_add_one_edge_is_held_by_target():
    g = Graph(3)
    g.add_one_edge(2, 0, 7)
    assert g.has_edge(0, 2)
    assert not g.has_edge(2, 0)
    assert g.edge_weight(0, 2) == 7


def test_remove_edge_removes_only_newest_duplicate():
    g = Graph(2)
    g.add_edge(0, 1, 5)
    g.add_edge(0, 1, 9)
    g.remove_edge(0, 1)
    assert g.edge_weight(0, 1) == 5
    assert g.edge_weight(1, 0) == 5
    g.remove_edge(0, 1)
    assert not g.has_edge(0, 1)


def test_remove_missing_edge_leaves_graph_unchanged():
    g = Graph(3)
    g.add_edge(0, 1, 4)
    g.remove_edge(1, 2)
    assert g.adjacent_vertices(0) == [1]
    assert g.adjacent_vertices(1) == [0]


@pytest.mark.parametrize("source,target", [(-1, 0), (0, 5), (5, 0), (0, -3)])
def test_out_of_range_vertices(source, target):
    g = Graph(5)
    with pytest.raises(IndexError):
        g.add_edge(source, target, 1)
    with pytest.raises(IndexError):
        g.add_one_edge(source, target, 1)
    with pytest.raises(IndexError):
        g.remove_edge(source, target)


def test_query_invalid_vertex():
    g = Graph(2)
    with pytest.raises(IndexError):
        g.adjacent_vertices(2)
    with pytest.raises(IndexError):
        g.has_edge(-1, 0)


def test_str_format():
    g = Graph(3)
    g.add_edge(0, 1, 7)
    assert str(g) == "Vertex 0: -> (0, 1, 7)\nVertex 1: -> (1, 0, 7)\nVertex 2: "


def test_str_lists_newest_first():
    g = Graph(2)
    g.add_one_edge(1, 0, 2)
    g.add_one_edge(0, 0, 3)
    assert str(g).splitlines()[0] == "Vertex 0: -> (0, 0, 3)-> (0, 1, 2)"