from graphnexus import MISSING_WEIGHT, GraphValidator, WeightedGraph, flatten_pairs, iter_pairs


def test_vertex_and_edge_existence(triangle):
    assert triangle.has_vertex("a")
    assert triangle.has_edge("a", "b")
    assert not triangle.has_vertex("d")
    assert not triangle.has_edge("a", "d")
    assert "a" in triangle
    assert len(triangle) == 3


def test_get_weight(triangle):
    assert triangle.get_weight("a", "b") == 1
    assert triangle.get_weight("a", "d") == MISSING_WEIGHT == -1


def test_get_adjacent_preserves_insertion_order(triangle):
    assert triangle.get_adjacent("a") == ["b", "c"]


def test_get_adjacent_unknown_vertex(triangle):
    assert triangle.get_adjacent("zz") == []
    assert triangle.get_incident("zz") == []


def test_g1_edges_and_weights(g1):
    for u, v, w in [("a", "b", 2), ("a", "d", 2), ("b", "c", 2), ("d", "c", 5), ("a", "c", 3)]:
        assert g1.has_edge(u, v)
        assert g1.has_edge(v, u)
        assert g1.get_weight(u, v) == w
        assert g1.get_weight(v, u) == w
    assert not g1.has_edge("b", "d")
    assert g1.get_weight("b", "d") == -1


def test_g1_adjacency(g1):
    assert set(g1.get_adjacent("a")) == {"b", "d", "c"}
    assert set(g1.get_adjacent("b")) == {"a", "c"}
    assert set(g1.get_adjacent("c")) == {"a", "b", "d"}
    assert set(g1.get_adjacent("d")) == {"a", "c"}


def test_vertices_in_first_appearance_order(g1):
    assert g1.get_vertices() == ["a", "b", "d", "c"]


def test_symmetry_invariant(g1):
    degree_sum = sum(len(g1.get_adjacent(v)) for v in g1.get_vertices())
    assert g1.get_edge_count() * 2 == degree_sum
    for u in g1.get_vertices():
        for v in g1.get_vertices():
            assert g1.has_edge(u, v) == g1.has_edge(v, u)
            assert (g1.get_weight(u, v) == -1) == (not g1.has_edge(u, v))


def test_returned_collections_are_copies(triangle):
    triangle.get_vertices().append("x")
    triangle.get_adjacent("a").clear()
    assert triangle.get_vertices() == ["a", "b", "c"]
    assert triangle.get_adjacent("a") == ["b", "c"]


def test_edges_yields_each_edge_once(g1):
    edges = list(g1.edges())
    assert len(edges) == g1.get_edge_count()
    assert {frozenset(e.endpoints()) for e in edges} == {
        frozenset(p) for p in [("a", "b"), ("a", "d"), ("b", "c"), ("d", "c"), ("a", "c")]
    }


def test_total_weight(g1):
    assert g1.total_weight(["a", "b", "b", "c"]) == 4
    assert g1.total_weight(["a", "b", "b", "d"]) is None
    assert g1.total_weight([]) == 0


def test_graph_validator_accepts_loaded_graph(g1):
    result = GraphValidator().validate(g1)
    assert result.is_valid
    assert result.details['degree_sum'] == 10
    assert not result.warnings


def test_graph_validator_warns_on_self_loop():
    g = WeightedGraph()
    g.load_edges(["a", "a", "a", "b"], [3, 1])
    result = GraphValidator().validate(g)
    assert result.is_valid
    assert len(result.warnings) == 1
    assert result.warnings[0].subjects == ("a",)


def test_empty_graph_queries(graph):
    assert graph.get_vertex_count() == 0
    assert graph.get_edge_count() == 0
    assert graph.get_vertices() == []
    assert not graph.has_edge("a", "b")


def test_pair_helpers():
    flat = flatten_pairs([("a", "b"), ("c", "d")])
    assert flat == ["a", "b", "c", "d"]
    assert list(iter_pairs(flat)) == [("a", "b"), ("c", "d")]
    assert list(iter_pairs(["a", "b", "c"])) == [("a", "b")]
