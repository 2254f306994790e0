import networkx as nx
import numpy as np

from graphnexus import GraphBuilder, WeightedGraph
from graphnexus.analysis import prim_mst
from graphnexus.benchmark import generate_star_graph


def edge_set(flat):
    return {frozenset(flat[i:i + 2]) for i in range(0, len(flat), 2)}


def test_triangle_mst(triangle):
    mst = triangle.get_mst()
    assert len(mst) == 4
    assert edge_set(mst) == {frozenset(("a", "b")), frozenset(("b", "c"))}


def test_mst_extraction_order(triangle):
    assert triangle.get_mst() == ["a", "b", "b", "c"]


def test_g1_mst(g1):
    mst = g1.get_mst()
    assert len(mst) == 6
    assert edge_set(mst) >= {frozenset(("a", "b")), frozenset(("a", "d")), frozenset(("b", "c"))}


def test_complex_mst(complex_path):
    g = WeightedGraph()
    g.load(complex_path)
    mst = g.get_mst()
    assert len(mst) == 8
    assert edge_set(mst) == {frozenset(p) for p in [("A", "B"), ("B", "C"), ("C", "D"), ("D", "E")]}


def test_empty_graph_mst(graph):
    assert graph.get_mst() == []


def test_single_vertex_mst(write_graph):
    g = WeightedGraph()
    g.load(write_graph("1\nA A 0\n"))
    assert g.get_mst() == ["A"]


def test_disconnected_mst_spans_start_component():
    g = WeightedGraph()
    g.load_edges(["a", "b", "c", "d"], [1, 2])
    assert g.get_mst() == ["a", "b"]


def test_equal_weights_pop_in_push_order():
    g = WeightedGraph()
    g.load_edges(["s", "x", "s", "y", "s", "z"], [1, 1, 1])
    assert g.get_mst() == ["s", "x", "s", "y", "s", "z"]


def test_mst_on_cycle_has_three_edges(graph):
    graph.load_edges(["a", "b", "b", "c", "c", "d", "d", "a"], [1, 2, 3, 4])
    mst = graph.get_mst()
    assert len(mst) == 6
    assert frozenset(("d", "a")) not in edge_set(mst)


def test_mst_weight_matches_networkx():
    rng = np.random.default_rng(7)
    builder = GraphBuilder()
    for size in (5, 30, 120):
        edges, weights = generate_star_graph(size, rng)
        g = WeightedGraph()
        g.load_edges(edges, weights)
        mst = prim_mst(g)
        assert len(mst) == 2 * (size - 1)
        expected = nx.minimum_spanning_tree(builder.to_networkx(g)).size(weight="weight")
        assert g.total_weight(mst) == expected


def test_complete_graph_mst_size():
    n = 60
    edges, weights = [], []
    for i in range(n):
        for j in range(i + 1, n):
            edges.extend((str(i), str(j)))
            weights.append((i + j) % 100)
    g = WeightedGraph()
    g.load_edges(edges, weights)
    assert g.get_edge_count() == n * (n - 1) // 2
    assert len(g.get_mst()) == 2 * (n - 1)
