from graphnexus import GraphConfig, GraphValidator, SubgraphValidator, WeightedGraph
from graphnexus.analysis import subgraph_distances


def test_triangle_report_with_mst(triangle):
    assert triangle.get_report("a", triangle.get_mst()) == {"a", "b", "c"}


def test_triangle_report_with_explicit_subgraph(triangle):
    assert triangle.get_report("a", ["a", "b", "b", "c"]) == {"a", "b", "c"}


def test_g1_report_excludes_longer_tree_path(g1):
    # A graph's own MST does not always keep every true distance:
    # c costs 4 through the tree but 3 directly
    assert g1.get_report("a", g1.get_mst()) == {"a", "b", "d"}


def test_unknown_source_is_invalid(triangle):
    assert triangle.get_report("zz", ["a", "b"]) is None


def test_empty_subgraph_is_source_only(triangle):
    assert triangle.get_report("b", []) == {"b"}
    assert triangle.get_report("b", None) == {"b"}


def test_odd_length_subgraph_is_invalid(triangle):
    assert triangle.get_report("a", ["a", "b", "c"]) is None


def test_missing_pairs_are_skipped(triangle):
    assert triangle.get_report("a", ["a", "b", "b", "zz"]) == {"a", "b"}


def test_path_through_missing_pair_is_disqualified(g1):
    # b-d is not an edge, so d is never reached
    assert g1.get_report("a", ["a", "b", "b", "d"]) == {"a", "b"}


def test_missing_pairs_rejected_when_configured(g1_path):
    g = WeightedGraph(GraphConfig(missing_edge_policy="reject"))
    g.load(g1_path)
    assert g.get_report("a", ["a", "b", "b", "d"]) is None
    assert g.get_report("a", ["a", "b"]) == {"a", "b"}


def test_first_discovery_fixes_subgraph_distance(graph):
    graph.load_edges(["a", "b", "b", "c", "a", "c"], [1, 1, 5])
    subgraph = ["a", "c", "a", "b", "b", "c"]
    distances, skipped = subgraph_distances(graph, "a", subgraph)
    assert distances == {"a": 0, "c": 5, "b": 1}
    assert skipped == []
    assert graph.get_report("a", subgraph) == {"a", "b"}


def test_unreached_subgraph_vertices_are_excluded(g1):
    assert g1.get_report("a", ["b", "c"]) == {"a"}


def test_long_chain_report(graph):
    n = 500
    edges, weights = [], []
    for i in range(n):
        edges.extend((str(i), str(i + 1)))
        weights.append(1)
    graph.load_edges(edges, weights)
    report = graph.get_report("0", ["0", "1", "1", "2", "2", "3", "3", "4"])
    assert report == {"0", "1", "2", "3", "4"}


def test_subgraph_validator_details(g1):
    result = SubgraphValidator().validate(g1, "a", ["a", "b", "b", "d"])
    assert result.is_valid
    assert result.details["missing_pairs"] == [("b", "d")]
    assert len(result.warnings) == 1
    assert result.warnings[0].subjects == (("b", "d"),)


def test_subgraph_validator_errors(g1):
    result = SubgraphValidator().validate(g1, "zz", ["a", "b", "c"])
    assert not result.is_valid
    assert len(result.errors) == 2
    assert result.flagged() == ["zz", "c"]


def test_single_vertex_mst_report(write_graph):
    g = WeightedGraph()
    g.load(write_graph("1\nA A 0\n"))
    assert g.get_report("A", g.get_mst()) == {"A"}


def test_subgraph_distances_returns_skipped_pairs(g1):
    distances, skipped = subgraph_distances(g1, "a", ["a", "b", "b", "d", "d", "c"])
    assert distances == {"a": 0, "b": 2}
    assert skipped == [("b", "d")]


def test_validation_results_merge(g1):
    result = GraphValidator().validate(g1)
    result.merge(SubgraphValidator().validate(g1, "zz", []))
    assert not result.is_valid
    assert result.details["degree_sum"] == 10
    assert result.get_summary() == {"errors": 1, "warnings": 0, "total": 1}
    assert str(result.errors[0]) == "[ERROR] Source vertex 'zz' is not in the graph"
