import pytest

from mst_compare.graph import Edge, WeightedGraph
from mst_compare.kruskal import KruskalEngine
from mst_compare.prim import PrimEngine
from mst_compare.validator import MSTValidator, is_spanning_tree


@pytest.mark.unit
def test_valid_tree(simple_graph):
    edges = [Edge(2, 3, 4), Edge(0, 3, 5), Edge(0, 1, 10)]
    assert MSTValidator().validate(simple_graph, edges)


@pytest.mark.unit
def test_engine_results_validate(simple_graph, medium_graph, complete_graph_5):
    for G in (simple_graph, medium_graph, complete_graph_5):
        assert is_spanning_tree(G, PrimEngine().find_mst(G).edges)
        assert is_spanning_tree(G, KruskalEngine().find_mst(G).edges)


@pytest.mark.unit
def test_wrong_edge_count(simple_graph):
    assert not is_spanning_tree(simple_graph, [Edge(2, 3, 4), Edge(0, 3, 5)])
    assert not is_spanning_tree(
        simple_graph,
        [Edge(2, 3, 4), Edge(0, 3, 5), Edge(0, 1, 10), Edge(1, 3, 15)],
    )


@pytest.mark.unit
def test_cycle_is_invalid(simple_graph):
    # right count, but 0-2-3 is a cycle and vertex 1 is left out
    assert not is_spanning_tree(simple_graph, [Edge(0, 3, 5), Edge(2, 3, 4), Edge(0, 2, 6)])


@pytest.mark.unit
def test_self_loop_is_invalid():
    G = WeightedGraph.from_edges(2, [(0, 0, 1), (0, 1, 2)])
    assert not is_spanning_tree(G, [Edge(0, 0, 1)])


@pytest.mark.unit
def test_out_of_range_endpoint_is_invalid_not_an_error():
    G = WeightedGraph(3)
    assert not is_spanning_tree(G, [Edge(0, 1, 1), Edge(1, 5, 1)])
    assert not is_spanning_tree(G, [Edge(-1, 1, 1), Edge(1, 2, 1)])


@pytest.mark.unit
def test_disconnected_graph_results_are_invalid(disconnected_graph):
    for engine in (PrimEngine(), KruskalEngine()):
        assert not is_spanning_tree(disconnected_graph, engine.find_mst(disconnected_graph).edges)


@pytest.mark.unit
@pytest.mark.parametrize("n", [0, 1])
def test_degenerate_graphs_accept_empty_tree(n):
    assert is_spanning_tree(WeightedGraph(n), [])
