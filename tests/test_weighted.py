from itertools import permutations

import pytest

from route_graph import EngineSettings, WeightedGraph
from route_graph.weighted import FIFO, PRIORITY, WeightedTraversal


def build_weighted(edges, settings=None):
    graph = WeightedGraph(settings)
    for source, target, weight in edges:
        graph.add_node(source)
        graph.add_node(target)
        graph.add_edge(source, target, weight)
    return graph


def test_shortest_path_prefers_cheaper_route():
    graph = build_weighted([("A", "B", 2), ("A", "D", 1), ("D", "C", 2), ("D", "E", 2)])
    assert graph.shortest_path("A", "E") == ["A", "D", "E"]
    assert graph.shortest_path_cost("A", "E") == 3


def test_shortest_paths_on_example(weighted_graph):
    assert weighted_graph.shortest_path("A", "A") == ["A"]
    assert weighted_graph.shortest_path_cost("A", "A") == 0
    assert weighted_graph.shortest_path("A", "B") == ["A", "B"]
    assert weighted_graph.shortest_path("A", "C") == ["A", "D", "C"]
    assert weighted_graph.shortest_path("A", "E") == ["A", "D", "E"]
    assert weighted_graph.shortest_path("A", "F") == ["A", "D", "G", "F"]
    assert weighted_graph.shortest_path_cost("A", "F") == 6
    assert weighted_graph.shortest_path("C", "G") == ["C", "A", "D", "G"]


def test_invalid_and_unreachable_requests(weighted_graph):
    assert weighted_graph.shortest_path(None, "A") == []
    assert weighted_graph.shortest_path("A", None) == []
    assert weighted_graph.shortest_path("A", "Q") == []
    # F has no outgoing edges
    assert weighted_graph.shortest_path("F", "A") == []
    assert weighted_graph.shortest_path_cost("F", "A") is None
    weighted_graph.add_node("Z")
    assert weighted_graph.shortest_path("A", "Z") == []


def test_shortest_path_after_node_removal(weighted_graph):
    weighted_graph.remove_node("D")
    assert weighted_graph.shortest_path("A", "C") == []
    assert weighted_graph.shortest_path("A", "G") == ["A", "B", "E", "G"]
    assert weighted_graph.shortest_path_cost("A", "G") == 18


def test_path_weight_matches_recorded_cost(weighted_graph):
    for source, target in permutations(weighted_graph.node_ids, 2):
        path = weighted_graph.shortest_path(source, target)
        if not path:
            continue
        assert path[0] == source and path[-1] == target
        assert weighted_graph.path_weight(path) == weighted_graph.shortest_path_cost(source, target)


def test_fifo_relaxation_reports_the_weight_of_its_path(weighted_graph):
    fifo = WeightedTraversal(weighted_graph, relaxation=FIFO)
    priority = WeightedTraversal(weighted_graph, relaxation=PRIORITY)
    for source, target in permutations(weighted_graph.node_ids, 2):
        result = fifo.shortest(source, target)
        if not result:
            assert not priority.shortest(source, target)
            continue
        assert result.cost == weighted_graph.path_weight(result.nodes)
        assert result.cost >= priority.shortest(source, target).cost

    # F is dequeued while its parent is still C, before G lowers it.
    assert fifo.shortest_path("A", "F") == ["A", "D", "C", "F"]
    assert fifo.shortest("A", "F").cost == 8


def test_fifo_relaxation_fixes_path_when_target_is_dequeued():
    # D is dequeued through the direct A-C edge before A-B-E-C lowers C.
    edges = [("A", "C", 5), ("A", "B", 1), ("B", "E", 1), ("E", "C", 1), ("C", "D", 1)]
    fifo_graph = build_weighted(edges, EngineSettings(relaxation=FIFO))
    priority_graph = build_weighted(edges)

    path = fifo_graph.shortest_path("A", "D")
    assert path == ["A", "C", "D"]
    assert fifo_graph.shortest_path_cost("A", "D") == fifo_graph.path_weight(path) == 6
    assert priority_graph.shortest_path("A", "D") == ["A", "B", "E", "C", "D"]
    assert priority_graph.shortest_path_cost("A", "D") == 4


def test_unknown_relaxation_is_rejected(weighted_graph):
    with pytest.raises(ValueError):
        WeightedTraversal(weighted_graph, relaxation="greedy")


def test_search_leaves_store_untouched(weighted_graph):
    before = weighted_graph.to_json()
    weighted_graph.shortest_path("A", "F")
    assert weighted_graph.to_json() == before
