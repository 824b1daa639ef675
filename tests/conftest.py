import pytest

from route_graph import Graph, WeightedGraph

CITY_LINES = [
    "A B D E G H",
    "B C F H",
    "C D F G",
    "D E",
    "E F",
    "F G",
    "G H",
]

WEIGHTED_EDGES = [
    ("A", "B", 2),
    ("A", "D", 1),
    ("B", "D", 3),
    ("B", "E", 10),
    ("C", "A", 4),
    ("C", "F", 5),
    ("D", "C", 2),
    ("D", "E", 2),
    ("D", "F", 8),
    ("D", "G", 4),
    ("E", "G", 6),
    ("G", "F", 1),
]


@pytest.fixture(autouse=True)
def clean_engine_env(monkeypatch):
    for name in ("ROUTE_GRAPH_MAX_TIE_DEPTH", "ROUTE_GRAPH_RELAXATION", "ROUTE_GRAPH_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def build_graph(lines, settings=None):
    graph = Graph(settings)
    for line in lines:
        tokens = line.split()
        graph.add_nodes(tokens)
        graph.add_edges(tokens[0], tokens[1:])
    return graph


@pytest.fixture
def city_graph():
    return build_graph(CITY_LINES)


@pytest.fixture
def chain_graph():
    # A-B, A-D, B-C, C-D, D-E
    return build_graph(["A B D", "B C", "C D", "D E"])


@pytest.fixture
def detour_graph():
    # Two tied two-hop routes A-B-D and A-C-D plus a three-hop detour A-E-F-D.
    return build_graph(["A B C E", "B D", "C D", "E F", "F D"])


@pytest.fixture
def weighted_graph():
    graph = WeightedGraph()
    graph.add_nodes(["A", "B", "C", "D", "E", "F", "G"])
    for source, target, weight in WEIGHTED_EDGES:
        graph.add_edge(source, target, weight)
    return graph


@pytest.fixture
def graph_builder():
    return build_graph


@pytest.fixture
def city_lines():
    return list(CITY_LINES)
