"""In-memory graph engine with DFS/BFS, shortest and second shortest path queries."""

from .config import EngineSettings
from .graph_model import GraphEdge, GraphNode, GraphState, PathResult
from .graphs import Graph, WeightedGraph
from .loader import load_graph
from .phases import GraphParseError
from .traversal import ALPHABETICAL, REVERSE

__all__ = [
    "ALPHABETICAL",
    "REVERSE",
    "EngineSettings",
    "GraphEdge",
    "GraphNode",
    "GraphState",
    "PathResult",
    "Graph",
    "WeightedGraph",
    "load_graph",
    "GraphParseError",
]
