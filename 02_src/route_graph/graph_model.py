"""Graph data model primitives and per-traversal scratch state."""

import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple


@dataclass(frozen=True)
class GraphEdge:
    source: str
    target: str
    weight: int = 1


@dataclass
class GraphNode:
    id: str
    edges: List[GraphEdge] = field(default_factory=list)

    def find_edge(self, target: str) -> Tuple[int, Optional[GraphEdge]]:
        for index, edge in enumerate(self.edges):
            if edge.target == target:
                return index, edge
        return -1, None


@dataclass
class GraphState:
    nodes: Dict[str, GraphNode] = field(default_factory=dict)
    node_ids: List[str] = field(default_factory=list)


@dataclass
class EdgeRemoval:
    """Edge records detached from their owners, with their list positions.

    Entries are kept in detach order; restoring walks them backwards so every
    record lands at the index it was taken from.
    """

    source: str
    target: str
    weight: int
    entries: List[Tuple[str, int, GraphEdge]] = field(default_factory=list)


@dataclass
class TraversalMark:
    visited: bool = False
    parent: Optional[str] = None
    cost: float = math.inf


class TraversalContext:
    """Scratch state for one traversal call, keyed by node id."""

    def __init__(self, node_ids: Iterable[str]) -> None:
        self.marks: Dict[str, TraversalMark] = {node_id: TraversalMark() for node_id in node_ids}

    def __getitem__(self, node_id: str) -> TraversalMark:
        return self.marks[node_id]

    def path_to(self, target: str) -> List[str]:
        path: List[str] = []
        current: Optional[str] = target
        while current is not None:
            path.append(current)
            current = self.marks[current].parent
        path.reverse()
        return path


@dataclass
class PathResult:
    nodes: List[str] = field(default_factory=list)
    cost: float = math.inf

    def __bool__(self) -> bool:
        return bool(self.nodes)

    @classmethod
    def empty(cls) -> "PathResult":
        return cls()

    @classmethod
    def hops(cls, nodes: List[str]) -> "PathResult":
        if not nodes:
            return cls.empty()
        return cls(nodes=list(nodes), cost=len(nodes) - 1)
