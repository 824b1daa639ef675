"""Node and edge storage shared by the graph variants."""

import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import asdict
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from .graph_model import EdgeRemoval, GraphEdge, GraphNode, GraphState

logger = logging.getLogger(__name__)


class GraphStore(ABC):
    """Owns node identifiers, adjacency lists and safe edge updates."""

    def __init__(self) -> None:
        self.state = GraphState()

    @property
    def node_ids(self) -> List[str]:
        return list(self.state.node_ids)

    @property
    def edge_count(self) -> int:
        return sum(len(node.edges) for node in self.state.nodes.values())

    def has_node(self, node_id: Optional[str]) -> bool:
        return node_id is not None and node_id in self.state.nodes

    def add_node(self, node_id: Optional[str]) -> bool:
        if node_id is None or node_id in self.state.nodes:
            return False
        self.state.nodes[node_id] = GraphNode(id=node_id)
        self.state.node_ids.append(node_id)
        return True

    def remove_node(self, node_id: Optional[str]) -> bool:
        if not self.has_node(node_id):
            return False
        # Drop every record pointing at the node, whichever side owns it.
        for node in self.state.nodes.values():
            node.edges = [edge for edge in node.edges if edge.target != node_id]
        del self.state.nodes[node_id]
        self.state.node_ids.remove(node_id)
        return True

    def remove_nodes(self, node_ids: Optional[Iterable[str]]) -> bool:
        if node_ids is None:
            return False
        node_ids = list(node_ids)
        removed = sum(1 for node_id in node_ids if self.remove_node(node_id))
        return removed == len(node_ids)

    def neighbors(self, node_id: str) -> List[GraphEdge]:
        node = self.state.nodes.get(node_id)
        if node is None:
            return []
        return list(node.edges)

    def get_edge(self, source_id: str, target_id: str) -> Optional[GraphEdge]:
        node = self.state.nodes.get(source_id)
        if node is None:
            return None
        return node.find_edge(target_id)[1]

    def remove_edge(self, source_id: str, target_id: str) -> Optional[EdgeRemoval]:
        edge = self.get_edge(source_id, target_id)
        if edge is None:
            return None
        removal = EdgeRemoval(source=source_id, target=target_id, weight=edge.weight)
        for owner_id, peer_id in self._edge_records(source_id, target_id):
            owner = self.state.nodes[owner_id]
            index, record = owner.find_edge(peer_id)
            if record is None:
                continue
            del owner.edges[index]
            removal.entries.append((owner_id, index, record))
        logger.debug("Detached edge %s -> %s (%d records)", source_id, target_id, len(removal.entries))
        return removal

    def restore_edge(self, removal: EdgeRemoval) -> None:
        for owner_id, index, record in reversed(removal.entries):
            owner = self.state.nodes.get(owner_id)
            if owner is None:
                raise ValueError(f"Cannot restore edge onto missing node: {owner_id}")
            owner.edges.insert(index, record)
        logger.debug("Restored edge %s -> %s", removal.source, removal.target)

    @contextmanager
    def suppressed_edge(self, source_id: str, target_id: str) -> Iterator[Optional[EdgeRemoval]]:
        removal = self.remove_edge(source_id, target_id)
        try:
            yield removal
        finally:
            if removal is not None:
                self.restore_edge(removal)

    def to_json(self) -> Dict[str, Any]:
        return {
            "nodes": list(self.state.node_ids),
            "edges": [
                asdict(edge)
                for node_id in self.state.node_ids
                for edge in self.state.nodes[node_id].edges
            ],
        }

    def render(self) -> str:
        lines = []
        for node_id in sorted(self.state.node_ids):
            tokens = [node_id] + self._render_neighbors(self.state.nodes[node_id])
            lines.append(" ".join(tokens))
        return "\n".join(lines)

    @abstractmethod
    def _edge_records(self, source_id: str, target_id: str) -> List[Tuple[str, str]]:
        raise NotImplementedError

    @abstractmethod
    def _render_neighbors(self, node: GraphNode) -> List[str]:
        raise NotImplementedError


class UndirectedGraphStore(GraphStore):
    """Unweighted store; every edge is kept as two mirrored records."""

    def add_nodes(self, node_ids: Optional[Iterable[str]]) -> bool:
        if node_ids is None:
            return False
        results = [self.add_node(node_id) for node_id in node_ids]
        return all(results)

    def add_edge(self, source_id: Optional[str], target_id: Optional[str]) -> bool:
        if not self.has_node(source_id) or not self.has_node(target_id) or source_id == target_id:
            return False
        if self.get_edge(source_id, target_id) is not None:
            return False
        self.state.nodes[source_id].edges.append(GraphEdge(source=source_id, target=target_id))
        self.state.nodes[target_id].edges.append(GraphEdge(source=target_id, target=source_id))
        return True

    def add_edges(self, source_id: Optional[str], target_ids: Optional[Iterable[str]]) -> bool:
        if target_ids is None:
            return False
        results = [self.add_edge(source_id, target_id) for target_id in target_ids]
        return all(results)

    def _edge_records(self, source_id: str, target_id: str) -> List[Tuple[str, str]]:
        return [(source_id, target_id), (target_id, source_id)]

    def _render_neighbors(self, node: GraphNode) -> List[str]:
        return sorted(edge.target for edge in node.edges)


class DirectedWeightedGraphStore(GraphStore):
    """Directed store with positive integer weights, one record per edge."""

    def add_nodes(self, node_ids: Optional[Iterable[str]]) -> bool:
        if node_ids is None:
            return False
        results = [self.add_node(node_id) for node_id in node_ids]
        return any(results)

    def add_edge(self, source_id: Optional[str], target_id: Optional[str], weight: int) -> bool:
        if not self.has_node(source_id) or not self.has_node(target_id) or source_id == target_id:
            return False
        if weight < 1:
            return False
        if self.get_edge(source_id, target_id) is not None:
            return False
        self.state.nodes[source_id].edges.append(
            GraphEdge(source=source_id, target=target_id, weight=weight)
        )
        return True

    def add_edges(
        self,
        source_id: Optional[str],
        target_ids: Sequence[str],
        weights: Sequence[int],
    ) -> bool:
        if not self.has_node(source_id) or len(target_ids) != len(weights):
            return False
        results = [
            self.add_edge(source_id, target_id, weight)
            for target_id, weight in zip(target_ids, weights)
        ]
        return any(results)

    def edge_weight(self, source_id: str, target_id: str) -> Optional[int]:
        edge = self.get_edge(source_id, target_id)
        return edge.weight if edge is not None else None

    def path_weight(self, path: Sequence[str]) -> Optional[int]:
        total = 0
        for source_id, target_id in zip(path, path[1:]):
            weight = self.edge_weight(source_id, target_id)
            if weight is None:
                return None
            total += weight
        return total

    def _edge_records(self, source_id: str, target_id: str) -> List[Tuple[str, str]]:
        return [(source_id, target_id)]

    def _render_neighbors(self, node: GraphNode) -> List[str]:
        tokens: List[str] = []
        for edge in sorted(node.edges, key=lambda item: item.weight):
            tokens.extend([str(edge.weight), edge.target])
        return tokens
