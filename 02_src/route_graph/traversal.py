"""Depth-first and breadth-first search over the unweighted graph."""

import heapq
from typing import Iterator, List, Optional, Tuple

from .graph_model import PathResult, TraversalContext
from .graph_store import GraphStore

ALPHABETICAL = "alphabetical"
REVERSE = "reverse"
NEIGHBOR_ORDERS = (ALPHABETICAL, REVERSE)


class _Descending(str):
    """Heap key that pops identifiers from the largest down."""

    def __lt__(self, other: str) -> bool:
        return str.__gt__(self, other)


class UnweightedTraversal:
    """Runs DFS/BFS queries against a store without mutating it.

    Both searches return the node ids from ``source`` to ``target`` or an
    empty list when either endpoint is missing, ``order`` is not one of
    ``NEIGHBOR_ORDERS``, or the target cannot be reached.
    """

    def __init__(self, store: GraphStore) -> None:
        self._store = store

    def dfs(self, source: str, target: str, order: str) -> List[str]:
        if not self._store.has_node(source) or not self._store.has_node(target):
            return []
        if order not in NEIGHBOR_ORDERS:
            return []
        descending = order == REVERSE

        context = TraversalContext(self._store.node_ids)
        context[source].visited = True
        if source == target:
            return [source]

        # Each frame mirrors one recursive call: the node and its remaining neighbors.
        stack: List[Tuple[str, Iterator[str]]] = [
            (source, iter(self._ordered_neighbors(source, descending)))
        ]
        while stack:
            node_id, pending = stack[-1]
            next_id: Optional[str] = None
            for neighbor_id in pending:
                if not context[neighbor_id].visited:
                    next_id = neighbor_id
                    break
            if next_id is None:
                stack.pop()
                continue

            mark = context[next_id]
            mark.visited = True
            mark.parent = node_id
            if next_id == target:
                return context.path_to(target)
            stack.append((next_id, iter(self._ordered_neighbors(next_id, descending))))
        return []

    def bfs(self, source: str, target: str, order: str) -> List[str]:
        if not self._store.has_node(source) or not self._store.has_node(target):
            return []
        if order not in NEIGHBOR_ORDERS:
            return []
        key = _Descending if order == REVERSE else str

        context = TraversalContext(self._store.node_ids)
        context[source].visited = True
        frontier = [key(source)]
        while frontier:
            node_id = str(heapq.heappop(frontier))
            if node_id == target:
                return context.path_to(target)
            for edge in self._store.neighbors(node_id):
                mark = context[edge.target]
                if mark.visited:
                    continue
                # Visited on discovery, so a node enters the frontier once.
                mark.visited = True
                mark.parent = node_id
                heapq.heappush(frontier, key(edge.target))
        return []

    def shortest(self, source: str, target: str) -> PathResult:
        return PathResult.hops(self.bfs(source, target, ALPHABETICAL))

    def _ordered_neighbors(self, node_id: str, descending: bool) -> List[str]:
        return sorted(
            (edge.target for edge in self._store.neighbors(node_id)),
            reverse=descending,
        )
