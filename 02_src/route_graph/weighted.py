"""Single-source shortest path over the directed weighted graph."""

import heapq
import itertools
import logging
import math
from collections import deque
from typing import List, Tuple

from .graph_model import PathResult, TraversalContext
from .graph_store import GraphStore

logger = logging.getLogger(__name__)

PRIORITY = "priority"
FIFO = "fifo"
RELAXATION_STRATEGIES = (PRIORITY, FIFO)


class WeightedTraversal:
    """Shortest path search with a configurable relaxation order.

    ``priority`` is Dijkstra over a binary heap. ``fifo`` walks a plain
    first-in first-out worklist, enqueuing each node the first time it is
    discovered, and fixes the path when the target leaves the worklist. It
    follows a label-correcting search and is only optimal when the discovery
    order settles every node before it is expanded.
    """

    def __init__(self, store: GraphStore, relaxation: str = PRIORITY) -> None:
        if relaxation not in RELAXATION_STRATEGIES:
            raise ValueError(f"Unknown relaxation strategy: {relaxation}")
        self._store = store
        self.relaxation = relaxation

    def shortest_path(self, source: str, target: str) -> List[str]:
        return self.shortest(source, target).nodes

    def shortest(self, source: str, target: str) -> PathResult:
        if not self._store.has_node(source) or not self._store.has_node(target):
            return PathResult.empty()

        context = TraversalContext(self._store.node_ids)
        context[source].cost = 0
        if self.relaxation == FIFO:
            return self._relax_fifo(context, source, target)

        self._relax_priority(context, source, target)
        cost = context[target].cost
        if math.isinf(cost):
            return PathResult.empty()
        return PathResult(nodes=context.path_to(target), cost=cost)

    def _relax_priority(self, context: TraversalContext, source: str, target: str) -> None:
        sequence = itertools.count()
        heap: List[Tuple[float, int, str]] = [(0, next(sequence), source)]
        while heap:
            cost, _, node_id = heapq.heappop(heap)
            current = context[node_id]
            if current.visited:
                continue
            current.visited = True
            if node_id == target:
                return
            for edge in self._store.neighbors(node_id):
                neighbor = context[edge.target]
                candidate = cost + edge.weight
                if not neighbor.visited and candidate < neighbor.cost:
                    neighbor.cost = candidate
                    neighbor.parent = node_id
                    heapq.heappush(heap, (candidate, next(sequence), edge.target))

    def _relax_fifo(self, context: TraversalContext, source: str, target: str) -> PathResult:
        worklist = deque([source])
        context[source].visited = True
        expanded = 0
        while worklist:
            node_id = worklist.popleft()
            current = context[node_id]
            expanded += 1
            if node_id == target:
                # Parents can still move after this point; the path is fixed here.
                nodes = context.path_to(target)
                logger.debug("FIFO relaxation from %s expanded %d nodes", source, expanded)
                return PathResult(nodes=nodes, cost=self._path_cost(nodes))
            for edge in self._store.neighbors(node_id):
                neighbor = context[edge.target]
                candidate = current.cost + edge.weight
                if candidate < neighbor.cost:
                    neighbor.cost = candidate
                    neighbor.parent = node_id
                if not neighbor.visited:
                    neighbor.visited = True
                    worklist.append(edge.target)
        logger.debug("FIFO relaxation from %s expanded %d nodes", source, expanded)
        return PathResult.empty()

    def _path_cost(self, nodes: List[str]) -> int:
        return sum(self._store.get_edge(a, b).weight for a, b in zip(nodes, nodes[1:]))
