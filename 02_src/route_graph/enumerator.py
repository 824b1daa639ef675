"""Second shortest path search by suppressing edges of the primary path."""

import logging
from typing import Callable, List

from .graph_model import PathResult
from .graph_store import GraphStore

logger = logging.getLogger(__name__)

PathSearch = Callable[[str, str], PathResult]


class SecondShortestPathEnumerator:
    """Finds the best alternate to the shortest path between two nodes.

    For every edge of the primary path, walked from the target back to the
    source, the edge is detached and the search rerun. A rerun that ties the
    primary cost deepens recursively on the reduced graph until a strictly
    worse route or no route remains. The cheapest candidate wins, earliest
    first on ties. Every detached edge is restored before ``find`` returns.

    The store is mutated while a search is in flight, so the same graph must
    not be queried from elsewhere until it finishes.
    """

    def __init__(self, store: GraphStore, search: PathSearch, max_tie_depth: int = 64) -> None:
        if max_tie_depth < 1:
            raise ValueError("max_tie_depth must be at least 1")
        self._store = store
        self._search = search
        self.max_tie_depth = max_tie_depth

    def find(self, source: str, target: str) -> PathResult:
        return self._find(source, target, depth=0)

    def _find(self, source: str, target: str, depth: int) -> PathResult:
        primary = self._search(source, target)
        path = primary.nodes
        candidates: List[PathResult] = []

        for index in range(len(path) - 1, 0, -1):
            edge_source, edge_target = path[index - 1], path[index]
            with self._store.suppressed_edge(edge_source, edge_target) as removal:
                if removal is None:
                    continue
                alternate = self._search(source, target)
                if alternate and alternate.cost == primary.cost:
                    alternate = self._deepen(source, target, depth, edge_source, edge_target)
                if alternate:
                    logger.debug(
                        "Candidate without %s -> %s: %s (cost %s)",
                        edge_source,
                        edge_target,
                        alternate.nodes,
                        alternate.cost,
                    )
                    candidates.append(alternate)

        best = PathResult.empty()
        for candidate in candidates:
            if candidate.cost < best.cost:
                best = candidate
        return best

    def _deepen(
        self, source: str, target: str, depth: int, edge_source: str, edge_target: str
    ) -> PathResult:
        if depth + 1 >= self.max_tie_depth:
            logger.warning(
                "Tie depth limit %d reached while suppressing %s -> %s; dropping candidate",
                self.max_tie_depth,
                edge_source,
                edge_target,
            )
            return PathResult.empty()
        return self._find(source, target, depth + 1)
