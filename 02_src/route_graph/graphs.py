"""Public graph types combining storage with path queries."""

from pathlib import Path
from typing import List, Optional, Union

from .config import EngineSettings
from .enumerator import SecondShortestPathEnumerator
from .graph_store import DirectedWeightedGraphStore, UndirectedGraphStore
from .traversal import UnweightedTraversal
from .weighted import WeightedTraversal


class Graph(UndirectedGraphStore):
    """Undirected, unweighted graph with DFS/BFS and alternate path queries."""

    weighted = False

    def __init__(self, settings: Optional[EngineSettings] = None) -> None:
        super().__init__()
        self.settings = settings or EngineSettings()
        self._traversal = UnweightedTraversal(self)
        self._enumerator = SecondShortestPathEnumerator(
            self, self._traversal.shortest, max_tie_depth=self.settings.max_tie_depth
        )

    @classmethod
    def read(cls, input_path: Union[str, Path], settings: Optional[EngineSettings] = None) -> "Graph":
        from .loader import load_graph

        return load_graph(input_path=input_path, weighted=False, settings=settings)

    def dfs(self, source: str, target: str, order: str) -> List[str]:
        return self._traversal.dfs(source, target, order)

    def bfs(self, source: str, target: str, order: str) -> List[str]:
        return self._traversal.bfs(source, target, order)

    def second_shortest_path(self, source: str, target: str) -> List[str]:
        """Shortest path that drops at least one edge of ``bfs(source, target, "alphabetical")``."""
        return self._enumerator.find(source, target).nodes


class WeightedGraph(DirectedWeightedGraphStore):
    """Directed graph with positive integer weights and cost-based path queries."""

    weighted = True

    def __init__(self, settings: Optional[EngineSettings] = None) -> None:
        super().__init__()
        self.settings = settings or EngineSettings()
        self._traversal = WeightedTraversal(self, relaxation=self.settings.relaxation)
        self._enumerator = SecondShortestPathEnumerator(
            self, self._traversal.shortest, max_tie_depth=self.settings.max_tie_depth
        )

    @classmethod
    def read(
        cls, input_path: Union[str, Path], settings: Optional[EngineSettings] = None
    ) -> "WeightedGraph":
        from .loader import load_graph

        return load_graph(input_path=input_path, weighted=True, settings=settings)

    def shortest_path(self, source: str, target: str) -> List[str]:
        return self._traversal.shortest_path(source, target)

    def shortest_path_cost(self, source: str, target: str) -> Optional[int]:
        result = self._traversal.shortest(source, target)
        return int(result.cost) if result else None

    def second_shortest_path(self, source: str, target: str) -> List[str]:
        """Cheapest path that drops at least one edge of ``shortest_path(source, target)``."""
        return self._enumerator.find(source, target).nodes
