"""Graph construction phase: applies parsed line batches to the graph."""

import logging
from typing import Any, Dict, List

from ..graphs import Graph, WeightedGraph
from ..pipeline import PipelinePhase

logger = logging.getLogger(__name__)


class GraphConstructionPhase(PipelinePhase):
    phase_name = "construction"

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        graph = context["graph"]
        batches = context.get("parsing_output", {}).get("batches", [])
        rejected_edges: List[Dict[str, Any]] = []

        for batch in batches:
            if isinstance(graph, WeightedGraph):
                rejected_edges.extend(self._apply_weighted(graph, batch))
            elif isinstance(graph, Graph):
                rejected_edges.extend(self._apply_unweighted(graph, batch))
            else:
                raise TypeError(f"Unsupported graph type: {type(graph).__name__}")

        for rejected in rejected_edges:
            logger.warning(
                "Line %s: rejected edge %s -> %s%s",
                rejected["line_no"],
                rejected["source"],
                rejected["target"],
                f" (weight {rejected['weight']})" if "weight" in rejected else "",
            )

        return {
            "construction_output": {
                "applied_lines": len(batches),
                "rejected_edges": rejected_edges,
            }
        }

    @staticmethod
    def _apply_unweighted(graph: Graph, batch: Dict[str, Any]) -> List[Dict[str, Any]]:
        origin = batch["origin"]
        neighbors = batch.get("neighbors", [])
        graph.add_nodes([origin, *neighbors])
        rejected = []
        for neighbor in neighbors:
            if neighbor == origin:
                continue
            if not graph.add_edge(origin, neighbor):
                rejected.append({"line_no": batch["line_no"], "source": origin, "target": neighbor})
        return rejected

    @staticmethod
    def _apply_weighted(graph: WeightedGraph, batch: Dict[str, Any]) -> List[Dict[str, Any]]:
        origin = batch["origin"]
        neighbors = batch.get("neighbors", [])
        weights = batch.get("weights", [])
        graph.add_node(origin)
        graph.add_nodes(neighbors)
        rejected = []
        for neighbor, weight in zip(neighbors, weights):
            if not graph.add_edge(origin, neighbor, weight):
                rejected.append(
                    {
                        "line_no": batch["line_no"],
                        "source": origin,
                        "target": neighbor,
                        "weight": weight,
                    }
                )
        return rejected
