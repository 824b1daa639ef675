"""Validation phase: counts and store consistency checks."""

from typing import Any, Dict, List

from ..pipeline import PipelinePhase


class GraphValidationPhase(PipelinePhase):
    phase_name = "validation"

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        graph = context["graph"]
        construction_output = context.get("construction_output", {})
        warnings: List[str] = []

        node_ids = graph.state.node_ids
        if len(node_ids) != len(set(node_ids)) or set(node_ids) != set(graph.state.nodes):
            warnings.append("node id list and node map are out of sync")
        for node_id in node_ids:
            for edge in graph.neighbors(node_id):
                if not graph.has_node(edge.target):
                    warnings.append(f"edge {node_id} -> {edge.target} points at a missing node")
                elif not graph.weighted and graph.get_edge(edge.target, node_id) is None:
                    warnings.append(f"edge {node_id} -> {edge.target} has no mirrored record")

        edge_count = graph.edge_count if graph.weighted else graph.edge_count // 2
        return {
            "validation_report": {
                "node_count": len(node_ids),
                "edge_count": edge_count,
                "rejected_edge_count": len(construction_output.get("rejected_edges", [])),
                "warnings": warnings,
            }
        }
