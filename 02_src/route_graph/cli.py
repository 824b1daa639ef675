"""CLI entrypoint: load a graph file and run a path query."""

import argparse
import json
from pathlib import Path
from typing import Any, Dict, List

from .config import EngineSettings
from .loader import run_pipeline
from .logging_utils import setup_logging
from .traversal import ALPHABETICAL, NEIGHBOR_ORDERS

QUERIES = ("dfs", "bfs", "shortest", "second")


def run_query(graph, query: str, source: str, target: str, order: str) -> List[str]:
    if query == "dfs":
        if graph.weighted:
            raise ValueError("dfs queries need an unweighted graph")
        return graph.dfs(source, target, order)
    if query == "bfs":
        if graph.weighted:
            raise ValueError("bfs queries need an unweighted graph")
        return graph.bfs(source, target, order)
    if query == "shortest":
        if graph.weighted:
            return graph.shortest_path(source, target)
        return graph.bfs(source, target, ALPHABETICAL)
    if query == "second":
        return graph.second_shortest_path(source, target)
    raise ValueError(f"Unknown query: {query}")


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Load a graph from text and run path queries.")
    parser.add_argument("--input-path", required=True, help="Line-oriented graph description file.")
    parser.add_argument(
        "--weighted",
        action="store_true",
        help="Read lines as '<origin> (<weight> <neighbor>)*' into a directed weighted graph.",
    )
    parser.add_argument("--query", choices=QUERIES, help="Path query to run.")
    parser.add_argument("--source", help="Start node of the query.")
    parser.add_argument("--target", help="End node of the query.")
    parser.add_argument(
        "--order",
        default=ALPHABETICAL,
        choices=NEIGHBOR_ORDERS,
        help="Neighbor priority for dfs/bfs.",
    )
    parser.add_argument("--output-path", default="", help="Optional path for a JSON artifact.")
    args = parser.parse_args(argv)
    if args.query and (args.source is None or args.target is None):
        parser.error("--query requires --source and --target")
    return args


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)
    settings = EngineSettings.from_env()
    setup_logging(settings.log_level)

    context = run_pipeline(input_path=args.input_path, weighted=args.weighted, settings=settings)
    graph = context["graph"]
    print(graph.render())

    query_result: Dict[str, Any] = {}
    if args.query:
        path = run_query(graph, args.query, args.source, args.target, args.order)
        query_result = {
            "query": args.query,
            "source": args.source,
            "target": args.target,
            "path": path,
        }
        if graph.weighted and path:
            query_result["cost"] = graph.path_weight(path)
        print(f"{args.query} {args.source} -> {args.target}: {path}")

    report = context.get("validation_report", {})
    print(
        "Counts:",
        f"nodes={report.get('node_count', 0)}",
        f"edges={report.get('edge_count', 0)}",
        f"rejected_edges={report.get('rejected_edge_count', 0)}",
    )

    if args.output_path:
        artifact = graph.to_json()
        artifact["meta"] = {
            "input_path": args.input_path,
            "weighted": args.weighted,
            "validation_report": report,
            "query": query_result,
        }
        output_path = Path(args.output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json.dumps(artifact, ensure_ascii=False, indent=2), encoding="utf-8")
        print(f"Graph artifact saved to: {output_path.resolve()}")
    return 0
