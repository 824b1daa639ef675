"""Builds graphs from line-oriented text through the phase pipeline."""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .config import EngineSettings
from .graphs import Graph, WeightedGraph
from .phases import (
    GraphConstructionPhase,
    GraphValidationPhase,
    LineParsingPhase,
    TextIngestionPhase,
)
from .pipeline import PipelinePhase, PipelineRunner

logger = logging.getLogger(__name__)


def build_default_phases() -> List[PipelinePhase]:
    return [
        TextIngestionPhase(),
        LineParsingPhase(),
        GraphConstructionPhase(),
        GraphValidationPhase(),
    ]


def run_pipeline(
    input_path: Optional[Union[str, Path]] = None,
    text: Optional[str] = None,
    weighted: bool = False,
    settings: Optional[EngineSettings] = None,
) -> Dict[str, Any]:
    graph: Union[Graph, WeightedGraph] = WeightedGraph(settings) if weighted else Graph(settings)
    initial_context: Dict[str, Any] = {
        "input_path": str(input_path) if input_path else "",
        "text": text,
        "weighted": weighted,
        "graph": graph,
    }
    runner = PipelineRunner(phases=build_default_phases())
    final_context = runner.run(initial_context)
    report = final_context.get("validation_report", {})
    logger.info(
        "Loaded %s graph: nodes=%s edges=%s rejected=%s",
        "weighted" if weighted else "unweighted",
        report.get("node_count"),
        report.get("edge_count"),
        report.get("rejected_edge_count"),
    )
    return final_context


def load_graph(
    input_path: Optional[Union[str, Path]] = None,
    text: Optional[str] = None,
    weighted: bool = False,
    settings: Optional[EngineSettings] = None,
) -> Union[Graph, WeightedGraph]:
    return run_pipeline(input_path=input_path, text=text, weighted=weighted, settings=settings)["graph"]
