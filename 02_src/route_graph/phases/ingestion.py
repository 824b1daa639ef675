"""Text ingestion phase: reads the graph description into memory."""

from pathlib import Path
from typing import Any, Dict

from ..pipeline import PipelinePhase


class TextIngestionPhase(PipelinePhase):
    phase_name = "ingestion"

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        input_path = context.get("input_path")
        text = context.get("text")
        if text is None:
            if not input_path:
                raise ValueError("Either input_path or text must be provided.")
            path = Path(str(input_path))
            if not path.exists():
                raise FileNotFoundError(f"Graph file not found: {path}")
            text = path.read_text(encoding="utf-8")
            source = str(path)
        else:
            source = "<inline>"
        return {"ingestion_output": {"source": source, "text": str(text)}}
