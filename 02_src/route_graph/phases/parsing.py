"""Line parsing phase built as a LangGraph workflow."""

from typing import Any, Dict, List

from langgraph.graph import END, START, StateGraph
from typing_extensions import TypedDict

from ..pipeline import PipelinePhase


class GraphParseError(ValueError):
    """Raised for graph description lines that cannot be interpreted."""

    def __init__(self, line_no: int, message: str) -> None:
        super().__init__(f"line {line_no}: {message}")
        self.line_no = line_no


class ParsingState(TypedDict):
    text: str
    weighted: bool
    lines: List[Dict[str, Any]]
    token_rows: List[Dict[str, Any]]
    batches: List[Dict[str, Any]]


class LineParsingPhase(PipelinePhase):
    """Turns ``<origin> <neighbor>*`` or ``<origin> (<weight> <neighbor>)*`` lines into batches.

    One batch per non-blank line: ``{"line_no", "origin", "neighbors", "weights"}``
    where ``weights`` is empty for unweighted input.
    """

    phase_name = "parsing"

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        ingestion_output = context.get("ingestion_output", {})
        workflow = self._build_workflow()
        result_state = workflow.invoke(
            {
                "text": ingestion_output.get("text", ""),
                "weighted": bool(context.get("weighted", False)),
                "lines": [],
                "token_rows": [],
                "batches": [],
            }
        )
        batches = result_state.get("batches", [])
        return {
            "parsing_output": {
                "batches": batches,
                "line_count": len(result_state.get("lines", [])),
            }
        }

    def _build_workflow(self):
        graph = StateGraph(ParsingState)
        graph.add_node("split_lines", self._split_lines)
        graph.add_node("tokenize_lines", self._tokenize_lines)
        graph.add_node("build_batches", self._build_batches)
        graph.add_edge(START, "split_lines")
        graph.add_edge("split_lines", "tokenize_lines")
        graph.add_edge("tokenize_lines", "build_batches")
        graph.add_edge("build_batches", END)
        return graph.compile()

    @staticmethod
    def _split_lines(state: ParsingState) -> Dict[str, Any]:
        lines = [
            {"line_no": line_no, "text": raw}
            for line_no, raw in enumerate(state.get("text", "").splitlines(), start=1)
            if raw.strip()
        ]
        return {"lines": lines}

    @staticmethod
    def _tokenize_lines(state: ParsingState) -> Dict[str, Any]:
        token_rows = [
            {"line_no": line["line_no"], "tokens": line["text"].split()}
            for line in state.get("lines", [])
        ]
        return {"token_rows": token_rows}

    def _build_batches(self, state: ParsingState) -> Dict[str, Any]:
        weighted = state.get("weighted", False)
        batches = []
        for row in state.get("token_rows", []):
            if weighted:
                batches.append(self._weighted_batch(row["line_no"], row["tokens"]))
            else:
                batches.append(
                    {
                        "line_no": row["line_no"],
                        "origin": row["tokens"][0],
                        "neighbors": row["tokens"][1:],
                        "weights": [],
                    }
                )
        return {"batches": batches}

    @staticmethod
    def _weighted_batch(line_no: int, tokens: List[str]) -> Dict[str, Any]:
        origin, rest = tokens[0], tokens[1:]
        weights: List[int] = []
        neighbors: List[str] = []
        for index in range(0, len(rest), 2):
            weight_token = rest[index]
            try:
                weights.append(int(weight_token))
            except ValueError as error:
                raise GraphParseError(
                    line_no, f"expected an integer weight, got {weight_token!r}"
                ) from error
            if index + 1 >= len(rest):
                raise GraphParseError(line_no, f"weight {weight_token!r} has no neighbor")
            neighbors.append(rest[index + 1])
        return {"line_no": line_no, "origin": origin, "neighbors": neighbors, "weights": weights}
