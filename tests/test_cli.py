import json
import logging

import pytest

from route_graph.cli import main, parse_args


@pytest.fixture
def quiet_logs(monkeypatch):
    monkeypatch.setenv("ROUTE_GRAPH_LOG_LEVEL", "WARNING")
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    # main() installs a stdout handler bound to this test's captured stream
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)


def test_cli_runs_second_shortest_query(tmp_path, capsys, quiet_logs):
    input_path = tmp_path / "chain.txt"
    input_path.write_text("A B D\nB C\nC D\nD E\n", encoding="utf-8")
    output_path = tmp_path / "out" / "artifact.json"

    exit_code = main(
        [
            "--input-path",
            str(input_path),
            "--query",
            "second",
            "--source",
            "A",
            "--target",
            "E",
            "--output-path",
            str(output_path),
        ]
    )

    assert exit_code == 0
    stdout = capsys.readouterr().out
    assert "A B D" in stdout
    assert "second A -> E: ['A', 'B', 'C', 'D', 'E']" in stdout
    assert "nodes=5" in stdout

    artifact = json.loads(output_path.read_text(encoding="utf-8"))
    assert artifact["nodes"] == ["A", "B", "D", "C", "E"]
    assert artifact["meta"]["query"]["path"] == ["A", "B", "C", "D", "E"]
    assert artifact["meta"]["validation_report"]["edge_count"] == 5


def test_cli_weighted_shortest_reports_cost(tmp_path, capsys, quiet_logs):
    input_path = tmp_path / "weighted.txt"
    input_path.write_text("A 2 B 1 D\nD 2 C 2 E\n", encoding="utf-8")
    output_path = tmp_path / "artifact.json"

    main(
        [
            "--input-path",
            str(input_path),
            "--weighted",
            "--query",
            "shortest",
            "--source",
            "A",
            "--target",
            "E",
            "--output-path",
            str(output_path),
        ]
    )

    assert "shortest A -> E: ['A', 'D', 'E']" in capsys.readouterr().out
    artifact = json.loads(output_path.read_text(encoding="utf-8"))
    assert artifact["meta"]["query"]["cost"] == 3
    assert {"source": "A", "target": "D", "weight": 1} in artifact["edges"]


def test_query_requires_endpoints():
    with pytest.raises(SystemExit):
        parse_args(["--input-path", "graph.txt", "--query", "bfs", "--source", "A"])
