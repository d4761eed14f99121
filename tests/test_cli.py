import json
import logging
from pathlib import Path

import pytest

from spgraph import cli

TRIANGLE_YAML = """
vertices: [A, B, C, D]
edges:
  - [A, B, 2]
  - [B, C, 3]
  - [A, C, 10]
"""


@pytest.fixture
def graph_file(tmp_path: Path) -> Path:
    path = tmp_path / "triangle.yaml"
    path.write_text(TRIANGLE_YAML)
    return path


def test_cli_path(graph_file: Path, capsys) -> None:
    cli.main(["path", str(graph_file), "A", "C"])
    captured = capsys.readouterr()
    assert captured.out.strip() == "A -> B -> C (cost 5)"


def test_cli_path_reflexive(graph_file: Path, capsys) -> None:
    cli.main(["path", str(graph_file), "B", "B"])
    assert capsys.readouterr().out.strip() == "B (cost 0)"


def test_cli_path_unreachable(graph_file: Path, capsys) -> None:
    cli.main(["path", str(graph_file), "A", "D"])
    assert "unreachable" in capsys.readouterr().out


def test_cli_path_json(graph_file: Path, capsys) -> None:
    cli.main(["path", str(graph_file), "A", "C", "--json"])
    data = json.loads(capsys.readouterr().out)
    assert data == {
        "source": "A",
        "destination": "C",
        "reachable": True,
        "vertices": ["A", "B", "C"],
        "cost": 5,
    }


def test_cli_path_json_unreachable(graph_file: Path, capsys) -> None:
    cli.main(["path", str(graph_file), "C", "A", "--json"])
    data = json.loads(capsys.readouterr().out)
    assert data["reachable"] is False
    assert data["vertices"] == []
    assert data["cost"] is None


def test_cli_path_numeric_labels(tmp_path: Path, capsys) -> None:
    path = tmp_path / "numeric.yaml"
    path.write_text("vertices: [1, 2, 3]\nedges: [[1, 2, 1], [2, 3, 1]]\n")
    cli.main(["path", str(path), "1", "3"])
    assert capsys.readouterr().out.strip() == "1 -> 2 -> 3 (cost 2)"


def test_cli_unknown_vertex(graph_file: Path, capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["path", str(graph_file), "A", "Z"])
    assert exc_info.value.code == 1
    assert "UnknownVertexError" in capsys.readouterr().out


def test_cli_conflicting_edges(tmp_path: Path, capsys) -> None:
    path = tmp_path / "conflict.yaml"
    path.write_text("vertices: [A, B]\nedges: [[A, B, 1], [A, B, 2]]\n")
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["inspect", str(path)])
    assert exc_info.value.code == 1
    assert "ConflictingEdgeError" in capsys.readouterr().out


def test_cli_non_scalar_endpoint(tmp_path: Path, capsys) -> None:
    path = tmp_path / "nested.yaml"
    path.write_text(
        "vertices: [B]\nedges: [{source: {x: 1}, destination: B, weight: 1}]\n"
    )
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["inspect", str(path)])
    assert exc_info.value.code == 1
    assert "scalar label" in capsys.readouterr().out


def test_cli_missing_file(tmp_path: Path, capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["inspect", str(tmp_path / "missing.yaml")])
    assert exc_info.value.code == 1
    assert "not found" in capsys.readouterr().out


def test_cli_implicit_vertices(tmp_path: Path, capsys) -> None:
    path = tmp_path / "implicit.yaml"
    path.write_text("edges: [[A, B, 1]]\n")
    with pytest.raises(SystemExit):
        cli.main(["path", str(path), "A", "B"])
    capsys.readouterr()

    cli.main(["path", str(path), "A", "B", "--implicit-vertices"])
    assert capsys.readouterr().out.strip() == "A -> B (cost 1)"


def test_cli_inspect(graph_file: Path, capsys) -> None:
    cli.main(["inspect", str(graph_file)])
    out = capsys.readouterr().out
    assert "GRAPH INSPECTION: triangle.yaml" in out
    assert "Vertices: 4" in out
    assert "Edges: 3" in out
    assert "B (2), C (10)" in out


def test_cli_demo(capsys) -> None:
    cli.main(["demo"])
    out = capsys.readouterr().out
    assert "Vertices: 7" in out
    assert "Edges: 0" in out
    assert "0123456" in out


def test_demo_graph_labels() -> None:
    graph = cli._demo_graph()
    labels = sorted((str(v) for v in graph.vertices()), key=len)
    assert labels == ["0", "01", "012", "0123", "01234", "012345", "0123456"]


def test_cli_no_args_prints_help(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])
    assert exc_info.value.code == 0
    assert "usage" in capsys.readouterr().out


def test_cli_verbose_sets_debug(graph_file: Path, capsys) -> None:
    cli.main(["--verbose", "path", str(graph_file), "A", "C"])
    assert logging.getLogger("spgraph").level == logging.DEBUG
    cli.main(["--quiet", "path", str(graph_file), "A", "C"])
    assert logging.getLogger("spgraph").level == logging.WARNING
    capsys.readouterr()


def test_format_table() -> None:
    table = cli._format_table(["Name", "Cost"], [["A", 1], ["BB", 22]])
    lines = table.splitlines()
    assert len(lines) == 4
    assert lines[0].strip().startswith("Name")
    assert set(lines[1].strip()) <= {"-", "+"}
    assert cli._format_table(["Name"], []) == ""
