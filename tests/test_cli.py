import json
import logging
from pathlib import Path

import pytest

from ridegraph import cli

TOPOLOGY = """
vertices: [Home, Office, Mall, Island]
edges:
  - {source: Home, target: Office, weight: 2}
  - {source: Office, target: Mall, weight: 2}
defaults: {driver: Home, destination: Mall}
"""


def test_cli_route_default_topology(capsys) -> None:
    cli.main(["route", "Jose"])
    data = json.loads(capsys.readouterr().out)

    assert data["route"] == ["Juan", "Maria", "Jose", "Makati"]
    assert data["vertex_count"] == 5
    assert data["edge_count"] == 9
    assert data["radius"] == 2
    assert data["match_percentages"]["Jose"] == pytest.approx(42.857, abs=1e-3)


def test_cli_route_overrides_driver_and_destination(capsys) -> None:
    cli.main(["route", "Jose", "--driver", "Makati", "--destination", "Juan"])
    data = json.loads(capsys.readouterr().out)
    assert data["route"][0] == "Makati"
    assert data["route"][-1] == "Juan"


def test_cli_route_with_topology_and_output(tmp_path: Path, capsys) -> None:
    topo = tmp_path / "city.yaml"
    topo.write_text(TOPOLOGY)
    out_file = tmp_path / "reports" / "report.json"

    cli.main(["route", "Office", "--topology", str(topo), "--output", str(out_file)])

    assert out_file.is_file()
    data = json.loads(out_file.read_text())
    assert data == json.loads(capsys.readouterr().out)
    assert data["route"] == ["Home", "Office", "Mall"]
    assert data["match_percentages"] == {"Office": 50.0}
    # Island is isolated
    assert data["radius"] is None


def test_cli_route_request_file(tmp_path: Path, capsys) -> None:
    request = tmp_path / "request.json"
    request.write_text(json.dumps({"driver": "Ana", "passengers": ["Maria"]}))

    cli.main(["route", "--request", str(request)])
    data = json.loads(capsys.readouterr().out)
    assert data["route"] == ["Ana", "Jose", "Maria", "Makati"]


def test_cli_route_invalid_request_file(tmp_path: Path, capsys) -> None:
    request = tmp_path / "request.json"
    request.write_text(json.dumps({"passengers": "Maria"}))

    with pytest.raises(SystemExit) as exc_info:
        cli.main(["route", "--request", str(request)])
    assert exc_info.value.code == 1
    assert "Passengers must be provided as an array." in capsys.readouterr().err


def test_cli_route_no_path(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["route", "Pedro"])
    assert exc_info.value.code == 1
    err = capsys.readouterr().err
    assert "NoPathFoundError" in err
    assert "'Pedro'" in err


def test_cli_missing_topology_file(tmp_path: Path, capsys) -> None:
    missing = tmp_path / "missing.yaml"
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["route", "Jose", "--topology", str(missing)])
    assert exc_info.value.code == 1
    assert "File not found" in capsys.readouterr().err


def test_cli_inspect(capsys) -> None:
    cli.main(["inspect"])
    out = capsys.readouterr().out

    assert "Vertices: 5" in out
    assert "Edges: 9" in out
    assert "Radius: 2" in out
    assert "Default driver: Juan" in out
    assert "Eccentricity" in out
    assert "Makati" in out


def test_cli_inspect_disconnected(tmp_path: Path, capsys) -> None:
    topo = tmp_path / "city.yaml"
    topo.write_text(TOPOLOGY)
    cli.main(["inspect", "-t", str(topo)])
    out = capsys.readouterr().out
    assert "Radius: inf" in out


def test_cli_inspect_invalid_topology(tmp_path: Path, capsys) -> None:
    topo = tmp_path / "bad.yaml"
    topo.write_text("vertices: [A, A]")
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["inspect", "--topology", str(topo)])
    assert exc_info.value.code == 1
    assert "Duplicate vertex 'A'" in capsys.readouterr().err


def test_cli_no_args_prints_help(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])
    assert exc_info.value.code == 0
    assert "usage: ridegraph" in capsys.readouterr().out


def test_cli_verbose_and_quiet() -> None:
    cli.main(["--verbose", "inspect"])
    assert logging.getLogger("ridegraph").level == logging.DEBUG

    cli.main(["--quiet", "inspect"])
    assert logging.getLogger("ridegraph").level == logging.WARNING

    cli.main(["--verbose", "inspect"])
    cli.main(["inspect"])
    assert logging.getLogger("ridegraph").level == logging.INFO


def test_format_cost() -> None:
    assert cli._format_cost(0.1) == "0.1"
    assert cli._format_cost(10.0) == "10"
    assert cli._format_cost(1234.5678) == "1,234.568"
    assert cli._format_cost(float("inf")) == "inf"


def test_format_table() -> None:
    table = cli._format_table(["Vertex", "Degree"], [["A", "2"], ["Bee", "10"]])
    lines = table.splitlines()
    assert len(lines) == 4
    assert lines[0].strip().startswith("Vertex")
    assert set(lines[1].strip()) <= {"-", "+"}
    assert cli._format_table(["X"], []) == ""
