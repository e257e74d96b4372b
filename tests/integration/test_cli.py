"""Integration tests for the graphkit command line."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from graphkit.cli import app
from graphkit.model import GraphSummary, SearchReport, TreeReport

FIXTURES = Path(__file__).parent.parent / "fixtures"
runner = CliRunner()


class TestInfo:
    def test_console(self) -> None:
        result = runner.invoke(app, ["info", "--graph", str(FIXTURES / "dangling.yml")])
        assert result.exit_code == 0
        assert "Vertices: 2" in result.output
        assert "ghost" in result.output

    def test_json(self) -> None:
        result = runner.invoke(
            app, ["info", "--graph", str(FIXTURES / "weighted.yml"), "--json"]
        )
        assert result.exit_code == 0
        summary = GraphSummary.model_validate(json.loads(result.output))
        assert summary.vertices == 4
        assert summary.dangling == []


class TestPath:
    def test_found(self) -> None:
        result = runner.invoke(
            app,
            [
                "path", "--graph", str(FIXTURES / "three-layer.yml"),
                "--start", "Root", "--goal", "L3_B", "--json",
            ],
        )
        assert result.exit_code == 0
        report = SearchReport.model_validate(json.loads(result.output))
        assert report.path == ["Root", "L1_B", "L2_C", "L3_B"]

    def test_console_output(self) -> None:
        result = runner.invoke(
            app,
            ["path", "--graph", str(FIXTURES / "three-layer.yml"), "--start", "Root", "--goal", "L2_C"],
        )
        assert result.exit_code == 0
        assert "Root -> L1_B -> L2_C" in result.output

    def test_not_found_exits_1(self) -> None:
        result = runner.invoke(
            app,
            ["path", "--graph", str(FIXTURES / "unconnected.yml"), "--start", "A", "--goal", "C"],
        )
        assert result.exit_code == 1
        assert "No path" in result.output

    def test_undirected_flag(self) -> None:
        result = runner.invoke(
            app,
            [
                "path", "--graph", str(FIXTURES / "unconnected.yml"),
                "--start", "B", "--goal", "A", "--undirected", "--json",
            ],
        )
        assert result.exit_code == 0
        assert json.loads(result.output)["path"] == ["B", "A"]

    def test_max_depth_from_config(self, tmp_path: Path) -> None:
        cfg = tmp_path / "graphkit.yml"
        cfg.write_text("search:\n  max_depth: 2\n")
        args = [
            "path", "--graph", str(FIXTURES / "three-layer.yml"),
            "--start", "Root", "--goal", "L3_B", "--config", str(cfg),
        ]
        assert runner.invoke(app, args).exit_code == 1
        assert runner.invoke(app, [*args, "--max-depth", "3"]).exit_code == 0

    def test_integer_ids(self) -> None:
        result = runner.invoke(
            app,
            ["path", "--graph", str(FIXTURES / "int-ids.json"), "--start", "0", "--goal", "2", "--json"],
        )
        assert result.exit_code == 0
        assert json.loads(result.output)["path"] == [0, 1, 2]

    def test_json_determinism(self) -> None:
        args = [
            "path", "--graph", str(FIXTURES / "three-layer.yml"),
            "--start", "Root", "--goal", "L3_A", "--json",
        ]
        assert runner.invoke(app, args).output == runner.invoke(app, args).output


class TestSpan:
    def test_minimum_json(self) -> None:
        result = runner.invoke(
            app,
            ["span", "--graph", str(FIXTURES / "weighted.yml"), "--start", "A", "--minimum", "--json"],
        )
        assert result.exit_code == 0
        report = TreeReport.model_validate(json.loads(result.output))
        assert report.minimum
        assert report.total_weight == 6.0

    def test_console_output(self) -> None:
        result = runner.invoke(
            app, ["span", "--graph", str(FIXTURES / "weighted.yml"), "--start", "A"]
        )
        assert result.exit_code == 0
        assert "Spanning tree" in result.output
        assert "Vertices: 4, edges: 3" in result.output

    def test_missing_start_exits_1(self) -> None:
        result = runner.invoke(
            app, ["span", "--graph", str(FIXTURES / "weighted.yml"), "--start", "Z"]
        )
        assert result.exit_code == 1
        assert "not in graph" in result.output


class TestInputErrors:
    def test_missing_graph_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["info", "--graph", str(tmp_path / "nope.yml")])
        assert result.exit_code == 2

    def test_malformed_graph_file(self) -> None:
        result = runner.invoke(app, ["info", "--graph", str(FIXTURES / "malformed.yml")])
        assert result.exit_code == 2
