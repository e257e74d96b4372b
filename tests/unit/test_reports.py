"""Tests for reports: summary, search and tree report assembly."""

from __future__ import annotations

from pathlib import Path

from graphkit.graph import Graph
from graphkit.loader import load_graph
from graphkit.model import EdgeSpec
from graphkit.reports import edge_weight, search_report, summarize, tree_report


class TestEdgeWeight:
    def test_spec_weight(self) -> None:
        assert edge_weight(EdgeSpec(from_id="A", to_id="B", weight=3)) == 3.0

    def test_default_when_missing(self) -> None:
        assert edge_weight(EdgeSpec(from_id="A", to_id="B"), 7.0) == 7.0
        assert edge_weight("plain label", 2.0) == 2.0


class TestSummarize:
    def test_counts_and_dangling(self, fixtures_dir: Path) -> None:
        summary = summarize(load_graph(fixtures_dir / "dangling.yml"))
        assert summary.vertices == 2
        assert summary.edges == 2
        assert [(d.from_id, d.to_id, d.label) for d in summary.dangling] == [
            ("A", "ghost", "dangling")
        ]


class TestSearchReport:
    def test_found(self, fixtures_dir: Path) -> None:
        graph = load_graph(fixtures_dir / "three-layer.yml")
        report = search_report(graph, "Root", "L3_B")
        assert report.found
        assert report.path == ["Root", "L1_B", "L2_C", "L3_B"]
        assert report.hops == 3
        assert report.layers[1] == ["L1_A", "L1_B", "L1_C"]

    def test_not_found(self, fixtures_dir: Path) -> None:
        graph = load_graph(fixtures_dir / "three-layer.yml")
        report = search_report(graph, "L3_B", "Root")
        assert not report.found
        assert report.path == []
        assert report.hops is None
        assert report.explored == 1

    def test_max_depth(self, fixtures_dir: Path) -> None:
        graph = load_graph(fixtures_dir / "three-layer.yml")
        assert not search_report(graph, "Root", "L3_B", max_depth=2).found


class TestTreeReport:
    def test_minimum(self, fixtures_dir: Path) -> None:
        graph = load_graph(fixtures_dir / "weighted.yml")
        report = tree_report(graph, "A", minimum=True)
        assert report.found
        assert report.total_weight == 6.0
        assert sorted(e.label for e in report.edges) == ["ac", "cb", "cd"]
        assert report.vertices[0] == "A"

    def test_arbitrary(self, fixtures_dir: Path) -> None:
        graph = load_graph(fixtures_dir / "weighted.yml")
        report = tree_report(graph, "A")
        assert not report.minimum
        assert len(report.vertices) == 4
        assert len(report.edges) == 3

    def test_default_weight_for_unweighted_edges(self, fixtures_dir: Path) -> None:
        graph = load_graph(fixtures_dir / "three-layer.yml")
        report = tree_report(graph, "Root", minimum=True, default_weight=2.0)
        assert report.total_weight == 2.0 * (len(report.vertices) - 1)

    def test_missing_start(self) -> None:
        graph: Graph = Graph()
        assert not tree_report(graph, "A").found
        assert not tree_report(graph, "A", minimum=True).found
