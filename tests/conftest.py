"""Shared test fixtures."""

from pathlib import Path

import pytest

from graphkit.graph import Graph

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture()
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture()
def three_layer() -> Graph:
    """Cyclic three-layer directed graph rooted at "Root"."""
    g: Graph = Graph()
    for vid in ["Root", "L1_A", "L1_B", "L1_C", "L2_A", "L2_B", "L2_C", "L3_A", "L3_B"]:
        g.push_vid(vid)
    g.push_edge("Root", "L1_A")
    g.push_edge("Root", "L1_B")
    g.push_edge("Root", "L1_C")
    g.push_edge("L1_A", "L2_A")
    g.push_edge("L1_A", "L2_B")
    g.push_edge("L1_B", "L2_C")
    g.push_edge("L2_B", "L3_A")
    g.push_edge("L2_B", "L1_A")
    g.push_edge("L2_C", "L3_B")
    return g


@pytest.fixture()
def weighted() -> Graph:
    """A, B, C, D with integer-weighted directed edges; MST from A weighs 6."""
    g: Graph = Graph()
    for vid in "ABCD":
        g.push_vid(vid)
    g.push_edge("A", "B", 4)
    g.push_edge("B", "C", 3)
    g.push_edge("C", "D", 2)
    g.push_edge("D", "A", 5)
    g.push_edge("A", "C", 1)
    g.push_edge("C", "B", 3)
    return g
