"""Report assembly: runs the algorithms and shapes results into models.

Works on graphs produced by ``loader``, whose edge labels are EdgeSpec.
Any other label is reported with no name and the default weight.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from graphkit.model import (
    EdgeReport,
    EdgeSpec,
    GraphSummary,
    SearchReport,
    TreeReport,
    VertexKey,
)
from graphkit.search import breadth_first_search, goal_id
from graphkit.spanning import minimum_spanning_tree, spanning_tree, tree_weight

if TYPE_CHECKING:
    from graphkit.graph import Graph


def edge_weight(edge: Any, default: float = 1.0) -> float:
    if isinstance(edge, EdgeSpec) and edge.weight is not None:
        return edge.weight
    return default


def _edge_report(from_id: VertexKey, to_id: VertexKey, edge: Any, weight: float | None) -> EdgeReport:
    label = edge.label if isinstance(edge, EdgeSpec) else None
    return EdgeReport(from_id=from_id, to_id=to_id, label=label, weight=weight)


def summarize(graph: Graph[VertexKey, Any, Any]) -> GraphSummary:
    dangling = [
        _edge_report(f, t, e, e.weight if isinstance(e, EdgeSpec) else None)
        for f, t, e in graph.dangling_edges()
    ]
    return GraphSummary(
        vertices=graph.vertex_count,
        edges=graph.edge_count,
        dangling=dangling,
    )


def search_report(
    graph: Graph[VertexKey, Any, Any],
    start: VertexKey,
    goal: VertexKey,
    max_depth: int | None = None,
) -> SearchReport:
    result = breadth_first_search(graph, start, goal_id(goal), max_depth=max_depth)
    return SearchReport(
        start=start,
        goal=goal,
        found=result.found,
        path=result.path(),
        hops=result.depth,
        explored=len(result.explored),
        layers=result.layers(),
    )


def tree_report(
    graph: Graph[VertexKey, Any, Any],
    start: VertexKey,
    minimum: bool = False,
    default_weight: float = 1.0,
) -> TreeReport:
    def weight(edge: Any) -> float:
        return edge_weight(edge, default_weight)

    if minimum:
        tree = minimum_spanning_tree(graph, start, weight)
    else:
        tree = spanning_tree(graph, start)
        if tree.vertex_count == 0:
            tree = None

    if tree is None:
        return TreeReport(start=start, minimum=minimum, found=False)

    return TreeReport(
        start=start,
        minimum=minimum,
        vertices=[vid for vid, _value in tree.iter_vertices()],
        edges=[_edge_report(f, t, e, weight(e)) for f, t, e in tree.iter_complete_edges()],
        total_weight=tree_weight(tree, weight),
    )
