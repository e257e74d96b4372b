"""Spanning trees over any graph store.

Both constructions grow a tree from a start vertex by repeatedly taking a
candidate edge ``(from, to, label)`` and keeping it when ``to`` is new.
``spanning_tree`` takes candidates from a stack (depth-first order, no
optimality); ``minimum_spanning_tree`` takes the lightest one from a heap
(Prim's algorithm).

The result is a fresh explicit Graph keyed by the source's ids whose
values and labels are the source's own objects, not copies.  It is only
meaningful while the source is left unmodified.

Targets without a vertex (dangling edges) are skipped.
"""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

from graphkit.graph import Graph
from graphkit.logger import logger

if TYPE_CHECKING:
    from graphkit.abstract_graph import AbstractGraph

W = TypeVar("W")


def spanning_tree(graph: AbstractGraph, start: Any) -> Graph[Any, Any, Any]:
    """Tree of every vertex reachable from *start*, built depth-first.

    Returns an empty Graph when *start* has no vertex.
    """
    tree: Graph[Any, Any, Any] = Graph()
    if not graph.has_vertex(start):
        logger.debug("spanning_tree: start %r has no vertex", start)
        return tree

    tree.push_vertex(start, graph.get_vertex(start))
    candidates: list[tuple[Any, Any, Any]] = []
    _extend_with_incident(graph, candidates, start)

    while candidates:
        from_vid, to_vid, edge = candidates.pop()
        if tree.has_vertex(to_vid):
            continue
        if not graph.has_vertex(to_vid):
            logger.debug("spanning_tree: skipping dangling edge %r -> %r", from_vid, to_vid)
            continue
        tree.push_vertex(to_vid, graph.get_vertex(to_vid))
        tree.push_edge(from_vid, to_vid, edge)
        _extend_with_incident(graph, candidates, to_vid)

    return tree


def minimum_spanning_tree(
    graph: AbstractGraph, start: Any, weight: Callable[[Any], W]
) -> Graph[Any, Any, Any] | None:
    """Prim's minimum spanning tree of the vertices reachable from *start*.

    *weight* maps an edge label to a totally ordered weight.  Equal
    weights are taken in the order their edges were discovered.  Returns
    None when *start* has no vertex.
    """
    if not graph.has_vertex(start):
        logger.debug("minimum_spanning_tree: start %r has no vertex", start)
        return None

    tree: Graph[Any, Any, Any] = Graph()
    tree.push_vertex(start, graph.get_vertex(start))

    # (weight, seq, from, to, label); seq keeps ties stable and stops
    # heapq from ever comparing ids or labels
    heap: list[tuple[Any, int, Any, Any, Any]] = []
    seq = itertools.count()
    _push_weighted(graph, heap, seq, weight, start)

    while heap:
        _w, _seq, from_vid, to_vid, edge = heapq.heappop(heap)
        if tree.has_vertex(to_vid):
            continue
        if not graph.has_vertex(to_vid):
            logger.debug(
                "minimum_spanning_tree: skipping dangling edge %r -> %r", from_vid, to_vid
            )
            continue
        tree.push_vertex(to_vid, graph.get_vertex(to_vid))
        tree.push_edge(from_vid, to_vid, edge)
        _push_weighted(graph, heap, seq, weight, to_vid)

    return tree


def tree_weight(tree: Graph[Any, Any, Any], weight: Callable[[Any], Any]) -> Any:
    """Sum of *weight* over every edge label in *tree*."""
    return sum(weight(edge) for _from, _to, edge in tree.iter_complete_edges())


def _extend_with_incident(
    graph: AbstractGraph, candidates: list[tuple[Any, Any, Any]], vid: Any
) -> None:
    for to_vid, edge in graph.incident_edges(vid) or ():
        candidates.append((vid, to_vid, edge))


def _push_weighted(
    graph: AbstractGraph,
    heap: list[tuple[Any, int, Any, Any, Any]],
    seq: itertools.count[int],
    weight: Callable[[Any], Any],
    vid: Any,
) -> None:
    for to_vid, edge in graph.incident_edges(vid) or ():
        heapq.heappush(heap, (weight(edge), next(seq), vid, to_vid, edge))
