"""Capability protocol every graph store satisfies.

Algorithms in ``search`` and ``spanning`` are written once against
AbstractGraph; Graph, HashGraph and VecGraph each implement it without a
common base class.  Vertex insertion is part of the capability set but
its signature depends on the identity scheme: explicit stores take
``(vid, vertex)``, derived and positional stores take ``(vertex)`` and
return the id they assigned.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterator
from typing import Any, Protocol, TypeVar, runtime_checkable

R = TypeVar("R")


@runtime_checkable
class AbstractGraph(Protocol):
    """Create, insert, fetch and enumerate adjacency."""

    @classmethod
    def new(cls) -> AbstractGraph:
        """Return an empty store."""
        ...

    def push_vertex(self, *args: Any) -> Hashable:
        """Insert or overwrite a vertex and return its id."""
        ...

    def push_edge(self, from_vid: Any, to_vid: Any, edge: Any = None) -> None:
        """Append a directed edge; never checks that endpoints exist."""
        ...

    def has_vertex(self, vid: Any) -> bool:
        ...

    def get_vertex(self, vid: Any) -> Any | None:
        ...

    def get_edge(self, from_vid: Any, to_vid: Any) -> Any | None:
        ...

    def incident_edges(self, vid: Any) -> list[tuple[Any, Any]] | None:
        ...

    def adjacent(self, vid: Any) -> list[Any]:
        ...

    def map_adjacent(self, vid: Any, f: Callable[[tuple[Any, Any]], R]) -> list[R]:
        ...

    def iter_vertices(self) -> Iterator[tuple[Any, Any]]:
        ...

    def iter_complete_edges(self) -> Iterator[tuple[Any, Any, Any]]:
        ...


def build_graph(
    graph: AbstractGraph,
    vertices: list[Any],
    edges: list[tuple[int, int, Any]],
) -> list[Hashable]:
    """Fill *graph* from positional edge triples and return the issued ids.

    ``edges`` refer to vertices by their position in *vertices*, which
    lets one edge list populate any store whose ``push_vertex`` takes a
    single value (HashGraph, VecGraph).
    """
    vids = [graph.push_vertex(vertex) for vertex in vertices]
    for src, dst, edge in edges:
        graph.push_edge(vids[src], vids[dst], edge)
    return vids
