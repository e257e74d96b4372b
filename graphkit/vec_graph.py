"""List-backed graph store with positional vertex ids.

A vertex id is the index it was pushed at.  The store is append-only:
removing or reordering vertices would invalidate ids already handed out,
so neither is offered.  Adjacency is still a dict keyed by source index.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Generic, TypeVar

from graphkit.errors import DanglingEdgeError

V = TypeVar("V")
E = TypeVar("E")
R = TypeVar("R")


class VecGraph(Generic[V, E]):
    __slots__ = ("vertices", "adjacency")

    def __init__(self) -> None:
        self.vertices: list[V] = []
        self.adjacency: dict[int, list[tuple[int, E]]] = {}

    @classmethod
    def new(cls) -> VecGraph[V, E]:
        return cls()

    # ---- mutation --------------------------------------------------------

    def push_vertex(self, vertex: V) -> int:
        """Append *vertex* and return its index."""
        self.vertices.append(vertex)
        return len(self.vertices) - 1

    def push_edge(self, from_vid: int, to_vid: int, edge: E = None) -> None:  # type: ignore[assignment]
        self.adjacency.setdefault(from_vid, []).append((to_vid, edge))

    def push_undirected_edge(self, a: int, b: int, edge: E = None) -> None:  # type: ignore[assignment]
        self.push_edge(a, b, edge)
        self.push_edge(b, a, edge)

    # ---- queries ---------------------------------------------------------

    def has_vertex(self, vid: int) -> bool:
        # negative indices are not ids, even though list indexing accepts them
        return isinstance(vid, int) and 0 <= vid < len(self.vertices)

    def get_vertex(self, vid: int) -> V | None:
        if not self.has_vertex(vid):
            return None
        return self.vertices[vid]

    def resolve(self, vid: int) -> V:
        if not self.has_vertex(vid):
            raise DanglingEdgeError(vid)
        return self.vertices[vid]

    def get_edge(self, from_vid: int, to_vid: int) -> E | None:
        for target, edge in self.adjacency.get(from_vid, ()):
            if target == to_vid:
                return edge
        return None

    def incident_edges(self, vid: int) -> list[tuple[int, E]] | None:
        return self.adjacency.get(vid)

    def adjacent(self, vid: int) -> list[int]:
        return [target for target, _edge in self.adjacency.get(vid, ())]

    def map_adjacent(self, vid: int, f: Callable[[tuple[int, E]], R]) -> list[R]:
        return [f(pair) for pair in self.adjacency.get(vid, ())]

    def iter_vertices(self) -> Iterator[tuple[int, V]]:
        yield from enumerate(self.vertices)

    def iter_edges(self) -> Iterator[tuple[int, list[tuple[int, E]]]]:
        yield from self.adjacency.items()

    def iter_complete_edges(self) -> Iterator[tuple[int, int, E]]:
        for from_vid, incident in self.adjacency.items():
            for to_vid, edge in incident:
                yield from_vid, to_vid, edge

    def dangling_edges(self) -> Iterator[tuple[int, int, E]]:
        for from_vid, to_vid, edge in self.iter_complete_edges():
            if not self.has_vertex(to_vid):
                yield from_vid, to_vid, edge

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def edge_count(self) -> int:
        return sum(len(incident) for incident in self.adjacency.values())

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, vid: object) -> bool:
        return self.has_vertex(vid)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self.vertex_count

    def __repr__(self) -> str:
        return f"VecGraph(vertices={self.vertex_count}, edges={self.edge_count})"
