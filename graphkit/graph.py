"""Hashmap-backed graph stores: explicit ids and value-derived ids.

Both stores keep two dicts: ``vertices`` maps an id to the vertex value
and ``adjacency`` maps a source id to its outgoing ``(target, label)``
pairs in insertion order.  Edges are stored only under their source;
there is no reverse index.

Edge insertion never checks that either endpoint has a vertex.  A target
without a vertex is a *dangling* edge: plain lookups on it return None,
``resolve`` raises DanglingEdgeError, and ``dangling_edges`` lists them.

Iterators are fresh generators over the current state.  Mutating the
store while one is being consumed is a caller error.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterator
from typing import Generic, TypeVar

from graphkit.errors import DanglingEdgeError, IdentityCollisionError
from graphkit.identity import HashIdentity, IdentityScheme

VId = TypeVar("VId", bound=Hashable)
V = TypeVar("V")
E = TypeVar("E")
R = TypeVar("R")

_MISSING = object()


class _IndexedGraph(Generic[VId, E, V]):
    """Storage and queries shared by the hashmap-backed stores."""

    __slots__ = ("vertices", "adjacency")

    def __init__(self) -> None:
        self.vertices: dict[VId, V] = {}
        self.adjacency: dict[VId, list[tuple[VId, E]]] = {}

    # ---- mutation --------------------------------------------------------

    def push_edge(self, from_vid: VId, to_vid: VId, edge: E = None) -> None:  # type: ignore[assignment]
        """Append ``(to_vid, edge)`` to the adjacency list of *from_vid*."""
        self.adjacency.setdefault(from_vid, []).append((to_vid, edge))

    def push_undirected_edge(self, a: VId, b: VId, edge: E = None) -> None:  # type: ignore[assignment]
        """Push the edge in both directions, sharing the same label."""
        self.push_edge(a, b, edge)
        self.push_edge(b, a, edge)

    # ---- queries ---------------------------------------------------------

    def has_vertex(self, vid: VId) -> bool:
        return vid in self.vertices

    def get_vertex(self, vid: VId) -> V | None:
        return self.vertices.get(vid)

    def resolve(self, vid: VId) -> V:
        """Strict lookup: the vertex value for *vid* or DanglingEdgeError."""
        try:
            return self.vertices[vid]
        except KeyError:
            raise DanglingEdgeError(vid) from None

    def get_edge(self, from_vid: VId, to_vid: VId) -> E | None:
        """First label on an edge from_vid -> to_vid, in insertion order.

        Later parallel edges are only reachable through incident_edges.
        """
        for target, edge in self.adjacency.get(from_vid, ()):
            if target == to_vid:
                return edge
        return None

    def incident_edges(self, vid: VId) -> list[tuple[VId, E]] | None:
        return self.adjacency.get(vid)

    def adjacent(self, vid: VId) -> list[VId]:
        return [target for target, _edge in self.adjacency.get(vid, ())]

    def map_adjacent(self, vid: VId, f: Callable[[tuple[VId, E]], R]) -> list[R]:
        return [f(pair) for pair in self.adjacency.get(vid, ())]

    def iter_vertices(self) -> Iterator[tuple[VId, V]]:
        yield from self.vertices.items()

    def iter_edges(self) -> Iterator[tuple[VId, list[tuple[VId, E]]]]:
        yield from self.adjacency.items()

    def iter_complete_edges(self) -> Iterator[tuple[VId, VId, E]]:
        for from_vid, incident in self.adjacency.items():
            for to_vid, edge in incident:
                yield from_vid, to_vid, edge

    def dangling_edges(self) -> Iterator[tuple[VId, VId, E]]:
        """Edges whose target id has no vertex."""
        for from_vid, to_vid, edge in self.iter_complete_edges():
            if to_vid not in self.vertices:
                yield from_vid, to_vid, edge

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def edge_count(self) -> int:
        return sum(len(incident) for incident in self.adjacency.values())

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, vid: object) -> bool:
        return vid in self.vertices

    def __len__(self) -> int:
        return self.vertex_count

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(vertices={self.vertex_count}, "
            f"edges={self.edge_count})"
        )


class Graph(_IndexedGraph[VId, E, V]):
    """Graph with caller-supplied vertex ids.

    Identity-only graphs (no data beyond the id) use ``push_vid``, which
    stores None as the value.  Re-pushing an id overwrites its value.
    """

    __slots__ = ()

    @classmethod
    def new(cls) -> Graph[VId, E, V]:
        return cls()

    def push_vertex(self, vid: VId, vertex: V = None) -> VId:  # type: ignore[assignment]
        self.vertices[vid] = vertex
        return vid

    def push_vid(self, vid: VId) -> VId:
        return self.push_vertex(vid)


class HashGraph(_IndexedGraph[Hashable, E, V]):
    """Graph whose ids are derived from vertex values by an IdentityScheme.

    The scheme is fixed at construction (HashIdentity by default).  Values
    must be hashable and equality-comparable.  Pushing a value whose id is
    already held by an *unequal* value raises IdentityCollisionError.
    """

    __slots__ = ("identity",)

    def __init__(self, identity: IdentityScheme[V] | None = None) -> None:
        super().__init__()
        self.identity: IdentityScheme[V] = identity if identity is not None else HashIdentity()

    @classmethod
    def new(cls) -> HashGraph[E, V]:
        return cls()

    def vid_of(self, vertex: V) -> Hashable:
        return self.identity.vid_of(vertex)

    def push_vertex(self, vertex: V) -> Hashable:
        vid = self.vid_of(vertex)
        existing = self.vertices.get(vid, _MISSING)
        if existing is not _MISSING and existing != vertex:
            raise IdentityCollisionError(vid, existing, vertex)
        self.vertices[vid] = vertex
        return vid

    def contains_value(self, vertex: V) -> bool:
        return self.vid_of(vertex) in self.vertices

    def __repr__(self) -> str:
        return (
            f"HashGraph(identity={self.identity!r}, vertices={self.vertex_count}, "
            f"edges={self.edge_count})"
        )
