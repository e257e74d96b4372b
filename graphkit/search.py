"""Breadth-first search, goal and move-filter helpers, path reconstruction.

``bfs`` is the primitive: it answers found / not found and reports every
newly explored vertex through ``on_explore(parent, child)``.  Parent maps,
exploration order and depths are built from that callback by the helpers
below, and ``breadth_first_search`` bundles them into a BfsResult.

Neighbours are visited in adjacency insertion order, so ties between
equally short paths go to the edge that was pushed first.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Hashable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from graphkit.abstract_graph import AbstractGraph

VId = TypeVar("VId", bound=Hashable)

GoalFn = Callable[[Any, int], bool]
MoveFilter = Callable[[Any, Any], bool]
ExploreFn = Callable[[Any, Any], None]

_MISSING: Any = object()


def bfs(
    graph: AbstractGraph,
    start: Any,
    is_goal: GoalFn,
    *,
    is_allowed_move: MoveFilter | None = None,
    on_explore: ExploreFn | None = None,
) -> bool:
    """Search *graph* breadth-first from *start* until *is_goal* holds.

    ``is_goal(vid, depth)`` is checked when a vertex is dequeued, so the
    start vertex can satisfy it at depth 0.  ``is_allowed_move(current,
    next)`` rejects individual moves.  ``on_explore(parent, child)`` fires
    exactly once per vertex other than *start*, when it is first reached.
    """
    explored: set[Any] = {start}
    frontier: deque[tuple[Any, int]] = deque([(start, 0)])

    while frontier:
        current, depth = frontier.popleft()
        if is_goal(current, depth):
            return True

        for nxt, _edge in graph.incident_edges(current) or ():
            if is_allowed_move is not None and not is_allowed_move(current, nxt):
                continue
            if nxt in explored:
                continue
            if on_explore is not None:
                on_explore(current, nxt)
            explored.add(nxt)
            frontier.append((nxt, depth + 1))

    return False


# ---- goals ---------------------------------------------------------------


def goal_id(target: Any) -> GoalFn:
    """Stop at the vertex with id *target*."""
    return lambda vid, _depth: vid == target


def goal_value(graph: AbstractGraph, value: Any) -> GoalFn:
    """Stop at the first vertex whose value equals *value*."""
    return lambda vid, _depth: graph.has_vertex(vid) and graph.get_vertex(vid) == value


def goal_depth(max_depth: int) -> GoalFn:
    """Stop once a vertex at *max_depth* is dequeued."""
    return lambda _vid, depth: depth >= max_depth


def never(_vid: Any, _depth: int) -> bool:
    """Goal that never fires; the search explores everything reachable."""
    return False


# ---- move filters --------------------------------------------------------


def moves_by_values(
    graph: AbstractGraph, allowed: Callable[[Any, Any], bool]
) -> MoveFilter:
    """Adapt a predicate over vertex values to one over ids.

    Moves from or to an id without a vertex are rejected.
    """

    def _allowed(from_vid: Any, to_vid: Any) -> bool:
        if not (graph.has_vertex(from_vid) and graph.has_vertex(to_vid)):
            return False
        return allowed(graph.get_vertex(from_vid), graph.get_vertex(to_vid))

    return _allowed


# ---- parent tracking -----------------------------------------------------


def record_parents(parents: dict[Any, Any]) -> ExploreFn:
    """Return an ``on_explore`` callback that writes child -> parent into *parents*."""

    def _record(parent: Any, child: Any) -> None:
        parents[child] = parent

    return _record


class ParentRecorder(Generic[VId]):
    """``on_explore`` callback keeping the parent map and discovery order."""

    __slots__ = ("parents", "order")

    def __init__(self) -> None:
        self.parents: dict[VId, VId] = {}
        self.order: list[VId] = []

    def __call__(self, parent: VId, child: VId) -> None:
        self.parents[child] = parent
        self.order.append(child)

    def path_to(self, target: VId, start: Any = _MISSING) -> list[VId]:
        return path_from_parents(self.parents, target, start)


def path_from_parents(
    parents: dict[Any, Any], target: Any, start: Any = _MISSING
) -> list[Any]:
    """Reconstruct the path from the search root to *target*, both included.

    Returns ``[]`` if *target* was never explored.  The root never appears
    as a key of *parents*; pass *start* to get ``[start]`` back for it.
    """
    if target not in parents:
        if start is not _MISSING and target == start:
            return [start]
        return []

    path = [target]
    current = target
    while current in parents:
        current = parents[current]
        path.append(current)
    path.reverse()
    return path


# ---- bundled result ------------------------------------------------------


@dataclass
class BfsResult(Generic[VId]):
    start: VId
    found: bool = False
    goal: VId | None = None
    depth: int | None = None
    parents: dict[VId, VId] = field(default_factory=dict)
    depths: dict[VId, int] = field(default_factory=dict)
    explored: list[VId] = field(default_factory=list)

    def path(self, target: Any = _MISSING) -> list[VId]:
        """Path to *target*, or to the goal that stopped the search."""
        if target is _MISSING:
            if not self.found:
                return []
            target = self.goal
        return path_from_parents(self.parents, target, self.start)

    def layers(self) -> list[list[VId]]:
        """Explored vertices grouped by the depth they were discovered at."""
        layers: list[list[VId]] = []
        for vid in self.explored:
            depth = self.depths[vid]
            while len(layers) <= depth:
                layers.append([])
            layers[depth].append(vid)
        return layers


def breadth_first_search(
    graph: AbstractGraph,
    start: VId,
    is_goal: GoalFn = never,
    *,
    is_allowed_move: MoveFilter | None = None,
    max_depth: int | None = None,
) -> BfsResult[VId]:
    """Run ``bfs`` and collect parents, depths and discovery order.

    With *max_depth* set, moves that would go deeper are rejected.
    """
    result: BfsResult[VId] = BfsResult(start=start)
    result.depths[start] = 0
    result.explored.append(start)

    def _allowed(current: VId, nxt: VId) -> bool:
        if max_depth is not None and result.depths[current] >= max_depth:
            return False
        return is_allowed_move is None or is_allowed_move(current, nxt)

    def _explore(parent: VId, child: VId) -> None:
        result.parents[child] = parent
        result.depths[child] = result.depths[parent] + 1
        result.explored.append(child)

    def _goal(vid: VId, depth: int) -> bool:
        if is_goal(vid, depth):
            result.goal = vid
            result.depth = depth
            return True
        return False

    result.found = bfs(
        graph, start, _goal, is_allowed_move=_allowed, on_explore=_explore
    )
    return result
