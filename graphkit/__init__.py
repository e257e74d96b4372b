"""Directed labelled graphs with pluggable vertex identity, BFS and spanning trees."""

from graphkit.abstract_graph import AbstractGraph, build_graph
from graphkit.errors import (
    DanglingEdgeError,
    GraphKitError,
    GraphLoadError,
    IdentityCollisionError,
)
from graphkit.graph import Graph, HashGraph
from graphkit.identity import HashIdentity, IdentityScheme, ValueIdentity
from graphkit.search import (
    BfsResult,
    ParentRecorder,
    bfs,
    breadth_first_search,
    goal_depth,
    goal_id,
    goal_value,
    moves_by_values,
    never,
    path_from_parents,
    record_parents,
)
from graphkit.spanning import minimum_spanning_tree, spanning_tree, tree_weight
from graphkit.vec_graph import VecGraph

__all__ = [
    "AbstractGraph",
    "BfsResult",
    "DanglingEdgeError",
    "Graph",
    "GraphKitError",
    "GraphLoadError",
    "HashGraph",
    "HashIdentity",
    "IdentityCollisionError",
    "IdentityScheme",
    "ParentRecorder",
    "ValueIdentity",
    "VecGraph",
    "bfs",
    "breadth_first_search",
    "build_graph",
    "goal_depth",
    "goal_id",
    "goal_value",
    "minimum_spanning_tree",
    "moves_by_values",
    "never",
    "path_from_parents",
    "record_parents",
    "spanning_tree",
    "tree_weight",
]
