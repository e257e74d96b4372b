"""Graph description loader: YAML/JSON file into an explicit Graph.

The file is input only; nothing is ever written back.  Edge labels in the
loaded graph are the EdgeSpec models themselves, so callers can read
``label``, ``weight`` and ``meta`` straight off ``get_edge``.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path

import yaml
from pydantic import ValidationError

from graphkit.errors import GraphLoadError
from graphkit.graph import Graph
from graphkit.logger import logger
from graphkit.model import EdgeSpec, GraphSpec, VertexKey

_JSON_SUFFIXES: frozenset[str] = frozenset({".json"})


def load_graph(path: Path, undirected: bool = False) -> Graph[VertexKey, EdgeSpec, Any]:
    """Parse a description file and build the graph it describes."""
    return graph_from_spec(load_spec(path), undirected=undirected)


def load_spec(path: Path) -> GraphSpec:
    raw = _load_raw(path)
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise GraphLoadError(f"{path} is not a graph description (expected a mapping).")
    try:
        return GraphSpec.model_validate(raw)
    except ValidationError as e:
        raise GraphLoadError(f"Invalid graph description in {path}: {e}") from e


def graph_from_spec(
    spec: GraphSpec, undirected: bool = False
) -> Graph[VertexKey, EdgeSpec, Any]:
    """Build a Graph from *spec*; with *undirected* every edge is mirrored."""
    graph: Graph[VertexKey, EdgeSpec, Any] = Graph()
    for vertex in spec.vertices:
        if graph.has_vertex(vertex.id):
            logger.debug("Vertex %r declared twice, keeping the last value", vertex.id)
        graph.push_vertex(vertex.id, vertex.value)

    for edge in spec.edges:
        if undirected:
            graph.push_undirected_edge(edge.from_id, edge.to_id, edge)
        else:
            graph.push_edge(edge.from_id, edge.to_id, edge)

    dangling = sum(1 for _ in graph.dangling_edges())
    if dangling > 0:
        logger.warning("%d edge(s) point at ids with no vertex", dangling)
    logger.info(
        "Loaded graph with %d vertices and %d edges", graph.vertex_count, graph.edge_count
    )
    return graph


def _load_raw(path: Path) -> Any:
    from pathlib import Path as _Path

    p = _Path(str(path))
    try:
        text = p.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise GraphLoadError(f"File not found: {path}") from None
    except OSError as e:
        raise GraphLoadError(f"Cannot read file {path}: {e}") from None

    if p.suffix.lower() in _JSON_SUFFIXES:
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise GraphLoadError(f"{path} is not valid JSON: {e}") from e
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise GraphLoadError(f"{path} is not valid YAML: {e}") from e
