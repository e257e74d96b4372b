"""Pydantic models: graph description files, configuration, reports."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

VertexKey = str | int


# ---- graph description ---------------------------------------------------


class VertexSpec(BaseModel):
    id: VertexKey
    value: object | None = None


class EdgeSpec(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_id: VertexKey = Field(alias="from")
    to_id: VertexKey = Field(alias="to")
    label: str | None = None
    weight: float | None = None
    meta: dict[str, object] | None = None


class GraphSpec(BaseModel):
    """Contents of a graph description file."""

    vertices: list[VertexSpec] = Field(default_factory=list)
    edges: list[EdgeSpec] = Field(default_factory=list)


# ---- configuration -------------------------------------------------------


class SearchConfig(BaseModel):
    max_depth: int | None = Field(default=None, ge=0)


class SpanningConfig(BaseModel):
    # weight given to edges that carry none
    default_weight: float = 1.0


class GraphKitConfig(BaseModel):
    undirected: bool = False
    search: SearchConfig = Field(default_factory=SearchConfig)
    spanning: SpanningConfig = Field(default_factory=SpanningConfig)


# ---- reports -------------------------------------------------------------


class EdgeReport(BaseModel):
    from_id: VertexKey
    to_id: VertexKey
    label: str | None = None
    weight: float | None = None


class GraphSummary(BaseModel):
    vertices: int
    edges: int
    dangling: list[EdgeReport] = Field(default_factory=list)


class SearchReport(BaseModel):
    start: VertexKey
    goal: VertexKey
    found: bool
    path: list[VertexKey] = Field(default_factory=list)
    hops: int | None = None
    explored: int = 0
    layers: list[list[VertexKey]] = Field(default_factory=list)


class TreeReport(BaseModel):
    start: VertexKey
    minimum: bool
    found: bool = True
    vertices: list[VertexKey] = Field(default_factory=list)
    edges: list[EdgeReport] = Field(default_factory=list)
    total_weight: float = 0.0
