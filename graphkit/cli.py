"""CLI entry point: load a graph description and run an algorithm on it."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Annotated, Any

import typer

from graphkit.config import load_config
from graphkit.errors import GraphLoadError
from graphkit.loader import load_graph
from graphkit.outputs.output_console import render_search, render_summary, render_tree
from graphkit.outputs.output_json import render_json
from graphkit.reports import search_report, summarize, tree_report

if TYPE_CHECKING:
    from graphkit.graph import Graph
    from graphkit.model import VertexKey

app = typer.Typer(no_args_is_help=True)

GraphOption = Annotated[Path, typer.Option("--graph", help="Path to a YAML/JSON graph description")]
ConfigOption = Annotated[
    Path | None, typer.Option("--config", help="Path to graphkit.yml")
]
JsonOption = Annotated[bool, typer.Option("--json", help="Print the report as JSON")]
VerboseOption = Annotated[bool, typer.Option("--verbose", help="Enable verbose logging")]
UndirectedOption = Annotated[
    bool, typer.Option("--undirected", help="Mirror every edge while loading")
]


@app.callback(invoke_without_command=True)
def _callback() -> None:
    """graphkit: graph traversal and spanning trees."""


def _setup_logging(verbose: bool) -> None:
    if verbose:
        import logging

        logging.basicConfig(level=logging.DEBUG)


def _load(graph_path: Path, undirected: bool) -> Graph[VertexKey, Any, Any]:
    try:
        return load_graph(graph_path, undirected=undirected)
    except GraphLoadError as e:
        typer.echo(f"Error: {e}", err=True)
        raise SystemExit(2)  # noqa: B904


def _resolve_id(graph: Graph[VertexKey, Any, Any], raw: str) -> VertexKey:
    """Command-line ids are strings; match integer ids from the file too."""
    if raw in graph:
        return raw
    try:
        as_int = int(raw)
    except ValueError:
        return raw
    return as_int if as_int in graph else raw


@app.command()
def info(
    graph_path: GraphOption,
    as_json: JsonOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Summarize a graph: vertex and edge counts, dangling edges."""
    _setup_logging(verbose)
    graph = _load(graph_path, undirected=False)
    summary = summarize(graph)
    if as_json:
        typer.echo(render_json(summary), nl=False)
    else:
        render_summary(summary)


@app.command()
def path(
    graph_path: GraphOption,
    start: Annotated[str, typer.Option("--start", help="Start vertex id")],
    goal: Annotated[str, typer.Option("--goal", help="Goal vertex id")],
    max_depth: Annotated[
        int | None, typer.Option("--max-depth", min=0, help="Do not search deeper than this")
    ] = None,
    config_path: ConfigOption = None,
    undirected: UndirectedOption = False,
    as_json: JsonOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Shortest path (fewest edges) from --start to --goal."""
    _setup_logging(verbose)
    cfg = load_config(config_path)
    graph = _load(graph_path, undirected=undirected or cfg.undirected)

    if max_depth is None:
        max_depth = cfg.search.max_depth

    report = search_report(
        graph, _resolve_id(graph, start), _resolve_id(graph, goal), max_depth=max_depth
    )
    if as_json:
        typer.echo(render_json(report), nl=False)
    else:
        render_search(report)

    if not report.found:
        raise SystemExit(1)


@app.command()
def span(
    graph_path: GraphOption,
    start: Annotated[str, typer.Option("--start", help="Root vertex id")],
    minimum: Annotated[
        bool, typer.Option("--minimum", help="Build a minimum spanning tree (Prim)")
    ] = False,
    config_path: ConfigOption = None,
    undirected: UndirectedOption = False,
    as_json: JsonOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Spanning tree of everything reachable from --start."""
    _setup_logging(verbose)
    cfg = load_config(config_path)
    graph = _load(graph_path, undirected=undirected or cfg.undirected)

    report = tree_report(
        graph,
        _resolve_id(graph, start),
        minimum=minimum,
        default_weight=cfg.spanning.default_weight,
    )
    if as_json:
        typer.echo(render_json(report), nl=False)
    else:
        render_tree(report)

    if not report.found:
        raise SystemExit(1)
