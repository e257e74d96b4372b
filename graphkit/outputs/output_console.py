"""Console output: TTY summaries with Rich tables."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from graphkit.model import EdgeReport, GraphSummary, SearchReport, TreeReport


def render_summary(summary: GraphSummary, console: Console | None = None) -> None:
    console = console or Console()
    console.print(f"Vertices: {summary.vertices}")
    console.print(f"Edges: {summary.edges}")
    if summary.dangling:
        console.print(_edge_table("Dangling Edges", summary.dangling))
    else:
        console.print("Dangling edges: none")


def render_search(report: SearchReport, console: Console | None = None) -> None:
    console = console or Console()
    if not report.found:
        console.print(
            f"[red]No path[/red] from {report.start} to {report.goal} "
            f"({report.explored} explored)"
        )
        return

    path_str = " -> ".join(str(vid) for vid in report.path)
    console.print(f"[green]Path[/green] ({report.hops} hops): {path_str}")

    table = Table(title="Exploration Layers")
    table.add_column("Depth", justify="right")
    table.add_column("Vertices")
    for depth, layer in enumerate(report.layers):
        table.add_row(str(depth), ", ".join(str(vid) for vid in layer))
    console.print(table)
    console.print(f"Explored: {report.explored}")


def render_tree(report: TreeReport, console: Console | None = None) -> None:
    console = console or Console()
    kind = "Minimum spanning tree" if report.minimum else "Spanning tree"
    if not report.found:
        console.print(f"[red]{kind}:[/red] start vertex {report.start} not in graph")
        return

    console.print(_edge_table(f"{kind} from {report.start}", report.edges))
    console.print(f"Vertices: {len(report.vertices)}, edges: {len(report.edges)}")
    console.print(f"Total weight: {report.total_weight:g}")


def _edge_table(title: str, edges: list[EdgeReport]) -> Table:
    table = Table(title=title)
    table.add_column("From", style="bold")
    table.add_column("To", style="bold")
    table.add_column("Label")
    table.add_column("Weight", justify="right")
    for edge in edges:
        weight = "" if edge.weight is None else f"{edge.weight:g}"
        table.add_row(str(edge.from_id), str(edge.to_id), edge.label or "", weight)
    return table
