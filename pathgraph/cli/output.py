"""Console rendering shared by the CLI commands."""

from typing import Iterable, Optional

from rich.console import Console
from rich.table import Table

from pathgraph.graph import Graph, PathResult


def format_path(path: Iterable[int]) -> str:
    return " ".join(str(node_id) for node_id in path)


def print_path(
    console: Console,
    source: int,
    target: int,
    result: PathResult,
) -> None:
    """Print distance and node sequence for a search result."""
    console.print(
        f"The shortest distance from node {source} to node {target}: {result.weight}",
        highlight=False,
    )
    console.print(
        f"The shortest path from node {source} to node {target}: {format_path(result.path)}",
        highlight=False,
    )


def edge_table(graph: Graph, title: Optional[str] = None) -> Table:
    """Tabulate the edges of ``graph`` sorted by (source, target)."""
    table = Table(title=title)
    table.add_column("source", justify="right")
    table.add_column("target", justify="right")
    table.add_column("weight", justify="right")
    for edge in sorted(graph.edges(), key=lambda e: e.key):
        table.add_row(str(edge.source), str(edge.target), f"{edge.weight:g}")
    return table
