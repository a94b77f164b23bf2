"""Demo command: build the sample graph and run the core queries on it."""

import logging
from typing import Optional

from rich.console import Console

from pathgraph.graph import Graph

from .output import edge_table, format_path, print_path

logger = logging.getLogger("pathgraph.cli.demo")


def build_demo_graph() -> Graph:
    """Four nodes, five edges; node 0 carries x/y coordinates."""
    graph = Graph()
    graph.add_node(0, {"x": 100, "y": 200})
    graph.add_node(1)
    graph.add_node(2)
    graph.add_edge(0, 1, 0.5)
    graph.add_edge(1, 2, 1.0)
    graph.add_edge(0, 2, 2)
    graph.add_edge(0, 3, 0.3)
    graph.add_edge(1, 3, 0.3)
    return graph


def demo_command(args, console: Optional[Console] = None) -> int:
    """Execute demo command.

    Returns:
        int: Exit code.
    """
    console = console or Console()
    graph = build_demo_graph()
    logger.info("Demo graph built: %r", graph)

    if getattr(args, "show_edges", False):
        console.print(edge_table(graph, title="Edges"))

    console.print(f"Has edge(0, 1): {str(graph.has_edge(0, 1)).lower()}", highlight=False)
    neighbors = sorted(graph.get_neighbors(0))
    console.print(f"The neighbors of node 0: {format_path(neighbors)}", highlight=False)
    print_path(console, 0, 2, graph.shortest_path(0, 2))
    return 0
