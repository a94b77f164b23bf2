"""Path command: build a graph from edge specs and search it."""

import logging
from typing import List, Optional, Sequence, Tuple

from rich.console import Console

from pathgraph.config import load_search_config
from pathgraph.errors import GraphError
from pathgraph.graph import Graph

from .output import edge_table, print_path

logger = logging.getLogger("pathgraph.cli.path")

EdgeSpec = Tuple[int, int, float]


def parse_edge_spec(spec: str) -> EdgeSpec:
    """Parse ``"U,V"`` or ``"U,V,W"`` into a (source, target, weight) triple.

    Raises:
        ValueError: If the spec is malformed.
    """
    parts = [part.strip() for part in spec.split(",")]
    if len(parts) not in (2, 3):
        raise ValueError(f"Edge spec must be U,V or U,V,W: {spec!r}")
    try:
        source, target = int(parts[0]), int(parts[1])
        weight = float(parts[2]) if len(parts) == 3 else 1.0
    except ValueError as exc:
        raise ValueError(f"Invalid edge spec {spec!r}: {exc}") from exc
    return source, target, weight


def build_graph(specs: Sequence[str]) -> Graph:
    graph = Graph()
    for source, target, weight in (parse_edge_spec(spec) for spec in specs):
        graph.add_edge(source, target, weight)
    return graph


def path_command(args, console: Optional[Console] = None) -> int:
    """Execute path command.

    Args:
        args: Parsed command-line arguments containing:
            - edges: Edge specs (U,V[,W])
            - source / target: Node ids
            - config: Optional search configuration source
            - skip_blocked: Skip blocked edges instead of aborting the level

    Returns:
        int: Exit code (0 for success, non-zero for failure).
    """
    console = console or Console()
    edges: List[str] = getattr(args, "edges", None) or []

    try:
        config = load_search_config(getattr(args, "config", None))
        if getattr(args, "skip_blocked", False):
            config = config.model_copy(update={"abort_on_blocked_edge": False})

        graph = build_graph(edges)
        logger.info("Built %r from %d edge spec(s)", graph, len(edges))

        if getattr(args, "show_edges", False):
            console.print(edge_table(graph, title="Edges"))

        result = graph.shortest_path(args.source, args.target, config)
    except (GraphError, ValueError) as exc:
        logger.error("%s", exc)
        return 1

    print_path(console, args.source, args.target, result)
    return 0 if result.reachable else 2
