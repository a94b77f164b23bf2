"""In-memory directed, weighted, attributed graphs with simple-path search."""

from pathgraph.errors import (
    ConfigurationError,
    EdgeNotFoundError,
    GraphError,
    InvalidAttributeError,
    InvalidWeightError,
    NodeNotFoundError,
    SearchLimitError,
)
from pathgraph.graph import Edge, Graph, Node, PathResult, shortest_simple_path

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "Edge",
    "EdgeNotFoundError",
    "Graph",
    "GraphError",
    "InvalidAttributeError",
    "InvalidWeightError",
    "Node",
    "NodeNotFoundError",
    "PathResult",
    "SearchLimitError",
    "shortest_simple_path",
]
