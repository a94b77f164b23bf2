"""Public graph API surface."""

from pathgraph.graph.core import Graph, GraphBackend, NetworkXBackend
from pathgraph.graph.models import (
    AttributeMap,
    AttributeValue,
    Edge,
    EdgeKey,
    Node,
    PathResult,
    validate_attributes,
)
from pathgraph.graph.ops import UNREACHABLE, shortest_simple_path

__all__ = [
    "AttributeMap",
    "AttributeValue",
    "Edge",
    "EdgeKey",
    "Graph",
    "GraphBackend",
    "NetworkXBackend",
    "Node",
    "PathResult",
    "UNREACHABLE",
    "shortest_simple_path",
    "validate_attributes",
]
