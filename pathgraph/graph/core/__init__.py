"""Core graph storage APIs."""

from .backend import GraphBackend, NetworkXBackend
from .manager import Graph

__all__ = [
    "Graph",
    "GraphBackend",
    "NetworkXBackend",
]
