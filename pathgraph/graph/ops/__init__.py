"""Algorithms operating on a Graph."""

from .shortest_path import UNREACHABLE, shortest_simple_path

__all__ = [
    "UNREACHABLE",
    "shortest_simple_path",
]
