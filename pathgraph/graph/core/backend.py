"""Graph storage backend.

Wraps NetworkX so the arena holding node and edge records can be swapped
without touching the Graph API.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, Optional

import networkx as nx

logger = logging.getLogger("pathgraph.graph.core.backend")


class GraphBackend(ABC):
    """Abstract storage protocol for a directed graph with one edge per pair."""

    @property
    @abstractmethod
    def native_graph(self) -> Any:
        """Get native graph object for advanced operations."""
        pass

    @abstractmethod
    def add_node(self, node_id: int, **attributes: Any) -> None:
        """Add node, replacing its attributes if it already exists."""
        pass

    @abstractmethod
    def add_edge(self, source: int, target: int, **attributes: Any) -> None:
        """Add edge, replacing its attributes if it already exists."""
        pass

    @abstractmethod
    def has_node(self, node_id: int) -> bool:
        """Check if node exists."""
        pass

    @abstractmethod
    def has_edge(self, source: int, target: int) -> bool:
        """Check if edge exists."""
        pass

    @abstractmethod
    def get_node_data(self, node_id: int) -> Optional[Dict[str, Any]]:
        """Get node attributes."""
        pass

    @abstractmethod
    def get_edge_data(self, source: int, target: int) -> Optional[Dict[str, Any]]:
        """Get edge attributes."""
        pass

    @abstractmethod
    def nodes(self, data: bool = False) -> Iterable:
        """Iterate over nodes."""
        pass

    @abstractmethod
    def edges(self, data: bool = False) -> Iterable:
        """Iterate over edges."""
        pass

    @abstractmethod
    def node_count(self) -> int:
        """Get number of nodes."""
        pass

    @abstractmethod
    def edge_count(self) -> int:
        """Get number of edges."""
        pass


class NetworkXBackend(GraphBackend):
    """NetworkX-based in-memory backend.

    Uses a DiGraph: adding an edge for an existing ordered pair updates that
    edge instead of creating a parallel one.
    """

    def __init__(self) -> None:
        self._graph = nx.DiGraph()
        logger.debug("NetworkXBackend initialized")

    @property
    def native_graph(self) -> nx.DiGraph:
        return self._graph

    def add_node(self, node_id: int, **attributes: Any) -> None:
        self._graph.add_node(node_id, **attributes)

    def add_edge(self, source: int, target: int, **attributes: Any) -> None:
        self._graph.add_edge(source, target, **attributes)

    def has_node(self, node_id: int) -> bool:
        return self._graph.has_node(node_id)

    def has_edge(self, source: int, target: int) -> bool:
        return self._graph.has_edge(source, target)

    def get_node_data(self, node_id: int) -> Optional[Dict[str, Any]]:
        return self._graph.nodes.get(node_id)

    def get_edge_data(self, source: int, target: int) -> Optional[Dict[str, Any]]:
        return self._graph.get_edge_data(source, target)

    def nodes(self, data: bool = False) -> Iterable:
        return self._graph.nodes(data=data)

    def edges(self, data: bool = False) -> Iterable:
        return self._graph.edges(data=data)

    def node_count(self) -> int:
        return self._graph.number_of_nodes()

    def edge_count(self) -> int:
        return self._graph.number_of_edges()
