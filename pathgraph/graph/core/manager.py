"""Graph container.

The Graph owns every Node and Edge record. Records live in the backend
(a NetworkX DiGraph by default) under the ``record`` attribute; a Node's
``edges`` mapping holds ``(source, target)`` handles into that edge table,
never the Edge objects themselves.
"""

import logging
import threading
from typing import Any, Iterator, List, Mapping, Optional, Set, Union

from pathgraph.config.schema import SearchConfig
from pathgraph.errors import EdgeNotFoundError, NodeNotFoundError

from .backend import GraphBackend, NetworkXBackend
from ..models.schema import (
    Edge,
    Node,
    PathResult,
    validate_attributes,
    validate_weight,
)
from ..ops.shortest_path import shortest_simple_path

logger = logging.getLogger("pathgraph.graph.core.manager")

RECORD = "record"


class Graph:
    """Directed, weighted, attributed graph with at most one edge per pair.

    Re-adding a node or an edge overwrites the previous state ("last write
    wins"); there is no removal. Mutations are serialized by an internal
    lock, and searches hold it for their whole run so they observe one
    consistent graph state.
    """

    def __init__(
        self,
        backend: Optional[GraphBackend] = None,
        config: Optional[SearchConfig] = None,
    ) -> None:
        """Initialize an empty graph.

        Args:
            backend: Optional storage backend. Defaults to NetworkXBackend.
            config: Default options for ``shortest_path``.
        """
        self._backend: GraphBackend = backend or NetworkXBackend()
        self.config = config if config is not None else SearchConfig.default()
        self._lock = threading.RLock()

    @property
    def backend(self) -> GraphBackend:
        """Return the underlying storage backend."""
        return self._backend

    @property
    def native_graph(self) -> Any:
        """Native graph object (a ``networkx.DiGraph`` by default).

        Node and edge records are reachable through the ``record`` attribute.
        Mutating it directly bypasses the adjacency bookkeeping.
        """
        return self._backend.native_graph

    # -----------------
    # NODE OPERATIONS
    # -----------------

    def add_node(
        self,
        node: Union[int, Node],
        attributes: Optional[Mapping[str, Any]] = None,
    ) -> Node:
        """Insert a node, replacing any node with the same id.

        Attributes are replaced, not merged. Outgoing edges already stored
        for the id stay attached to the replacement node.

        Args:
            node: Node id, or a prebuilt Node. A deep copy is stored, so the
                caller's instance is never modified.
            attributes: Attribute map for a node given by id.

        Returns:
            The stored Node record.

        Raises:
            InvalidAttributeError: If an attribute value is not int, float
                or str.
        """
        if isinstance(node, Node):
            record = node.model_copy(deep=True)
            if attributes is not None:
                record.attributes = validate_attributes(attributes)
        else:
            record = Node(id=node, attributes=validate_attributes(attributes))

        with self._lock:
            existing = self._node_record(record.id)
            if existing is not None:
                logger.debug("Replacing node %s", record.id)
                record.edges = dict(existing.edges)
            else:
                record.edges = {}
            self._backend.add_node(record.id, **{RECORD: record})
        return record

    def has_node(self, node_id: int) -> bool:
        """Check whether ``node_id`` names a stored node."""
        return self._backend.has_node(node_id)

    def node(self, node_id: int) -> Node:
        """Return the Node record for ``node_id``.

        Raises:
            NodeNotFoundError: If the node was never added.
        """
        record = self._node_record(node_id)
        if record is None:
            raise NodeNotFoundError(node_id)
        return record

    def node_count(self) -> int:
        return self._backend.node_count()

    def node_ids(self) -> List[int]:
        """All node ids in insertion order."""
        return list(self._backend.nodes())

    def nodes(self) -> Iterator[Node]:
        """Iterate over Node records in insertion order."""
        for _, data in self._backend.nodes(data=True):
            yield data[RECORD]

    def _node_record(self, node_id: int) -> Optional[Node]:
        data = self._backend.get_node_data(node_id)
        if data is None:
            return None
        return data.get(RECORD)

    # -----------------
    # EDGE OPERATIONS
    # -----------------

    def add_edge(
        self,
        source: int,
        target: int,
        weight: float = 1.0,
        attributes: Optional[Mapping[str, Any]] = None,
    ) -> Edge:
        """Add the directed edge ``source -> target`` or update its weight.

        Missing endpoints are created with empty attributes. If the edge
        already exists its weight is overwritten in place; its attributes
        are replaced only when ``attributes`` is given. Self loops are
        stored like any other edge.

        Returns:
            The stored Edge record.

        Raises:
            InvalidWeightError: If ``weight`` is not a number.
            InvalidAttributeError: If an attribute value is not int, float
                or str.
        """
        weight = validate_weight(weight)
        validated = validate_attributes(attributes) if attributes is not None else None

        with self._lock:
            edge = self._edge_record(source, target)
            if edge is not None:
                edge.weight = weight
                if validated is not None:
                    edge.attributes = validated
                logger.debug("Updated edge (%s, %s) weight=%s", source, target, weight)
                return edge

            edge = Edge(
                source=source,
                target=target,
                weight=weight,
                attributes=validated or {},
            )
            for node_id in (source, target):
                if not self._backend.has_node(node_id):
                    self.add_node(node_id)

            self._backend.add_edge(source, target, **{RECORD: edge})
            self.node(source).add_edge(target, edge.key)
            logger.debug("Added edge (%s, %s) weight=%s", source, target, weight)
        return edge

    def has_edge(self, source: int, target: int) -> bool:
        """Check whether the edge ``source -> target`` exists."""
        return self._backend.has_edge(source, target)

    def edge(self, source: int, target: int) -> Edge:
        """Return the Edge record for ``source -> target``.

        Raises:
            EdgeNotFoundError: If no such edge is stored.
        """
        edge = self._edge_record(source, target)
        if edge is None:
            raise EdgeNotFoundError(source, target)
        return edge

    def edge_count(self) -> int:
        """Number of stored directed edges."""
        return self._backend.edge_count()

    def edges(self) -> Iterator[Edge]:
        """Iterate over Edge records."""
        for _, _, data in self._backend.edges(data=True):
            yield data[RECORD]

    def _edge_record(self, source: int, target: int) -> Optional[Edge]:
        data = self._backend.get_edge_data(source, target)
        if data is None:
            return None
        return data.get(RECORD)

    # -----------------
    # QUERIES
    # -----------------

    def get_neighbors(self, node_id: int) -> Set[int]:
        """Ids reachable over one outgoing edge, excluding ``node_id`` itself.

        Raises:
            NodeNotFoundError: If the node was never added.
        """
        node = self.node(node_id)
        return {target for target in node.edges if target != node_id}

    def shortest_path(
        self,
        source: int,
        target: int,
        config: Optional[SearchConfig] = None,
    ) -> PathResult:
        """Minimum-weight simple path from ``source`` to ``target``.

        See ``pathgraph.graph.ops.shortest_simple_path``.
        """
        with self._lock:
            return shortest_simple_path(
                self, source, target, config if config is not None else self.config
            )

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()})"
