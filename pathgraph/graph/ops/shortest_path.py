"""Minimum-weight simple path search.

The search enumerates simple paths depth first, carrying the set of node
ids that are still allowed on the path. Because every simple path is
considered, negative edge weights are handled correctly; the price is
exponential running time, so this is meant for small graphs.

Depth-first state lives on an explicit stack of frames, so path length is
bounded by memory rather than by the interpreter recursion limit.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, FrozenSet, List, Optional, Tuple

from pathgraph.config.schema import SearchConfig
from pathgraph.errors import NodeNotFoundError, SearchLimitError
from pathgraph.graph.models.schema import Node, PathResult

if TYPE_CHECKING:
    from pathgraph.graph.core.manager import Graph

logger = logging.getLogger("pathgraph.graph.ops.shortest_path")

UNREACHABLE = math.inf

# (cost from a node to the target, path after that node)
_SubResult = Tuple[float, List[int]]


@dataclass
class _Frame:
    """Exploration state of one node on the current path."""

    node: Node
    remaining: FrozenSet[int]
    neighbors: List[int]
    index: int = 0
    min_weight: float = UNREACHABLE
    best_path: List[int] = field(default_factory=list)

    @property
    def neighbor(self) -> int:
        return self.neighbors[self.index]

    @property
    def exhausted(self) -> bool:
        return self.index >= len(self.neighbors)


class _Search:
    """One search run against a fixed graph state."""

    def __init__(self, graph: "Graph", target: int, config: SearchConfig) -> None:
        self._graph = graph
        self._target = target
        self._abort_on_blocked = config.abort_on_blocked_edge
        self.visits = 0

    def _frame(self, node_id: int, remaining: FrozenSet[int]) -> _Frame:
        self.visits += 1
        node = self._graph.node(node_id)
        return _Frame(node=node, remaining=remaining, neighbors=node.neighbor_ids())

    def _offer(self, frame: _Frame, sub_result: _SubResult) -> None:
        """Account the current neighbor's result and advance to the next one."""
        neighbor = frame.neighbor
        sub_weight, sub_path = sub_result
        edge = self._graph.edge(*frame.node.edges[neighbor])
        weight = sub_weight + edge.weight
        # Strict comparison: the first minimum in neighbor order wins.
        if weight < frame.min_weight:
            frame.min_weight = weight
            frame.best_path = [neighbor] + sub_path
        frame.index += 1

    def best_from(self, start: int, remaining: FrozenSet[int]) -> _SubResult:
        """Best cost and path (excluding ``start``) from ``start`` to target."""
        stack = [self._frame(start, remaining)]
        returned: Optional[_SubResult] = None

        while stack:
            frame = stack[-1]
            if returned is not None:
                self._offer(frame, returned)
                returned = None

            if frame.exhausted:
                stack.pop()
                returned = (frame.min_weight, frame.best_path)
                continue

            neighbor = frame.neighbor
            if neighbor not in frame.remaining:
                if self._abort_on_blocked:
                    stack.pop()
                    returned = (UNREACHABLE, [])
                else:
                    frame.index += 1
                continue

            if neighbor == self._target:
                self._offer(frame, (0.0, []))
                continue

            stack.append(self._frame(neighbor, frame.remaining - {neighbor}))

        assert returned is not None
        return returned


def shortest_simple_path(
    graph: "Graph",
    source: int,
    target: int,
    config: Optional[SearchConfig] = None,
) -> PathResult:
    """Find the minimum-weight simple path from ``source`` to ``target``.

    Neighbors are explored in ascending id order and ties keep the first
    minimum found. With ``config.abort_on_blocked_edge`` (the default), a
    node whose outgoing edges include one back onto the current path is
    treated as a dead end altogether.

    Args:
        graph: Graph to search. It is not modified.
        source: Start node id.
        target: End node id.
        config: Search options; defaults to ``SearchConfig()``.

    Returns:
        PathResult with the total weight and the node ids from source to
        target inclusive, or ``(inf, [])`` when no simple path exists.

    Raises:
        NodeNotFoundError: If source or target is not in the graph.
        SearchLimitError: If the graph exceeds ``config.max_nodes``.
    """
    if config is None:
        config = SearchConfig.default()

    for node_id in (source, target):
        if not graph.has_node(node_id):
            raise NodeNotFoundError(node_id)

    node_count = graph.node_count()
    if config.max_nodes is not None and node_count > config.max_nodes:
        raise SearchLimitError(
            f"Graph has {node_count} nodes, search is limited to {config.max_nodes}"
        )

    if source == target:
        return PathResult(0.0, [source])

    remaining = frozenset(node_id for node_id in graph.node_ids() if node_id != source)
    search = _Search(graph, target, config)
    weight, path = search.best_from(source, remaining)

    logger.debug(
        "Search %s -> %s visited %d states, weight=%s",
        source,
        target,
        search.visits,
        weight,
    )
    if not path:
        return PathResult(UNREACHABLE, [])
    return PathResult(weight, [source] + path)


__all__ = ["UNREACHABLE", "shortest_simple_path"]
