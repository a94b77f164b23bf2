"""Exception hierarchy for pathgraph.

Unreachable targets are not errors: the search reports them as a result
with infinite cost. Everything here signals a caller mistake.
"""

from typing import Any, Tuple


class GraphError(Exception):
    """Base class for all graph errors."""
    pass


class NodeNotFoundError(GraphError, KeyError):
    """Raised when an operation names a node id that was never added."""

    def __init__(self, node_id: int) -> None:
        super().__init__(node_id)
        self.node_id = node_id

    def __str__(self) -> str:
        return f"Node {self.node_id!r} not found"


class EdgeNotFoundError(GraphError, KeyError):
    """Raised when no edge is stored for an ordered node pair."""

    def __init__(self, source: int, target: int) -> None:
        super().__init__((source, target))
        self.source = source
        self.target = target

    @property
    def key(self) -> Tuple[int, int]:
        return (self.source, self.target)

    def __str__(self) -> str:
        return f"Edge ({self.source!r}, {self.target!r}) not found"


class InvalidAttributeError(GraphError, ValueError):
    """Attribute map holds a value outside {int, float, str}."""

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


class InvalidWeightError(InvalidAttributeError):
    """Edge weight is not a floating-point number."""
    pass


class SearchLimitError(GraphError):
    """Graph is larger than the configured search bound."""
    pass


class ConfigurationError(GraphError, ValueError):
    """Search configuration could not be read or validated."""
    pass
