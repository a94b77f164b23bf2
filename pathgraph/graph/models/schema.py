"""Record types stored in a Graph.

Attribute values form a closed variant over integer, floating-point and
text. Nodes refer to their outgoing edges through ``EdgeKey`` handles into
the graph's edge table rather than holding Edge objects themselves.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, NamedTuple, Optional, Tuple, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
    StrictStr,
    TypeAdapter,
    ValidationError,
)

from pathgraph.errors import InvalidAttributeError, InvalidWeightError

AttributeValue = Union[StrictInt, StrictFloat, StrictStr]
AttributeMap = Dict[str, AttributeValue]

# (source id, target id)
EdgeKey = Tuple[int, int]

_ATTRIBUTE_MAP = TypeAdapter(AttributeMap)
_WEIGHT = TypeAdapter(float)


def validate_attributes(attributes: Optional[Mapping[str, Any]]) -> AttributeMap:
    """Validate an attribute mapping against the attribute value variant.

    Args:
        attributes: Mapping of attribute name to value, or None.

    Returns:
        A fresh dict owned by the caller.

    Raises:
        InvalidAttributeError: If a name is not text or a value is not an
            int, float or str (booleans and None are rejected).
    """
    if not attributes:
        return {}
    try:
        return _ATTRIBUTE_MAP.validate_python(dict(attributes))
    except (ValidationError, TypeError, ValueError) as exc:
        locations = []
        if isinstance(exc, ValidationError):
            locations = list(
                dict.fromkeys(str(err["loc"][0]) for err in exc.errors() if err["loc"])
            )
        raise InvalidAttributeError(
            "Attribute values must be int, float or str"
            + (f" (offending keys: {', '.join(locations)})" if locations else ""),
            value=attributes,
        ) from exc


def validate_weight(weight: Any) -> float:
    """Coerce an edge weight to float.

    Raises:
        InvalidWeightError: If ``weight`` is not a number.
    """
    try:
        return _WEIGHT.validate_python(weight)
    except ValidationError as exc:
        raise InvalidWeightError(
            f"Edge weight must be a number, got {weight!r}", value=weight
        ) from exc


class Node(BaseModel):
    """A vertex with an integer id, attributes and outgoing edge handles.

    Attributes:
        id: Caller-supplied node id.
        attributes: Named attribute values.
        edges: Mapping from neighbor id to the handle of the edge leading
            there. Maintained by the owning Graph.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: StrictInt
    attributes: AttributeMap = Field(default_factory=dict)
    edges: Dict[int, EdgeKey] = Field(default_factory=dict)

    def add_edge(self, target: int, key: EdgeKey) -> None:
        """Register the outgoing edge to ``target``."""
        self.edges[target] = key

    def neighbor_ids(self) -> List[int]:
        """Outgoing neighbor ids in ascending order."""
        return sorted(self.edges)


class Edge(BaseModel):
    """A directed, weighted connection from ``source`` to ``target``."""

    model_config = ConfigDict(validate_assignment=True)

    source: StrictInt
    target: StrictInt
    weight: float = 1.0
    attributes: AttributeMap = Field(default_factory=dict)

    @property
    def key(self) -> EdgeKey:
        return (self.source, self.target)

    @property
    def is_self_loop(self) -> bool:
        return self.source == self.target


class PathResult(NamedTuple):
    """Total weight and node sequence of a shortest simple path.

    ``weight`` is ``inf`` and ``path`` empty when the target is unreachable.
    """

    weight: float
    path: List[int]

    @property
    def reachable(self) -> bool:
        return bool(self.path)
