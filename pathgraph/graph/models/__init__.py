"""Graph record models."""

from .schema import (
    AttributeMap,
    AttributeValue,
    Edge,
    EdgeKey,
    Node,
    PathResult,
    validate_attributes,
    validate_weight,
)

__all__ = [
    "AttributeMap",
    "AttributeValue",
    "Edge",
    "EdgeKey",
    "Node",
    "PathResult",
    "validate_attributes",
    "validate_weight",
]
