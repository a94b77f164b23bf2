"""Configuration schema for the shortest simple path search."""

from typing import Optional

from pydantic import BaseModel, Field


class SearchConfig(BaseModel):
    """Tuning knobs for ``shortest_simple_path``.

    Attributes:
        abort_on_blocked_edge: When an outgoing edge leads to a node already
            on the current path, abandon the whole level (True) or skip only
            that edge (False).
        max_nodes: Refuse to search graphs with more nodes than this
            (None = unlimited). The search is exponential in the node count.
    """

    abort_on_blocked_edge: bool = True
    max_nodes: Optional[int] = Field(default=None, ge=1)

    model_config = {"extra": "forbid"}

    @classmethod
    def default(cls) -> "SearchConfig":
        return cls()
