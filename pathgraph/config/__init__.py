"""Configuration schema and loading for pathgraph."""

from .loader import load_search_config
from .schema import SearchConfig

__all__ = [
    "SearchConfig",
    "load_search_config",
]
