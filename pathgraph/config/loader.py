"""Load SearchConfig from TOML/JSON sources.

Accepted sources:

* None -> default SearchConfig
* dict -> validated directly
* Path / path-like string -> load .toml/.json from filesystem
* Inline JSON/TOML strings

Settings may sit at the top level or inside a ``[search]`` table.
"""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from pathgraph.errors import ConfigurationError

from .schema import SearchConfig

logger = logging.getLogger("pathgraph.config.loader")

ConfigSource = Union[str, Path, Dict[str, Any], SearchConfig, None]


def _is_file(path: Path) -> bool:
    try:
        return path.is_file()
    except OSError:
        # Inline strings can exceed the platform name limit.
        return False


def _detect_format(text: str) -> str:
    return "json" if text.lstrip().startswith(("{", "[")) else "toml"


def _parse(text: str, fmt: str) -> Any:
    try:
        if fmt == "json":
            return json.loads(text)
        return tomllib.loads(text)
    except (json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ConfigurationError(f"Malformed {fmt.upper()} configuration: {exc}") from exc


def _from_mapping(data: Dict[str, Any]) -> SearchConfig:
    section = data.get("search", data)
    if not isinstance(section, dict):
        raise ConfigurationError("[search] section must be a mapping")
    try:
        return SearchConfig.model_validate(section)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid search configuration: {exc}") from exc


def load_search_config(source: ConfigSource) -> SearchConfig:
    """Load SearchConfig from various configuration sources.

    Args:
        source: One of:
            * None: returns SearchConfig.default()
            * SearchConfig: returned unchanged
            * dict: treated as already-parsed configuration mapping
            * str/Path: either a filesystem path to a .toml/.json file,
              or an inline TOML/JSON string (auto-detected)

    Returns:
        SearchConfig instance.

    Raises:
        ConfigurationError: If the source cannot be parsed or validated.
    """
    if source is None:
        logger.debug("No config source provided; using default SearchConfig")
        return SearchConfig.default()

    if isinstance(source, SearchConfig):
        return source

    if isinstance(source, dict):
        logger.debug("Loading SearchConfig from provided dict")
        return _from_mapping(source)

    if isinstance(source, (str, Path)):
        path = Path(source)
        text: Optional[str] = None

        if isinstance(source, Path) or _is_file(path):
            try:
                text = path.read_text(encoding="utf-8")
            except OSError as exc:
                raise ConfigurationError(f"Cannot read config file {path}: {exc}") from exc
            suffix = path.suffix.lower()
            if suffix in {".toml", ".tml"}:
                fmt = "toml"
            elif suffix == ".json":
                fmt = "json"
            else:
                fmt = _detect_format(text)
            logger.info("Loading configuration from file: %s (fmt=%s)", path, fmt)
        else:
            text = str(source)
            fmt = _detect_format(text)
            logger.info("Loading configuration from inline %s string", fmt)

        data = _parse(text, fmt)
        if not isinstance(data, dict):
            raise ConfigurationError("Top-level configuration must be a mapping/dict")
        return _from_mapping(data)

    raise TypeError(f"Unsupported config source type: {type(source)!r}")


__all__ = ["load_search_config"]
