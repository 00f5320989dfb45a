"""Helpers for loading export configuration from TOML/JSON sources.

This module provides a single entry point `load_export_config` that
accepts various configuration sources:

* None -> default ExportConfig
* dict -> ExportConfig.from_dict
* Path / path-like string -> load .toml/.json from filesystem
* Inline JSON/TOML strings
"""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from sassexport.config.schema import ExportConfig
from sassexport.errors import ConfigurationError

logger = logging.getLogger("sassexport.config.loader")

ConfigSource = Union[str, Path, Dict[str, Any], None]


def _detect_format(text: str) -> str:
    # Configuration is always a mapping; a leading "[" is a TOML table header.
    return "json" if text.lstrip().startswith("{") else "toml"


def _validate(data: Dict[str, Any], origin: Optional[str]) -> ExportConfig:
    try:
        return ExportConfig.from_dict(data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}", path=origin) from exc


def load_export_config(source: ConfigSource) -> ExportConfig:
    """Load ExportConfig from various configuration sources.

    Args:
        source: One of:
            * None: returns ExportConfig.default()
            * dict: treated as already-parsed configuration mapping
            * str/Path: either a filesystem path to a .toml/.json file,
              or an inline TOML/JSON string (auto-detected)

    Returns:
        ExportConfig instance.

    Raises:
        ConfigurationError: If the source cannot be decoded or validated.
        TypeError: If the source type is unsupported.
    """
    if source is None:
        logger.debug("No config source provided; using default ExportConfig")
        return ExportConfig.default()

    if isinstance(source, dict):
        logger.debug("Loading ExportConfig from provided dict")
        return _validate(source, None)

    if isinstance(source, (str, Path)):
        path = Path(source)
        origin: Optional[str] = None

        if isinstance(source, Path) or (len(str(source)) < 4096 and path.is_file()):
            origin = str(path)
            try:
                text = path.read_text(encoding="utf-8")
            except OSError as exc:
                raise ConfigurationError(f"Cannot read config file: {exc}", path=origin) from exc
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

        try:
            data = json.loads(text) if fmt == "json" else tomllib.loads(text)
        except (json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
            raise ConfigurationError(f"Malformed {fmt} configuration: {exc}", path=origin) from exc

        if not isinstance(data, dict):
            raise ConfigurationError("Top-level configuration must be a mapping/dict", path=origin)

        return _validate(data, origin)

    raise TypeError(f"Unsupported config source type: {type(source)!r}")


__all__ = ["load_export_config"]
