"""Building the render data value from files, overrides and the environment."""

from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

_INT_PATTERN = re.compile(r"^-?\d+$")
_FLOAT_PATTERN = re.compile(r"^-?\d+(?:\.\d+)?$")

_YAML_SUFFIXES = {".yaml", ".yml"}


class DataError(ValueError):
    """Raised when render data cannot be loaded or merged."""


def coerce_value(value: str) -> bool | int | float | str:
    """Coerce a string value to its appropriate type.

    Args:
        value: String value to coerce

    Returns:
        Coerced value (bool, int, float, or str)
    """
    value_lower = value.lower()

    if value_lower in ("true", "false"):
        return value_lower == "true"

    if _INT_PATTERN.match(value):
        try:
            return int(value)
        except (ValueError, OverflowError):
            return value

    if _FLOAT_PATTERN.match(value):
        try:
            return float(value)
        except (ValueError, OverflowError):
            return value

    return value


def load_data_file(path: Path) -> dict[str, Any]:
    """Load a JSON or YAML mapping used as render data.

    YAML is picked by the ``.yaml``/``.yml`` suffix, JSON otherwise.

    Raises:
        DataError: File is unreadable, malformed, or not a mapping
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DataError(f"Cannot read data file {path}: {exc}") from exc

    try:
        if path.suffix.lower() in _YAML_SUFFIXES:
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise DataError(f"Invalid data file {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise DataError(f"Data file {path} must contain a mapping at the top level")

    logger.debug(f"Loaded {len(data)} top-level key(s) from {path}")
    return data


def set_value(data: dict[str, Any], key: str, value: Any) -> None:
    """Set *value* at a dotted *key*, creating nested mappings as needed."""
    parts = key.split(".")
    if not all(parts):
        raise DataError(f"Invalid key: {key!r}")

    node = data
    for part in parts[:-1]:
        child = node.setdefault(part, {})
        if not isinstance(child, dict):
            raise DataError(f"Cannot set {key!r}: {part!r} is not a mapping")
        node = child
    node[parts[-1]] = value


def build_context(
    data_file: Path | None = None,
    overrides: list[tuple[str, str]] | None = None,
    *,
    include_env: bool = False,
) -> dict[str, Any]:
    """Build the render data value.

    Sources are applied in order: data file, ``env`` (the process
    environment, if requested), then ``KEY=VALUE`` overrides with coerced
    values.

    Returns:
        Context dictionary for template rendering
    """
    context: dict[str, Any] = load_data_file(data_file) if data_file else {}

    if include_env:
        logger.debug("Adding process environment under 'env'")
        context["env"] = dict(os.environ)

    for key, raw in overrides or []:
        set_value(context, key, coerce_value(raw))

    return context
