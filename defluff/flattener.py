"""Flatten nested JSON mappings into dot-path keyed leaves.

Two variants:
  * flatten()             -- lists are opaque leaves (bare JSON records)
  * flatten_with_arrays() -- lists collapsed to "[a, b]" in compact mode,
                             exploded to key[i] paths in expanded mode
"""

import json
import logging
from typing import Any

from defluff.models import RenderMode

logger = logging.getLogger(__name__)


def format_value(value: Any) -> str:
    """Render a leaf the way it is printed to the user.

    Booleans are lowercase JSON literals, None is "null", lists are
    bracketed and comma-joined, nested mappings fall back to JSON text.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, list):
        return "[" + ", ".join(format_value(item) for item in value) + "]"
    if isinstance(value, dict):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def _join(prefix: str, key: str) -> str:
    return f"{prefix}.{key}" if prefix else key


def _put(flat: dict[str, Any], key: str, value: Any) -> None:
    if key in flat:
        # e.g. {"a": {"b": 1}, "a.b": 2} -- later value wins
        logger.warning("Duplicate flattened key %r, keeping the later value", key)
    flat[key] = value


def flatten(data: dict[str, Any], prefix: str = "") -> dict[str, Any]:
    """Flatten nested mappings into {"a.b.c": leaf}. Lists are kept whole."""
    flat: dict[str, Any] = {}
    for k, v in data.items():
        key = _join(prefix, k)
        if isinstance(v, dict):
            for nk, nv in flatten(v, key).items():
                _put(flat, nk, nv)
        else:
            _put(flat, key, v)
    return flat


def _explode_list(items: list, key: str, flat: dict[str, Any]) -> None:
    for i, item in enumerate(items):
        item_key = f"{key}[{i}]"
        if isinstance(item, dict):
            for nk, nv in flatten_with_arrays(item, RenderMode.EXPANDED, item_key).items():
                _put(flat, nk, nv)
        elif isinstance(item, list):
            _explode_list(item, item_key, flat)
        else:
            _put(flat, item_key, item)


def flatten_with_arrays(
    data: dict[str, Any], mode: RenderMode, prefix: str = ""
) -> dict[str, Any]:
    """Flatten nested mappings, handling lists according to the render mode."""
    flat: dict[str, Any] = {}
    for k, v in data.items():
        key = _join(prefix, k)
        if isinstance(v, dict):
            for nk, nv in flatten_with_arrays(v, mode, key).items():
                _put(flat, nk, nv)
        elif isinstance(v, list):
            if mode is RenderMode.COMPACT:
                _put(flat, key, format_value(v))
            else:
                _explode_list(v, key, flat)
        else:
            _put(flat, key, v)
    return flat
