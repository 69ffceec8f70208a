"""Deterministic, case-insensitive ordering of flattened fields."""

from typing import Any

from defluff.models import FlatField


def order_fields(flat: dict[str, Any]) -> list[FlatField]:
    """Sort fields by lowercased key path.

    sorted() is stable, so keys that only differ in case keep the order
    they were flattened in.
    """
    keys = sorted(flat, key=str.lower)
    return [FlatField(key=k, value=flat[k]) for k in keys]
