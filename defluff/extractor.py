"""Pull the well-known top-level fields out of a JSON log record."""

from typing import Any

from defluff.flattener import format_value
from defluff.models import SpecialFields

TIMESTAMP_KEY = "ts"
LEVEL_KEY = "level"
LOGGER_KEY = "logger"
MESSAGE_KEY = "msg"


def extract_field(data: dict[str, Any], key: str) -> str:
    """Remove key from data and return its trimmed string form, or ""."""
    if key not in data:
        return ""
    return format_value(data.pop(key)).strip()


def extract_special_fields(data: dict[str, Any]) -> SpecialFields:
    """Remove ts/level/logger/msg from data (in place) and return them.

    Calling this again on the same mapping returns empty fields.
    """
    return SpecialFields(
        timestamp=extract_field(data, TIMESTAMP_KEY),
        level=extract_field(data, LEVEL_KEY),
        logger=extract_field(data, LOGGER_KEY),
        message=extract_field(data, MESSAGE_KEY),
    )
