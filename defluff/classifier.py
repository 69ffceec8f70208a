"""Line classification: bare JSON record, text-prefixed record, or plain.

Detection order:
  1. Trimmed line starts with '{' and parses as a JSON object -> RECORD
  2. Text up to the first '{', remainder parses as an object  -> PREFIXED
  3. Anything else                                            -> PLAIN
"""

import json
from typing import Any

from defluff.models import ClassifiedLine, LineKind


def _reject_constant(name: str):
    raise ValueError(f"non-standard JSON constant {name}")


def parse_mapping(text: str) -> dict[str, Any] | None:
    """Parse text as a JSON object. Returns None for anything else.

    NaN, Infinity and -Infinity are not JSON and are rejected.
    """
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return None
    if not isinstance(data, dict):
        return None
    return data


def classify_line(line: str) -> ClassifiedLine:
    """Decide how a raw line (without its newline) should be rendered."""
    if line.strip().startswith("{"):
        data = parse_mapping(line)
        if data is not None:
            return ClassifiedLine(kind=LineKind.RECORD, raw=line, payload=data)

    prefix, brace, rest = line.partition("{")
    if not brace:
        return ClassifiedLine(kind=LineKind.PLAIN, raw=line)

    data = parse_mapping(brace + rest)
    if data is None:
        return ClassifiedLine(kind=LineKind.PLAIN, raw=line)

    return ClassifiedLine(kind=LineKind.PREFIXED, raw=line, prefix=prefix, payload=data)
