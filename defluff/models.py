"""Per-line data model: classified lines, special fields, flat fields."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class RenderMode(Enum):
    COMPACT = "compact"
    EXPANDED = "expanded"


class LineKind(Enum):
    RECORD = "record"      # whole line is a JSON object
    PREFIXED = "prefixed"  # text prefix followed by a JSON object
    PLAIN = "plain"        # anything else, emitted verbatim


@dataclass(frozen=True)
class ClassifiedLine:
    kind: LineKind
    raw: str
    prefix: str = ""
    payload: dict[str, Any] | None = None


@dataclass(frozen=True)
class SpecialFields:
    timestamp: str = ""
    level: str = ""
    logger: str = ""
    message: str = ""

    def header(self) -> str:
        """Non-empty timestamp, level and logger joined by single spaces."""
        return " ".join(p for p in (self.timestamp, self.level, self.logger) if p)


@dataclass(frozen=True)
class FlatField:
    key: str
    value: Any
