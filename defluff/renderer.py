"""Render classified lines as compact (single-line) or expanded text blocks.

Every function returns the complete block for one input line, newline
terminated, so the sink can write it in one go.
"""

import json

from defluff.flattener import format_value
from defluff.models import FlatField, RenderMode, SpecialFields


def quote(value: str) -> str:
    """Double-quote a value, escaping quotes, backslashes and control chars."""
    return json.dumps(value, ensure_ascii=False)


def format_header(special: SpecialFields) -> str:
    """'<ts> <level> <logger>: "<msg>"' with empty segments left out."""
    header = special.header()
    if not special.message:
        return header
    quoted = f'"{special.message}"'
    if header:
        return f"{header}: {quoted}"
    return quoted


def _expanded_lines(fields: list[FlatField]) -> list[str]:
    return [f"\t{f.key}: {format_value(f.value)}" for f in fields]


def render_record(special: SpecialFields, fields: list[FlatField], mode: RenderMode) -> str:
    """Render a bare JSON record whose special fields were already extracted."""
    header = format_header(special)
    if mode is RenderMode.COMPACT:
        pairs = [f"{f.key}={quote(format_value(f.value))}" for f in fields]
        return " ".join(p for p in [header, *pairs] if p) + "\n"

    lines = [header, *_expanded_lines(fields)]
    return "\n".join(lines) + "\n\n"


def render_prefixed(prefix: str, fields: list[FlatField], mode: RenderMode) -> str:
    """Render a text prefix followed by the fields of its JSON payload."""
    head = prefix.strip()
    if mode is RenderMode.COMPACT:
        pairs = "".join(f' {f.key}="{format_value(f.value)}"' for f in fields)
        return head + pairs + "\n"

    return "\n".join([head, *_expanded_lines(fields)]) + "\n"


def render_plain(line: str, mode: RenderMode) -> str:
    """Emit a line that carries no JSON payload unchanged."""
    if mode is RenderMode.EXPANDED:
        return line + "\n\n"
    return line + "\n"
