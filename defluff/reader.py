"""Generator-based line reading from stdin or files."""

import io
import sys
from typing import Generator, Iterable, TextIO

STDIN_PATH = "-"


def strip_newline(line: str) -> str:
    """Drop a trailing '\\n' or '\\r\\n'."""
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def read_stream(stream: TextIO) -> Generator[str, None, None]:
    """Yield each line of an open text stream without its line ending."""
    for line in stream:
        yield strip_newline(line)


def open_stdin() -> TextIO:
    """stdin as UTF-8 text; undecodable bytes are replaced, not fatal."""
    return io.TextIOWrapper(sys.stdin.buffer, encoding="utf-8", errors="replace")


def read_lines(path: str) -> Generator[str, None, None]:
    """Yield lines from a single file, or from stdin when path is '-'."""
    if path == STDIN_PATH:
        yield from read_stream(open_stdin())
        return
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        yield from read_stream(f)


def read_multiple(paths: Iterable[str]) -> Generator[str, None, None]:
    """Yield lines from several inputs, sequentially, in the order given."""
    for path in paths:
        yield from read_lines(path)
