"""Output sink with a latched closed-pipe state."""

import errno
import logging
import sys
from typing import TextIO

logger = logging.getLogger(__name__)


class SinkError(Exception):
    """Base class for output failures."""


class SinkClosedError(SinkError):
    """Downstream consumer stopped reading. Not a user-visible error."""


class SinkWriteError(SinkError):
    """Any other write failure. Fatal."""


def is_broken_pipe(exc: BaseException) -> bool:
    """True if exc means the reader on the other end of the pipe went away."""
    if isinstance(exc, BrokenPipeError):
        return True
    return isinstance(exc, OSError) and exc.errno in (errno.EPIPE, errno.ESHUTDOWN)


def open_stdout() -> TextIO:
    """stdout as UTF-8 text; unencodable characters (lone surrogates) are replaced, not fatal."""
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
    return sys.stdout


class OutputSink:
    """Writes rendered blocks to a text stream and flushes after each one.

    Once a broken pipe has been seen every later write raises
    SinkClosedError without touching the stream again.
    """

    def __init__(self, stream: TextIO):
        self._stream = stream
        self._closed = False
        self.blocks_written = 0

    @property
    def closed(self) -> bool:
        return self._closed

    def write(self, text: str) -> None:
        if self._closed:
            raise SinkClosedError("output already closed")
        try:
            self._stream.write(text)
            self._stream.flush()
        except UnicodeError as exc:
            raise SinkWriteError(str(exc)) from exc
        except OSError as exc:
            if is_broken_pipe(exc):
                self._closed = True
                logger.debug("Downstream closed the pipe after %d block(s)", self.blocks_written)
                raise SinkClosedError(str(exc)) from exc
            raise SinkWriteError(str(exc)) from exc
        self.blocks_written += 1
