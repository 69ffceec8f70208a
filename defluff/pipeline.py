"""Per-line transform: classify -> extract -> flatten -> order -> render -> write."""

import logging
from typing import Iterable

from defluff.classifier import classify_line
from defluff.extractor import extract_special_fields
from defluff.flattener import flatten, flatten_with_arrays
from defluff.models import LineKind, RenderMode
from defluff.ordering import order_fields
from defluff.renderer import render_plain, render_prefixed, render_record
from defluff.sink import OutputSink, SinkClosedError, SinkWriteError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def transform_line(line: str, mode: RenderMode) -> str:
    """Return the rendered text block for one raw line."""
    classified = classify_line(line)

    if classified.kind is LineKind.RECORD:
        data = dict(classified.payload)
        special = extract_special_fields(data)
        fields = order_fields(flatten(data))
        return render_record(special, fields, mode)

    if classified.kind is LineKind.PREFIXED:
        fields = order_fields(flatten_with_arrays(classified.payload, mode))
        return render_prefixed(classified.prefix, fields, mode)

    return render_plain(line, mode)


class TransformPipeline:
    """Drives lines through transform_line() and into the output sink."""

    def __init__(self, sink: OutputSink, mode: RenderMode = RenderMode.EXPANDED,
                 emit_original: bool = False):
        self.sink = sink
        self.mode = mode
        self.emit_original = emit_original
        self.lines_processed = 0

    def process(self, line: str) -> None:
        """Echo (optionally) and render a single line. Raises SinkError."""
        if self.emit_original:
            self.sink.write(line + "\n")
        self.sink.write(transform_line(line, self.mode))
        self.lines_processed += 1

    def run(self, lines: Iterable[str]) -> int:
        """Process every line in order and return the process exit status.

        A closed sink stops processing silently with status 0. Any other
        write failure, or a failure reading input, returns status 1.
        """
        try:
            for line in lines:
                self.process(line)
        except SinkClosedError:
            logger.debug("Output closed, stopping after %d line(s)", self.lines_processed)
            return EXIT_OK
        except SinkWriteError as e:
            logger.error("Error writing output: %s", e)
            return EXIT_FAILURE
        except OSError as e:
            logger.error("Error reading input: %s", e)
            return EXIT_FAILURE

        logger.debug("Processed %d line(s)", self.lines_processed)
        return EXIT_OK
