#!/usr/bin/env python3
"""defluff: make JSON log lines readable.

Reads log lines from stdin (or files), flattens embedded JSON objects and
prints their fields one per line, or all on one line with -s.
"""

import logging
import os
import sys
from argparse import ArgumentParser

from defluff.config import load_config, load_yaml_config
from defluff.pipeline import TransformPipeline
from defluff.reader import STDIN_PATH, read_multiple
from defluff.sink import OutputSink, open_stdout

logger = logging.getLogger(__name__)


def build_parser() -> ArgumentParser:
    """Build the CLI argument parser."""
    parser = ArgumentParser(
        prog="defluff",
        description="Flatten and pretty-print JSON log lines.",
    )
    parser.add_argument(
        "files",
        nargs="*",
        default=[STDIN_PATH],
        help="Input file(s); '-' or none reads standard input",
    )
    parser.add_argument(
        "-o", "--original",
        action="store_true",
        default=None,
        help="Output the original, unfiltered input line before each record",
    )
    parser.add_argument(
        "-s", "--singleline",
        action="store_true",
        default=None,
        help="Output key-value pairs on a single line",
    )
    parser.add_argument(
        "-c", "--config",
        default=os.environ.get("DEFLUFF_CONFIG"),
        help="Path to YAML config file (default: $DEFLUFF_CONFIG)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=None,
        help="Log debug diagnostics to stderr",
    )
    return parser


def _silence_stdout():
    """Point stdout at /dev/null so interpreter shutdown does not hit EPIPE again."""
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = load_config(args, load_yaml_config(args.config))
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logger.debug("Config: mode=%s, emit_original=%s, inputs=%s",
                 config.mode.value, config.emit_original, args.files)

    sink = OutputSink(open_stdout())
    pipeline = TransformPipeline(sink, mode=config.mode, emit_original=config.emit_original)
    status = pipeline.run(read_multiple(args.files))

    if sink.closed:
        _silence_stdout()
    return status


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(130)
