"""Implements the strslice command line interface."""

import sys
from logging import INFO, WARNING, Logger, basicConfig, getLogger
from typing import Final

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers.web import JsonLexer

from .models.cli_arguments import CLIArguments
from .models.slice_report import SliceEntry, SliceReport
from .slice_reader import SliceReader

logger: Final[Logger] = getLogger(__name__)


def tokenize(data: bytes, args: CLIArguments) -> list[SliceEntry]:
    """Split data into report entries according to the CLI arguments.

    Args:
        data: The data to split.
        args: The CLI arguments.

    Returns:
        One entry per kept token.
    """
    entries: Final[list[SliceEntry]] = []
    reader: Final[SliceReader] = SliceReader(data)

    for token in reader.split(args.separator):
        if args.trim_whitespace:
            token.trim()
        if args.trim_char is not None:
            token.trim(args.trim_char)

        if args.skip_empty and token.is_empty():
            continue
        entries.append(SliceEntry(token.offset(), token, args.find))

    logger.debug(f"{len(entries)} tokens kept out of {len(data)} bytes")
    return entries


def run_cli() -> None:
    """Implements the strslice command line interface."""
    basicConfig()
    args: Final[CLIArguments] = CLIArguments(sys.argv)
    getLogger(__name__.rsplit(".", 1)[0]).setLevel(WARNING if args.quiet else INFO)

    # STEP 1: Load the input file.
    try:
        with args.input_path.open("rb") as input_file:
            data: Final[bytes] = input_file.read()
    except OSError as e:
        logger.error(f"Couldn't read {args.input_path}: {e}")  # noqa: TRY400
        sys.exit(1)

    # STEP 2: Split it into slices.
    entries: Final[list[SliceEntry]] = tokenize(data, args)
    logger.info(f"{len(entries)} tokens extracted from {args.input_path.name}")

    # STEP 3: Generate the final JSON report.
    report_json: Final[str] = SliceReport(args.input_path, data, entries).to_json(pretty=True)

    # STEP 3.1: Print colorized report to the terminal.
    if not args.quiet:
        report_colorized: Final[str] = highlight(report_json, JsonLexer(), TerminalFormatter())
        print(f"Report: {report_colorized}")  # noqa: T201

    # STEP 3.2: If required, then write report to disk.
    if args.output:
        with args.output.open("w") as output_file:
            output_file.write(report_json)
        logger.info(f"Report written to {args.output}")
