"""Command line entry point for the rate converter."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

if __package__ in (None, ""):
    project_root = Path(__file__).resolve().parents[1]
    if str(project_root) not in sys.path:
        sys.path.insert(0, str(project_root))

from rate_converter.models import ByteUnit, ConverterOptions, Period, UnitSystem  # noqa: E402
from rate_converter.services.conversion_service import ConversionService  # noqa: E402
from rate_converter.services.exceptions import ParseError  # noqa: E402
from rate_converter.services.parser import join_arguments, parse_rate  # noqa: E402

PROG_NAME = "rate"
VERSION = "1.0.0"
LOG_FORMAT = "%(levelname)s: %(message)s"

HELP_TEXT = (
    f"Usage: {PROG_NAME} <number> <unit> / <period>\n"
    "       <number>: integer or float (no scientific notation)\n"
    f"       <unit>  : {' '.join(ByteUnit.names())}\n"
    f"       <period>: {' '.join(Period.labels())}\n"
)

LOGGER = logging.getLogger(__name__)

FLAGS = ("-h", "--help", "-V", "--version", "--binary", "--debug")


def build_argument_parser() -> argparse.ArgumentParser:
    """Create the parser; help and version are printed by ``main`` itself."""
    parser = argparse.ArgumentParser(prog=PROG_NAME, add_help=False)
    parser.add_argument("-h", "--help", action="store_true")
    parser.add_argument("-V", "--version", action="store_true")
    parser.add_argument(
        "--binary",
        action="store_true",
        help="use 1024 instead of 1000 as the step between byte units",
    )
    parser.add_argument("--debug", action="store_true", help="log diagnostics to stderr")
    return parser


def split_arguments(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Separate the known flags from the rate expression.

    Expression tokens never reach argparse, so a compact amount such as
    ``-5MB/s`` is reported by the rate parser instead of as an unknown option.
    """
    flags: list[str] = []
    expression: list[str] = []
    for token in argv:
        (flags if token in FLAGS else expression).append(token)
    return flags, expression


def configure_logging(debug: bool = False) -> None:
    """Send log records to stderr so they never mix with the table."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the converter and return the process exit status."""
    flags, expression = split_arguments(sys.argv[1:] if argv is None else argv)
    arguments = build_argument_parser().parse_args(flags)
    configure_logging(arguments.debug)

    if arguments.help:
        sys.stdout.write(HELP_TEXT)
        return 0
    if arguments.version:
        print(f"{PROG_NAME} {VERSION}")
        return 0
    if not expression:
        sys.stdout.write(HELP_TEXT)
        return 0

    unit_system = UnitSystem.BINARY if arguments.binary else UnitSystem.DECIMAL
    service = ConversionService(ConverterOptions(unit_system=unit_system))
    text = join_arguments(expression)
    try:
        lines = service.convert(parse_rate(text))
    except ParseError as exc:
        LOGGER.debug("Rejected input %r", text, exc_info=True)
        print(f"{PROG_NAME}: {exc}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0


def run() -> None:
    """Entry point for the ``rate`` console script."""
    sys.exit(main())


if __name__ == "__main__":
    run()
