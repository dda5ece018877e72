"""Command line entry point: list the test cases defined in a document."""

from __future__ import annotations

import argparse
import logging
import sys

from mdtestcases.config import MDTESTCASES_LOG_LEVEL
from mdtestcases.exceptions import MdTestCasesError
from mdtestcases.loader import load_test_cases
from mdtestcases.options import merge_toml_table
from mdtestcases.output_formatter import dump_test_cases_json, format_test_cases

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdtestcases",
        description="List the test cases defined by a Markdown fixture document.",
    )
    parser.add_argument("source", help="Path or http(s) URL of the Markdown document")
    parser.add_argument(
        "--options",
        default="",
        help="TOML applied as root options before any options block",
    )
    parser.add_argument("--json", action="store_true", help="Print test cases as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else MDTESTCASES_LOG_LEVEL.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        root_options = merge_toml_table({}, args.options)
    except ValueError as exc:
        print(f"error: invalid --options: {exc}", file=sys.stderr)
        return 2

    try:
        test_cases = load_test_cases(args.source, root_options, merge=merge_toml_table)
    except MdTestCasesError as exc:
        logger.debug("Collection failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(dump_test_cases_json(test_cases))
    else:
        print(format_test_cases(test_cases))
    return 0


if __name__ == "__main__":
    sys.exit(main())
