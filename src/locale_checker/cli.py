"""
Command line entry point.

Usage:
    locale-checker path/to/locales
    locale-checker path/to/locales --sort

Exit codes:
- 0: Run completed
- 1: Fatal error, or missing keys found with --fail-on-missing
- 2: Invalid arguments
"""

import argparse
import io
import sys
from typing import List, Optional, Sequence

from loguru import logger
from pydantic import ValidationError

from . import __version__
from .checker import CompletenessChecker
from .config import CheckerConfig
from .core.exceptions import LocaleCheckerError
from .core.models import NamespaceReport
from .loader import TreeLoader
from .report import Reporter
from .stack import KeyStack


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="locale-checker",
        description="Simple program to check your locales files",
    )
    parser.add_argument("directory", help="Directory holding one folder per language")
    parser.add_argument(
        "-s", "--sort", action="store_true", help="Also sort locale files"
    )
    parser.add_argument(
        "-j",
        "--jobs",
        type=int,
        default=1,
        help="Number of language folders loaded in parallel (default: 1)",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="Spaces per indentation level when sorting files (default: 2)",
    )
    parser.add_argument(
        "--fail-on-missing",
        action="store_true",
        help="Exit with code 1 if any missing keys found",
    )
    parser.add_argument(
        "--report-missing-namespaces",
        action="store_true",
        help="Also report languages that have no file for a namespace",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Print a summary and skipped entries"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level for stderr diagnostics (default: WARNING, DEBUG with --verbose)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level)


def _format_validation_error(error: ValidationError) -> str:
    lines = []
    for err in error.errors():
        location = " -> ".join(str(loc) for loc in err["loc"]) or "arguments"
        lines.append(f"  - '{location}': {err['msg']}")
    return "\n".join(lines)


def run(config: CheckerConfig, reporter: Optional[Reporter] = None) -> int:
    """
    Load, accumulate and check the locale tree described by ``config``.

    Returns:
        Process exit code

    Raises:
        LocaleCheckerError: On a fatal load or rewrite failure
    """
    reporter = reporter or Reporter()
    stack = KeyStack()
    loader = TreeLoader(
        stack,
        sort=config.sort,
        indent=config.indent,
        workers=config.workers,
        reporter=reporter,
    )
    result = loader.load(config.root)

    checker = CompletenessChecker(
        stack,
        result.languages,
        report_missing_namespaces=config.report_missing_namespaces,
    )
    reports: List[NamespaceReport] = []
    for report in checker.iter_reports():
        reporter.namespace_report(report)
        reports.append(report)

    if config.verbose:
        reporter.summary(result, reports)

    if config.fail_on_missing and not all(r.is_complete for r in reports):
        return 1
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    # Force UTF-8 encoding for stdout/stderr on Windows
    if sys.platform == "win32" and argv is None:
        sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding="utf-8")
        sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding="utf-8")

    args = build_parser().parse_args(argv)

    try:
        config = CheckerConfig.from_args(args)
    except ValidationError as e:
        print(f"ERROR: Invalid arguments:\n{_format_validation_error(e)}", file=sys.stderr)
        return 2

    configure_logging(config.log_level)

    try:
        return run(config)
    except LocaleCheckerError as e:
        logger.error(str(e))
        return 1
