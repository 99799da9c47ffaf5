"""
Service Area City Checker — Interactive CLI
===========================================
Thin wrapper around the servicearea library.

Usage:
    servicearea                          # interactive mode
    servicearea "Framingham"             # single check
    servicearea --json "Framinghm"       # single check, JSON output
    servicearea --cities cities.xlsx     # use another city list

Configuration is read from environment variables:
    SERVICEAREA_CITIES     Path or http(s) URL of the covered-city list
    SERVICEAREA_THRESHOLD  Minimum similarity for suggestions (default 0.7)

If SERVICEAREA_CITIES is not set, looks for the bundled CSV in the
current working directory.
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from servicearea.area import SERVICE_AREA_NAME
from servicearea.checker import ServiceAreaChecker
from servicearea.cities import DEFAULT_CITIES_FILE
from servicearea.exceptions import ServiceAreaError
from servicearea.models import CheckResult

# ── Default configuration ─────────────────────────────────────
# Environment variables take priority. Fall back to CWD, which is
# stable regardless of where the package is installed.
_DEFAULT_SOURCE = os.environ.get(
    "SERVICEAREA_CITIES", str(Path.cwd() / DEFAULT_CITIES_FILE)
)
_DEFAULT_THRESHOLD = "0.7"

_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"

_BANNER = f"""\
╔══════════════════════════════════════╗
║       Service Area City Checker      ║
╚══════════════════════════════════════╝
{SERVICE_AREA_NAME}
Matching ignores case and extra spaces. Type 'q' to quit.
"""


def _print_result(result: CheckResult) -> None:
    if result.covered:
        print(f"  ✓ '{result.matched_name}' is COVERED by the {SERVICE_AREA_NAME}")
        return
    print(f"  ✗ '{result.query}' is OUTSIDE the {SERVICE_AREA_NAME}")
    if result.suggestions:
        print("    Did you mean:")
        for s in result.suggestions:
            print(f"      • {s.name:<30} ({s.score:.0%} similar)")


def _run_interactive(checker: ServiceAreaChecker) -> None:
    print(_BANNER)
    print(f"{len(checker)} cities loaded.")

    while True:
        try:
            raw = input("\nCity:  ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            break

        if raw.lower() in ("q", "quit", "exit"):
            print("Bye!")
            break
        if not raw:
            print("  ✗ City name is required.")
            continue

        _print_result(checker.check(raw))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="servicearea",
        description=f"Check whether a city is in the {SERVICE_AREA_NAME}.",
    )
    parser.add_argument("city", nargs="?", help="city name to check")
    parser.add_argument(
        "--cities",
        default=_DEFAULT_SOURCE,
        help="path or URL of the covered-city list (.csv, .xlsx or .xls)",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        default=os.environ.get("SERVICEAREA_THRESHOLD", _DEFAULT_THRESHOLD),
        help="minimum similarity for suggestions",
    )
    parser.add_argument(
        "--json", action="store_true", help="print the result as JSON"
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="-v for INFO logging, -vv for DEBUG",
    )
    return parser


def _log_level(verbose: int) -> int:
    """WARNING by default, INFO for -v, DEBUG for -vv and beyond."""
    return {0: logging.WARNING, 1: logging.INFO}.get(verbose, logging.DEBUG)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point. Checks one city argument, or runs interactively without one."""
    args = _build_parser().parse_args(argv)

    logging.basicConfig(level=_log_level(args.verbose), format=_LOG_FORMAT)

    try:
        checker = ServiceAreaChecker.from_source(
            args.cities, threshold=args.threshold
        )
    except ServiceAreaError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print(
            "Set SERVICEAREA_CITIES or pass --cities with a .csv/.xlsx/.xls "
            "file or URL.",
            file=sys.stderr,
        )
        return 2

    if args.city is None:
        _run_interactive(checker)
        return 0

    result = checker.check(args.city)
    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        _print_result(result)
    return 0 if result.covered else 1


if __name__ == "__main__":
    sys.exit(main())
