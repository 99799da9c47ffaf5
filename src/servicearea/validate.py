"""
Covered-cities CSV validation
=============================
Run before a release to make sure the bundled city list is sane.

Usage:
    servicearea-validate                 # validates $SERVICEAREA_CITIES
    servicearea-validate cities.csv

Checks that the header is exactly NAME, that at least one city follows,
that no city appears twice (case-insensitive) and that no blocklisted
city is present.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import AbstractSet, List, Optional

from servicearea.cities import DEFAULT_CITIES_FILE
from servicearea.exceptions import CityListInvalid, CityListNotFound, ServiceAreaError
from servicearea.models import ValidationReport

logger = logging.getLogger(__name__)

# Cities that must never be listed as covered
DEFAULT_BLOCKLIST = frozenset(
    {"MILTON", "PHILLIPSTON", "EVERETT", "CAMBRIDGE", "NEWTON"}
)


def validate_city_csv(
    path: str | Path, blocklist: AbstractSet[str] = DEFAULT_BLOCKLIST
) -> ValidationReport:
    """
    Validate the covered-cities CSV at *path*.

    Structural problems (missing file, wrong header, no cities) raise
    CityListNotFound or CityListInvalid. Duplicate and blocklisted names
    are returned in the report instead.
    """
    path = Path(path)
    if not path.is_file():
        raise CityListNotFound(str(path))

    raw = path.read_text(encoding="utf-8-sig").replace("\r\n", "\n")
    lines = [line.strip() for line in raw.split("\n")]
    lines = [line for line in lines if line]
    if not lines:
        raise CityListInvalid(str(path), "file is empty")

    header = lines[0]
    if header.upper() != "NAME":
        raise CityListInvalid(
            str(path), f"expected header 'NAME', found '{header}'"
        )

    cities = lines[1:]
    if not cities:
        raise CityListInvalid(str(path), "no cities after the NAME header")

    upper = [city.upper() for city in cities]
    seen: set = set()
    duplicates = set()
    for city in upper:
        if city in seen:
            duplicates.add(city)
        seen.add(city)
    blocked = {city for city in upper if city in blocklist}

    report = ValidationReport(
        path=str(path),
        city_count=len(cities),
        duplicates=tuple(sorted(duplicates)),
        blocked=tuple(sorted(blocked)),
    )
    logger.debug("Validated %s: %s", path, report)
    return report


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for ``servicearea-validate``. Returns the exit status."""
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else os.environ.get(
        "SERVICEAREA_CITIES", str(Path.cwd() / DEFAULT_CITIES_FILE)
    )

    try:
        report = validate_city_csv(path)
    except ServiceAreaError as exc:
        print(f"[validate] {exc}", file=sys.stderr)
        return 1

    if report.duplicates:
        print(
            f"[validate] Duplicate cities: {', '.join(report.duplicates)}",
            file=sys.stderr,
        )
    if report.blocked:
        print(
            f"[validate] Blocklisted cities present: {', '.join(report.blocked)}",
            file=sys.stderr,
        )
    if not report.ok:
        return 1

    print(
        f"[validate] OK: {report.city_count} cities, header NAME, "
        "no duplicates, no blocklisted cities."
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
