"""Loading covered-city lists from CSV/XLSX/XLS files and remote CSV URLs."""

from __future__ import annotations

import csv
import io
import logging
import zipfile
from pathlib import Path
from typing import Iterable, List, Mapping, Optional

import requests
import xlrd
from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException
from xlrd.compdoc import CompDocError

from servicearea.exceptions import (
    CityListFetchError,
    CityListInvalid,
    CityListNotFound,
    UnsupportedFormat,
)

logger = logging.getLogger(__name__)

# Uploaded files use whichever of these headers the source export had
NAME_COLUMNS = ("NAME", "City", "CITY", "NAMELSAD")

DEFAULT_CITIES_FILE = "cidades_area_atendida_1a_home_energy.csv"

_DEFAULT_TIMEOUT = 10.0


def extract_city_names(rows: Iterable[Mapping[str, object]]) -> List[str]:
    """
    Pull city names out of spreadsheet rows.

    The first non-empty NAME_COLUMNS value of each row is used. Names are
    trimmed, blanks dropped, duplicates removed and the result sorted.
    """
    names = set()
    for row in rows:
        value = next((row.get(col) for col in NAME_COLUMNS if row.get(col)), "")
        name = str(value).strip()
        if name:
            names.add(name)
    return sorted(names, key=lambda n: (n.casefold(), n))


def parse_city_csv(text: str) -> List[str]:
    """
    Names from the NAME column of CSV *text*, in first-seen order.

    Blank lines and blank names are skipped; duplicates are kept once.
    """
    reader = csv.DictReader(io.StringIO(text.lstrip("\ufeff")))
    seen = dict.fromkeys(
        name
        for name in ((row.get("NAME") or "").strip() for row in reader)
        if name
    )
    return list(seen)


def read_city_file(path: str | Path) -> List[str]:
    """
    Read a .csv, .xlsx or .xls upload and return its sorted, unique city names.

    Raises CityListNotFound, UnsupportedFormat or CityListInvalid.
    """
    path = Path(path)
    if not path.is_file():
        raise CityListNotFound(str(path))

    ext = path.suffix.lower()
    if ext == ".csv":
        rows = _read_csv_rows(path)
    elif ext == ".xlsx":
        rows = _read_xlsx_rows(path)
    elif ext == ".xls":
        rows = _read_xls_rows(path)
    else:
        raise UnsupportedFormat(str(path), ext or "<none>")

    names = extract_city_names(rows)
    logger.info("Read %d rows, %d unique cities from %s", len(rows), len(names), path)
    return names


def fetch_city_list(
    url: str,
    timeout: float = _DEFAULT_TIMEOUT,
    session: Optional[requests.Session] = None,
) -> List[str]:
    """
    Download a CSV city list and return its NAME column.

    Raises CityListFetchError on network failure or a non-2xx status.
    """
    getter = session or requests
    try:
        resp = getter.get(url, timeout=timeout, headers={"Cache-Control": "no-cache"})
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise CityListFetchError(url, str(exc)) from exc

    names = parse_city_csv(resp.text)
    logger.info("Fetched %d unique cities from %s", len(names), url)
    return names


def load_cities(source: str | Path, **kwargs) -> List[str]:
    """Fetch *source* if it is an http(s) URL, otherwise read it from disk."""
    text = str(source)
    if text.startswith(("http://", "https://")):
        return fetch_city_list(text, **kwargs)
    return read_city_file(source)


# ── Private helpers ───────────────────────────────────────────


def _read_csv_rows(path: Path) -> list[dict]:
    try:
        with path.open(newline="", encoding="utf-8-sig") as fh:
            return [row for row in csv.DictReader(fh) if any(row.values())]
    except (UnicodeDecodeError, csv.Error) as exc:
        raise CityListInvalid(str(path), str(exc)) from exc


def _read_xlsx_rows(path: Path) -> list[dict]:
    """First worksheet of an .xlsx workbook."""
    try:
        wb = load_workbook(path, read_only=True, data_only=True)
    except (
        InvalidFileException, zipfile.BadZipFile, OSError, KeyError, ValueError
    ) as exc:
        raise CityListInvalid(str(path), str(exc)) from exc

    try:
        return _sheet_rows(wb.worksheets[0].iter_rows(values_only=True))
    finally:
        wb.close()


def _read_xls_rows(path: Path) -> list[dict]:
    """First sheet of a legacy Excel workbook, read with xlrd."""
    try:
        book = xlrd.open_workbook(str(path), on_demand=True)
    except (xlrd.XLRDError, CompDocError, OSError) as exc:
        raise CityListInvalid(str(path), str(exc)) from exc

    try:
        sheet = book.sheet_by_index(0)
        return _sheet_rows(sheet.row_values(i) for i in range(sheet.nrows))
    finally:
        book.release_resources()


def _sheet_rows(values: Iterable[Iterable[object]]) -> list[dict]:
    """Rows as dicts keyed by the header row; empty cells become ''."""
    values = iter(values)
    header = next(values, None)
    if header is None:
        return []
    keys = ["" if h is None else str(h) for h in header]
    rows = []
    for raw in values:
        cells = ["" if v is None else v for v in raw]
        if any(str(c).strip() for c in cells):
            rows.append(dict(zip(keys, cells)))
    return rows
