"""Shared test fixtures — small city lists in the formats we read."""

from pathlib import Path

import pytest
import requests
from openpyxl import Workbook

CITIES = ["Framingham", "Lexington", "Burlington", "Natick", "Needham", "Worcester"]


@pytest.fixture()
def cities_csv(tmp_path: Path) -> Path:
    """A covered-cities CSV with a NAME header, as shipped with the app."""
    path = tmp_path / "cities.csv"
    path.write_text("NAME\n" + "\n".join(CITIES) + "\n", encoding="utf-8")
    return path


@pytest.fixture()
def messy_csv(tmp_path: Path) -> Path:
    """An uploaded export using a City header, with blanks and duplicates."""
    path = tmp_path / "upload.csv"
    path.write_text(
        "City,State\r\n"
        "  Natick ,MA\r\n"
        "Boston,MA\r\n"
        ",MA\r\n"
        "Natick,MA\r\n"
        "acton,MA\r\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture()
def cities_xlsx(tmp_path: Path) -> Path:
    """An uploaded spreadsheet using the census NAMELSAD column."""
    path = tmp_path / "cities.xlsx"
    wb = Workbook()
    ws = wb.active
    ws.append(["NAMELSAD", "COUNTY"])
    ws.append(["Worcester city", "Worcester"])
    ws.append(["Hopkinton town", "Middlesex"])
    ws.append([None, None])
    ws.append(["Worcester city", "Worcester"])
    wb.save(path)
    return path


@pytest.fixture()
def checker():
    """A ServiceAreaChecker over the CITIES fixture list."""
    from servicearea import ServiceAreaChecker

    return ServiceAreaChecker(CITIES)


class FakeResponse:
    def __init__(self, text: str, status_code: int = 200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"HTTP {self.status_code}")


class FakeSession:
    """Stands in for requests.Session; records the calls it receives."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture()
def fake_session():
    def _make(text: str = "", status_code: int = 200, error=None) -> FakeSession:
        return FakeSession(FakeResponse(text, status_code), error)

    return _make
