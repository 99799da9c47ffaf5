"""Tests for servicearea.cli module."""

import json
import logging
from pathlib import Path

import pytest

from servicearea.cli import _log_level, main


class TestSingleShot:
    def test_covered(self, cities_csv: Path, capsys):
        assert main(["--cities", str(cities_csv), "natick"]) == 0
        assert "COVERED" in capsys.readouterr().out

    def test_outside_with_suggestion(self, cities_csv: Path, capsys):
        assert main(["--cities", str(cities_csv), "Framinghm"]) == 1
        out = capsys.readouterr().out
        assert "OUTSIDE" in out
        assert "Framingham" in out

    def test_json(self, cities_csv: Path, capsys):
        assert main(["--cities", str(cities_csv), "--json", "Framinghm"]) == 1
        data = json.loads(capsys.readouterr().out)
        assert data["covered"] is False
        assert data["suggestions"][0]["name"] == "Framingham"

    def test_threshold_from_env(self, cities_csv: Path, capsys, monkeypatch):
        monkeypatch.setenv("SERVICEAREA_THRESHOLD", "0.95")
        assert main(["--cities", str(cities_csv), "--json", "Framinghm"]) == 1
        assert json.loads(capsys.readouterr().out)["suggestions"] == []

    def test_malformed_threshold_env(self, cities_csv: Path, capsys, monkeypatch):
        monkeypatch.setenv("SERVICEAREA_THRESHOLD", "high")
        with pytest.raises(SystemExit) as exc_info:
            main(["--cities", str(cities_csv), "Natick"])
        assert exc_info.value.code == 2
        assert "invalid float value" in capsys.readouterr().err

    def test_missing_city_list(self, tmp_path: Path, capsys):
        assert main(["--cities", str(tmp_path / "none.csv"), "Natick"]) == 2
        assert "not found" in capsys.readouterr().err


class TestInteractive:
    def test_check_then_quit(self, cities_csv: Path, capsys, monkeypatch):
        answers = iter(["Needham", "", "q"])
        monkeypatch.setattr("builtins.input", lambda _prompt="": next(answers))
        assert main(["--cities", str(cities_csv)]) == 0
        out = capsys.readouterr().out
        assert "6 cities loaded" in out
        assert "'Needham' is COVERED" in out
        assert "City name is required" in out
        assert "Bye!" in out

    def test_eof_exits(self, cities_csv: Path, capsys, monkeypatch):
        def _eof(_prompt=""):
            raise EOFError

        monkeypatch.setattr("builtins.input", _eof)
        assert main(["--cities", str(cities_csv)]) == 0
        assert "Bye!" in capsys.readouterr().out


class TestLogLevel:
    @pytest.mark.parametrize(
        ("verbose", "level"),
        [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (5, logging.DEBUG)],
    )
    def test_verbosity(self, verbose: int, level: int):
        assert _log_level(verbose) == level
