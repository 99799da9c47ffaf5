"""Tests for servicearea.models module."""

import dataclasses

import pytest

from servicearea.models import CheckResult, MatchCandidate, ValidationReport


class TestMatchCandidate:
    def test_to_dict_rounds_score(self):
        assert MatchCandidate("Newton", 0.83333).to_dict() == {
            "name": "Newton",
            "score": 0.833,
        }

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            MatchCandidate("Newton", 1.0).score = 0.5


class TestCheckResult:
    def test_to_dict_keys(self):
        result = CheckResult(
            query="Newtn",
            covered=False,
            suggestions=(MatchCandidate("Newton", 0.8333),),
        )
        assert result.to_dict() == {
            "query": "Newtn",
            "covered": False,
            "matched_name": None,
            "suggestions": [{"name": "Newton", "score": 0.833}],
        }


class TestValidationReport:
    def test_ok(self):
        assert ValidationReport(path="x.csv", city_count=3).ok is True

    def test_not_ok(self):
        report = ValidationReport(path="x.csv", city_count=3, blocked=("NEWTON",))
        assert report.ok is False
