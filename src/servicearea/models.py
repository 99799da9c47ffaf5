"""Typed result models for servicearea."""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class MatchCandidate:
    """A covered city name offered as a "did you mean" suggestion."""

    name: str
    score: float             # 0.0-1.0 similarity to the query

    def to_dict(self) -> dict:
        return {"name": self.name, "score": round(self.score, 3)}


@dataclass(frozen=True)
class CheckResult:
    """Outcome of checking one city name against the covered list."""

    query: str
    covered: bool
    matched_name: Optional[str] = None          # verbatim list entry on a hit
    suggestions: Tuple[MatchCandidate, ...] = ()

    def to_dict(self) -> dict:
        """Convert to a plain dictionary (useful for JSON serialisation)."""
        return {
            "query": self.query,
            "covered": self.covered,
            "matched_name": self.matched_name,
            "suggestions": [s.to_dict() for s in self.suggestions],
        }


@dataclass(frozen=True)
class ValidationReport:
    """Findings from validating a covered-cities CSV file."""

    path: str
    city_count: int
    duplicates: Tuple[str, ...] = ()
    blocked: Tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.duplicates and not self.blocked
