"""ServiceAreaChecker — the main entry point for the library."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from servicearea import area, cities, matching, names
from servicearea.models import CheckResult

logger = logging.getLogger(__name__)

_DEFAULT_THRESHOLD = 0.7
_DEFAULT_MAX_SUGGESTIONS = 3


class ServiceAreaChecker:
    """
    Decides whether a city is covered by the service area.

    Coverage is membership in the covered-city list after name
    normalisation. Misses come back with "did you mean" suggestions
    scored by edit-distance similarity.
    """

    def __init__(
        self,
        city_names: Iterable[str],
        threshold: float = _DEFAULT_THRESHOLD,
        max_suggestions: int = _DEFAULT_MAX_SUGGESTIONS,
    ):
        self._threshold = threshold
        self._max_suggestions = max_suggestions
        self._cities = tuple(
            dict.fromkeys(
                name
                for name in (
                    ("" if n is None else str(n)).strip() for n in city_names or ()
                )
                if name
            )
        )

    @classmethod
    def from_source(cls, source: str | Path, **kwargs) -> ServiceAreaChecker:
        """Build a checker from a city-list file path or URL."""
        return cls(cities.load_cities(source), **kwargs)

    # ── Public API ────────────────────────────────────────────────

    @property
    def cities(self) -> tuple:
        return self._cities

    @property
    def threshold(self) -> float:
        return self._threshold

    def check(self, name: str) -> CheckResult:
        """
        Check *name* against the covered list.

        A hit returns the verbatim list entry it matched. A miss returns
        up to ``max_suggestions`` candidates scoring at least ``threshold``.
        """
        query = "" if name is None else str(name)
        matched = matching.find_exact(query, self._cities)
        logger.debug("check(%r) -> %r", query, matched)
        if matched is not None:
            return CheckResult(query=query, covered=True, matched_name=matched)

        suggestions: tuple = ()
        if query and self._cities:
            ranked = matching.rank_suggestions(
                query, self._cities, self._max_suggestions
            )
            suggestions = tuple(s for s in ranked if s.score >= self._threshold)
            logger.info(
                "'%s' not covered; %d suggestion(s)", query, len(suggestions)
            )
        return CheckResult(query=query, covered=False, suggestions=suggestions)

    def autocomplete(self, prefix: str) -> List[str]:
        """Covered cities containing *prefix*, for a type-ahead list."""
        return names.filter_names(prefix, self._cities)

    def service_area(self) -> dict:
        """Boundary data for a map renderer: GeoJSON feature plus bounds."""
        return {
            "feature": area.service_area_feature(),
            "bounds": area.compute_bounds(area.SERVICE_AREA_POLYGON),
            "center": area.DEFAULT_CENTER,
            "zoom": area.DEFAULT_ZOOM,
        }

    def __len__(self) -> int:
        return len(self._cities)

    def __contains__(self, name: object) -> bool:
        return matching.exact_match(name, self._cities)
