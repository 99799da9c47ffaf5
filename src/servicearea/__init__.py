"""servicearea — Check city names against a service area's covered-city list."""

from servicearea.checker import ServiceAreaChecker
from servicearea.exceptions import (
    CityListFetchError,
    CityListInvalid,
    CityListNotFound,
    ServiceAreaError,
    UnsupportedFormat,
)
from servicearea.matching import (
    edit_distance,
    exact_match,
    rank_suggestions,
    similarity,
)
from servicearea.models import CheckResult, MatchCandidate, ValidationReport
from servicearea.names import normalise

__all__ = [
    "ServiceAreaChecker",
    "CheckResult",
    "MatchCandidate",
    "ValidationReport",
    "normalise",
    "edit_distance",
    "similarity",
    "rank_suggestions",
    "exact_match",
    "ServiceAreaError",
    "CityListNotFound",
    "CityListInvalid",
    "UnsupportedFormat",
    "CityListFetchError",
]
