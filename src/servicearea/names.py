"""City-name normalisation and autocomplete filtering."""

import re
from typing import Iterable, List, Optional

_WHITESPACE_RE = re.compile(r"\s+")
_SUFFIX_RE = re.compile(r"\b(?:town|city)$", re.IGNORECASE)


def normalise(raw: Optional[object]) -> str:
    """
    Reduce a city name to its comparison key, e.g. 'Lexington  Town ' -> 'lexington'.

    Collapses whitespace, drops a trailing 'town' / 'city' word, trims and
    lower-cases. Never raises: ``None`` becomes the empty string and other
    values are coerced with ``str()``.
    """
    text = _WHITESPACE_RE.sub(" ", "" if raw is None else str(raw)).strip()
    # 'Foo City Town' needs two passes to reach a fixed point
    while True:
        stripped = _SUFFIX_RE.sub("", text).rstrip()
        if stripped == text:
            break
        text = stripped
    return text.lower()


def filter_names(
    query: Optional[str],
    names: Iterable[str],
    limit: int = 12,
    default_limit: int = 10,
) -> List[str]:
    """
    Return names whose normalised form contains the normalised *query*.

    An empty (or None) query returns the first *default_limit* names unchanged.
    Input order is preserved.
    """
    names = list(names)
    if not query:
        return names[:default_limit]
    key = normalise(query)
    return [name for name in names if key in normalise(name)][:limit]
