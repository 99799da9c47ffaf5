"""Edit-distance similarity scoring and "did you mean" ranking."""

from typing import Iterable, List, Optional, Sequence

from servicearea.models import MatchCandidate
from servicearea.names import normalise


def edit_distance(a: Optional[str], b: Optional[str]) -> int:
    """
    Levenshtein distance between *a* and *b*.

    Counts single-character insertions, deletions and substitutions (cost 1
    each, no transpositions). Compares the raw strings as given.
    """
    a = "" if a is None else str(a)
    b = "" if b is None else str(b)
    m, n = len(a), len(b)
    if m == 0:
        return n
    if n == 0:
        return m

    table = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(m + 1):
        table[i][0] = i
    for j in range(n + 1):
        table[0][j] = j

    for i in range(1, m + 1):
        ca = a[i - 1]
        for j in range(1, n + 1):
            cost = 0 if ca == b[j - 1] else 1
            table[i][j] = min(
                table[i - 1][j] + 1,
                table[i][j - 1] + 1,
                table[i - 1][j - 1] + cost,
            )
    return table[m][n]


def similarity(a: Optional[str], b: Optional[str]) -> float:
    """
    Score how alike two city names are, from 0.0 to 1.0.

    The edit distance of the normalised forms is divided by the longer
    normalised length (at least 1), so two empty names score 1.0.
    """
    na = normalise(a)
    nb = normalise(b)
    longest = max(1, len(na), len(nb))
    return 1 - edit_distance(na, nb) / longest


def rank_suggestions(
    query: Optional[str], candidates: Sequence[str], k: int = 3
) -> List[MatchCandidate]:
    """
    Return the *k* candidates most similar to *query*, best first.

    Candidates are scored verbatim. ``sorted`` is stable, so equal scores
    keep their input order.
    """
    if k <= 0:
        return []
    scored = [
        MatchCandidate(name=name, score=similarity(query, name))
        for name in candidates or ()
    ]
    scored = sorted(scored, key=lambda c: c.score, reverse=True)
    return scored[:k]


def find_exact(query: Optional[str], candidates: Iterable[str]) -> Optional[str]:
    """Return the first candidate equal to *query* once both are normalised."""
    key = normalise(query)
    for name in candidates or ():
        if normalise(name) == key:
            return name
    return None


def exact_match(query: Optional[str], candidates: Iterable[str]) -> bool:
    """True if *query* names one of *candidates* after normalisation."""
    return find_exact(query, candidates) is not None
