"""
Relevance ranking shared by every search strategy.

A candidate's score is the sum of independent bonuses (prefix hits on each
field, a short-name bonus, exact-match bonuses). Candidates are ordered by
score descending, then display label ascending; id, name, country and
coordinates break any remaining ties so the order is total and results
are reproducible.
"""
from __future__ import annotations
from typing import Iterable, List, Tuple
from .models import Record

# Bonus tables
NAME_PREFIX_BONUS = 100
LABEL_PREFIX_BONUS = 80
COUNTRY_PREFIX_BONUS = 60
SHORT_NAME_BASE = 50
NAME_EXACT_BONUS = 200
COUNTRY_EXACT_BONUS = 150


def score(record: Record, query: str) -> int:
    """Score `record` against an already-normalized query."""
    name = record.name.lower()
    country = record.country.lower()
    label = record.display_label.lower()

    s = 0
    if name.startswith(query):
        s += NAME_PREFIX_BONUS
    if label.startswith(query):
        s += LABEL_PREFIX_BONUS
    if country.startswith(query):
        s += COUNTRY_PREFIX_BONUS

    # shorter names are more specific
    s += max(0, SHORT_NAME_BASE - len(name))

    if name == query:
        s += NAME_EXACT_BONUS
    if country == query:
        s += COUNTRY_EXACT_BONUS
    return s


def sort_key(record: Record, query: str) -> Tuple[int, str, int, str, str, float, float]:
    return (
        -score(record, query),
        record.display_label,
        record.id,
        record.name,
        record.country,
        record.coord.lon,
        record.coord.lat,
    )


def rank(candidates: Iterable[Record], query: str) -> List[Record]:
    """
    Dedupe candidates by full-value equality and return them in relevance order.
    Records that differ in any field (id included) are all kept.
    """
    unique = dict.fromkeys(candidates)
    return sorted(unique, key=lambda r: sort_key(r, query))
