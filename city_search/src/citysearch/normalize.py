from __future__ import annotations
from typing import Callable, Tuple
from .models import Record


def normalize_query(query: str) -> str:
    """Lowercase, then trim surrounding whitespace. "" means "no query"."""
    if not isinstance(query, str):
        raise TypeError(f"query must be a string, got {type(query).__name__}")
    return query.lower().strip()


# ---- lowercase projections of the three indexed fields ----
def name_key(r: Record) -> str:
    return r.name.lower()

def country_key(r: Record) -> str:
    return r.country.lower()

def label_key(r: Record) -> str:
    return r.display_label.lower()


# Order matters only for logging; every strategy indexes all three.
FIELD_KEYS: Tuple[Tuple[str, Callable[[Record], str]], ...] = (
    ("name", name_key),
    ("country", country_key),
    ("display_label", label_key),
)


def indexed_keys(r: Record) -> Tuple[str, str, str]:
    """The three lowercase strings a record is searchable by."""
    return name_key(r), country_key(r), label_key(r)
