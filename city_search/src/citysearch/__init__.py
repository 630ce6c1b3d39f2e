"""
City search engine.

In-memory autocomplete over a catalog of city records. Two interchangeable
strategies answer case-insensitive prefix queries on name, country and
"name, country" label:

    BinarySearchStrategy  sorted arrays + binary search for range bounds
    TrieStrategy          character trie + incremental search state

Both share one relevance ranker, so they return identical ranked lists.

Example Usage:
    from citysearch import Record, SearchEngine

    engine = SearchEngine("trie")
    engine.index([Record(1, "Buenos Aires", "Argentina")])
    engine.search("bue")        # -> [Record(id=1, ...)]
"""
from .models import Coordinate, Record
from .engine import SearchEngine
from .strategies import BinarySearchStrategy, TrieStrategy, make_strategy

__version__ = "1.0.0"
__all__ = [
    "Coordinate",
    "Record",
    "SearchEngine",
    "BinarySearchStrategy",
    "TrieStrategy",
    "make_strategy",
]
