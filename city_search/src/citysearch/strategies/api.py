# citysearch/strategies/api.py
from __future__ import annotations
from typing import Callable, Dict, List, Protocol, Sequence

from ..models import Record


class SearchStrategy(Protocol):
    name: str

    # Build
    def index(self, records: Sequence[Record]) -> None: ...
    # Query
    def search(self, query: str) -> List[Record]: ...
    # Teardown
    def clear(self) -> None: ...
    @property
    def indexed_count(self) -> int: ...


def _registry() -> Dict[str, Callable[[], SearchStrategy]]:
    # Lazy imports keep api.py importable from the strategy modules
    from .binary_search import BinarySearchStrategy
    from .trie_search import TrieStrategy
    return {
        BinarySearchStrategy.name: BinarySearchStrategy,
        TrieStrategy.name: TrieStrategy,
    }


def available_strategies() -> List[str]:
    return sorted(_registry())


def make_strategy(name: str) -> SearchStrategy:
    """
    Factory:
      - "binary" -> BinarySearchStrategy (sorted arrays + binary search)
      - "trie"   -> TrieStrategy (character trie + incremental search state)
    """
    key = (name or "").strip().lower()
    factory = _registry().get(key)
    if factory is None:
        raise ValueError(f"Unsupported search strategy: {name!r} (choose from {available_strategies()})")
    return factory()
