from .api import SearchStrategy, available_strategies, make_strategy
from .binary_search import BinarySearchStrategy
from .trie_search import SearchState, TrieStrategy

__all__ = [
    "SearchStrategy",
    "available_strategies",
    "make_strategy",
    "BinarySearchStrategy",
    "SearchState",
    "TrieStrategy",
]
