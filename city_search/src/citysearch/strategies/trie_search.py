from __future__ import annotations
import logging
import time
from typing import List, NamedTuple, Optional, Sequence, Tuple

from .. import config as CFG
from ..models import Record
from ..normalize import indexed_keys, normalize_query
from ..ranking import rank
from ..trie import ROOT, Trie

log = logging.getLogger(__name__)


class SearchState(NamedTuple):
    """Where the previous query ended in the trie, and what it returned."""
    node: int
    query: str
    results: Tuple[Record, ...]


class TrieStrategy:
    """
    Character trie over the lowercase name, country and display label of
    every record.

    The node reached by the previous query is remembered. A query that
    extends the previous one descends only the new characters from that
    node; a shorter query restarts from the root (nodes have no parent
    links), and so does any unrelated query. Results always equal a search
    from the root.
    """
    name = "trie"

    def __init__(self) -> None:
        self._trie = Trie()
        self._records: List[Record] = []
        self._state: Optional[SearchState] = None

    # ---- Build ----
    def index(self, records: Sequence[Record]) -> None:
        self.clear()
        t0 = time.perf_counter()
        self._records = list(records)
        for r in self._records:
            for key in indexed_keys(r):
                self._trie.insert(key, r)
        if CFG.VERBOSE:
            log.debug("trie index built: records=%d nodes=%d in %.3fs",
                      len(self._records), len(self._trie), time.perf_counter() - t0)

    # ---- Query ----
    def search(self, query: str) -> List[Record]:
        q = normalize_query(query)
        if not q:
            self._state = None
            return []

        state = self._state  # read once; a concurrent search may replace it
        if state is not None and q == state.query:
            return list(state.results)

        if state is not None and q.startswith(state.query):
            # typed forward: only the appended characters need descending
            start, chars = state.node, q[len(state.query):]
        else:
            # backspace (state.query extends q), unrelated query, or no state
            start, chars = ROOT, q

        node = self._trie.descend(chars, start)
        if node is None:
            self._state = None
            if CFG.VERBOSE:
                log.debug("trie search q=%r: no path", q)
            return []

        results = rank(self._trie.collect(node), q)
        self._state = SearchState(node=node, query=q, results=tuple(results))
        if CFG.VERBOSE:
            log.debug("trie search q=%r from=%s hits=%d",
                      q, "root" if start == ROOT else "cache", len(results))
        return results

    @property
    def search_state(self) -> Optional[SearchState]:
        return self._state

    def reset_search_state(self) -> None:
        """Forget the previous query so the next search descends from the root."""
        self._state = None

    # ---- Teardown ----
    def clear(self) -> None:
        self._trie = Trie()
        self._records = []
        self._state = None

    @property
    def indexed_count(self) -> int:
        return len(self._records)

    @property
    def trie(self) -> Trie:
        return self._trie

    def __repr__(self) -> str:
        return f"TrieStrategy(indexed={self.indexed_count}, nodes={len(self._trie)})"
