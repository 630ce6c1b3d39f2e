from __future__ import annotations
import logging
import time
from typing import Callable, List, Sequence, Tuple

from .. import config as CFG
from ..models import Record
from ..normalize import FIELD_KEYS, normalize_query
from ..ranking import rank

log = logging.getLogger(__name__)


# ---- Prefix boundaries over a sorted key list ----
def first_prefix_index(keys: Sequence[str], query: str) -> int:
    """Leftmost index whose key starts with `query`, or len(keys) if none does."""
    left, right = 0, len(keys) - 1
    result = len(keys)
    while left <= right:
        mid = (left + right) // 2
        key = keys[mid]
        if key.startswith(query):
            result = mid
            right = mid - 1   # keep looking left for an earlier hit
        elif key < query:
            left = mid + 1
        else:
            right = mid - 1
    return result


def last_prefix_index(keys: Sequence[str], query: str) -> int:
    """Rightmost index whose key starts with `query`, or -1 if none does."""
    left, right = 0, len(keys) - 1
    result = -1
    while left <= right:
        mid = (left + right) // 2
        key = keys[mid]
        if key.startswith(query):
            result = mid
            left = mid + 1    # keep looking right for a later hit
        elif key < query:
            left = mid + 1
        else:
            right = mid - 1
    return result


def prefix_range(keys: Sequence[str], query: str) -> Tuple[int, int]:
    """Half-open (start, stop) range of keys having `query` as prefix; (0, 0) when empty."""
    if not keys:
        return 0, 0
    first = first_prefix_index(keys, query)
    last = last_prefix_index(keys, query)
    if first <= last:
        return first, last + 1
    return 0, 0


class _SortedView:
    """Records sorted by one lowercase field, with the keys kept alongside."""
    __slots__ = ("field", "keys", "records")

    def __init__(self, field: str, records: Sequence[Record], key: Callable[[Record], str]) -> None:
        pairs = sorted(((key(r), r) for r in records), key=lambda kv: kv[0])
        self.field = field
        self.keys: List[str] = [k for k, _ in pairs]
        self.records: List[Record] = [r for _, r in pairs]

    def __len__(self) -> int:
        return len(self.records)

    def matching(self, query: str) -> List[Record]:
        start, stop = prefix_range(self.keys, query)
        return self.records[start:stop]


class BinarySearchStrategy:
    """
    Three sorted views of the catalog (by name, country and display label).
    A query is answered by locating the contiguous prefix range in each view
    with two binary searches, unioning the slices and ranking the result.
    """
    name = "binary"

    def __init__(self) -> None:
        self._views: List[_SortedView] = []
        self.clear()

    # ---- Build ----
    def index(self, records: Sequence[Record]) -> None:
        self.clear()
        t0 = time.perf_counter()
        records = list(records)
        self._views = [_SortedView(field, records, key) for field, key in FIELD_KEYS]
        if CFG.VERBOSE:
            log.debug("binary index built: records=%d in %.3fs", len(records), time.perf_counter() - t0)

    # ---- Query ----
    def search(self, query: str) -> List[Record]:
        q = normalize_query(query)
        if not q:
            return []

        candidates: List[Record] = []
        for view in self._views:
            hits = view.matching(q)
            if CFG.VERBOSE:
                log.debug("binary search q=%r field=%s hits=%d", q, view.field, len(hits))
            candidates.extend(hits)
        return rank(candidates, q)

    # ---- Teardown ----
    def clear(self) -> None:
        self._views = [_SortedView(field, [], key) for field, key in FIELD_KEYS]

    @property
    def indexed_count(self) -> int:
        return len(self._views[0])

    def __repr__(self) -> str:
        return f"BinarySearchStrategy(indexed={self.indexed_count})"
