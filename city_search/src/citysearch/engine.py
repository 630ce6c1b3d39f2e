# citysearch/engine.py
from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import List, Optional, Sequence, Union

from . import config as CFG
from .models import Record
from .strategies.api import SearchStrategy, make_strategy

log = logging.getLogger(__name__)


class SearchEngine:
    """
    Thin facade that hosts exactly one search strategy and delegates to it:
      - index(records):  clear + rebuild the strategy from a full catalog
      - search(query):   ranked list of matching records ([] for an empty query)
      - clear():         drop all indexed state
      - indexed_count / is_indexed

    The active strategy can be swapped at runtime with set_strategy(). The new
    strategy is used as constructed; the previous catalog is NOT re-indexed into
    it. Callers that want it populated call index() again.

    Every operation runs under one lock, so index/clear/set_strategy never
    interleave with a search on the same engine.
    """

    # ------------- lifecycle -------------

    def __init__(self, strategy: Union[SearchStrategy, str, None] = None) -> None:
        self._lock = threading.RLock()
        self._strategy: SearchStrategy = self._resolve(strategy or CFG.DEFAULT_STRATEGY)
        self._executor: Optional[ThreadPoolExecutor] = None
        log.info("SearchEngine created with %s strategy", self.strategy_name)

    @staticmethod
    def _resolve(strategy: Union[SearchStrategy, str]) -> SearchStrategy:
        if isinstance(strategy, str):
            return make_strategy(strategy)
        return strategy

    # /* ~~~ Replace the active strategy (no automatic re-index) ~~~ */
    def set_strategy(self, strategy: Union[SearchStrategy, str]) -> None:
        new = self._resolve(strategy)
        with self._lock:
            old = self._strategy
            self._strategy = new
        log.info("Search strategy switched: %s -> %s (indexed=%d)",
                 getattr(old, "name", type(old).__name__), self.strategy_name, new.indexed_count)

    @property
    def strategy(self) -> SearchStrategy:
        return self._strategy

    @property
    def strategy_name(self) -> str:
        return getattr(self._strategy, "name", type(self._strategy).__name__)

    # ------------- build -------------

    def index(self, records: Sequence[Record]) -> None:
        records = list(records)
        with self._lock:
            self._strategy.index(records)
            count = self._strategy.indexed_count
        log.info("Indexed %d records with %s strategy", count, self.strategy_name)

    # ------------- query -------------

    def search(self, query: str) -> List[Record]:
        with self._lock:
            return self._strategy.search(query)

    # /* ~~~ Run search on a worker thread; the caller owns the Future ~~~ */
    def search_async(self, query: str) -> "Future[List[Record]]":
        with self._lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=CFG.SEARCH_WORKERS, thread_name_prefix="citysearch"
                )
            executor = self._executor
        return executor.submit(self.search, query)

    @property
    def indexed_count(self) -> int:
        with self._lock:
            return self._strategy.indexed_count

    @property
    def is_indexed(self) -> bool:
        return self.indexed_count > 0

    # ------------- teardown -------------

    def clear(self) -> None:
        with self._lock:
            self._strategy.clear()
        log.info("Search index cleared (%s strategy)", self.strategy_name)

    # /* ~~~ Release worker threads and indexed state ~~~ */
    def shutdown(self) -> None:
        with self._lock:
            executor, self._executor = self._executor, None
        try:
            if executor is not None:
                executor.shutdown(wait=True)
        finally:
            self.clear()
            log.info("SearchEngine shutdown complete")

    def __repr__(self) -> str:
        return f"SearchEngine(strategy={self.strategy_name!r}, indexed={self.indexed_count})"
