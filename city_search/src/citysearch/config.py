from __future__ import annotations
import os

# /* ~~~ strategy used by SearchEngine() when none is given ~~~ */
DEFAULT_STRATEGY: str = os.environ.get("CITYSEARCH_STRATEGY", "binary")

# /* ~~~ worker threads behind SearchEngine.search_async ~~~ */
_cpu = os.cpu_count() or 4
SEARCH_WORKERS: int = max(1, int(os.environ.get("CITYSEARCH_WORKERS", _cpu)))

# Web surface defaults
TOP_K: int = 10
HOST: str = "127.0.0.1"
PORT: int = 8000

# Debug timing logs in the strategies (set CITYSEARCH_VERBOSE=1 to enable)
VERBOSE: bool = os.environ.get("CITYSEARCH_VERBOSE") == "1"
