"""HTTP surface for citysearch: index a catalog, run prefix searches, swap strategies."""
from .web import app, get_engine, main, set_engine

__all__ = ["app", "get_engine", "main", "set_engine"]
