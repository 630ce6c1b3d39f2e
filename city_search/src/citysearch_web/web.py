from __future__ import annotations
import argparse
import logging
import os
from typing import List, Optional

from flask import Flask, request, jsonify

from citysearch import config as CFG
from citysearch.engine import SearchEngine
from citysearch.models import Record

log = logging.getLogger(__name__)

app = Flask(__name__)
_engine: SearchEngine | None = None
_catalog: List[Record] = []   # last catalog posted to /api/index, kept for re-index on swap


def get_engine() -> SearchEngine:
    global _engine
    if _engine is None:
        _engine = SearchEngine()
    return _engine


def set_engine(engine: Optional[SearchEngine]) -> None:
    global _engine, _catalog
    _engine = engine
    _catalog = []


def _bad_request(msg: str):
    return jsonify({"error": msg}), 400


# ---------- API ----------
@app.get("/health")
def health():
    eng = get_engine()
    return jsonify({"ok": True, "strategy": eng.strategy_name, "indexed": eng.indexed_count})


@app.post("/api/index")
def api_index():
    global _catalog
    payload = request.get_json(silent=True)
    if not isinstance(payload, list):
        return _bad_request("expected a JSON list of records")
    try:
        records = [Record.from_dict(item) for item in payload]
    except ValueError as exc:
        return _bad_request(str(exc))

    eng = get_engine()
    eng.index(records)
    _catalog = records
    return jsonify({"indexed": eng.indexed_count})


@app.get("/api/search")
def api_search():
    q = request.args.get("q", "", type=str)
    k = request.args.get("k", CFG.TOP_K, type=int)
    if k is not None and k < 0:
        return _bad_request("k must be a non-negative integer")
    if not q:
        return jsonify([])
    rows = get_engine().search(q)
    if k is not None:
        rows = rows[:k]
    return jsonify([r.to_dict() for r in rows])


@app.post("/api/clear")
def api_clear():
    global _catalog
    eng = get_engine()
    eng.clear()
    _catalog = []
    return jsonify({"indexed": eng.indexed_count})


@app.post("/api/strategy")
def api_strategy():
    payload = request.get_json(silent=True) or {}
    if not isinstance(payload, dict):
        return _bad_request("expected a JSON object")
    name = payload.get("name")
    if not isinstance(name, str):
        return _bad_request("missing strategy name")

    eng = get_engine()
    try:
        eng.set_strategy(name)
    except ValueError as exc:
        return _bad_request(str(exc))
    if payload.get("reindex") and _catalog:
        eng.index(_catalog)
    return jsonify({"strategy": eng.strategy_name, "indexed": eng.indexed_count})


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Serve a city SearchEngine over HTTP")
    ap.add_argument("--host", default=CFG.HOST)
    ap.add_argument("--port", type=int, default=CFG.PORT)
    ap.add_argument("--strategy", default=CFG.DEFAULT_STRATEGY, help="binary | trie")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
        os.environ["CITYSEARCH_VERBOSE"] = "1"
        CFG.VERBOSE = True

    try:
        engine = SearchEngine(args.strategy)
    except ValueError as exc:
        ap.error(str(exc))
    set_engine(engine)

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        engine.shutdown()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
