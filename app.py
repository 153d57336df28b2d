from __future__ import annotations

import os
import sys
from typing import Any, Dict, List

from flask import Flask, jsonify, request

# Ensure package imports work when executed directly from repo root
if __package__ in (None, ""):
    sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from pieces import Catalog, get_catalog  # noqa: E402

app = Flask(__name__)


def _catalog() -> Catalog:
    return get_catalog()


def _want_counts() -> bool:
    raw = request.args.get("counts", "1")
    return raw.lower() not in ("0", "false", "no", "off")


# ---------- Catalog API ----------

@app.get("/api/pieces")
def api_pieces() -> Any:
    return jsonify({"ok": True, "pieces": _catalog().records(include_count=_want_counts())})


@app.get("/api/pieces/<name>")
def api_piece(name: str) -> Any:
    catalog = _catalog()
    if name not in catalog:
        return jsonify({"ok": False, "error": f"Unknown piece: {name}", "names": catalog.names()}), 404
    return jsonify({"ok": True, "piece": catalog.get(name).to_json(include_count=_want_counts())})


@app.get("/api/cells")
def api_cells() -> Any:
    cells: List[Dict[str, Any]] = [c.to_json() for c in _catalog().flat_cells()]
    return jsonify({"ok": True, "cells": cells})


@app.get("/api/supply")
def api_supply() -> Any:
    catalog = _catalog()
    return jsonify({"ok": True, "supply": catalog.supply(), "totalCells": catalog.total_cells()})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
