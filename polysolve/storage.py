"""
polysolve — Local JSON storage for settings and solve history.

Data is persisted in ``<project>/data/polysolve.json``.
"""

import json
import logging
import os
import time
import uuid
from datetime import datetime

from polysolve.formatting import STYLES

logger = logging.getLogger(__name__)

_DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "data")
_DATA_FILE = os.path.join(_DATA_DIR, "polysolve.json")

# ── Default settings ────────────────────────────────────────────────────
DEFAULT_SETTINGS = {
    "render": "text",            # "text", "html", "unicode"
    "max_decimals": 10,          # digits shown for non-integral roots
    "verify_tolerance": 1e-9,    # residual bound for numeric verification
    "graph_span": 5.0,           # half-width of the plotted x range
    "history_limit": 200,
}


def _ensure_dir() -> None:
    os.makedirs(_DATA_DIR, exist_ok=True)


def _empty_db() -> dict:
    return {"settings": dict(DEFAULT_SETTINGS), "history": []}


def _load_db() -> dict:
    _ensure_dir()
    if os.path.exists(_DATA_FILE):
        try:
            with open(_DATA_FILE, "r", encoding="utf-8") as f:
                db = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Ignoring unreadable data file %s: %s", _DATA_FILE, e)
            return _empty_db()
        if isinstance(db, dict):
            db.setdefault("settings", dict(DEFAULT_SETTINGS))
            db.setdefault("history", [])
            return db
        logger.warning("Ignoring malformed data file %s", _DATA_FILE)
    return _empty_db()


def _save_db(db: dict) -> None:
    _ensure_dir()
    with open(_DATA_FILE, "w", encoding="utf-8") as f:
        json.dump(db, f, indent=2, ensure_ascii=False)


# ── Settings ─────────────────────────────────────────────────────────────

def get_settings() -> dict:
    """Return the stored settings merged over the defaults."""
    merged = dict(DEFAULT_SETTINGS)
    merged.update(_load_db().get("settings", {}))
    return merged


def save_settings(settings: dict) -> None:
    """Persist *settings*.  Unknown keys are rejected."""
    unknown = set(settings) - set(DEFAULT_SETTINGS)
    if unknown:
        raise ValueError(f"Unknown setting(s): {', '.join(sorted(unknown))}")
    if settings.get("render", "text") not in STYLES:
        raise ValueError(f"render must be one of: {', '.join(STYLES)}")
    db = _load_db()
    db["settings"] = settings
    _save_db(db)


def reset_settings() -> None:
    db = _load_db()
    db["settings"] = dict(DEFAULT_SETTINGS)
    _save_db(db)


# ── History ──────────────────────────────────────────────────────────────

def add_history(equation: str, answer: str) -> str:
    """Record a solve, newest first.  Returns the new record id."""
    db = _load_db()
    record = {
        "id": uuid.uuid4().hex,
        "equation": equation,
        "answer": answer,
        "timestamp": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        "epoch": time.time(),
    }
    limit = get_settings().get("history_limit", DEFAULT_SETTINGS["history_limit"])
    db["history"].insert(0, record)
    db["history"] = db["history"][:limit]
    _save_db(db)
    return record["id"]


def get_history() -> list[dict]:
    """Return the history list (newest first)."""
    return _load_db().get("history", [])


def delete_history_item(record_id: str) -> None:
    db = _load_db()
    db["history"] = [r for r in db["history"] if r.get("id") != record_id]
    _save_db(db)


def clear_history() -> None:
    """Remove all history entries."""
    db = _load_db()
    db["history"] = []
    _save_db(db)
