"""
MediaDB - Centralised configuration.

All tunables live here.  Every other module imports from config
instead of reading os.environ directly.
"""

from __future__ import annotations
import os
from pathlib import Path


# ── Paths ──────────────────────────────────────────────────────────────
BASE_DIR    = Path(__file__).resolve().parent
IMPORT_DIR  = Path(os.environ.get("MEDIADB_IMPORT_DIR", BASE_DIR / "resources")).resolve()
# Seed file is resolved relative to IMPORT_DIR, like any path import
SEED_FILE   = os.environ.get("MEDIADB_SEED", "mediaitems.csv")

# ── Database ───────────────────────────────────────────────────────────
DB_URL = os.environ.get("MEDIADB_DB", f"sqlite:///{BASE_DIR / 'mediadb.sqlite'}")

# ── Server ─────────────────────────────────────────────────────────────
HOST   = os.environ.get("MEDIADB_HOST", "0.0.0.0")
PORT   = int(os.environ.get("MEDIADB_PORT", "8080"))
DEBUG  = os.environ.get("MEDIADB_DEBUG", "0") == "1"
SECRET = os.environ.get("MEDIADB_SECRET", "mediadb-dev-key-change-in-prod")

# ── Logging ────────────────────────────────────────────────────────────
LOG_LEVEL = os.environ.get("MEDIADB_LOG_LEVEL", "INFO").upper()
