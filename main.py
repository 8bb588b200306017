#!/usr/bin/env python3
"""
MediaDB - Media catalog web service
===================================

Single-command run:  python main.py

See config.py for all environment-variable tunables.
"""

import logging

from flask import Flask

import config
from db import init_db, get_session
from api import api_bp
from exchange import ImportCoordinator
from exchange.errors import ExchangeError
from services.media_store import MediaStore


def create_app(db_url: str | None = None) -> Flask:
    """Flask application factory."""

    app = Flask(__name__)
    app.secret_key = config.SECRET

    # ── Initialise database ─────────────────────────────────────────
    init_db(db_url or config.DB_URL)

    # ── Register blueprints ─────────────────────────────────────────
    app.register_blueprint(api_bp)

    return app


def _seed_if_empty():
    """Merge-import the seed file when the catalog is empty."""
    session = get_session()
    try:
        store = MediaStore(session)
        count = store.count()
        if count > 0:
            print(f"\n  Database has {count} media items.")
            return

        seed = config.IMPORT_DIR / config.SEED_FILE
        if not seed.exists():
            print(f"\n  No seed file at {seed} - starting empty.")
            return

        print(f"\n  Database empty → auto-importing {config.SEED_FILE} …")
        try:
            report = ImportCoordinator(store).import_path(config.SEED_FILE)
        except ExchangeError as exc:
            print(f"  Seed import failed: {exc}")
            return
    finally:
        session.close()

    print(f"  Done: {report.persisted} imported, "
          f"{report.failed} skipped / {report.decoded} decoded")
    if report.diagnostics:
        print("  First errors (max 10):")
        for diag in report.diagnostics[:10]:
            print(f"    Line {diag.line}: {diag.reason}")


def main():
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print("=" * 56)
    print("  MediaDB - Media Catalog")
    print("=" * 56)

    app = create_app()
    print(f"  Database: {config.DB_URL}")
    _seed_if_empty()

    print(f"\n  http://{config.HOST}:{config.PORT}/api/media")
    print("=" * 56)

    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG)


if __name__ == "__main__":
    main()
