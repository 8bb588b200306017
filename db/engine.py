"""
db.engine - Engine bootstrap and session factory.

The connection string comes from config.DB_URL; SQLite (file or
in-memory) gets its pragmas, any other backend is used as-is.
"""

from __future__ import annotations

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from db.models import Base

_engine: Engine | None = None
_SessionLocal: sessionmaker | None = None

_SQLITE_PRAGMAS = ("journal_mode=WAL", "synchronous=NORMAL")


def init_db(db_url: str) -> None:
    """(Re)build the engine and session factory, creating missing tables."""
    global _engine, _SessionLocal

    if _engine is not None:
        _engine.dispose()

    _engine = _build_engine(db_url)
    Base.metadata.create_all(_engine)
    _SessionLocal = sessionmaker(bind=_engine, expire_on_commit=False)


def get_session() -> Session:
    """Return a new session.  Caller is responsible for .close()."""
    if _SessionLocal is None:
        raise RuntimeError("Database not initialised - call init_db() first")
    return _SessionLocal()


def _build_engine(db_url: str) -> Engine:
    if not db_url.startswith("sqlite"):
        return create_engine(db_url, future=True)

    kwargs = {}
    if db_url in ("sqlite://", "sqlite:///:memory:") or ":memory:" in db_url:
        # In-memory DB lives in one connection; share it across sessions
        kwargs = {"connect_args": {"check_same_thread": False}, "poolclass": StaticPool}
    engine = create_engine(db_url, future=True, **kwargs)

    @event.listens_for(engine, "connect")
    def _apply_pragmas(dbapi_conn, _rec):
        cur = dbapi_conn.cursor()
        for pragma in _SQLITE_PRAGMAS:
            cur.execute(f"PRAGMA {pragma}")
        cur.close()

    return engine
