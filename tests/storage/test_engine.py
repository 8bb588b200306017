import pytest

from db import engine, get_session, init_db
from exchange.record import MediaRecord
from services.media_store import MediaStore


def test_in_memory_db_shared_across_sessions():
    init_db("sqlite://")
    first, second = get_session(), get_session()
    try:
        MediaStore(first).upsert(MediaRecord(url="https://a.com"))
        assert MediaStore(second).count() == 1
    finally:
        first.close()
        second.close()


def test_init_db_again_starts_from_an_empty_catalog():
    init_db("sqlite://")
    session = get_session()
    MediaStore(session).upsert(MediaRecord(url="https://a.com"))
    session.close()

    init_db("sqlite://")
    session = get_session()
    try:
        assert MediaStore(session).count() == 0
    finally:
        session.close()


def test_file_db_gets_sqlite_pragmas(tmp_path):
    init_db(f"sqlite:///{tmp_path / 'media.db'}")
    with engine._engine.connect() as conn:
        assert conn.exec_driver_sql("PRAGMA journal_mode").scalar() == "wal"


def test_get_session_before_init_raises(monkeypatch):
    monkeypatch.setattr(engine, "_SessionLocal", None)
    with pytest.raises(RuntimeError):
        get_session()
