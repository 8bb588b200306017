import pytest

from db import get_session
from exchange.record import MediaRecord
from main import create_app
from services.media_store import MediaStore


@pytest.fixture
def app():
    """Flask app on a fresh in-memory SQLite database."""
    app = create_app("sqlite://")
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    """Return a Flask test client."""
    return app.test_client()


@pytest.fixture
def session(app):
    s = get_session()
    yield s
    s.close()


@pytest.fixture
def store(session):
    return MediaStore(session)


@pytest.fixture
def seeded_store(store):
    """Store pre-filled with three records."""
    for n in range(1, 4):
        store.upsert(MediaRecord(url=f"https://old{n}.example", description=f"Old {n}"))
    return store
