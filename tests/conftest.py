import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session

from app.main import app
from app.api.dependencies import get_tutorial_repository
from app.db.repositories.base import StoreError
from app.db.repositories.tutorials import TutorialRepository
from app.db.session import build_engine, get_session


@pytest.fixture()
def engine():
    """Fresh in-memory SQLite database for each test."""
    eng = build_engine("sqlite://", echo=False, poolclass=StaticPool)
    SQLModel.metadata.create_all(eng)
    yield eng
    eng.dispose()


@pytest.fixture()
def session(engine):
    with Session(engine) as s:
        yield s


@pytest.fixture()
def client(engine):
    def _session_override():
        with Session(engine) as s:
            yield s

    app.dependency_overrides[get_session] = _session_override
    yield TestClient(app)
    app.dependency_overrides.clear()


class BrokenTutorialRepository(TutorialRepository):
    """Every store call fails, as if the database were unreachable."""

    def __init__(self, message="database is locked"):
        self.message = message

    def _fail(self, *args, **kwargs):
        raise StoreError(self.message)

    create = find_all = find_by_title = find_published = get = _fail
    update_by_id = destroy_by_id = destroy_all = count = _fail


@pytest.fixture()
def broken_client():
    app.dependency_overrides[get_tutorial_repository] = lambda: BrokenTutorialRepository()
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def silent_broken_client():
    """Store failures without a driver message: routes fall back to their own text."""
    app.dependency_overrides[get_tutorial_repository] = lambda: BrokenTutorialRepository(message=None)
    yield TestClient(app)
    app.dependency_overrides.clear()
