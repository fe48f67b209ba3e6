"""
Shared fixtures: in-memory SQLite wired into the app, a seeded user, session
tokens and an Overpass client backed by httpx.MockTransport.
"""
import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_FORMAT", "text")
os.environ["SECURITY_JWT_SECRET"] = "test-secret-with-at-least-32-bytes!!"

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from kidmap.config import OverpassSettings
from kidmap.core.db import build_engine, get_db, init_db
from kidmap.core.dependencies import get_overpass_client
from kidmap.core.security import issue_session_token
from kidmap.models.user import User
from kidmap.services.overpass_client import OverpassClient


def overpass_client_for(handler) -> OverpassClient:
    """OverpassClient whose HTTP calls are answered by ``handler(request) -> httpx.Response``."""
    return OverpassClient(
        overpass_settings=OverpassSettings(api_url="https://overpass.test/api/interpreter"),
        transport=httpx.MockTransport(handler),
    )


@pytest.fixture
def make_overpass_client():
    return overpass_client_for


@pytest.fixture
def engine():
    engine = build_engine("sqlite://", poolclass=StaticPool)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def test_user(db_session):
    user = User(id="user-1", email="parent@example.com", first_name="Pat", last_name="Lee")
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture
def other_user(db_session):
    user = User(id="user-2", email="other@example.com")
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture
def overpass_elements():
    return [
        {
            "type": "node", "id": 101, "lat": 40.74, "lon": -74.05,
            "tags": {
                "leisure": "playground",
                "name": "Liberty Park Playground",
                "addr:housenumber": "12",
                "addr:street": "Grand Street",
                "addr:city": "Jersey City",
            },
        },
        {
            "type": "way", "id": 202, "center": {"lat": 40.72, "lon": -74.04},
            "tags": {"tourism": "museum"},
        },
        {
            "type": "node", "id": 303, "lat": 40.75, "lon": -74.03,
            "tags": {"leisure": "park", "name": "Hamilton Park"},
        },
        {
            "type": "node", "id": 404, "lat": 40.73, "lon": -74.06,
            "tags": {"amenity": "restaurant", "name": "Not For Kids Diner"},
        },
    ]


@pytest.fixture
def app(session_factory):
    from kidmap.main import app

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def overpass_stub(app, overpass_elements):
    """Serve ``overpass_elements`` from /api/places; set ``.status`` to make upstream fail."""

    class Stub:
        status = 200
        requests = []

    stub = Stub()

    def handler(request: httpx.Request) -> httpx.Response:
        stub.requests.append(request)
        if stub.status != 200:
            return httpx.Response(stub.status, text="busy")
        return httpx.Response(200, json={"version": 0.6, "elements": overpass_elements})

    app.dependency_overrides[get_overpass_client] = lambda: overpass_client_for(handler)
    return stub


@pytest.fixture
def auth_headers(test_user):
    token = issue_session_token(test_user.id, email=test_user.email)
    return {"Authorization": f"Bearer {token}"}
