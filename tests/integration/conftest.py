"""API fixtures: in-memory SQLite shared across threads and fixed tokens."""

import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from app.db import base  # noqa: F401
from app.core.config import settings
from app.db.session import get_db
from app.main import app
from app.models.test_session import TestSessionRecord

TOKENS = {"admin-token": "admin", "coach-token": "coach", "viewer-token": "viewer"}


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def client(engine, monkeypatch):
    def override_get_db():
        with Session(engine) as session:
            yield session

    monkeypatch.setattr(settings, "ACCESS_TOKENS", TOKENS)
    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def auth(role: str = "coach") -> dict:
    return {"Authorization": f"Bearer {role}-token"}


@pytest.fixture
def coach():
    return auth("coach")


@pytest.fixture
def viewer():
    return auth("viewer")


@pytest.fixture
def create_player(client, coach):
    def factory(first_name="Mario", last_name="Rossi", **fields):
        response = client.post("/api/v1/players", json={"first_name": first_name, "last_name": last_name, **fields},
                               headers=coach, )
        assert response.status_code == 201, response.text
        return response.json()

    return factory


@pytest.fixture
def create_session(client, coach, make_series):
    def factory(player_id, date="2026-05-10", category="terza", series=None, **series_kwargs):
        payload = {"player_id": player_id, "date": date, "category": category, "coach": "Coach",
                   "series": series if series is not None else make_series(**series_kwargs)}
        response = client.post("/api/v1/sessions", json=payload, headers=coach)
        assert response.status_code == 201, response.text
        return response.json()

    return factory


@pytest.fixture
def admin():
    return auth("admin")


@pytest.fixture
def store_draft(engine, make_series):
    """Write an incomplete session straight to the table, bypassing the API checks."""

    def factory(player_id, **series_kwargs):
        record = TestSessionRecord(player_id=player_id, player_name="Draft", date=datetime.date(2026, 5, 10),
                                   category="terza", completed=False, series=make_series(**series_kwargs), )
        with Session(engine) as session:
            session.add(record)
            session.commit()
            session.refresh(record)
            return record.id

    return factory
