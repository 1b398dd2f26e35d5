"""Shared fixtures: an in-memory MongoDB and an API client bound to it."""

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from app import app
from database import get_db


class FakeClient:
    """Stand-in for AsyncMongoClient that hands out one database and records close()."""

    def __init__(self, db):
        self.db = db
        self.closed = False

    def __getitem__(self, name):
        return self.db

    async def close(self):
        self.closed = True


@pytest.fixture
def db():
    """Fresh in-memory database per test."""
    return AsyncMongoMockClient()["interview_practice_test"]


@pytest.fixture
def fake_client(db):
    """Client wrapper around the in-memory database."""
    return FakeClient(db)


@pytest.fixture
def client(db):
    """TestClient with get_db overridden; startup events are not run."""
    app.dependency_overrides[get_db] = lambda: db
    yield TestClient(app)
    app.dependency_overrides.clear()
