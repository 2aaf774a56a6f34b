"""Pytest configuration and shared fixtures."""

import asyncio

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient
from pymongo.errors import PyMongoError

from app.crud.user import create_indexes
from app.database import get_db
from app.main import app


class FailingCollection:
    """Collection whose every operation fails like an unreachable server."""

    def __getattr__(self, name):
        if name.startswith("__"):
            raise AttributeError(name)

        def fail(*args, **kwargs):
            raise PyMongoError("connection refused")
        return fail


class FailingDatabase:
    def __getattr__(self, name):
        if name.startswith("__"):
            raise AttributeError(name)
        return FailingCollection()


def _override_db(db):
    async def override_get_db():
        return db

    app.dependency_overrides[get_db] = override_get_db


@pytest.fixture
def mock_db():
    """In-memory MongoDB with the users indexes in place."""
    db = AsyncMongoMockClient()["test_users_app"]
    asyncio.run(create_indexes(db))
    return db


@pytest.fixture
def failing_db():
    return FailingDatabase()


@pytest.fixture
def client(mock_db):
    """TestClient whose get_db dependency returns the in-memory database."""
    _override_db(mock_db)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def failing_client(failing_db):
    """TestClient backed by a database that rejects every operation."""
    _override_db(failing_db)
    yield TestClient(app)
    app.dependency_overrides.clear()
