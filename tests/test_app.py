"""Tests for application startup."""

import logging

from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from app.database import get_db
from app.main import app


class TestLifespan:

    def test_index_failure_is_not_fatal(self, failing_client, caplog):
        with caplog.at_level(logging.ERROR, logger="app.main"):
            with TestClient(app) as started:
                response = started.get("/")

        assert response.status_code == 200
        assert "Could not create user indexes" in caplog.text

    def test_indexes_created_on_startup(self):
        # No index yet: only startup can enforce email uniqueness here
        db = AsyncMongoMockClient()["fresh_users_app"]

        async def override_get_db():
            return db

        app.dependency_overrides[get_db] = override_get_db
        try:
            with TestClient(app) as started:
                payload = {"name": "Al", "email": "al@example.com"}
                assert started.post("/users", json=payload).status_code == 201
                assert started.post("/users", json=payload).status_code == 409
        finally:
            app.dependency_overrides.clear()
