"""Shared helpers: app and database wired to in-memory SQLite for tests."""

import unittest
from typing import Any

from fastapi.testclient import TestClient
from httpx import Response
from sqlalchemy.orm import Session

from skillboard.app import create_app
from skillboard.core.config import Settings
from skillboard.core.database import create_db_engine, create_session_factory
from skillboard.models import Base

TEST_JWT_SECRET = "test-jwt-secret"


def make_settings(**overrides: Any) -> Settings:
    """Settings isolated from .env: in-memory SQLite and cheap bcrypt rounds."""
    values: dict[str, Any] = {
        "DATABASE_URL": "sqlite://",
        "JWT_SECRET": TEST_JWT_SECRET,
        "BCRYPT_ROUNDS": 4,
        "APP_ENV": "dev",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def make_session(settings: Settings | None = None) -> Session:
    """A session on a fresh database with the schema created."""
    engine = create_db_engine(settings or make_settings())
    Base.metadata.create_all(engine)
    return create_session_factory(engine)()


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


class ApiTestCase(unittest.TestCase):
    """Fresh app, database and TestClient per test."""

    def setUp(self) -> None:
        self.settings = make_settings()
        self.app = create_app(self.settings)
        Base.metadata.create_all(self.app.state.engine)
        self.client = TestClient(self.app)

    def tearDown(self) -> None:
        self.client.close()
        self.app.state.engine.dispose()

    def register(self, **overrides: Any) -> Response:
        payload: dict[str, Any] = {
            "name": "John Doe",
            "email": "john@example.com",
            "password": "password123",
        }
        payload.update(overrides)
        return self.client.post("/api/auth/register", json=payload)

    def register_token(self, **overrides: Any) -> str:
        response = self.register(**overrides)
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()["data"]["token"]
