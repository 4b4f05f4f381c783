"""Tests for app wiring: liveness, unknown routes, body parsing errors and the 500 boundary."""

from datetime import datetime

from fastapi.testclient import TestClient

from skillboard.core.security import TokenService

from support import ApiTestCase


class TestHealth(ApiTestCase):
    def test_liveness(self) -> None:
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["status"], "OK")
        datetime.fromisoformat(body["timestamp"])


class TestRouteNotFound(ApiTestCase):
    def test_unknown_route(self) -> None:
        response = self.client.get("/api/nope")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"success": False, "message": "Route not found"})

    def test_root_is_not_routed(self) -> None:
        self.assertEqual(self.client.get("/").status_code, 404)

    def test_wrong_method(self) -> None:
        response = self.client.delete("/api/auth/profile")
        self.assertEqual(response.status_code, 405)
        self.assertFalse(response.json()["success"])


class TestRequestBody(ApiTestCase):
    def test_invalid_json_is_a_validation_failure(self) -> None:
        response = self.client.post(
            "/api/auth/register",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        self.assertEqual(response.status_code, 400)
        body = response.json()
        self.assertFalse(body["success"])
        self.assertEqual(body["message"], "Validation failed")
        self.assertTrue(body["errors"])

    def test_non_object_json(self) -> None:
        response = self.client.post("/api/auth/login", json=["a@x.com", "secret1"])
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["message"], "Validation failed")


class TestUnhandledErrors(ApiTestCase):
    def test_unexpected_error_is_masked(self) -> None:
        def boom() -> None:
            raise RuntimeError("database exploded")

        self.app.add_api_route("/boom", boom)
        client = TestClient(self.app, raise_server_exceptions=False)
        with self.assertLogs("skillboard.app", level="ERROR"):
            response = client.get("/boom")
        self.assertEqual(response.status_code, 500)
        self.assertEqual(
            response.json(), {"success": False, "message": "Internal server error"}
        )
        self.assertNotIn("exploded", response.text)


class TestAppState(ApiTestCase):
    def test_configuration_built_once_and_shared(self) -> None:
        self.assertIs(self.app.state.settings, self.settings)
        self.assertIsInstance(self.app.state.token_service, TokenService)

    def test_api_prefix_from_settings(self) -> None:
        from skillboard.app import create_app
        from skillboard.models import Base

        from support import make_settings

        app = create_app(make_settings(API_PREFIX="/v2/"))
        Base.metadata.create_all(app.state.engine)
        with TestClient(app) as client:
            response = client.post("/v2/auth/login", json={})
        self.assertEqual(response.status_code, 400)
