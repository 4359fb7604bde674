"""HTTP tests for the dispatch endpoint."""

from __future__ import annotations

import unittest

from fastapi.testclient import TestClient

from app.api.v1.routes.dispatch import get_message_dispatcher
from app.main import app
from app.models.user import User
from app.providers.directory.in_memory import InMemoryUserDirectory
from app.services.message_dispatcher import MessageDispatcher


class RejectingTransport:
    """Transport test double that fails every delivery."""

    def attempt_delivery(self, email: str, message: str) -> bool:
        del email
        del message
        return False


class DispatchApiTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()

    def test_health_check(self) -> None:
        response = self.client.get("/")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "ok")

    def test_dispatch_with_mock_providers(self) -> None:
        response = self.client.post(
            "/api/v1/messages/dispatch",
            json={"user_ids": [4, 2, 42], "message": "hello"},
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json(),
            {"results": [{"id": 2, "status": "delivered"}, {"id": 4, "status": "delivered"}]},
        )

    def test_empty_message_returns_400(self) -> None:
        response = self.client.post(
            "/api/v1/messages/dispatch",
            json={"user_ids": [1], "message": ""},
        )

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"detail": "cannot_send_empty_message"})

    def test_invalid_payload_returns_422(self) -> None:
        response = self.client.post(
            "/api/v1/messages/dispatch",
            json={"user_ids": "all", "message": "hello"},
        )

        self.assertEqual(response.status_code, 422)

    def test_failed_deliveries_surface_as_error_status(self) -> None:
        directory = InMemoryUserDirectory([User(id=9, name="Nine", age=9, email="nine@example.com")])
        app.dependency_overrides[get_message_dispatcher] = lambda: MessageDispatcher(
            directory=directory,
            transport=RejectingTransport(),
        )

        response = self.client.post(
            "/api/v1/messages/dispatch",
            json={"user_ids": [9], "message": "hello"},
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"results": [{"id": 9, "status": "error"}]})


if __name__ == "__main__":
    unittest.main()
