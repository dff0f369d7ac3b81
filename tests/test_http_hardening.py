import os
import unittest

from fastapi.testclient import TestClient

os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

from app.main import app
from app.core.http_hardening import request_id_from_header


class HttpHardeningTests(unittest.TestCase):
    def setUp(self):
        self.client = TestClient(app)

    def tearDown(self):
        self.client.close()

    def test_health_has_api_headers_and_request_id(self):
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)

        self.assertEqual(response.headers.get("x-content-type-options"), "nosniff")
        self.assertEqual(response.headers.get("x-frame-options"), "DENY")
        self.assertEqual(response.headers.get("cache-control"), "no-store")
        self.assertIsNotNone(response.headers.get("x-response-time-ms"))

        request_id = response.headers.get("x-request-id")
        self.assertIsNotNone(request_id)
        self.assertRegex(str(request_id), r"^[A-Za-z0-9._-]{1,128}$")

    def test_valid_request_id_is_preserved(self):
        response = self.client.get("/health", headers={"X-Request-ID": "catalog-check_2026.10"})
        self.assertEqual(response.headers.get("x-request-id"), "catalog-check_2026.10")

    def test_invalid_request_id_is_replaced(self):
        response = self.client.get("/health", headers={"X-Request-ID": "bad id with spaces"})
        self.assertNotEqual(response.headers.get("x-request-id"), "bad id with spaces")

    def test_request_id_helper(self):
        self.assertEqual(request_id_from_header(" abc-1 "), "abc-1")
        self.assertEqual(len(request_id_from_header(None)), 32)
        self.assertEqual(len(request_id_from_header("x" * 129)), 32)

    def test_not_found_route_keeps_headers(self):
        response = self.client.get("/api/nowhere")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.headers.get("x-frame-options"), "DENY")
        self.assertTrue(bool(response.headers.get("x-request-id")))


if __name__ == "__main__":
    unittest.main()
