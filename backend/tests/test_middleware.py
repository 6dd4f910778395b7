from fastapi import FastAPI
from fastapi.testclient import TestClient

from insights.middleware.error_handler import register_error_handlers
from insights.middleware.rate_limit import RateLimitMiddleware
from insights.middleware.security import SecurityMiddleware
from insights.storage.base import StorageError


def _build_app(**limits) -> FastAPI:
    app = FastAPI()
    app.add_middleware(RateLimitMiddleware, **limits)

    @app.get("/ping")
    async def ping():
        return {"ok": True}

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


class TestRateLimitMiddleware:
    def test_blocks_after_limit(self):
        client = TestClient(_build_app(max_requests=2, window_seconds=60))
        assert client.get("/ping").status_code == 200
        assert client.get("/ping").status_code == 200
        blocked = client.get("/ping")
        assert blocked.status_code == 429
        assert int(blocked.headers["retry-after"]) >= 1

    def test_health_is_exempt(self):
        client = TestClient(_build_app(max_requests=1, window_seconds=60))
        for _ in range(3):
            assert client.get("/health").status_code == 200


class TestSecurityMiddleware:
    def _client(self, max_body_size: int = 1024) -> TestClient:
        app = FastAPI()
        app.add_middleware(SecurityMiddleware, max_body_size=max_body_size)

        @app.post("/feedback")
        async def feedback(payload: dict):
            return payload

        @app.post("/other")
        async def other():
            return {"ok": True}

        return TestClient(app)

    def test_oversized_body(self):
        resp = self._client(max_body_size=10).post("/feedback", json={"description": "x" * 50})
        assert resp.status_code == 413

    def test_feedback_requires_json(self):
        resp = self._client().post("/feedback", content="a=b", headers={"content-type": "text/plain"})
        assert resp.status_code == 415

    def test_json_with_charset_passes(self):
        resp = self._client().post(
            "/feedback", content='{"a": 1}',
            headers={"content-type": "application/json; charset=utf-8"},
        )
        assert resp.status_code == 200

    def test_other_paths_not_content_checked(self):
        assert self._client().post("/other").status_code == 200


class TestErrorHandlers:
    def _client(self) -> TestClient:
        app = FastAPI()
        register_error_handlers(app)

        @app.get("/value")
        async def value():
            raise ValueError("bad window")

        @app.get("/storage")
        async def storage():
            raise StorageError("disk full")

        @app.get("/boom")
        async def boom():
            raise RuntimeError("secret details")

        return TestClient(app, raise_server_exceptions=False)

    def test_value_error_is_400(self):
        resp = self._client().get("/value")
        assert resp.status_code == 400
        assert resp.json() == {"detail": "bad window", "type": "validation_error"}

    def test_storage_error_is_503(self):
        resp = self._client().get("/storage")
        assert resp.status_code == 503
        assert resp.json()["type"] == "storage_error"

    def test_unhandled_error_hides_details(self):
        resp = self._client().get("/boom")
        assert resp.status_code == 500
        assert resp.json() == {"detail": "Internal server error", "type": "internal_error"}
