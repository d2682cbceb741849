"""Unit tests for middleware."""

import pytest
import structlog
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from api.middleware.logging import RequestLoggingMiddleware
from api.middleware.request_id import MAX_REQUEST_ID_LENGTH, RequestIDMiddleware
from api.middleware.security import SecurityHeadersMiddleware


def _create_app_with_middleware() -> FastAPI:
    """Create a minimal FastAPI app with the production middleware order."""
    app = FastAPI()
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/test")
    async def _():
        return {"ok": True}

    @app.get("/context")
    async def _context():
        return structlog.contextvars.get_contextvars()

    return app


async def _get(path: str, **kwargs):
    transport = ASGITransport(app=_create_app_with_middleware())
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        return await c.get(path, **kwargs)


class TestSecurityHeadersMiddleware:
    """Tests for SecurityHeadersMiddleware."""

    @pytest.mark.asyncio
    async def test_adds_x_content_type_options(self):
        response = await _get("/test")

        assert response.headers["x-content-type-options"] == "nosniff"

    @pytest.mark.asyncio
    async def test_adds_x_frame_options(self):
        response = await _get("/test")

        assert response.headers["x-frame-options"] == "DENY"

    @pytest.mark.asyncio
    async def test_adds_referrer_policy(self):
        response = await _get("/test")

        assert response.headers["referrer-policy"] == "strict-origin-when-cross-origin"

    @pytest.mark.asyncio
    async def test_disables_legacy_xss_filter(self):
        response = await _get("/test")

        assert response.headers["x-xss-protection"] == "0"


class TestRequestIDMiddleware:
    """Tests for RequestIDMiddleware."""

    @pytest.mark.asyncio
    async def test_generates_request_id_when_not_provided(self):
        response = await _get("/test")

        assert len(response.headers["x-request-id"]) > 0

    @pytest.mark.asyncio
    async def test_propagates_existing_request_id(self):
        response = await _get("/test", headers={"X-Request-ID": "custom-req-123"})

        assert response.headers["x-request-id"] == "custom-req-123"

    @pytest.mark.asyncio
    async def test_replaces_oversized_request_id(self):
        oversized = "x" * (MAX_REQUEST_ID_LENGTH + 1)

        response = await _get("/test", headers={"X-Request-ID": oversized})

        assert response.headers["x-request-id"] != oversized
        assert len(response.headers["x-request-id"]) == 36

    @pytest.mark.asyncio
    async def test_generated_ids_differ(self):
        transport = ASGITransport(app=_create_app_with_middleware())
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            r1 = await c.get("/test")
            r2 = await c.get("/test")

        assert r1.headers["x-request-id"] != r2.headers["x-request-id"]


class TestRequestLoggingMiddleware:
    """Tests for RequestLoggingMiddleware."""

    @pytest.mark.asyncio
    async def test_binds_request_context_for_handlers(self):
        response = await _get("/context", headers={"X-Request-ID": "ctx-1"})

        assert response.status_code == 200
        assert response.json() == {"request_id": "ctx-1", "method": "GET", "path": "/context"}

    @pytest.mark.asyncio
    async def test_passes_error_responses_through(self):
        response = await _get("/missing")

        assert response.status_code == 404
        assert "x-request-id" in response.headers
