"""
Tests for middleware and infrastructure components.
"""

import json
import logging
from unittest.mock import MagicMock, patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from rest_api.core.middlewares import (
    JsonBodyMiddleware,
    SecurityHeadersMiddleware,
    register_middlewares,
)
from shared.config.logging import StructuredFormatter, StructuredLogger, get_logger
from shared.infrastructure.correlation import (
    CorrelationIdFilter,
    CorrelationIdMiddleware,
    get_request_id,
    request_id_var,
)
from shared.infrastructure.db import safe_commit


def build_app(*middlewares) -> FastAPI:
    app = FastAPI()
    for middleware in middlewares:
        app.add_middleware(middleware)

    @app.get("/test")
    def get_endpoint():
        return {"request_id": get_request_id()}

    @app.post("/test")
    def post_endpoint(data: dict):
        return {"received": data}

    return app


# =============================================================================
# SecurityHeadersMiddleware Tests
# =============================================================================


class TestSecurityHeadersMiddleware:
    """Tests for security headers middleware."""

    def test_adds_security_headers(self):
        client = TestClient(build_app(SecurityHeadersMiddleware))
        response = client.get("/test")

        assert response.headers.get("X-Content-Type-Options") == "nosniff"
        assert response.headers.get("X-Frame-Options") == "DENY"
        assert response.headers.get("Referrer-Policy") == "strict-origin-when-cross-origin"
        assert "geolocation=()" in response.headers.get("Permissions-Policy", "")
        assert "default-src 'none'" in response.headers.get("Content-Security-Policy", "")

    def test_docs_keep_default_csp(self):
        """The interactive docs load scripts, so no restrictive CSP there."""
        client = TestClient(build_app(SecurityHeadersMiddleware))
        response = client.get("/docs")

        assert "Content-Security-Policy" not in response.headers

    def test_adds_hsts_in_production(self):
        with patch("rest_api.core.middlewares.settings") as mock_settings:
            mock_settings.environment = "production"

            client = TestClient(build_app(SecurityHeadersMiddleware))
            response = client.get("/test")

            assert "max-age=31536000" in response.headers.get("Strict-Transport-Security", "")

    def test_no_hsts_in_development(self):
        with patch("rest_api.core.middlewares.settings") as mock_settings:
            mock_settings.environment = "development"

            client = TestClient(build_app(SecurityHeadersMiddleware))
            response = client.get("/test")

            assert "Strict-Transport-Security" not in response.headers


# =============================================================================
# JsonBodyMiddleware Tests
# =============================================================================


class TestJsonBodyMiddleware:
    """Tests for the JSON body check."""

    def test_allows_json(self):
        client = TestClient(build_app(JsonBodyMiddleware))
        response = client.post("/test", json={"key": "value"})

        assert response.status_code == 200

    def test_rejects_other_content_types(self):
        client = TestClient(build_app(JsonBodyMiddleware))
        response = client.post("/test", content="some data", headers={"Content-Type": "text/plain"})

        assert response.status_code == 415
        assert "application/json" in response.json()["detail"]

    def test_ignores_get(self):
        client = TestClient(build_app(JsonBodyMiddleware))

        assert client.get("/test", headers={"Content-Type": "text/plain"}).status_code == 200


# =============================================================================
# Correlation Tests
# =============================================================================


class TestCorrelationIdMiddleware:
    """Tests for correlation ID middleware."""

    def test_generates_request_id_when_not_provided(self):
        client = TestClient(build_app(CorrelationIdMiddleware))
        response = client.get("/test")

        request_id = response.headers.get("X-Request-ID")
        assert request_id is not None
        assert len(request_id) == 36  # UUID v4 length
        assert response.json()["request_id"] == request_id

    def test_uses_provided_request_id(self):
        client = TestClient(build_app(CorrelationIdMiddleware))
        response = client.get("/test", headers={"X-Request-ID": "my-custom-request-id-12345"})

        assert response.headers.get("X-Request-ID") == "my-custom-request-id-12345"
        assert response.json()["request_id"] == "my-custom-request-id-12345"


class TestCorrelationIdFilter:
    """Tests for correlation ID logging filter."""

    def test_adds_request_id_to_log_record(self):
        token = request_id_var.set("test-request-123")
        try:
            record = MagicMock()
            assert CorrelationIdFilter().filter(record) is True
            assert record.request_id == "test-request-123"
        finally:
            request_id_var.reset(token)

    def test_uses_dash_when_no_request_id(self):
        token = request_id_var.set("")
        try:
            record = MagicMock()
            assert CorrelationIdFilter().filter(record) is True
            assert record.request_id == "-"
        finally:
            request_id_var.reset(token)


# =============================================================================
# Structured logging Tests
# =============================================================================


class TestStructuredLogger:
    """Keyword arguments become structured data on the record."""

    def test_keywords_attached_as_extra_data(self, caplog):
        logger = get_logger("rest_api.test_structured")
        assert isinstance(logger, StructuredLogger)

        with caplog.at_level(logging.INFO, logger="rest_api.test_structured"):
            logger.info("Entity created", entity="Branch", entity_id=7)

        record = caplog.records[-1]
        assert record.getMessage() == "Entity created"
        assert record.extra_data == {"entity": "Branch", "entity_id": 7}

    def test_json_formatter_fields(self):
        """The JSON line carries the record and its data, nothing else."""
        record = logging.LogRecord(
            "rest_api.test_structured", logging.WARNING, __file__, 10, "Entity already inactive", None, None
        )
        record.extra_data = {"entity": "Zone", "entity_id": 3}
        record.request_id = "req-9"

        log_data = json.loads(StructuredFormatter().format(record))

        assert set(log_data) == {"timestamp", "level", "logger", "message", "request_id", "data"}
        assert log_data["level"] == "WARNING"
        assert log_data["data"] == {"entity": "Zone", "entity_id": 3}


# =============================================================================
# safe_commit Tests
# =============================================================================


class TestSafeCommit:
    """Tests for safe_commit utility."""

    def test_commits_successfully(self):
        mock_db = MagicMock()

        safe_commit(mock_db)

        mock_db.commit.assert_called_once()
        mock_db.rollback.assert_not_called()

    def test_rollbacks_and_reraises_on_error(self):
        mock_db = MagicMock()

        class CustomDBError(Exception):
            pass

        mock_db.commit.side_effect = CustomDBError("Custom error")

        with pytest.raises(CustomDBError):
            safe_commit(mock_db)

        mock_db.rollback.assert_called_once()


# =============================================================================
# register_middlewares Tests
# =============================================================================


class TestRegisterMiddlewares:
    """Tests for middleware registration."""

    def test_registers_all_middlewares(self):
        app = FastAPI()

        register_middlewares(app)

        middleware_classes = [m.cls for m in app.user_middleware]
        assert SecurityHeadersMiddleware in middleware_classes
        assert JsonBodyMiddleware in middleware_classes
