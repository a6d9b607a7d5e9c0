"""
Tests for the centralized FastAPI error handlers.

Routes on a throwaway application raise errors; the handlers must
translate them into JSON responses without leaking internals.
"""

import logging

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.domain.common.errors import (
    ConflictError,
    DomainError,
    NotFoundError,
    UnexpectedError,
    ValidationError,
)
from app.main import create_app
from app.shared.errors import UNEXPECTED_ERROR_MESSAGE, ApiError, new_bad_request
from app.shared.errors.handlers import register_error_handlers

HANDLER_LOGGER = "app.shared.errors.handlers"


def _build_app() -> FastAPI:
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/not-found")
    def not_found() -> None:
        raise NotFoundError("user 42 not found")

    @app.get("/validation")
    def validation() -> None:
        raise ValidationError("email is required")

    @app.get("/conflict")
    def conflict() -> None:
        raise ConflictError("username already taken")

    @app.get("/unexpected")
    def unexpected() -> None:
        raise UnexpectedError("db connection reset")

    @app.get("/unknown-kind")
    def unknown_kind() -> None:
        raise DomainError("internal detail", "Timeout")  # type: ignore[arg-type]

    @app.get("/api-error")
    def api_error() -> None:
        raise new_bad_request("page size too large")

    @app.get("/crash")
    def crash() -> None:
        raise RuntimeError("segfault in driver")

    return app


@pytest.fixture
def client() -> TestClient:
    return TestClient(_build_app(), raise_server_exceptions=False)


class TestDomainErrorHandler:
    """Tests for domain errors raised from routes."""

    @pytest.mark.parametrize(
        ("path", "status", "message"),
        [
            ("/not-found", 404, "user 42 not found"),
            ("/validation", 400, "email is required"),
            ("/conflict", 409, "username already taken"),
            ("/unexpected", 500, "db connection reset"),
        ],
    )
    def test_known_kinds(self, client: TestClient, path: str, status: int, message: str) -> None:
        """Known kinds respond with their status and the domain message."""
        response = client.get(path)
        assert response.status_code == status
        assert response.json() == {"error": message}

    def test_unknown_kind_is_generic_500(self, client: TestClient) -> None:
        response = client.get("/unknown-kind")
        assert response.status_code == 500
        assert response.json() == {"error": UNEXPECTED_ERROR_MESSAGE}
        assert "internal detail" not in response.text

    def test_client_error_logged_as_warning(
        self, client: TestClient, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.WARNING, logger=HANDLER_LOGGER)
        client.get("/validation")
        records = [r for r in caplog.records if r.name == HANDLER_LOGGER]
        assert records and records[-1].levelno == logging.WARNING
        assert "email is required" in records[-1].getMessage()

    def test_server_error_logged_as_error(
        self, client: TestClient, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.WARNING, logger=HANDLER_LOGGER)
        client.get("/unknown-kind")
        records = [r for r in caplog.records if r.name == HANDLER_LOGGER]
        assert records and records[-1].levelno == logging.ERROR
        # The original message stays in the server log.
        assert "internal detail" in records[-1].getMessage()


class TestApiErrorHandler:
    """Tests for ApiErrors raised directly by routes."""

    def test_api_error_rendered(self, client: TestClient) -> None:
        response = client.get("/api-error")
        assert response.status_code == 400
        assert response.json() == {"error": "page size too large"}


class TestUnexpectedHandler:
    """Tests for the catch-all exception handler."""

    def test_internals_not_exposed(self, client: TestClient) -> None:
        response = client.get("/crash")
        assert response.status_code == 500
        assert response.json() == {"error": UNEXPECTED_ERROR_MESSAGE}
        assert "segfault" not in response.text


class TestCreateApp:
    """Tests for the application composition root."""

    def test_handlers_registered(self) -> None:
        app = create_app()
        assert DomainError in app.exception_handlers
        assert ApiError in app.exception_handlers
        assert Exception in app.exception_handlers
