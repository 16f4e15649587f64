import uuid

from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.api.exception_handlers import error_response, register_exception_handlers
from app.errors import ForbiddenError, ValidationError


def _app(recording_logger) -> FastAPI:
    app = FastAPI()
    app.state.structured_logger = recording_logger
    register_exception_handlers(app)

    @app.get("/boom")
    def boom():
        raise RuntimeError("database password is hunter2")

    @app.get("/invalid")
    def invalid():
        raise ValidationError('"email" é um campo obrigatório.', key="email")

    return app


def test_error_response_uses_error_status_and_wire_body():
    error = ForbiddenError()
    response = error_response(error)
    assert response.status_code == 403
    assert b'"error_location_code"' in response.body
    assert b'"key"' not in response.body


def test_unexpected_errors_become_structured_500(recording_logger):
    client = TestClient(_app(recording_logger), raise_server_exceptions=False)
    response = client.get("/boom")

    assert response.status_code == 500
    data = response.json()
    assert data["name"] == "InternalServerError"
    uuid.UUID(data["error_id"])
    assert "hunter2" not in response.text
    assert len(recording_logger.named("InternalServerError")) == 1


def test_validation_errors_are_logged_and_returned(recording_logger):
    client = TestClient(_app(recording_logger))
    response = client.get("/invalid")

    assert response.status_code == 400
    assert response.json()["key"] == "email"
    (entry,) = recording_logger.named("ValidationError")
    assert entry["key"] == "email"
