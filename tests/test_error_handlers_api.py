from __future__ import annotations

from fastapi import APIRouter, FastAPI, HTTPException
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from contract_hub.errors import register_error_handlers
from contract_hub.observability import REQUEST_ID_HEADER, ObservabilityMiddleware
from contract_hub.services.common import domain_error


def _build_app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(ObservabilityMiddleware)
    register_error_handlers(app)

    api_router = APIRouter(prefix="/api/v1")

    @api_router.get("/http-403")
    def api_http_403():
        raise HTTPException(status_code=403, detail="Forbidden api")

    @api_router.get("/domain")
    def api_domain():
        raise domain_error(409, "invalid_transition", "Cannot transition", {"from": "a"})

    @api_router.get("/needs-int")
    def api_needs_int(value: int):
        return {"value": value}

    @api_router.get("/db-down")
    def api_db_down():
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    @api_router.get("/crash")
    def api_crash():
        raise RuntimeError("boom")

    app.include_router(api_router)
    return app


def test_http_exception_returns_envelope() -> None:
    client = TestClient(_build_app(), raise_server_exceptions=False)
    resp = client.get("/api/v1/http-403")
    assert resp.status_code == 403
    body = resp.json()
    assert body["code"] == "http_403"
    assert body["message"] == "Forbidden api"
    assert body["request_id"] == resp.headers[REQUEST_ID_HEADER]


def test_domain_error_keeps_code_and_details() -> None:
    client = TestClient(_build_app(), raise_server_exceptions=False)
    resp = client.get("/api/v1/domain")
    assert resp.status_code == 409
    assert resp.json()["code"] == "invalid_transition"
    assert resp.json()["details"] == {"from": "a"}


def test_request_id_is_echoed() -> None:
    client = TestClient(_build_app(), raise_server_exceptions=False)
    resp = client.get("/api/v1/http-403", headers={REQUEST_ID_HEADER: "req-123"})
    assert resp.json()["request_id"] == "req-123"


def test_validation_error_returns_422() -> None:
    client = TestClient(_build_app(), raise_server_exceptions=False)
    resp = client.get("/api/v1/needs-int", params={"value": "abc"})
    assert resp.status_code == 422
    body = resp.json()
    assert body["code"] == "validation_error"
    assert isinstance(body["details"], list)


def test_storage_failure_returns_generic_message() -> None:
    client = TestClient(_build_app(), raise_server_exceptions=False)
    resp = client.get("/api/v1/db-down")
    assert resp.status_code == 500
    body = resp.json()
    assert body["code"] == "persistence_error"
    assert "connection refused" not in body["message"]


def test_unhandled_exception_returns_internal_error() -> None:
    client = TestClient(_build_app(), raise_server_exceptions=False)
    resp = client.get("/api/v1/crash")
    assert resp.status_code == 500
    assert resp.json()["code"] == "internal_error"
