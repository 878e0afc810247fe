from collections.abc import AsyncGenerator
from typing import Any

import httpx
import pytest
from fastapi import FastAPI, HTTPException
from starlette.responses import Response

import infra.web.middleware.request_event_log_middleware as middleware_module
from infra.web.middleware.request_event_log_middleware import RequestEventLogMiddleware


class FakeRequestLogger:
    def __init__(self) -> None:
        self.calls: list[tuple[str, str, dict[str, Any]]] = []

    def info(self, event: str, **payload: Any) -> None:
        self.calls.append(("info", event, payload))

    def warning(self, event: str, **payload: Any) -> None:
        self.calls.append(("warning", event, payload))

    def error(self, event: str, **payload: Any) -> None:
        self.calls.append(("error", event, payload))

    def exception(self, event: str, **payload: Any) -> None:
        self.calls.append(("exception", event, payload))


@pytest.fixture
def test_app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(
        RequestEventLogMiddleware,
        excluded_path_suffixes={"/stats/health"},
    )

    @app.get("/status-page/public/{slug}")
    async def public_status_page(slug: str) -> dict[str, str]:
        return {"slug": slug}

    @app.get("/incident/{incident_id}/updates")
    async def incident_updates(incident_id: int) -> dict[str, int]:
        raise HTTPException(status_code=404, detail=f"Incident {incident_id} not found")

    @app.get("/stats/degraded")
    async def degraded() -> Response:
        return Response(status_code=503)

    @app.get("/maintenance-window/crash")
    async def crash() -> dict[str, str]:
        raise RuntimeError("scheduler offline")

    @app.get("/stats/health")
    async def health() -> dict[str, str]:
        return {"status": "UP"}

    return app


@pytest.fixture
def request_logger(monkeypatch: pytest.MonkeyPatch) -> FakeRequestLogger:
    fake_logger = FakeRequestLogger()
    monkeypatch.setattr(middleware_module, "request_logger", fake_logger)
    return fake_logger


@pytest.fixture
async def async_client(test_app: FastAPI) -> AsyncGenerator[httpx.AsyncClient, None]:
    transport = httpx.ASGITransport(app=test_app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


@pytest.mark.asyncio
async def test_success_logs_info_summary(async_client: httpx.AsyncClient, request_logger: FakeRequestLogger) -> None:
    response = await async_client.get(
        "/status-page/public/acme",
        headers={"x-request-id": "req-1", "user-agent": "status-monitor"},
    )

    assert response.status_code == 200
    assert response.headers["x-request-id"] == "req-1"

    [(level, event, payload)] = request_logger.calls
    assert level == "info"
    assert event == "http_request_summary"
    assert payload["request_id"] == "req-1"
    assert payload["method"] == "GET"
    assert payload["path"] == "/status-page/public/acme"
    assert payload["route_path"] == "/status-page/public/{slug}"
    assert payload["route_name"] == "public_status_page"
    assert payload["status_code"] == 200
    assert payload["outcome"] == "success"
    assert payload["user_agent"] == "status-monitor"
    assert payload["duration_ms"] >= 0
    assert "error" not in payload


@pytest.mark.asyncio
async def test_client_error_logs_warning(async_client: httpx.AsyncClient, request_logger: FakeRequestLogger) -> None:
    response = await async_client.get("/incident/7/updates")

    assert response.status_code == 404

    [(level, _, payload)] = request_logger.calls
    assert level == "warning"
    assert payload["outcome"] == "client_error"


@pytest.mark.asyncio
async def test_server_error_response_logs_error(
    async_client: httpx.AsyncClient,
    request_logger: FakeRequestLogger,
) -> None:
    response = await async_client.get("/stats/degraded")

    assert response.status_code == 503

    [(level, _, payload)] = request_logger.calls
    assert level == "error"
    assert payload["outcome"] == "server_error"


@pytest.mark.asyncio
async def test_unhandled_exception_becomes_500_and_is_logged(
    async_client: httpx.AsyncClient,
    request_logger: FakeRequestLogger,
) -> None:
    response = await async_client.get("/maintenance-window/crash", headers={"x-request-id": "req-crash"})

    assert response.status_code == 500
    assert response.headers["x-request-id"] == "req-crash"

    [(level, _, payload)] = request_logger.calls
    assert level == "exception"
    assert payload["status_code"] == 500
    assert payload["outcome"] == "unhandled_exception"
    assert payload["error"] == {"error_class": "RuntimeError", "error_message": "scheduler offline"}


@pytest.mark.asyncio
async def test_request_id_is_generated_when_missing(
    async_client: httpx.AsyncClient,
    request_logger: FakeRequestLogger,
) -> None:
    response = await async_client.get("/status-page/public/acme")

    generated = response.headers["x-request-id"]

    assert generated
    assert request_logger.calls[0][2]["request_id"] == generated


@pytest.mark.asyncio
async def test_health_checks_are_not_logged(
    async_client: httpx.AsyncClient,
    request_logger: FakeRequestLogger,
) -> None:
    response = await async_client.get("/stats/health")

    assert response.status_code == 200
    assert "x-request-id" not in response.headers
    assert request_logger.calls == []


@pytest.mark.asyncio
async def test_non_http_scope_is_forwarded(request_logger: FakeRequestLogger) -> None:
    seen_scopes: list[dict] = []

    async def app(scope, receive, send) -> None:
        seen_scopes.append(scope)

    async def receive() -> dict:
        return {"type": "lifespan.startup"}

    async def send(_message) -> None:
        return None

    await RequestEventLogMiddleware(app)({"type": "lifespan"}, receive, send)

    assert seen_scopes == [{"type": "lifespan"}]
    assert request_logger.calls == []
