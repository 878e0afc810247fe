from time import perf_counter
from uuid import uuid4

import structlog
from starlette.types import ASGIApp, Message, Receive, Scope, Send
from structlog.contextvars import bind_contextvars, clear_contextvars

request_logger = structlog.stdlib.get_logger("infra.web.request")


def _header(scope: Scope, name: str) -> str | None:
    lookup = name.lower().encode("latin-1")

    for raw_key, raw_value in scope.get("headers", []):
        if raw_key.lower() == lookup:
            return raw_value.decode("latin-1")

    return None


def _outcome(status_code: int) -> str:
    if status_code < 400:
        return "success"

    if status_code < 500:
        return "client_error"

    return "server_error"


class RequestEventLogMiddleware:
    """Emit one ``http_request_summary`` event per HTTP request.

    The request id is read from (or generated for) ``request_id_header``,
    bound into structlog contextvars for the lifetime of the request and echoed
    back on the response. Unhandled exceptions are logged and turned into a
    plain 500 when no response has started yet.
    """

    def __init__(
        self,
        app: ASGIApp,
        *,
        request_id_header: str = "x-request-id",
        excluded_path_suffixes: set[str] | None = None,
    ) -> None:
        self.app = app
        self.request_id_header = request_id_header.lower()
        self.excluded_path_suffixes = excluded_path_suffixes or set()

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        path = str(scope.get("path", ""))

        if any(path.endswith(suffix) for suffix in self.excluded_path_suffixes):
            await self.app(scope, receive, send)
            return

        started_at = perf_counter()
        method = str(scope.get("method", ""))
        request_id = _header(scope, self.request_id_header) or str(uuid4())
        response_status_code: int | None = None

        bind_contextvars(request_id=request_id, http_method=method, http_path=path)

        async def send_wrapper(message: Message) -> None:
            nonlocal response_status_code

            if message["type"] == "http.response.start":
                response_status_code = int(message.get("status", 200))
                header_key = self.request_id_header.encode("latin-1")
                headers = [item for item in message.get("headers", []) if item[0].lower() != header_key]
                headers.append((header_key, request_id.encode("latin-1")))
                message = {**message, "headers": headers}

            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception as error:
            if response_status_code is None:
                await send_wrapper({"type": "http.response.start", "status": 500, "headers": []})
                await send_wrapper(
                    {
                        "type": "http.response.body",
                        "body": b"Internal Server Error",
                        "more_body": False,
                    }
                )

            self._log_summary(
                scope,
                request_id=request_id,
                status_code=response_status_code or 500,
                started_at=started_at,
                error=error,
            )
            raise
        else:
            self._log_summary(
                scope,
                request_id=request_id,
                status_code=response_status_code or 200,
                started_at=started_at,
            )
        finally:
            clear_contextvars()

    def _log_summary(
        self,
        scope: Scope,
        *,
        request_id: str,
        status_code: int,
        started_at: float,
        error: Exception | None = None,
    ) -> None:
        outcome = "unhandled_exception" if error is not None else _outcome(status_code)
        route = scope.get("route")
        client = scope.get("client")

        payload: dict[str, object] = {
            "request_id": request_id,
            "method": scope.get("method"),
            "path": scope.get("path"),
            "route_path": getattr(route, "path", None),
            "route_name": getattr(route, "name", None),
            "status_code": status_code,
            "outcome": outcome,
            "duration_ms": round((perf_counter() - started_at) * 1000, 3),
            "client_ip": client[0] if client else None,
            "user_agent": _header(scope, "user-agent"),
        }

        if error is not None:
            payload["error"] = {"error_class": error.__class__.__name__, "error_message": str(error)}
            request_logger.exception("http_request_summary", **payload)
            return

        if status_code >= 500:
            request_logger.error("http_request_summary", **payload)
        elif status_code >= 400:
            request_logger.warning("http_request_summary", **payload)
        else:
            request_logger.info("http_request_summary", **payload)
