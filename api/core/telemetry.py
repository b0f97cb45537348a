"""Per-request timing and the ``request.completed`` log line."""

import os
import time
import uuid
from typing import Any

from starlette.types import ASGIApp, Message, Receive, Scope, Send

from core.logger import get_logger
from core.wide_event import clear_wide_event, get_wide_event, init_wide_event

logger = get_logger(__name__)

SERVICE_NAME = os.getenv("SERVICE_NAME", "users-api")
SERVICE_VERSION = os.getenv("SERVICE_VERSION", "0.1.0")

# Successful requests slower than this are logged too
SLOW_REQUEST_THRESHOLD_MS = 1000


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000


def _route_path(scope: Scope) -> str:
    route = scope.get("route")
    return getattr(route, "path", None) or scope.get("path", "")


class RequestTimingMiddleware:
    """Pure ASGI middleware wrapping every HTTP request.

    Starts a wide event with the request basics, stamps ``x-request-id`` and
    ``x-request-duration-ms`` on the response, and logs the finished event
    when the response is an error, is slow, or the app raised.
    """

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        start = time.perf_counter()
        request_id = str(uuid.uuid4())
        client = scope.get("client")

        init_wide_event().update(
            service_name=SERVICE_NAME,
            service_version=SERVICE_VERSION,
            request_id=request_id,
            http_method=scope.get("method", "UNKNOWN"),
            http_path=scope.get("path", ""),
            http_client_ip=client[0] if client else "unknown",
        )
        status_code: int | None = None

        async def send_wrapper(message: Message) -> None:
            nonlocal status_code

            if message["type"] == "http.response.start":
                status_code = int(message.get("status", 0))
                message["headers"] = [
                    *message.get("headers", []),
                    (b"x-request-duration-ms", f"{_elapsed_ms(start):.2f}".encode()),
                    (b"x-request-id", request_id.encode()),
                ]
            elif message["type"] == "http.response.body" and not message.get(
                "more_body", False
            ):
                duration_ms = _elapsed_ms(start)
                is_error = status_code is None or status_code >= 400
                self._finish(
                    scope,
                    duration_ms,
                    emit=is_error or duration_ms > SLOW_REQUEST_THRESHOLD_MS,
                    http_status_code=status_code,
                    outcome="error" if is_error else "success",
                )

            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception as exc:
            self._finish(
                scope,
                _elapsed_ms(start),
                emit=True,
                outcome="exception",
                exception_type=type(exc).__name__,
            )
            raise

    @staticmethod
    def _finish(scope: Scope, duration_ms: float, emit: bool, **fields: Any) -> None:
        event = get_wide_event()
        event.update(
            http_route=_route_path(scope),
            duration_ms=round(duration_ms, 2),
            **fields,
        )
        if emit:
            logger.info("request.completed", **event)
        clear_wide_event()
