"""
Request logger middleware.

Every HTTP request that reaches the application is timed and recorded
in the request log store once its response has been sent.  The
middleware wraps the ASGI ``send`` callable to observe the status code
that actually goes out on the wire, so error responses produced by
exception handlers are recorded with their real status.  If the
application fails before starting a response the request is recorded
as ``500``.
"""

import logging
import time
from datetime import datetime, timezone

from starlette.types import ASGIApp, Message, Receive, Scope, Send

from .logging_config import ACCESS_LOGGER_NAME
from .store import RequestLog, RequestLogStore

access_logger = logging.getLogger(ACCESS_LOGGER_NAME)


def _request_url(scope: Scope) -> str:
    """Path as the client sent it (still percent‑encoded) plus the query string."""
    raw_path = scope.get("raw_path")
    if raw_path:
        path = raw_path.split(b"?", 1)[0].decode("latin-1")
    else:
        path = scope["path"]
    query = scope.get("query_string", b"").decode("latin-1")
    return f"{path}?{query}" if query else path


class RequestLoggerMiddleware:
    """Append one :class:`RequestLog` per completed HTTP request."""

    def __init__(self, app: ASGIApp, logs: RequestLogStore) -> None:
        self.app = app
        self.logs = logs

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        start = time.perf_counter()
        status_code = 500

        async def send_wrapper(message: Message) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            elapsed = int((time.perf_counter() - start) * 1000)
            self._record(scope["method"], _request_url(scope), status_code, elapsed)

    def _record(self, method: str, url: str, status_code: int, elapsed: int) -> None:
        self.logs.append(
            RequestLog(
                id=self.logs.next_id(),
                method=method,
                url=url,
                status=status_code,
                elapsed=elapsed,
                date=datetime.now(timezone.utc),
            )
        )
        access_logger.info("%s %s statusCode: %s %sms", method, url, status_code, elapsed)
