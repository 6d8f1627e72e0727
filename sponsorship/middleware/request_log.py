"""Request logging middleware.

Logs every HTTP request at DEBUG and tags it with an X-Request-ID (client
value forwarded when safe, otherwise generated). Raw ASGI, so streamed
certificate downloads and background tasks pass through untouched.
"""

import re
import uuid
from typing import Callable

from sponsorship.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

REQUEST_ID_MAX_LENGTH = 64
REQUEST_ID_ALLOWED_PATTERN = re.compile(r"^[a-zA-Z0-9_-]{1,64}$")


def _get_header(scope: dict, name: str) -> str | None:
    want = name.lower().encode()
    for k, v in scope.get("headers", []):
        if k.lower() == want:
            return v.decode("utf-8", errors="replace")
    return None


def _request_id(raw: str | None) -> str:
    """Return raw if it is a safe id; otherwise a new UUID (no log injection)."""
    if raw and REQUEST_ID_ALLOWED_PATTERN.match(raw.strip()):
        return raw.strip()
    return str(uuid.uuid4())


def RequestLogMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Log method and target of each request and echo its request id. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = _request_id(_get_header(scope, header_name))
        scope.setdefault("state", {})["request_id"] = request_id
        target = scope.get("path", "")
        if scope.get("query_string"):
            target += "?" + scope["query_string"].decode("latin-1")
        logger.debug("HTTP %s request: %r [%s]", scope.get("method"), target, request_id)

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                headers.append((header_name.encode(), request_id.encode()))
                message["headers"] = headers
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app
