"""Request context middleware: request ID and correlation ID.

Forwards sanitized X-Request-ID / X-Correlation-ID values (or generates
them), exposes them on scope state and to logging via app.shared.context,
and echoes both on the response. Raw ASGI (no BaseHTTPMiddleware).
"""

import re
import uuid
from typing import Callable

from app.shared.context import reset_request_ids, set_request_ids

# Safe for logging: alphanumeric, hyphen, underscore; bounded length.
ID_MAX_LENGTH = 64
_ID_PATTERN = re.compile(r"^[a-zA-Z0-9_-]{1," + str(ID_MAX_LENGTH) + r"}$")


def _get_header(scope: dict, name: str) -> str | None:
    """Return first header value for name (case-insensitive). Headers are (bytes, bytes)."""
    want = name.lower().encode()
    for k, v in scope.get("headers", []):
        if k.lower() == want:
            return v.decode("utf-8", errors="replace")
    return None


def _clean_id(raw: str | None) -> str | None:
    """Return raw stripped if it is a safe identifier, else None."""
    if raw is None:
        return None
    raw = raw.strip()
    return raw if _ID_PATTERN.match(raw) else None


def RequestContextMiddleware(
    app: Callable,
    request_id_header: str = "X-Request-ID",
    correlation_id_header: str = "X-Correlation-ID",
) -> Callable:
    """Attach request and correlation IDs to each HTTP request and response. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = _clean_id(_get_header(scope, request_id_header)) or str(uuid.uuid4())
        correlation_id = _clean_id(_get_header(scope, correlation_id_header)) or request_id
        state = scope.setdefault("state", {})
        state["request_id"] = request_id
        state["correlation_id"] = correlation_id

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                headers.append((request_id_header.encode(), request_id.encode()))
                headers.append((correlation_id_header.encode(), correlation_id.encode()))
                message["headers"] = headers
            await send(message)

        tokens = set_request_ids(request_id, correlation_id)
        try:
            await app(scope, receive, send_wrapper)
        finally:
            reset_request_ids(tokens)

    return asgi_app
