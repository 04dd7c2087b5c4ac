"""Security headers middleware.

Adds security-related response headers to API responses. The interactive
docs pages load Swagger UI / ReDoc assets, so they skip the strict CSP.
Raw ASGI (no BaseHTTPMiddleware).
"""

from typing import Callable

API_HEADERS = {
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
    "Cache-Control": "no-store",
}

DOCS_PATHS = ("/docs", "/redoc")


def SecurityHeadersMiddleware(
    app: Callable,
    headers: dict[str, str] | None = None,
    docs_paths: tuple[str, ...] = DOCS_PATHS,
) -> Callable:
    """Set security headers on responses; headers already set by the route win. Raw ASGI."""
    resolved = headers if headers is not None else API_HEADERS
    api_headers = [(k.lower().encode(), v.encode()) for k, v in resolved.items()]
    docs_headers = [h for h in api_headers if h[0] != b"content-security-policy"]

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        path = scope.get("path", "")
        extra = docs_headers if path.startswith(docs_paths) else api_headers

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                present = {name.lower() for name, _ in headers}
                headers.extend(h for h in extra if h[0] not in present)
                message["headers"] = headers
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app
