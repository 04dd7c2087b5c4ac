"""HTTP middleware: request context (request/correlation IDs), security headers
and request timeout.

Applied in main app; order matters (last added = outermost).
Import and use from app.main.
"""

from app.middleware.request_context import RequestContextMiddleware
from app.middleware.security_headers import SecurityHeadersMiddleware
from app.middleware.timeout import RequestTimeoutMiddleware

__all__ = [
    "RequestContextMiddleware",
    "RequestTimeoutMiddleware",
    "SecurityHeadersMiddleware",
]
