"""Request context management using contextvars.

Async-safe storage for request-scoped identifiers, set by
RequestContextMiddleware and read by logging.

Usage:
    token = set_request_ids("req-1", "corr-1")
    get_request_id()  # "req-1"
    reset_request_ids(token)
"""

from contextvars import ContextVar, Token
from dataclasses import dataclass

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)
_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)


@dataclass(frozen=True)
class RequestIdTokens:
    """Tokens needed to restore the previous request context."""

    request_id: Token
    correlation_id: Token


def set_request_ids(request_id: str, correlation_id: str) -> RequestIdTokens:
    """Set request and correlation IDs for the current async task."""
    return RequestIdTokens(
        request_id=_request_id.set(request_id),
        correlation_id=_correlation_id.set(correlation_id),
    )


def reset_request_ids(tokens: RequestIdTokens) -> None:
    """Restore the context that was active before set_request_ids()."""
    _request_id.reset(tokens.request_id)
    _correlation_id.reset(tokens.correlation_id)


def get_request_id() -> str | None:
    """Return the current request ID, or None outside a request."""
    return _request_id.get()


def get_correlation_id() -> str | None:
    """Return the current correlation ID, or None outside a request."""
    return _correlation_id.get()
