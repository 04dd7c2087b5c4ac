"""Shared utilities: request context, telemetry, and query helpers.

Used by application and presentation layers. No business logic.
"""

from app.shared.context import get_correlation_id, get_request_id

__all__ = [
    "get_correlation_id",
    "get_request_id",
]
