"""Error responses for the role API.

Every failure leaves the service as {"error", "message", "details"}:

- RoleApiException subclasses raised by dependencies or use cases keep
  their error_code; the status comes from _ERROR_CODE_STATUS (401 also
  carries WWW-Authenticate: Bearer so clients know to send a token).
- Body/path shape problems caught by FastAPI are 422 VALIDATION_ERROR.
- Starlette HTTP errors (unknown route, wrong method) keep their status.
- Anything else is logged with its traceback and answered 500.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings
from app.domain.exceptions import RoleApiException

logger = logging.getLogger(__name__)

_ERROR_CODE_STATUS: dict[str, int] = {
    "RESOURCE_NOT_FOUND": 404,
    "AUTHENTICATION_ERROR": 401,
    "PERMISSION_DENIED": 403,
    "VALIDATION_ERROR": 400,
    "CONFLICT": 409,
    "SERVICE_UNAVAILABLE": 503,
}


def status_for_error_code(error_code: str) -> int:
    """Return the HTTP status for a domain error code (400 when unmapped)."""
    return _ERROR_CODE_STATUS.get(error_code, 400)


def _error_response(
    status: int,
    error: str,
    message: Any,
    details: Any = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    content: dict[str, Any] = {"error": error, "message": message}
    if details is not None:
        content["details"] = jsonable_encoder(details)
    return JSONResponse(status_code=status, content=content, headers=headers)


def _role_api_exception_handler(request: Request, exc: RoleApiException) -> JSONResponse:
    status = status_for_error_code(exc.error_code)
    body = exc.to_dict()
    return _error_response(
        status,
        body["error"],
        body["message"],
        body["details"],
        headers={"WWW-Authenticate": "Bearer"} if status == 401 else None,
    )


def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _error_response(422, "VALIDATION_ERROR", "Request validation failed", exc.errors())


def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error_response(
        exc.status_code, "HTTP_ERROR", exc.detail, headers=getattr(exc, "headers", None)
    )


def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """500; the exception text is only exposed when debug is on."""
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    message = str(exc) if get_settings().debug else "Internal server error"
    return _error_response(500, "INTERNAL_ERROR", message)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the role API error handlers on app."""
    app.add_exception_handler(RoleApiException, _role_api_exception_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
