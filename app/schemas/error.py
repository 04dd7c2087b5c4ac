"""Error response schema shared by all routes (see app.core.exception_handlers)."""

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error body produced by the exception handlers."""

    error: str = Field(..., examples=["RESOURCE_NOT_FOUND"])
    message: str
    details: dict[str, Any] = Field(default_factory=dict)


AUTH_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    401: {"model": ErrorResponse, "description": "Missing or invalid bearer token"},
    403: {"model": ErrorResponse, "description": "Caller lacks the required permission"},
}

NOT_FOUND_RESPONSE: dict[int | str, dict[str, Any]] = {
    404: {"model": ErrorResponse, "description": "Role not found"},
}
