"""Domain exceptions for the role API.

Use cases and collaborators raise these to signal failures. They are
independent of HTTP; the presentation layer maps them to responses in
exception handlers.
"""

from typing import Any


class RoleApiException(Exception):
    """Base exception for all role API errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for an error response body."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(RoleApiException):
    """Raised when input validation fails (e.g. malformed sort or search query)."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        errors: list[Any] | None = None,
    ) -> None:
        """Initialize with message, optional field name and error list.

        Args:
            message: Description of the validation failure.
            field: Optional field or query parameter that failed validation.
            errors: Optional list of underlying validation errors.
        """
        details: dict[str, Any] = {}
        if field:
            details["field"] = field
        if errors:
            details["errors"] = errors
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(RoleApiException):
    """Raised when the caller is not authenticated (missing or invalid token)."""

    def __init__(self, message: str = "Not authenticated") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class AuthorizationException(RoleApiException):
    """Raised when the caller lacks the capability required by a route."""

    def __init__(self, capability: str | None = None) -> None:
        """Initialize with the missing capability.

        Args:
            capability: Capability that was required (e.g. 'role:create').
        """
        message = (
            f"Permission denied: {capability} required" if capability else "Permission denied"
        )
        details = {"capability": capability} if capability else {}
        super().__init__(message, "PERMISSION_DENIED", details)


class ResourceNotFoundException(RoleApiException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'role', 'permission').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class ConflictException(RoleApiException):
    """Raised when an operation conflicts with existing state (e.g. duplicate role name)."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, "CONFLICT", details)


class ServiceNotConfiguredException(RoleApiException):
    """Raised when a route needs a collaborator that was never wired into the app."""

    def __init__(self, collaborator: str) -> None:
        super().__init__(
            message=f"{collaborator} is not configured.",
            error_code="SERVICE_UNAVAILABLE",
            details={"collaborator": collaborator},
        )
