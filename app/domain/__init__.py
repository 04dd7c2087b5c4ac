"""Domain layer: exceptions shared by use cases and the HTTP layer.

No dependencies on infrastructure or presentation.
"""

from app.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    ConflictException,
    ResourceNotFoundException,
    RoleApiException,
    ServiceNotConfiguredException,
    ValidationException,
)

__all__ = [
    "AuthenticationException",
    "AuthorizationException",
    "ConflictException",
    "ResourceNotFoundException",
    "RoleApiException",
    "ServiceNotConfiguredException",
    "ValidationException",
]
