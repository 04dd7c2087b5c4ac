"""Auth and permission dependencies (composition root).

Authentication itself is delegated: the bearer token is handed to the
injected IPermissionResolver, which answers with the caller's capabilities.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.application.services.authorization_service import AuthorizationService
from app.domain.exceptions import AuthenticationException, ServiceNotConfiguredException

_http_bearer = HTTPBearer(auto_error=False)


async def get_bearer_token(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
) -> str:
    """Return the bearer token; raise 401 if the Authorization header is missing or not Bearer."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationException()
    return credentials.credentials


def get_authorization_service(request: Request) -> AuthorizationService:
    """Build AuthorizationService around the resolver stored on app.state."""
    resolver = getattr(request.app.state, "permission_resolver", None)
    if resolver is None:
        raise ServiceNotConfiguredException("Permission resolver")
    return AuthorizationService(permission_resolver=resolver)


def require_permission(capability: str):
    """Dependency factory: require a bearer token whose holder has capability."""

    async def _require(
        token: Annotated[str, Depends(get_bearer_token)],
        auth_svc: Annotated[AuthorizationService, Depends(get_authorization_service)],
    ) -> None:
        await auth_svc.require_permission(token, capability)

    _require.__name__ = f"require_{capability.replace(':', '_')}"
    return _require
