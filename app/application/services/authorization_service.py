"""Authorization service: capability checks against an injected IPermissionResolver."""

from __future__ import annotations

import logging

from app.application.interfaces.services import IPermissionResolver
from app.domain.exceptions import AuthorizationException

logger = logging.getLogger(__name__)


class AuthorizationService:
    """Checks that a bearer token holds a named capability (exact match)."""

    def __init__(self, permission_resolver: IPermissionResolver) -> None:
        self.permission_resolver = permission_resolver

    async def check_permission(self, token: str, capability: str) -> bool:
        """Return True if the token's holder has capability."""
        permissions = await self.permission_resolver.get_permissions(token)
        return capability in permissions

    async def require_permission(self, token: str, capability: str) -> None:
        """Raise AuthorizationException if the token's holder lacks capability."""
        if not await self.check_permission(token, capability):
            logger.info("Permission denied: %s required", capability)
            raise AuthorizationException(capability)
