"""Service interfaces (ports) for the application layer.

Protocols define contracts for collaborators implemented outside this service (DIP).
"""

from __future__ import annotations

from typing import Protocol


class IPermissionResolver(Protocol):
    """Protocol for resolving the caller's capabilities (used by AuthorizationService)."""

    async def get_permissions(self, token: str) -> set[str]:
        """Return capability codes held by the bearer of token (e.g. {'role:create'}).

        Raises AuthenticationException when the token is invalid or expired.
        """
