"""Pytest configuration and fixtures for the role API.

HTTP tests build the app with create_app() and hand it mocked use cases and
an in-test permission resolver, so no external services are needed.
"""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app.application.interfaces import RoleUseCases
from app.core.config import get_settings
from app.core.constants import ROLE_CAPABILITIES
from app.core.limiter import limiter
from app.main import create_app
from tests.fakes import (
    ADMIN_TOKEN,
    OUTSIDER_TOKEN,
    ROLE,
    FakePermissionResolver,
    bearer,
    make_use_case,
)


@pytest.fixture(autouse=True)
def _fresh_state():
    """Drop cached settings and rate-limit counters so tests don't leak into each other."""
    get_settings.cache_clear()
    limiter.reset()
    yield
    get_settings.cache_clear()


@pytest.fixture
def use_cases() -> RoleUseCases:
    """Role use cases, each an AsyncMock returning ROLE (list returns a page)."""
    return RoleUseCases(
        create=make_use_case(),
        update=make_use_case(),
        get_by_id=make_use_case(),
        list=make_use_case({"docs": [ROLE], "page": 1, "limit": 10, "total": 1}),
        delete=make_use_case(),
        add_permission=make_use_case(),
        remove_permission=make_use_case(),
    )


@pytest.fixture
def permission_resolver() -> FakePermissionResolver:
    """Admin token holds every role capability; outsider holds none of them."""
    return FakePermissionResolver(
        {
            ADMIN_TOKEN: set(ROLE_CAPABILITIES),
            OUTSIDER_TOKEN: {"user:list"},
        }
    )


@pytest.fixture
def app(
    use_cases: RoleUseCases, permission_resolver: FakePermissionResolver
) -> FastAPI:
    return create_app(role_use_cases=use_cases, permission_resolver=permission_resolver)


@pytest.fixture
async def client(app: FastAPI) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Headers for a caller holding every role capability."""
    return bearer(ADMIN_TOKEN)
