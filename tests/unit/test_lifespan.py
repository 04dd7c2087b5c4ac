"""Shutdown closes the ports held by the wired collaborators."""

from unittest.mock import AsyncMock, MagicMock

from app.application.interfaces import RoleUseCases
from app.core.lifespan import create_lifespan
from app.main import create_app
from tests.fakes import make_use_case


class ClosingResolver:
    def __init__(self) -> None:
        self.closed = False

    async def get_permissions(self, token: str) -> set[str]:
        return set()

    def close(self) -> None:
        self.closed = True


async def test_shutdown_closes_each_use_case_port_and_resolver() -> None:
    shared = make_use_case()
    shared.aclose = AsyncMock()
    sync_port = make_use_case()
    sync_port.aclose = None
    sync_port.close = MagicMock()
    use_cases = RoleUseCases(
        create=shared,
        update=shared,
        get_by_id=sync_port,
        list=make_use_case(),
        delete=make_use_case(),
        add_permission=make_use_case(),
        remove_permission=make_use_case(),
    )
    resolver = ClosingResolver()
    app = create_app(role_use_cases=use_cases, permission_resolver=resolver)

    async with create_lifespan(app):
        shared.aclose.assert_not_awaited()

    shared.aclose.assert_awaited_once()
    sync_port.close.assert_called_once()
    assert resolver.closed is True


async def test_shutdown_without_collaborators_is_quiet() -> None:
    app = create_app(role_use_cases=None, permission_resolver=None)
    async with create_lifespan(app):
        pass
