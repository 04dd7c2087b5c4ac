"""Application lifespan: startup and shutdown.

Single place for startup/shutdown logic. Used by main.py; only logging
setup and closing of collaborators that hold resources.
"""

import dataclasses
import inspect
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Iterator

from fastapi import FastAPI

from app.core.config import get_settings
from app.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


def _closeables(app: FastAPI) -> Iterator[tuple[str, object]]:
    """Yield (name, object) for each wired port; a port shared by several fields comes once."""
    seen: set[int] = set()
    candidates: list[tuple[str, object]] = []
    use_cases = getattr(app.state, "role_use_cases", None)
    if dataclasses.is_dataclass(use_cases):
        candidates.extend(
            (f"role_use_cases.{field.name}", getattr(use_cases, field.name))
            for field in dataclasses.fields(use_cases)
        )
    elif use_cases is not None:
        candidates.append(("role_use_cases", use_cases))
    candidates.append(("permission_resolver", getattr(app.state, "permission_resolver", None)))
    for name, obj in candidates:
        if obj is None or id(obj) in seen:
            continue
        seen.add(id(obj))
        yield name, obj


async def _close(collaborator: object, name: str) -> None:
    """Call collaborator.aclose() or .close() when it has one."""
    closer = getattr(collaborator, "aclose", None) or getattr(collaborator, "close", None)
    if closer is None:
        return
    result = closer()
    if inspect.isawaitable(result):
        await result
    logger.info("%s closed", name)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit close the wired collaborators."""
    settings = get_settings()
    setup_logging()
    logger.info("Starting %s %s", settings.app_name, settings.app_version)
    if getattr(app.state, "role_use_cases", None) is None:
        logger.warning("No role use cases configured; role routes will answer 503")
    if getattr(app.state, "permission_resolver", None) is None:
        logger.warning("No permission resolver configured; role routes will answer 503")

    yield

    for name, collaborator in _closeables(app):
        await _close(collaborator, name)
    logger.info("Shutdown complete")
