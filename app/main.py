"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, middleware, routers, and the
injected role use cases / permission resolver. No business logic here.

Settings are loaded inside create_app() so that tests can set env (and
optionally clear get_settings cache) before calling create_app().
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from app.api.v1 import api_router
from app.application.interfaces import IPermissionResolver, RoleUseCases
from app.core.config import get_settings
from app.core.exception_handlers import register_exception_handlers
from app.core.lifespan import create_lifespan
from app.core.limiter import limiter
from app.core.wiring import build_from_factory
from app.middleware import (
    RequestContextMiddleware,
    RequestTimeoutMiddleware,
    SecurityHeadersMiddleware,
)


def create_app(
    role_use_cases: RoleUseCases | None = None,
    permission_resolver: IPermissionResolver | None = None,
) -> FastAPI:
    """Build and return the FastAPI application.

    Collaborators passed here win; otherwise they are built from the
    ROLE_USE_CASES_FACTORY / PERMISSION_RESOLVER_FACTORY settings. Routes
    answer 503 while a collaborator is missing.
    """
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    if role_use_cases is None:
        role_use_cases = build_from_factory(settings.role_use_cases_factory)
    if permission_resolver is None:
        permission_resolver = build_from_factory(settings.permission_resolver_factory)
    app.state.role_use_cases = role_use_cases
    app.state.permission_resolver = permission_resolver

    limiter.enabled = settings.rate_limit_enabled
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    register_exception_handlers(app)

    # Middleware: first added = innermost. Order (outermost first): request context → security headers → timeout → CORS.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.allowed_origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestTimeoutMiddleware, timeout_seconds=settings.request_timeout_seconds)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        RequestContextMiddleware,
        request_id_header=settings.request_id_header,
        correlation_id_header=settings.correlation_id_header,
    )

    app.include_router(api_router, prefix=settings.api_prefix)

    return app


app = create_app()
