"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Collaborator factories are import strings validated
at load time.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env."""

    # App
    app_name: str = "role-api"
    app_version: str = "1.0.0"
    debug: bool = False
    api_prefix: str = "/v1"

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:8080"

    # Request / middleware
    request_timeout_seconds: float = 60.0
    request_id_header: str = "X-Request-ID"
    correlation_id_header: str = "X-Correlation-ID"
    rate_limit_enabled: bool = True

    # Collaborators: "package.module:factory" returning the use cases / resolver.
    # Used only when create_app() is not handed them directly.
    role_use_cases_factory: str | None = None
    permission_resolver_factory: str | None = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_factories_and_prefix(self) -> "Settings":
        """Validate collaborator import strings and the API prefix."""
        for name in ("role_use_cases_factory", "permission_resolver_factory"):
            value = getattr(self, name)
            if value is None:
                continue
            module_path, _, attr = value.partition(":")
            if not module_path or not attr:
                raise ValueError(
                    f"{name.upper()} must look like 'package.module:factory', got: {value!r}"
                )
        if self.api_prefix and not self.api_prefix.startswith("/"):
            raise ValueError(f"API_PREFIX must start with '/', got: {self.api_prefix!r}")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
