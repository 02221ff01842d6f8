from __future__ import annotations

"""chroma_client/config/settings.py

Client configuration using environment-driven settings.

This module centralizes:
- the Chroma server base URL and request timeout
- default tenant / database used to scope API paths
- token authentication (header name + token)
- Statsig telemetry secret and environment tier

Every field can be overridden with a ``CHROMA_``-prefixed environment
variable or an ``.env`` file, e.g. ``CHROMA_BASE_URL=http://chroma:8000``.
"""
from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "chroma-api-client"
    environment: str = "development"

    # Server
    base_url: str = "http://localhost:8000"
    timeout_seconds: float = 30.0

    # Multi-tenancy scoping
    tenant: str = "default_tenant"
    database: str = "default_database"

    # Token auth
    auth_token: str | None = None
    auth_header: Literal["Authorization", "X-Chroma-Token"] = "Authorization"

    # Telemetry (disabled when unset)
    statsig_server_secret: str | None = None

    model_config = SettingsConfigDict(
        env_prefix="CHROMA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def auth_headers(self) -> dict[str, str]:
        """Headers carrying the configured token, or nothing."""
        if not self.auth_token:
            return {}
        if self.auth_header == "Authorization":
            return {"Authorization": f"Bearer {self.auth_token}"}
        return {self.auth_header: self.auth_token}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()
