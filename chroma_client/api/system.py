# chroma_client/api/system.py
from __future__ import annotations

from typing import Any

from chroma_client import schemas
from chroma_client.api.base import API_PREFIX, ApiBase


class SystemApi(ApiBase):
    """Server-level endpoints: discovery, health, identity and reset."""

    def root(self) -> dict[str, Any]:
        return self._transport.request_json("GET", API_PREFIX)

    def version(self) -> str:
        # The server returns a JSON string literal, e.g. "1.0.0"
        response = self._transport.request("GET", f"{API_PREFIX}/version")
        return response.text.strip().strip('"')

    def heartbeat(self) -> dict[str, Any]:
        return self._transport.request_json("GET", f"{API_PREFIX}/heartbeat")

    def pre_flight_checks(self) -> dict[str, Any]:
        return self._transport.request_json("GET", f"{API_PREFIX}/pre-flight-checks")

    def get_user_identity(self) -> schemas.UserIdentity:
        result = self._transport.request_json("GET", f"{API_PREFIX}/auth/identity")
        return schemas.UserIdentity.model_validate(result)

    def reset(self) -> bool:
        """Wipe all server data. Only honoured when the server allows resets."""
        result = self._transport.request_json("POST", f"{API_PREFIX}/reset")
        self._telemetry.capture("server_reset", result=result)
        return bool(result)
