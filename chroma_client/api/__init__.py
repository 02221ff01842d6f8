# chroma_client/api/__init__.py
from __future__ import annotations

"""
API client aggregation.

This module exposes a single `ChromaApiClient` composed from the
per-resource mixins:

- system: root, version, heartbeat, pre-flight checks, identity, reset
- tenants: tenants and databases
- collections: collection CRUD
- records: add / update / upsert / get / delete / count / query
"""

import httpx

from chroma_client.config import Settings, get_settings
from chroma_client.services.telemetry import Telemetry
from chroma_client.services.transport import ChromaTransport

from .collections import CollectionsApi
from .records import RecordsApi
from .system import SystemApi
from .tenants import TenantsApi


class ChromaApiClient(SystemApi, TenantsApi, CollectionsApi, RecordsApi):
    """Client for the Chroma v2 REST API.

    Example:
        with ChromaApiClient() as client:
            collection = client.create_collection(
                schemas.CreateCollectionRequest(name="docs", get_or_create=True)
            )
            client.add(collection.id, schemas.AddEmbeddingRequest(...))

    Every failed call raises a ``chroma_client.errors.ChromaError`` subclass.
    """

    def __init__(
        self,
        http_client: httpx.Client | None = None,
        settings: Settings | None = None,
        telemetry: Telemetry | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._transport = ChromaTransport(http_client, self.settings)
        self._owns_telemetry = telemetry is None
        self._telemetry_instance = telemetry

    @property
    def _telemetry(self) -> Telemetry:
        # Statsig initialize() talks to the network; defer it to the first event.
        if self._telemetry_instance is None:
            self._telemetry_instance = Telemetry(self.settings)
        return self._telemetry_instance

    @property
    def http_client(self) -> httpx.Client:
        return self._transport.http_client

    def close(self) -> None:
        """Close the owned HTTP client and flush owned telemetry."""
        self._transport.close()
        if self._owns_telemetry and self._telemetry_instance is not None:
            self._telemetry_instance.shutdown()

    def __enter__(self) -> "ChromaApiClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = ["ChromaApiClient"]
