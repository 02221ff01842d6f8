# chroma_client/api/base.py
from __future__ import annotations

"""
Shared plumbing for the per-resource API mixins.

Resource mixins (system, tenants, collections, records) only build paths
and payloads; the request itself always goes through ChromaTransport so
failures are classified in one place.
"""

from typing import Any
from urllib.parse import quote

from chroma_client.config import Settings
from chroma_client.services.telemetry import Telemetry
from chroma_client.services.transport import ChromaTransport

API_PREFIX = "/api/v2"


def _segment(value: str) -> str:
    return quote(str(value), safe="")


def _page(limit: int | None, offset: int | None) -> dict[str, Any] | None:
    params = {"limit": limit, "offset": offset}
    return {k: v for k, v in params.items() if v is not None} or None


class ApiBase:
    settings: Settings
    _transport: ChromaTransport
    _telemetry: Telemetry

    def _tenant_path(self, tenant: str | None) -> str:
        return f"{API_PREFIX}/tenants/{_segment(tenant or self.settings.tenant)}"

    def _database_path(self, database: str | None, tenant: str | None) -> str:
        name = database or self.settings.database
        return f"{self._tenant_path(tenant)}/databases/{_segment(name)}"

    def _collections_path(self, database: str | None, tenant: str | None) -> str:
        return f"{self._database_path(database, tenant)}/collections"

    def _collection_path(
        self, collection_id: str, database: str | None, tenant: str | None
    ) -> str:
        return f"{self._collections_path(database, tenant)}/{_segment(collection_id)}"
