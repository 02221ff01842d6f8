# chroma_client/api/records.py
from __future__ import annotations

"""
Record-level operations on a single collection.

All methods address the collection by id within a tenant/database scope
(defaults from Settings).
"""

from chroma_client import schemas
from chroma_client.api.base import ApiBase


class RecordsApi(ApiBase):
    def _records_path(
        self,
        collection_id: str,
        action: str,
        database: str | None,
        tenant: str | None,
    ) -> str:
        return f"{self._collection_path(collection_id, database, tenant)}/{action}"

    def add(
        self,
        collection_id: str,
        request: schemas.AddEmbeddingRequest,
        database: str | None = None,
        tenant: str | None = None,
    ) -> None:
        self._transport.request(
            "POST",
            self._records_path(collection_id, "add", database, tenant),
            json=request.to_payload(),
        )
        self._telemetry.capture(
            "records_added", collection_id=collection_id, count=len(request.ids)
        )

    def update(
        self,
        collection_id: str,
        request: schemas.UpdateEmbeddingRequest,
        database: str | None = None,
        tenant: str | None = None,
    ) -> None:
        self._transport.request(
            "POST",
            self._records_path(collection_id, "update", database, tenant),
            json=request.to_payload(),
        )

    def upsert(
        self,
        collection_id: str,
        request: schemas.AddEmbeddingRequest,
        database: str | None = None,
        tenant: str | None = None,
    ) -> None:
        self._transport.request(
            "POST",
            self._records_path(collection_id, "upsert", database, tenant),
            json=request.to_payload(),
        )
        self._telemetry.capture(
            "records_upserted", collection_id=collection_id, count=len(request.ids)
        )

    def get(
        self,
        collection_id: str,
        request: schemas.GetEmbeddingRequest | None = None,
        database: str | None = None,
        tenant: str | None = None,
    ) -> schemas.GetItemsResponse:
        request = request or schemas.GetEmbeddingRequest()
        result = self._transport.request_json(
            "POST",
            self._records_path(collection_id, "get", database, tenant),
            json=request.to_payload(),
        )
        return schemas.GetItemsResponse.model_validate(result)

    def delete(
        self,
        collection_id: str,
        request: schemas.DeleteEmbeddingRequest,
        database: str | None = None,
        tenant: str | None = None,
    ) -> None:
        self._transport.request(
            "POST",
            self._records_path(collection_id, "delete", database, tenant),
            json=request.to_payload(),
        )
        self._telemetry.capture("records_deleted", collection_id=collection_id)

    def count(
        self,
        collection_id: str,
        database: str | None = None,
        tenant: str | None = None,
    ) -> int:
        result = self._transport.request_json(
            "GET", self._records_path(collection_id, "count", database, tenant)
        )
        return int(result)

    def query(
        self,
        collection_id: str,
        request: schemas.QueryEmbeddingRequest,
        database: str | None = None,
        tenant: str | None = None,
    ) -> schemas.QueryItemsResponse:
        """Nearest-neighbour search; one result row per query embedding."""
        result = self._transport.request_json(
            "POST",
            self._records_path(collection_id, "query", database, tenant),
            json=request.to_payload(),
        )
        return schemas.QueryItemsResponse.model_validate(result)
