# chroma_client/api/collections.py
from __future__ import annotations

from chroma_client import schemas
from chroma_client.api.base import ApiBase, _page


class CollectionsApi(ApiBase):
    def list_collections(
        self,
        database: str | None = None,
        tenant: str | None = None,
        *,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[schemas.Collection]:
        result = self._transport.request_json(
            "GET",
            self._collections_path(database, tenant),
            params=_page(limit, offset),
        )
        return [schemas.Collection.model_validate(item) for item in result]

    def count_collections(
        self,
        database: str | None = None,
        tenant: str | None = None,
    ) -> int:
        result = self._transport.request_json(
            "GET", f"{self._database_path(database, tenant)}/collections_count"
        )
        return int(result)

    def create_collection(
        self,
        request: schemas.CreateCollectionRequest,
        database: str | None = None,
        tenant: str | None = None,
    ) -> schemas.Collection:
        result = self._transport.request_json(
            "POST",
            self._collections_path(database, tenant),
            json=request.to_payload(),
        )
        collection = schemas.Collection.model_validate(result)
        self._telemetry.capture(
            "collection_created",
            collection_id=collection.id,
            get_or_create=request.get_or_create,
        )
        return collection

    def get_collection(
        self,
        collection_id: str,
        database: str | None = None,
        tenant: str | None = None,
    ) -> schemas.Collection:
        """Fetch a collection by id or name."""
        result = self._transport.request_json(
            "GET", self._collection_path(collection_id, database, tenant)
        )
        return schemas.Collection.model_validate(result)

    def update_collection(
        self,
        collection_id: str,
        request: schemas.UpdateCollectionRequest,
        database: str | None = None,
        tenant: str | None = None,
    ) -> None:
        self._transport.request(
            "PUT",
            self._collection_path(collection_id, database, tenant),
            json=request.to_payload(),
        )

    def delete_collection(
        self,
        collection_id: str,
        database: str | None = None,
        tenant: str | None = None,
    ) -> None:
        self._transport.request(
            "DELETE", self._collection_path(collection_id, database, tenant)
        )
        self._telemetry.capture("collection_deleted", collection_id=collection_id)
