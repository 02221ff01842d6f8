# chroma_client/schemas/__init__.py
from __future__ import annotations

"""
Pydantic schemas for Chroma v2 request/response payloads.

This module is the API contract layer and is used by:
- chroma_client.api (request serialization, response parsing)
- callers building requests for ChromaApiClient

Request models serialize through ``to_payload()`` which drops unset
optional fields. Response models keep unknown server fields so newer
server versions do not break parsing.
"""

import enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

Metadata = Dict[str, Any]
Embedding = List[float]
Where = Dict[str, Any]


class Include(str, enum.Enum):
    DOCUMENTS = "documents"
    EMBEDDINGS = "embeddings"
    METADATAS = "metadatas"
    DISTANCES = "distances"
    URIS = "uris"


class RequestModel(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class ResponseModel(BaseModel):
    model_config = ConfigDict(extra="allow")


# ---------- Tenant / Database Schemas ----------


class Tenant(ResponseModel):
    name: str


class Database(ResponseModel):
    id: Optional[str] = None
    name: str
    tenant: Optional[str] = None


class UserIdentity(ResponseModel):
    user_id: str = ""
    tenant: str
    databases: List[str] = Field(default_factory=list)


class CreateTenantRequest(RequestModel):
    name: str


class CreateDatabaseRequest(RequestModel):
    name: str


# ---------- Collection Schemas ----------


class Collection(ResponseModel):
    id: str
    name: str
    metadata: Optional[Metadata] = None
    configuration_json: Optional[Dict[str, Any]] = None
    dimension: Optional[int] = None
    tenant: Optional[str] = None
    database: Optional[str] = None
    version: Optional[int] = None
    log_position: Optional[int] = None


class CreateCollectionRequest(RequestModel):
    name: str
    metadata: Optional[Metadata] = None
    configuration: Optional[Dict[str, Any]] = None
    get_or_create: bool = False


class UpdateCollectionRequest(RequestModel):
    new_name: Optional[str] = None
    new_metadata: Optional[Metadata] = None
    new_configuration: Optional[Dict[str, Any]] = None


# ---------- Record Schemas ----------


class _RecordsRequest(RequestModel):
    """
    Column-oriented batch of records keyed by ``ids``.

    Every optional column that is provided must have one entry per id.
    """

    ids: List[str]
    embeddings: Optional[List[Embedding]] = None
    metadatas: Optional[List[Optional[Metadata]]] = None
    documents: Optional[List[Optional[str]]] = None
    uris: Optional[List[Optional[str]]] = None

    @model_validator(mode="after")
    def ensure_columns_align(self) -> "_RecordsRequest":
        if not self.ids:
            raise ValueError("ids must be a non-empty list")

        for column in ("embeddings", "metadatas", "documents", "uris"):
            values = getattr(self, column)
            if values is not None and len(values) != len(self.ids):
                raise ValueError(
                    f"{column} must have the same length as ids "
                    f"({len(values)} != {len(self.ids)})"
                )
        return self


class AddEmbeddingRequest(_RecordsRequest):
    """Payload for add and upsert."""


class UpdateEmbeddingRequest(_RecordsRequest):
    pass


class DeleteEmbeddingRequest(RequestModel):
    ids: Optional[List[str]] = None
    where: Optional[Where] = None
    where_document: Optional[Where] = None


class GetEmbeddingRequest(RequestModel):
    ids: Optional[List[str]] = None
    where: Optional[Where] = None
    where_document: Optional[Where] = None
    limit: Optional[int] = Field(default=None, ge=0)
    offset: Optional[int] = Field(default=None, ge=0)
    include: List[Include] = Field(
        default_factory=lambda: [Include.DOCUMENTS, Include.METADATAS]
    )


class QueryEmbeddingRequest(RequestModel):
    query_embeddings: List[Embedding]
    n_results: int = Field(default=10, ge=1)
    ids: Optional[List[str]] = None
    where: Optional[Where] = None
    where_document: Optional[Where] = None
    include: List[Include] = Field(
        default_factory=lambda: [Include.DOCUMENTS, Include.METADATAS, Include.DISTANCES]
    )


# ---------- Result Schemas ----------


class GetItemsResponse(ResponseModel):
    ids: List[str]
    embeddings: Optional[List[Optional[Embedding]]] = None
    metadatas: Optional[List[Optional[Metadata]]] = None
    documents: Optional[List[Optional[str]]] = None
    uris: Optional[List[Optional[str]]] = None
    include: List[str] = Field(default_factory=list)


class QueryItemsResponse(ResponseModel):
    """One inner list per query embedding, nearest first."""

    ids: List[List[str]]
    embeddings: Optional[List[Optional[List[Optional[Embedding]]]]] = None
    metadatas: Optional[List[Optional[List[Optional[Metadata]]]]] = None
    documents: Optional[List[Optional[List[Optional[str]]]]] = None
    uris: Optional[List[Optional[List[Optional[str]]]]] = None
    distances: Optional[List[Optional[List[Optional[float]]]]] = None
    include: List[str] = Field(default_factory=list)
