# chroma_client/api/tenants.py
from __future__ import annotations

from chroma_client import schemas
from chroma_client.api.base import API_PREFIX, ApiBase, _page


class TenantsApi(ApiBase):
    """Tenant and database management.

    ``tenant`` / ``database`` arguments default to the configured
    Settings.tenant / Settings.database.
    """

    def create_tenant(self, request: schemas.CreateTenantRequest) -> None:
        self._transport.request("POST", f"{API_PREFIX}/tenants", json=request.to_payload())
        self._telemetry.capture("tenant_created", tenant=request.name)

    def get_tenant(self, tenant: str | None = None) -> schemas.Tenant:
        result = self._transport.request_json("GET", self._tenant_path(tenant))
        return schemas.Tenant.model_validate(result)

    def create_database(
        self,
        request: schemas.CreateDatabaseRequest,
        tenant: str | None = None,
    ) -> None:
        self._transport.request(
            "POST",
            f"{self._tenant_path(tenant)}/databases",
            json=request.to_payload(),
        )
        self._telemetry.capture("database_created", database=request.name)

    def get_database(
        self,
        database: str | None = None,
        tenant: str | None = None,
    ) -> schemas.Database:
        result = self._transport.request_json("GET", self._database_path(database, tenant))
        return schemas.Database.model_validate(result)

    def list_databases(
        self,
        tenant: str | None = None,
        *,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[schemas.Database]:
        result = self._transport.request_json(
            "GET",
            f"{self._tenant_path(tenant)}/databases",
            params=_page(limit, offset),
        )
        return [schemas.Database.model_validate(item) for item in result]

    def delete_database(
        self,
        database: str | None = None,
        tenant: str | None = None,
    ) -> None:
        self._transport.request("DELETE", self._database_path(database, tenant))
        self._telemetry.capture(
            "database_deleted", database=database or self.settings.database
        )
