from __future__ import annotations

"""chroma_client/services/transport.py

HTTP transport shared by every ChromaApiClient operation.

This module provides:

- ChromaTransport: wraps an httpx.Client configured from Settings
  (base URL, timeout, auth headers) and issues one request per call
- failure handling: httpx request errors become ConnectionFailure, non-2xx
  responses become HttpFailure; both are run through
  services.diagnostics.classify and raised as a ChromaError subclass

The transport never retries; callers decide what to do with the raised
error.
"""

import logging
from typing import Any, Mapping, NoReturn

import httpx

from chroma_client.config import Settings, get_settings
from chroma_client.errors import raise_classified
from chroma_client.services.diagnostics import (
    ConnectionFailure,
    Failure,
    HttpFailure,
    classify,
)

logger = logging.getLogger(__name__)


def _find_os_error(exc: BaseException) -> OSError | None:
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        if isinstance(current, OSError):
            return current
        seen.add(id(current))
        current = current.__cause__ or current.__context__
    return None


def connection_failure_from(exc: httpx.RequestError) -> ConnectionFailure:
    """Build a ConnectionFailure, surfacing the OS-level error when present."""
    handler_context: dict[str, Any] = {}
    os_error = _find_os_error(exc)
    if os_error is not None:
        if os_error.strerror:
            handler_context["error"] = os_error.strerror
        if os_error.errno is not None:
            handler_context["errno"] = os_error.errno

    return ConnectionFailure(
        message=str(exc) or type(exc).__name__,
        code=None,
        handler_context=handler_context,
    )


class ChromaTransport:
    def __init__(
        self,
        http_client: httpx.Client | None = None,
        settings: Settings | None = None,
    ):
        self.settings = settings or get_settings()
        self._owns_client = http_client is None
        self._headers = {"Accept": "application/json", **self.settings.auth_headers()}
        self.http_client = http_client or httpx.Client(
            base_url=self.settings.base_url,
            timeout=self.settings.timeout_seconds,
        )

    def _fail(self, failure: Failure, method: str, path: str) -> NoReturn:
        classified = classify(failure)
        logger.warning(
            "Chroma %s %s failed: %s (code=%s): %s",
            method,
            path,
            classified.error_type,
            classified.code,
            classified.message,
        )
        raise_classified(classified)

    def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: Mapping[str, Any] | None = None,
    ) -> httpx.Response:
        """Issue one request; raise a ChromaError subclass on any failure."""
        logger.debug("Chroma %s %s", method, path)
        try:
            response = self.http_client.request(
                method, path, json=json, params=params, headers=self._headers
            )
        except httpx.RequestError as exc:
            self._fail(connection_failure_from(exc), method, path)

        if response.is_error:
            self._fail(HttpFailure(response.status_code, response.text), method, path)
        return response

    def request_json(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        response = self.request(method, path, json=json, params=params)
        try:
            return response.json()
        except ValueError:
            self._fail(HttpFailure(response.status_code, response.text), method, path)

    def close(self) -> None:
        if self._owns_client:
            self.http_client.close()
