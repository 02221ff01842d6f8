from __future__ import annotations

import logging

import httpx
import pytest

from chroma_client.errors import (
    ChromaConnectionError,
    ChromaError,
    ChromaUniqueConstraintError,
)
from chroma_client.services.transport import ChromaTransport, connection_failure_from

from .conftest import BASE_URL


def _transport(handler, settings) -> ChromaTransport:
    http_client = httpx.Client(base_url=BASE_URL, transport=httpx.MockTransport(handler))
    return ChromaTransport(http_client, settings)


def test_connect_error_becomes_connection_error(settings) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("All connection attempts failed", request=request)

    transport = _transport(handler, settings)

    with pytest.raises(ChromaConnectionError) as info:
        transport.request("GET", "/api/v2/heartbeat")

    assert info.value.message == "All connection attempts failed"
    assert info.value.code is None


def test_os_error_details_are_preferred(settings) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        try:
            raise ConnectionRefusedError(111, "Connection refused")
        except ConnectionRefusedError as exc:
            raise httpx.ConnectError("[Errno 111] Connection refused", request=request) from exc

    transport = _transport(handler, settings)

    with pytest.raises(ChromaConnectionError) as info:
        transport.request("GET", "/api/v2/heartbeat")

    assert info.value.message == "Connection refused"
    assert info.value.code == 111


def test_timeout_is_a_connection_error(settings) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(ChromaConnectionError):
        _transport(handler, settings).request("POST", "/api/v2/reset")


def test_connection_failure_from_plain_error() -> None:
    failure = connection_failure_from(httpx.ConnectError(""))

    assert failure.message == "ConnectError"
    assert failure.handler_context == {}


def test_error_response_is_classified_and_logged(settings, caplog) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            409, json={"error": "UniqueConstraintError('Collection docs already exists')"}
        )

    transport = _transport(handler, settings)

    with caplog.at_level(logging.WARNING, logger="chroma_client.services.transport"):
        with pytest.raises(ChromaUniqueConstraintError) as info:
            transport.request("POST", "/api/v2/tenants/t/databases/d/collections")

    assert info.value.message == "Collection docs already exists"
    assert info.value.code == 409
    assert "UniqueConstraintError" in caplog.text


def test_undecodable_success_body_is_generic_error(settings) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>proxy</html>")

    with pytest.raises(ChromaError) as info:
        _transport(handler, settings).request_json("GET", "/api/v2/heartbeat")

    assert type(info.value) is ChromaError
    assert info.value.message == "<html>proxy</html>"
    assert info.value.code == 200


def test_auth_headers_are_sent(settings) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"nanosecond heartbeat": 1})

    bearer = settings.model_copy(update={"auth_token": "s3cret"})
    _transport(handler, bearer).request_json("GET", "/api/v2/heartbeat")

    token = settings.model_copy(update={"auth_token": "s3cret", "auth_header": "X-Chroma-Token"})
    _transport(handler, token).request_json("GET", "/api/v2/heartbeat")

    assert seen[0].headers["Authorization"] == "Bearer s3cret"
    assert seen[1].headers["X-Chroma-Token"] == "s3cret"
    assert "Authorization" not in seen[1].headers


def test_close_leaves_caller_client_open(settings) -> None:
    http_client = httpx.Client(base_url=BASE_URL)
    ChromaTransport(http_client, settings).close()

    assert not http_client.is_closed


def test_close_owned_client(settings) -> None:
    transport = ChromaTransport(settings=settings)
    transport.close()

    assert transport.http_client.is_closed
