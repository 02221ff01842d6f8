from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from chroma_client import ChromaApiClient
from chroma_client.config import Settings
from chroma_client.services.telemetry import Telemetry

BASE_URL = "http://chroma.test"


class Recorder:
    """Collects requests seen by a MockTransport and replays canned replies."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.routes: dict[tuple[str, str], tuple[int, str]] = {}

    def reply(self, method: str, path: str, status: int = 200, body: Any = None, text: str | None = None) -> None:
        if text is None:
            text = "" if body is None else json.dumps(body)
        self.routes[(method, path)] = (status, text)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, text = self.routes.get((request.method, request.url.path), (200, "null"))
        return httpx.Response(status, text=text)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, base_url=BASE_URL, statsig_server_secret=None)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def make_client(settings: Settings) -> Callable[..., ChromaApiClient]:
    def _make(handler: Callable[[httpx.Request], httpx.Response], **overrides: Any) -> ChromaApiClient:
        client_settings = settings.model_copy(update=overrides) if overrides else settings
        http_client = httpx.Client(base_url=BASE_URL, transport=httpx.MockTransport(handler))
        return ChromaApiClient(
            http_client=http_client,
            settings=client_settings,
            telemetry=Telemetry(client_settings),
        )

    return _make


@pytest.fixture
def client(make_client, recorder: Recorder) -> ChromaApiClient:
    return make_client(recorder)
