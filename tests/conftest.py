"""Shared pytest fixtures.

- Settings are built with `_env_file=None` so a developer's .env never leaks in.
- HTTP goes through `httpx.MockTransport` or a recording transport double;
  nothing touches the network.
"""

from __future__ import annotations

from typing import Any

import httpx
import pytest

from core.config import AppSettings
from core.domain.models import FetchOptions
from core.services.content_client import ContentClient, build_content_client

CMS_URL = "http://cms.test"
READ_TOKEN = "read-token"

_CMS_ENV_VARS = (
    "STRAPI_URL",
    "NEXT_PUBLIC_STRAPI_URL",
    "STRAPI_READ_TOKEN",
    "NEXT_PUBLIC_STRAPI_READ_TOKEN",
)


def make_settings(**overrides: Any) -> AppSettings:
    return AppSettings(_env_file=None, **overrides)


class FakeCMS:
    """MockTransport handler: records requests, answers with one canned response."""

    def __init__(self) -> None:
        self.payload: Any = {"data": []}
        self.status_code = 200
        self.content: bytes | None = None
        self.requests: list[httpx.Request] = []

    def respond(self, payload: Any = None, *, status_code: int = 200, content: bytes | None = None) -> None:
        self.payload = payload if payload is not None else {}
        self.status_code = status_code
        self.content = content

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


class RecordingTransport:
    """`CMSTransport` double exposing the endpoint and options of each call."""

    def __init__(self, payload: Any = None) -> None:
        self.payload = payload if payload is not None else {"data": []}
        self.calls: list[tuple[str, FetchOptions | None]] = []

    async def request(self, endpoint: str, options: FetchOptions | None = None) -> httpx.Response:
        self.calls.append((endpoint, options))
        return httpx.Response(200, json=self.payload)

    @property
    def last_endpoint(self) -> str:
        return self.calls[-1][0]

    @property
    def last_tags(self) -> list[str]:
        options = self.calls[-1][1]
        return list(options.tags) if options else []


@pytest.fixture(autouse=True)
def _isolated_cms_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _CMS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def enabled_settings() -> AppSettings:
    return make_settings(strapi_url=CMS_URL, strapi_read_token=READ_TOKEN)


@pytest.fixture
def disabled_settings() -> AppSettings:
    return make_settings()


@pytest.fixture
def fake_cms() -> FakeCMS:
    return FakeCMS()


@pytest.fixture
def client(enabled_settings: AppSettings, fake_cms: FakeCMS) -> ContentClient:
    return build_content_client(enabled_settings, http_transport=fake_cms.transport)


@pytest.fixture
def recording() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def recorded_client(enabled_settings: AppSettings, recording: RecordingTransport) -> ContentClient:
    return ContentClient(enabled_settings, transport=recording)
