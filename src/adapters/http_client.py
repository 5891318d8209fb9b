"""httpx wrapper and the Strapi transport primitive.

Why a wrapper:
- Standardizes timeouts, headers and the bearer token for every CMS call.
- Eases testing: an `httpx.MockTransport` can be injected instead of the network.
"""

from __future__ import annotations

import httpx
import structlog

from core.config import AppSettings
from core.domain.models import FetchOptions
from core.errors import CMSRequestError
from core.interfaces.transport import CachedResponse, ResponseCache

logger = structlog.get_logger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with safe defaults.

    Why a builder:
    - Centralizes timeouts/headers so every request behaves the same.
    - `transport` lets tests replace the network.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


def _disabled_response() -> httpx.Response:
    return httpx.Response(200, json={})


class StrapiHttpClient:
    """Transport primitive: GET a relative endpoint on the configured CMS.

    - Disabled CMS (no base URL): a synthetic `200 {}` response, no I/O.
    - Non-2xx: `CMSRequestError`, no retry.
    - Optional `cache`: successful responses are reused per URL until one of
      their tags is revalidated.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        cache: ResponseCache | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._enabled = self._settings.strapi_enabled
        self._base_url = self._settings.strapi_url or ""
        self._cache = cache
        self._transport = transport

    @property
    def enabled(self) -> bool:
        return self._enabled

    def url_for(self, endpoint: str) -> str:
        return f"{self._base_url}{endpoint}"

    def _auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self._settings.strapi_read_token or ''}"}

    async def request(self, endpoint: str, options: FetchOptions | None = None) -> httpx.Response:
        if not self._enabled:
            logger.debug("cms_disabled_fallback", endpoint=endpoint)
            return _disabled_response()

        options = options or FetchOptions()
        url = self.url_for(endpoint)

        if self._cache is not None:
            cached = self._cache.get(url)
            if cached is not None:
                # The hit must also answer to this request's tags.
                cached = self._cache.add_tags(url, options.tags) or cached
                logger.debug("cms_cache_hit", endpoint=endpoint, tags=sorted(cached.tags))
                return httpx.Response(
                    cached.status_code,
                    headers=cached.headers,
                    content=cached.content,
                    request=httpx.Request("GET", url),
                )

        # Authorization always wins, whatever the caller's casing.
        headers = {k: v for k, v in options.headers.items() if k.lower() != "authorization"}
        headers.update(self._auth_headers())

        logger.debug("cms_request", endpoint=endpoint, tags=options.tags)
        async with build_async_client(self._settings, extra_headers=headers, transport=self._transport) as client:
            response = await client.get(url)

        if not response.is_success:
            raise CMSRequestError(status_code=response.status_code, url=url)

        if self._cache is not None:
            self._cache.put(
                url,
                CachedResponse(
                    status_code=response.status_code,
                    content=response.content,
                    headers={"content-type": response.headers.get("content-type", "application/json")},
                    tags=frozenset(options.tags),
                ),
            )
        return response

    def revalidate_tag(self, tag: str) -> int:
        if self._cache is None:
            return 0
        return self._cache.revalidate_tag(tag)
