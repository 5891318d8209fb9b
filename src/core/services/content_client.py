"""Content client: one coroutine per content need of the storefront.

This module is the only place page-rendering code should talk to the CMS
through. Every accessor follows the same flow:

1. CMS disabled (no base URL configured) -> return a fresh, schema-shaped
   empty value, without any I/O.
2. Otherwise build the endpoint (`core.queries`), request it with the
   accessor's cache tag and return the parsed JSON as-is.

Errors are not logged nor wrapped here: `CMSRequestError` (non-2xx) and
`json.JSONDecodeError` (malformed body) reach the caller unchanged. A
missing blog post is `None`, not an error.
"""

from __future__ import annotations

from typing import Any

import httpx

from adapters.http_client import StrapiHttpClient
from core import queries
from core.config import AppSettings
from core.domain.models import (
    DEFAULT_BLOG_SORT,
    AboutUsData,
    BlogData,
    BlogPost,
    BlogQuery,
    CollectionsData,
    ContentPageData,
    FAQData,
    FetchOptions,
    HeroBannerData,
    MidBannerData,
    VariantColorData,
    empty_about_us_data,
    empty_blog_data,
    empty_collections_data,
    empty_content_page_data,
    empty_faq_data,
    empty_hero_banner_data,
    empty_mid_banner_data,
    empty_variant_color_data,
)
from core.domain.tags import CacheTag
from core.interfaces.transport import CMSTransport, ResponseCache


class ContentClient:
    """Typed accessors over the Strapi REST API."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: CMSTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        # Fixed for the lifetime of the client.
        self._enabled = self._settings.strapi_enabled
        self._transport = transport or StrapiHttpClient(self._settings)

    @property
    def enabled(self) -> bool:
        return self._enabled

    async def request(self, endpoint: str, options: FetchOptions | None = None) -> httpx.Response:
        """Raw transport call; safe to use even when the CMS is disabled."""

        return await self._transport.request(endpoint, options)

    async def _fetch_json(self, endpoint: str, tag: str) -> Any:
        response = await self.request(endpoint, FetchOptions(tags=[tag]))
        return response.json()

    def revalidate_tag(self, tag: str | CacheTag) -> int:
        """Drop cached responses for `tag` (0 when the transport has no cache)."""

        revalidate = getattr(self._transport, "revalidate_tag", None)
        if revalidate is None:
            return 0
        return revalidate(tag.value if isinstance(tag, CacheTag) else tag)

    # Homepage

    async def get_hero_banner_data(self) -> HeroBannerData:
        if not self._enabled:
            return empty_hero_banner_data()
        return await self._fetch_json(queries.hero_banner_endpoint(), CacheTag.HERO_BANNER.value)

    async def get_mid_banner_data(self) -> MidBannerData:
        if not self._enabled:
            return empty_mid_banner_data()
        return await self._fetch_json(queries.mid_banner_endpoint(), CacheTag.MID_BANNER.value)

    async def get_collections_data(self) -> CollectionsData:
        if not self._enabled:
            return empty_collections_data()
        return await self._fetch_json(queries.collections_endpoint(), CacheTag.COLLECTIONS.value)

    async def get_explore_blog_data(self) -> BlogData:
        """Latest three posts for the homepage teaser."""

        if not self._enabled:
            return empty_blog_data()
        return await self._fetch_json(queries.explore_blog_endpoint(), CacheTag.EXPLORE_BLOG.value)

    # Products

    async def get_product_variants_colors(self) -> VariantColorData:
        if not self._enabled:
            return empty_variant_color_data()
        return await self._fetch_json(queries.variant_colors_endpoint(), CacheTag.VARIANT_COLORS.value)

    # Static pages

    async def get_about_us(self) -> AboutUsData:
        if not self._enabled:
            return empty_about_us_data()
        return await self._fetch_json(queries.about_us_endpoint(), CacheTag.ABOUT_US.value)

    async def get_faq(self) -> FAQData:
        if not self._enabled:
            return empty_faq_data()
        return await self._fetch_json(queries.faq_endpoint(), CacheTag.FAQ.value)

    async def get_content_page(self, content_type: str, tag: str) -> ContentPageData:
        """Generic single-type page (terms, privacy, ...) under a caller tag."""

        if not self._enabled:
            return empty_content_page_data()
        return await self._fetch_json(queries.content_page_endpoint(content_type), tag)

    # Blog

    async def get_blog_posts(
        self,
        sort_by: str = DEFAULT_BLOG_SORT,
        query: str | None = None,
        category: str | None = None,
    ) -> BlogData:
        if not self._enabled:
            return empty_blog_data()
        params = BlogQuery(sort_by=sort_by, query=query, category=category)
        endpoint = queries.blog_posts_endpoint(
            sort_by=params.sort_by,
            query=params.query,
            category=params.category,
        )
        return await self._fetch_json(endpoint, CacheTag.BLOG.value)

    async def get_blog_post_categories(self) -> BlogData:
        if not self._enabled:
            return empty_blog_data()
        return await self._fetch_json(queries.blog_categories_endpoint(), CacheTag.BLOG_CATEGORIES.value)

    async def get_blog_post_by_slug(self, slug: str) -> BlogPost | None:
        """First post whose slug matches exactly, or None.

        Slugs are trusted to be unique; extra matches are ignored.
        """

        if not self._enabled:
            return None
        payload = await self._fetch_json(
            queries.blog_post_by_slug_endpoint(slug),
            CacheTag.for_blog_post(slug),
        )
        posts = payload.get("data") if isinstance(payload, dict) else None
        if isinstance(posts, list) and posts:
            return posts[0]
        return None

    async def get_all_blog_slugs(self) -> list[str]:
        if not self._enabled:
            return []
        payload = await self._fetch_json(queries.blog_slugs_endpoint(), CacheTag.BLOG_SLUGS.value)
        posts = payload.get("data") if isinstance(payload, dict) else None
        slugs: list[str] = []
        for post in posts if isinstance(posts, list) else []:
            if not isinstance(post, dict):
                continue
            slug = post.get("Slug")
            if isinstance(slug, str):
                slugs.append(slug)
        return slugs


def build_content_client(
    settings: AppSettings | None = None,
    *,
    cache: ResponseCache | None = None,
    http_transport: httpx.AsyncBaseTransport | None = None,
) -> ContentClient:
    """Wire a `ContentClient` over the Strapi adapter (optionally cached)."""

    settings = settings or AppSettings()
    http = StrapiHttpClient(settings, cache=cache, transport=http_transport)
    return ContentClient(settings, transport=http)
