"""Domain models (Pydantic v2).

Why Pydantic here:
- Request parameters (fetch options, blog filters) get validated once, at the edge.
- The empty fallbacks are built from the same models, so their shape cannot
  drift from what the CMS would send.

Note:
- CMS payloads themselves are *not* modeled: envelopes are returned as the
  parsed JSON the backend sent. The aliases below only document intent.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

# Parsed JSON as returned by the CMS: {"data": ..., "meta"?: {...}}.
Envelope = dict[str, Any]
BlogPost = dict[str, Any]

HeroBannerData = Envelope
MidBannerData = Envelope
CollectionsData = Envelope
VariantColorData = Envelope
AboutUsData = Envelope
FAQData = Envelope
ContentPageData = Envelope
BlogData = Envelope

DEFAULT_BLOG_SORT = "createdAt:desc"


class Pagination(BaseModel):
    """Pagination block of a collection envelope (`meta.pagination`)."""

    model_config = ConfigDict(populate_by_name=True)

    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=0, ge=0, alias="pageSize")
    page_count: int = Field(default=0, ge=0, alias="pageCount")
    total: int = Field(default=0, ge=0)


class EnvelopeMeta(BaseModel):
    pagination: Pagination = Field(default_factory=Pagination)


class FetchOptions(BaseModel):
    """Transport options a caller may attach to a request.

    - `headers` are merged under the Authorization header (never over it).
    - `tags` group the cached response for later revalidation.
    """

    headers: dict[str, str] = Field(default_factory=dict)
    tags: list[str] = Field(default_factory=list)


class BlogQuery(BaseModel):
    """Filters for the blog list."""

    sort_by: str = Field(
        default=DEFAULT_BLOG_SORT,
        min_length=1,
        description="Strapi sort expression (`field:asc|desc`).",
    )
    query: str | None = Field(
        default=None,
        description="Free-text filter on the post title (contains).",
    )
    category: str | None = Field(
        default=None,
        description="Category slug (exact match).",
    )


def empty_pagination() -> dict[str, Any]:
    return Pagination().model_dump(by_alias=True)


def empty_blog_data() -> BlogData:
    return {"data": [], "meta": EnvelopeMeta().model_dump(by_alias=True)}


def empty_collections_data() -> CollectionsData:
    return {"data": []}


def empty_variant_color_data() -> VariantColorData:
    return {"data": []}


def empty_hero_banner_data() -> HeroBannerData:
    return {"data": {}}


def empty_mid_banner_data() -> MidBannerData:
    return {"data": {}}


def empty_about_us_data() -> AboutUsData:
    return {"data": {}}


def empty_faq_data() -> FAQData:
    return {"data": {"FAQSection": []}}


def empty_content_page_data() -> ContentPageData:
    return {"data": {"PageContent": ""}}
