"""Endpoint builders for the Strapi REST grammar.

Each function returns the relative endpoint (path + query string) for one
content need. They are pure so the exact query a page depends on can be
checked without any I/O.

Grammar reminder:
- `populate[n]=Field` / `populate=*` embed relations.
- `filters[Field][$op]=value` filters.
- `sort=field:dir`, `pagination[start]=n&pagination[limit]=n`.
"""

from __future__ import annotations

from urllib.parse import quote

from core.domain.models import DEFAULT_BLOG_SORT


def _populate(*fields: str) -> str:
    return "&".join(f"populate[{i}]={field}" for i, field in enumerate(fields, start=1))


def _value(raw: str) -> str:
    # User input only; keys and sort expressions stay literal.
    return quote(raw, safe="")


def hero_banner_endpoint() -> str:
    return "/api/homepage?" + _populate("HeroBanner", "HeroBanner.CTA", "HeroBanner.Image")


def mid_banner_endpoint() -> str:
    return "/api/homepage?" + _populate("MidBanner", "MidBanner.CTA", "MidBanner.Image")


def collections_endpoint() -> str:
    return "/api/collections?populate=*"


def explore_blog_endpoint() -> str:
    return (
        "/api/blogs?"
        + _populate("FeaturedImage")
        + "&sort=createdAt:desc&pagination[start]=0&pagination[limit]=3"
    )


def variant_colors_endpoint() -> str:
    return (
        "/api/product-variants-colors?"
        + _populate("Type", "Type.Image")
        + "&pagination[start]=0&pagination[limit]=100"
    )


def about_us_endpoint() -> str:
    return "/api/about-us?" + _populate(
        "Banner",
        "OurStory.Image",
        "OurCraftsmanship.Image",
        "WhyUs.Tile.Image",
        "Numbers",
    )


def faq_endpoint() -> str:
    return "/api/faq?" + _populate("FAQSection", "FAQSection.Question")


def content_page_endpoint(content_type: str) -> str:
    """Generic single-type page (`/api/<content_type>?populate=*`)."""

    content_type = content_type.strip().strip("/")
    if not content_type:
        raise ValueError("content_type must not be empty")
    return f"/api/{content_type}?populate=*"


def blog_posts_endpoint(
    *,
    sort_by: str = DEFAULT_BLOG_SORT,
    query: str | None = None,
    category: str | None = None,
) -> str:
    """Blog list with optional title and category filters.

    Empty strings count as "no filter".
    """

    endpoint = (
        "/api/blogs?"
        + _populate("FeaturedImage", "Categories")
        + f"&sort={sort_by}&pagination[limit]=1000"
    )
    if query:
        endpoint += f"&filters[Title][$contains]={_value(query)}"
    if category:
        endpoint += f"&filters[Categories][Slug][$eq]={_value(category)}"
    return endpoint


def blog_categories_endpoint() -> str:
    return "/api/blog-post-categories?sort=createdAt:desc&pagination[limit]=100"


def blog_post_by_slug_endpoint(slug: str) -> str:
    return f"/api/blogs?filters[Slug][$eq]={_value(slug)}&populate=*"


def blog_slugs_endpoint() -> str:
    return "/api/blogs?populate=*"
