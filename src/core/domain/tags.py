"""Cache tags attached to every CMS request.

A tag groups cached responses so an external revalidation (e.g. a CMS
webhook) can drop all of them at once. Keeping the names in one enum avoids
typos drifting between the client and whoever revalidates.
"""

from __future__ import annotations

from enum import Enum


class CacheTag(str, Enum):
    """Fixed tags, one per content need."""

    HERO_BANNER = "hero-banner"
    MID_BANNER = "mid-banner"
    COLLECTIONS = "collections-main"
    EXPLORE_BLOG = "explore-blog"
    VARIANT_COLORS = "variants-colors"
    ABOUT_US = "about-us"
    FAQ = "faq"
    BLOG = "blog"
    BLOG_CATEGORIES = "blog-categories"
    BLOG_SLUGS = "blog-slugs"

    @staticmethod
    def for_blog_post(slug: str) -> str:
        """Per-post tag (`blog-<slug>`)."""

        return f"blog-{slug}"
