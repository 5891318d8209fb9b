"""In-memory tag cache: indexing and revalidation."""

from __future__ import annotations

from adapters.tag_cache import InMemoryTagCache
from core.interfaces.transport import CachedResponse, ResponseCache


def _entry(*tags: str, body: bytes = b"{}") -> CachedResponse:
    return CachedResponse(status_code=200, content=body, tags=frozenset(tags))


def test_satisfies_response_cache_protocol() -> None:
    assert isinstance(InMemoryTagCache(), ResponseCache)


def test_put_then_get() -> None:
    cache = InMemoryTagCache()
    cache.put("u1", _entry("faq"))

    assert cache.get("u1") == _entry("faq")
    assert cache.get("u2") is None
    assert "u1" in cache
    assert len(cache) == 1


def test_revalidate_drops_only_tagged_entries() -> None:
    cache = InMemoryTagCache()
    cache.put("blogs", _entry("blog"))
    cache.put("slugs", _entry("blog-slugs"))
    cache.put("faq", _entry("faq"))

    assert cache.revalidate_tag("blog") == 1

    assert cache.get("blogs") is None
    assert cache.get("slugs") is not None
    assert cache.get("faq") is not None


def test_entry_with_several_tags_is_fully_unindexed() -> None:
    cache = InMemoryTagCache()
    cache.put("post", _entry("blog", "blog-my-post"))

    assert cache.revalidate_tag("blog-my-post") == 1
    assert cache.revalidate_tag("blog") == 0
    assert len(cache) == 0


def test_overwrite_replaces_tags() -> None:
    cache = InMemoryTagCache()
    cache.put("page", _entry("old-tag"))
    cache.put("page", _entry("new-tag", body=b'{"v": 2}'))

    assert cache.revalidate_tag("old-tag") == 0
    assert cache.get("page").content == b'{"v": 2}'
    assert cache.revalidate_tag("new-tag") == 1


def test_unknown_tag_is_noop() -> None:
    cache = InMemoryTagCache()
    cache.put("faq", _entry("faq"))

    assert cache.revalidate_tag("missing") == 0
    assert len(cache) == 1


def test_revalidate_tags_sums_and_clear() -> None:
    cache = InMemoryTagCache()
    cache.put("a", _entry("x"))
    cache.put("b", _entry("y"))
    cache.put("c", _entry("z"))

    assert cache.revalidate_tags(["x", "y"]) == 2
    cache.clear()
    assert len(cache) == 0
    assert cache.revalidate_tag("z") == 0


def test_add_tags_indexes_existing_entry() -> None:
    cache = InMemoryTagCache()
    cache.put("terms", _entry("terms-a"))

    updated = cache.add_tags("terms", ["terms-b", "terms-a"])

    assert updated is not None
    assert updated.tags == frozenset({"terms-a", "terms-b"})
    assert cache.revalidate_tag("terms-b") == 1
    assert cache.revalidate_tag("terms-a") == 0
    assert len(cache) == 0


def test_add_tags_on_missing_key_is_noop() -> None:
    cache = InMemoryTagCache()

    assert cache.add_tags("missing", ["x"]) is None
    assert cache.revalidate_tag("x") == 0
