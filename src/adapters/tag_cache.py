"""In-process tag cache for CMS responses.

Stands in for the framework fetch cache a web frontend would provide:
responses are keyed by URL and indexed by tag, and revalidating a tag
forces the next request for any of its URLs back to the network.

No TTL and no size bound: entries live until their tag is revalidated or
the cache is cleared. None of the methods await, so concurrent coroutines
in one event loop never observe a half-updated index.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable

import structlog

from core.interfaces.transport import CachedResponse

logger = structlog.get_logger(__name__)


class InMemoryTagCache:
    def __init__(self) -> None:
        self._entries: dict[str, CachedResponse] = {}
        self._keys_by_tag: dict[str, set[str]] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def get(self, key: str) -> CachedResponse | None:
        return self._entries.get(key)

    def put(self, key: str, response: CachedResponse) -> None:
        previous = self._entries.get(key)
        if previous is not None:
            self._unindex(key, previous.tags)
        self._entries[key] = response
        for tag in response.tags:
            self._keys_by_tag.setdefault(tag, set()).add(key)

    def add_tags(self, key: str, tags: Iterable[str]) -> CachedResponse | None:
        """Index an existing entry under extra tags. Returns the updated entry."""

        entry = self._entries.get(key)
        if entry is None:
            return None
        extra = frozenset(tags) - entry.tags
        if not extra:
            return entry
        entry = replace(entry, tags=entry.tags | extra)
        self._entries[key] = entry
        for tag in extra:
            self._keys_by_tag.setdefault(tag, set()).add(key)
        return entry

    def revalidate_tag(self, tag: str) -> int:
        """Drop every entry carrying `tag`. Returns how many were dropped."""

        keys = self._keys_by_tag.pop(tag, set())
        for key in keys:
            entry = self._entries.pop(key, None)
            if entry is not None:
                self._unindex(key, entry.tags)
        logger.debug("cms_tag_revalidated", tag=tag, dropped=len(keys))
        return len(keys)

    def revalidate_tags(self, tags: Iterable[str]) -> int:
        return sum(self.revalidate_tag(tag) for tag in tags)

    def clear(self) -> None:
        self._entries.clear()
        self._keys_by_tag.clear()

    def _unindex(self, key: str, tags: Iterable[str]) -> None:
        for tag in tags:
            keys = self._keys_by_tag.get(tag)
            if keys is None:
                continue
            keys.discard(key)
            if not keys:
                del self._keys_by_tag[tag]
