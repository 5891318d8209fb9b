"""Contracts for the HTTP boundary.

Why Protocol:
- Structural contract (duck typing) without rigid inheritance.
- Lets the content client run against the real Strapi adapter, a cached one
  or a test double without knowing which.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Protocol, runtime_checkable

import httpx

from core.domain.models import FetchOptions


@runtime_checkable
class CMSTransport(Protocol):
    """Minimal contract of the transport primitive.

    Design rules:
    - `request` is async because it does network I/O.
    - It returns a successful response or raises; callers only parse JSON.
    """

    async def request(self, endpoint: str, options: FetchOptions | None = None) -> httpx.Response:
        """GET `endpoint` (relative to the CMS base URL)."""

        ...


@dataclass(frozen=True)
class CachedResponse:
    """What the tag cache keeps of a successful response."""

    status_code: int
    content: bytes
    headers: dict[str, str] = field(default_factory=dict)
    tags: frozenset[str] = frozenset()


@runtime_checkable
class ResponseCache(Protocol):
    """Tag-aware response cache (the "transport-level cache" of the CMS layer)."""

    def get(self, key: str) -> CachedResponse | None: ...

    def put(self, key: str, response: CachedResponse) -> None: ...

    def add_tags(self, key: str, tags: Iterable[str]) -> CachedResponse | None: ...

    def revalidate_tag(self, tag: str) -> int: ...

    def revalidate_tags(self, tags: Iterable[str]) -> int: ...
