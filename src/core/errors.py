"""Errors raised by the CMS data-access layer.

Only the transport primitive raises; accessors let errors propagate so the
caller (page rendering, CLI) decides what the user sees.
"""

from __future__ import annotations


class CMSRequestError(OSError):
    """The CMS answered with a non-success (non-2xx) status."""

    def __init__(
        self,
        message: str = "Failed to fetch data",
        *,
        status_code: int | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url
