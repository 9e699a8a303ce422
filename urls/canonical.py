"""URL canonicalization and merge shortcuts for dedup keys and link rewriting."""

from __future__ import annotations

from core.config import UrlConfig
from urls.components import UrlComponents


def canonicalize_url(url: str, query_separator: str = UrlConfig.DEFAULT_QUERY_SEPARATOR) -> str:
    """
    Canonicalize URL for stable deduplication.

    Rules:
    - Lowercase scheme and host
    - Drop the port when it is the scheme default
    - Sort query params (only when none is a bare token)
    - Uppercase percent-escape hex digits
    - Percent-encode characters left raw by the source

    Raises:
        UrlParseError: If the URL cannot be parsed.
    """
    components = UrlComponents(url, query_separator=query_separator)
    components.normalize()
    return components.build()


def merge_urls(base: str, *overlays: str) -> str:
    """
    Overlay ``overlays`` on ``base`` in order and return the resulting URL.

    Example:
      merge_urls("https://example.com/a?x=1", "/b", "?y=2")
      # "https://example.com/b?y=2"

    Raises:
        UrlParseError: If ``base`` cannot be parsed.
    """
    if not overlays:
        return UrlComponents(base).build()
    return UrlComponents(base).merge(*overlays)
