"""Percent-encoding repair and path-slug helpers for scraped URLs."""

from __future__ import annotations

import re
from urllib.parse import quote

from core.config import UrlConfig


_UNSAFE_RUN_RE = re.compile(
    "[^0-9a-zA-Z" + re.escape(UrlConfig.FIX_ENCODING_SAFE_CHARS) + "]+"
)
_PERCENT_ESCAPE_RE = re.compile(r"%[0-9a-fA-F]{2}")

_SLUG_INVALID_RE = re.compile(r"[^a-z0-9\-]", re.IGNORECASE)
_SLUG_CAMEL_RE = re.compile(r"(\B[a-z])([A-Z])")
_SLUG_DIGIT_LETTER_RE = re.compile(r"([0-9])([a-z])", re.IGNORECASE)
_SLUG_HYPHENS_RE = re.compile(r"-+")


def fix_encoding(text: str) -> str:
    """
    Percent-encode characters a lenient upstream left unescaped.

    Naive on purpose: it targets the common mistakes found when scraping or
    ingesting third-party files (raw spaces, non-ASCII). Reserved
    punctuation and existing ``%xx`` triplets pass through unchanged, so
    running it twice is a no-op.

    Example:
      "deal news/❤" -> "deal%20news/%E2%9D%A4"
    """
    return _UNSAFE_RUN_RE.sub(lambda match: quote(match.group(0), safe=""), text)


def uppercase_percent_escapes(text: str) -> str:
    """Upper-case the hex digits of every ``%xx`` escape (``%7e`` -> ``%7E``)."""
    return _PERCENT_ESCAPE_RE.sub(lambda match: match.group(0).upper(), text)


def sanitize_path_component(text: str) -> str:
    """
    Turn free text into a hyphenated path slug.

    Example:
      "Hello World 4kTV" -> "Hello-World-4-k-TV"
    """
    output = text.replace("'", "")
    output = _SLUG_INVALID_RE.sub("-", output)
    output = _SLUG_CAMEL_RE.sub(r"\1-\2", output)
    output = _SLUG_DIGIT_LETTER_RE.sub(r"\1-\2", output)
    output = _SLUG_HYPHENS_RE.sub("-", output)
    return output.strip("-.")
