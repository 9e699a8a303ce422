"""URL component model: parsing, validation, normalization, and merging."""

from urls.canonical import canonicalize_url, merge_urls
from urls.components import UrlComponents, split_url
from urls.validation import is_well_formed_url, validate_component

__all__ = [
    "UrlComponents",
    "canonicalize_url",
    "merge_urls",
    "split_url",
    "is_well_formed_url",
    "validate_component",
]
