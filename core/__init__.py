"""Core module for url-toolkit."""

from core.models import (
    BareEntry,
    NamedEntry,
    QueryEntry,
    UrlField,
    UrlParts,
)
from core.config import UrlConfig
from core.errors import UnknownFieldError, UrlParseError

__all__ = [
    "BareEntry",
    "NamedEntry",
    "QueryEntry",
    "UrlField",
    "UrlParts",
    "UrlConfig",
    "UnknownFieldError",
    "UrlParseError",
]
