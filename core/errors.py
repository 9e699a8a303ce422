"""Exceptions raised by url-toolkit."""

from __future__ import annotations


class UrlParseError(ValueError):
    """A URL string could not be split into valid components."""


class UnknownFieldError(ValueError):
    """A component access named something outside the fixed URL field set."""
