"""
Core Pydantic models for url-toolkit.

Design principles:
- Query entries carry decoded text; percent-encoding only happens on build
- Bare tokens and key=value pairs are distinct types, never a (key, None) pair
- The component struct holds no query text (the query is derived from the
  parameter list), so a snapshot of it plus a copy of the list is a full copy
"""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator

from core.config import UrlConfig
from core.errors import UnknownFieldError


# ============================================================================
# Enums
# ============================================================================

class UrlField(str, Enum):
    """Component names accepted by get/set/unset/has."""
    SCHEME = "scheme"
    HOST = "host"
    PORT = "port"
    USER = "user"
    PASS = "pass"
    PATH = "path"
    QUERY = "query"
    FRAGMENT = "fragment"

    @classmethod
    def coerce(cls, name: "UrlField | str") -> "UrlField":
        """Map a component name to its field, rejecting unknown names."""
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            raise UnknownFieldError(f"Invalid URL setting `{name}`.") from None

    @property
    def attribute(self) -> str:
        """Attribute name on UrlParts (``pass`` is a keyword)."""
        if self is UrlField.PASS:
            return "password"
        return self.value


# ============================================================================
# Query Entries
# ============================================================================

class BareEntry(BaseModel):
    """
    A query token without a key.

    Example:
      "flag" in "?flag&page=2" -> BareEntry(token="flag")
    """
    token: str  # decoded

    @property
    def key(self) -> None:
        return None

    @property
    def value(self) -> str:
        return self.token


class NamedEntry(BaseModel):
    """
    A key=value query token.

    Example:
      "city=New%20York" -> NamedEntry(key="city", value="New York")
    """
    key: str  # decoded
    value: str  # decoded, rewritten in place by replace_parameter


QueryEntry = Union[BareEntry, NamedEntry]


# ============================================================================
# URL Components
# ============================================================================

class UrlParts(BaseModel):
    """
    Stored URL components. ``None`` means unset.

    The query is deliberately absent: it lives in a ParameterList owned by
    UrlComponents and is rendered on demand.
    """
    model_config = ConfigDict(validate_assignment=True)

    scheme: Optional[str] = None
    host: Optional[str] = None
    port: Optional[int] = None
    user: Optional[str] = None
    password: Optional[str] = None
    path: Optional[str] = None
    fragment: Optional[str] = None

    query_separator: str = UrlConfig.DEFAULT_QUERY_SEPARATOR

    @field_validator("query_separator")
    @classmethod
    def validate_query_separator(cls, v: str) -> str:
        """Splitting on an empty separator is undefined."""
        if not v:
            raise ValueError("query_separator must not be empty")
        return v
