"""Ordered query-string parameter list with configurable separators."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Mapping, Optional
from urllib.parse import quote, unquote_plus

from core.config import UrlConfig
from core.models import BareEntry, NamedEntry, QueryEntry


def _encode(text: str) -> str:
    """Strict percent-encoding: space becomes %20, only unreserved characters stay."""
    return quote(text, safe="")


def _check_separator(separator: str) -> str:
    if not separator:
        raise ValueError("separator must be a non-empty string")
    return separator


class ParameterList:
    """
    Query string parser and builder that keeps every token in order.

    Unlike ``urllib.parse.parse_qsl`` this keeps unnamed tokens (``?flag``),
    repeated keys and the original order, and can use any separator. Nothing
    is deduplicated.

    Example:
      params = ParameterList("product=4k-tv;flag;city=New%20York", ";")
      params.get_parameters()
      # [NamedEntry(product, 4k-tv), BareEntry(flag), NamedEntry(city, New York)]
      params.build()  # "product=4k-tv;flag;city=New%20York"
    """

    def __init__(
        self,
        query_string: Optional[str] = None,
        separator: str = UrlConfig.DEFAULT_QUERY_SEPARATOR,
    ) -> None:
        self.separator = _check_separator(separator)
        self._entries: List[QueryEntry] = []
        if query_string is not None:
            self.parse(query_string, separator)

    def __str__(self) -> str:
        return self.build()

    def __repr__(self) -> str:
        return f"ParameterList({self.build()!r}, separator={self.separator!r})"

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[QueryEntry]:
        return iter(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParameterList):
            return NotImplemented
        return self.separator == other.separator and self._entries == other._entries

    def copy(self) -> ParameterList:
        """Return an independent copy (entries are copied, not shared)."""
        clone = ParameterList(separator=self.separator)
        clone._entries = [entry.model_copy() for entry in self._entries]
        return clone

    # ========================================================================
    # Parse / Build
    # ========================================================================

    def parse(self, query_string: str, separator: str = UrlConfig.DEFAULT_QUERY_SEPARATOR) -> None:
        """
        Replace the current entries with the tokens of ``query_string``.

        A non-default separator means the whole string may have been encoded
        to protect it, so the string is decoded once before splitting.

        Only the first two ``=`` pieces of a token are kept: ``a=b=c`` parses
        as key ``a``, value ``b``. Existing callers rely on this.
        """
        self.separator = _check_separator(separator)
        self._entries = []

        if separator != UrlConfig.DEFAULT_QUERY_SEPARATOR:
            query_string = unquote_plus(query_string)

        for part in query_string.split(separator):
            if not part:
                continue
            if "=" in part:
                pieces = part.split("=")
                key, value = pieces[0], pieces[1]
                self._entries.append(NamedEntry(key=unquote_plus(key), value=unquote_plus(value)))
            else:
                self._entries.append(BareEntry(token=unquote_plus(part)))

    def build(self, separator: Optional[str] = None) -> str:
        """
        Render the entries as a query string (without the leading ``?``).

        Entries with an empty value are skipped entirely, including
        ``key=`` pairs. They stay in the list.
        """
        if separator is None:
            separator = self.separator

        query_parts: List[str] = []
        for entry in self._entries:
            if not entry.value:
                continue
            if isinstance(entry, BareEntry):
                query_parts.append(_encode(entry.token))
            else:
                query_parts.append(f"{_encode(entry.key)}={_encode(entry.value)}")

        return separator.join(query_parts)

    # ========================================================================
    # Mutation
    # ========================================================================

    def get_parameters(self) -> List[QueryEntry]:
        """Return the entries in their current order."""
        return list(self._entries)

    def add_parameter(self, key: Optional[str], value: str, front: bool = False) -> None:
        """Add an entry (bare when ``key`` is None) at the end, or the front."""
        entry: QueryEntry
        if key is None:
            entry = BareEntry(token=value)
        else:
            entry = NamedEntry(key=key, value=value)

        if front:
            self._entries.insert(0, entry)
        else:
            self._entries.append(entry)

    def replace_parameter(self, key: str, value: str, old_value: Optional[str] = None) -> bool:
        """
        Overwrite the value of every named entry with ``key``.

        When ``old_value`` is given only entries currently holding it are
        rewritten. Positions never change.

        Returns:
            True if at least one entry was rewritten.
        """
        found = False
        for entry in self._entries:
            if not isinstance(entry, NamedEntry) or entry.key != key:
                continue
            if old_value is None or old_value == entry.value:
                entry.value = value
                found = True
        return found

    def set_parameter(self, key: Optional[str], value: str, front: bool = False) -> None:
        """
        Replace ``key`` in place, or add it when nothing was replaced.

        ``front`` only applies to the add path; replaced entries keep their
        position.
        """
        found = False
        if key is not None:
            found = self.replace_parameter(key, value)
        if not found:
            self.add_parameter(key, value, front)

    def set_named_parameters(self, parameters: Mapping[str, str], front: bool = False) -> None:
        """Call set_parameter for each key/value pair, in mapping order."""
        for key, value in parameters.items():
            self.set_parameter(key, value, front)

    def add_named_parameters(self, parameters: Mapping[str, str], front: bool = False) -> None:
        """Call add_parameter for each key/value pair, in mapping order."""
        for key, value in parameters.items():
            self.add_parameter(key, value, front)

    def remove_parameters(self, keys: Iterable[str]) -> None:
        """Drop every named entry whose key is in ``keys``. Bare entries stay."""
        doomed = set(keys)
        self._entries = [
            entry
            for entry in self._entries
            if not (isinstance(entry, NamedEntry) and entry.key in doomed)
        ]

    def sort_parameters(self) -> None:
        """Stable-sort by key, but only when every entry is named."""
        if all(isinstance(entry, NamedEntry) for entry in self._entries):
            self._entries.sort(key=lambda entry: entry.key)
