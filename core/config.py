"""
Default URL handling configuration for url-toolkit.

These settings are IMMUTABLE and shared by every parser/builder instance so
that two processes canonicalizing the same link always agree on the output.

Design: the tables here mirror what third-party URLs look like in the wild,
not what RFC 3986 strictly allows.
"""

from typing import Dict


class UrlConfig:
    """
    Immutable URL handling settings.
    """

    # ========================================================================
    # Query Strings
    # ========================================================================

    DEFAULT_QUERY_SEPARATOR: str = "&"
    """Separator used when none is given at parse or build time."""

    # ========================================================================
    # Ports
    # ========================================================================

    # Known scheme/port pairs. The port is left out of built URLs when it
    # matches the scheme, and a missing scheme is inferred from the port.
    PORT_SCHEME_MAP: Dict[str, int] = {
        "http": 80,
        "https": 443,
        "ftp": 21,
        "ssh": 22,
    }
    """Default port per scheme."""

    MIN_PORT: int = 1
    """Lowest accepted port."""

    # One above the real maximum (65535). Existing callers depend on 65536
    # being accepted.
    MAX_PORT: int = 65536
    """Highest accepted port."""

    # ========================================================================
    # Encoding Repair
    # ========================================================================

    # Characters (besides ASCII letters and digits) that fix_encoding leaves
    # untouched. Everything else is percent-encoded.
    FIX_ENCODING_SAFE_CHARS: str = ";/?:@=&$-_.+!*(),#%~'"
    """Punctuation passed through by fix_encoding."""

    @classmethod
    def validate(cls) -> None:
        """
        Validate configuration at import time.

        Raises:
            AssertionError: If any constraint is violated.
        """
        assert cls.DEFAULT_QUERY_SEPARATOR, "DEFAULT_QUERY_SEPARATOR must not be empty"

        assert (
            0 < cls.MIN_PORT <= cls.MAX_PORT
        ), "MIN_PORT must be > 0 and <= MAX_PORT"

        assert all(
            cls.MIN_PORT <= port <= cls.MAX_PORT for port in cls.PORT_SCHEME_MAP.values()
        ), "PORT_SCHEME_MAP ports must be within MIN_PORT..MAX_PORT"

        assert all(
            scheme.isalpha() and scheme.islower() for scheme in cls.PORT_SCHEME_MAP
        ), "PORT_SCHEME_MAP schemes must be lower-case letters"

        assert (
            len(set(cls.PORT_SCHEME_MAP.values())) == len(cls.PORT_SCHEME_MAP)
        ), "PORT_SCHEME_MAP ports must be unique (scheme inference needs a 1:1 map)"


# Validate at module import time
UrlConfig.validate()
