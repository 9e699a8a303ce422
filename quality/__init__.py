"""Quality utilities: encoding repair, escape normalization, and path slugs."""

from quality.encoding import fix_encoding, sanitize_path_component, uppercase_percent_escapes

__all__ = ["fix_encoding", "sanitize_path_component", "uppercase_percent_escapes"]
