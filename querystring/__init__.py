"""Query-string package: ordered parameter lists."""

from querystring.parameters import ParameterList

__all__ = ["ParameterList"]
