"""DID URL parsing and formatting."""

from .builder import DIDURLBuilder
from .did import DIDReference
from .errors import MalformedDIDURLError
from .params import ParamMap
from .parser import parse, parse_relative
from .url import DIDURLValue, format_url

__all__ = [
    "DIDReference",
    "DIDURLBuilder",
    "DIDURLValue",
    "MalformedDIDURLError",
    "ParamMap",
    "format_url",
    "parse",
    "parse_relative",
]
