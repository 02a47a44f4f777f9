"""Parsed DID URL values and their canonical string form."""

from dataclasses import dataclass, field
from functools import total_ordering
from typing import Optional, Union

from .const import (
    FRAGMENT_SEP,
    PARAM_NAME_RESERVED,
    PARAM_SEP,
    PARAM_VALUE_RESERVED,
    PATH_RESERVED,
    PATH_SEP,
    QUERY_NAME_RESERVED,
    QUERY_PARAM_SEP,
    QUERY_SEP,
    QUERY_VALUE_RESERVED,
)
from .did import DIDReference
from .params import ParamMap


@total_ordering
@dataclass(frozen=True)
class DIDURLValue:
    """A DID URL as defined by Decentralized Identifiers 1.0.

    Instances are immutable: use `dataclasses.replace`, `DIDURLBuilder` or
    re-parse to derive a new value. Values order by their canonical string.

    Raises:
        ValueError: if a component could not be formatted and parsed back
            to the same value

    """

    did: DIDReference
    params: ParamMap = field(default_factory=ParamMap)
    path: str = ""
    query: ParamMap = field(default_factory=ParamMap)
    fragment: str = ""

    def __post_init__(self):
        if not isinstance(self.did, DIDReference):
            raise TypeError("Expected DIDReference for did")
        if not isinstance(self.params, ParamMap):
            object.__setattr__(self, "params", ParamMap(self.params))
        if not isinstance(self.query, ParamMap):
            object.__setattr__(self, "query", ParamMap(self.query))
        if not isinstance(self.path, str) or not isinstance(self.fragment, str):
            raise TypeError("Expected string for path and fragment")
        for name, value in self.params.items():
            check_parameter(name, value)
        for name, value in self.query.items():
            check_query_parameter(name, value)
        check_path(self.path)

    def __lt__(self, other) -> bool:
        if not isinstance(other, DIDURLValue):
            return NotImplemented
        return format_url(self) < format_url(other)

    @property
    def root(self) -> "DIDURLValue":
        """Access this DID URL without any parameters, path, query, or fragment."""
        return DIDURLValue(did=self.did)

    @property
    def params_string(self) -> Optional[str]:
        """The matrix parameters without the leading separator, if any."""
        if self.params:
            return self.params.serialize(PARAM_SEP)
        return None

    @property
    def query_string(self) -> Optional[str]:
        """The query parameters without the leading separator, if any."""
        if self.query:
            return self.query.serialize(QUERY_PARAM_SEP)
        return None

    def serialize(self) -> dict:
        return {
            "did": self.did.value,
            "method": self.did.method,
            "methodSpecificId": self.did.method_specific_id,
            "params": dict(self.params),
            "path": self.path,
            "query": dict(self.query),
            "fragment": self.fragment,
        }

    def __str__(self) -> str:
        return format_url(self)


def _check_pair(
    name: str,
    value: Optional[str],
    name_reserved: tuple[str, ...],
    value_reserved: tuple[str, ...],
):
    if not isinstance(name, str) or not name:
        raise ValueError("Invalid parameter name")
    if any(ch in name for ch in name_reserved):
        raise ValueError(f"Reserved character in parameter name: {name!r}")
    if value is not None and any(ch in value for ch in value_reserved):
        raise ValueError(f"Reserved character in value of parameter {name!r}")


def check_parameter(name: str, value: Optional[str]):
    """Check that a matrix parameter survives formatting."""
    _check_pair(name, value, PARAM_NAME_RESERVED, PARAM_VALUE_RESERVED)


def check_query_parameter(name: str, value: Optional[str]):
    """Check that a query parameter survives formatting."""
    _check_pair(name, value, QUERY_NAME_RESERVED, QUERY_VALUE_RESERVED)


def check_path(path: str):
    """Check that a path is empty or absolute, without a query or fragment."""
    if path and not path.startswith(PATH_SEP):
        raise ValueError(f"Path must begin with '{PATH_SEP}'")
    if any(ch in path for ch in PATH_RESERVED):
        raise ValueError(f"Reserved character in path: {path!r}")


def format_url(
    value: DIDURLValue, base: Union[DIDReference, str, None] = None
) -> str:
    """Format a DID URL value as its canonical string.

    When `base` matches the DID of the value, the DID is omitted and a
    relative DID URL is returned.
    """
    if isinstance(base, str):
        base = DIDReference.parse(base)
    elif base is not None and not isinstance(base, DIDReference):
        raise TypeError("Expected DIDReference or string for base DID")
    parts = []
    if base is None or value.did != base:
        parts.append(value.did.value)
    if value.params:
        parts.append(PARAM_SEP + value.params.serialize(PARAM_SEP))
    parts.append(value.path)
    if value.query:
        parts.append(QUERY_SEP + value.query.serialize(QUERY_PARAM_SEP))
    if value.fragment:
        parts.append(FRAGMENT_SEP + value.fragment)
    return "".join(parts)
