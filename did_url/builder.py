"""Incremental construction of DID URL values."""

from collections.abc import Mapping
from typing import Optional, Union

from .did import DIDReference
from .parser import parse
from .url import DIDURLValue, check_parameter, check_path, check_query_parameter


class DIDURLBuilder:
    """Build a new DID URL value from an existing DID or DID URL.

    Setting an existing parameter replaces its value in place.
    """

    def __init__(self, base: Union[DIDURLValue, DIDReference, str]):
        if isinstance(base, str):
            base = parse(base)
        elif isinstance(base, DIDReference):
            base = DIDURLValue(did=base)
        elif not isinstance(base, DIDURLValue):
            raise TypeError("Expected DID URL value, DID reference or string")
        self._did = base.did
        self._params = dict(base.params)
        self._path = base.path
        self._query = dict(base.query)
        self._fragment = base.fragment

    def set_did(self, did: Union[DIDReference, str]) -> "DIDURLBuilder":
        if isinstance(did, str):
            did = DIDReference.parse(did)
        elif not isinstance(did, DIDReference):
            raise TypeError("Expected DID reference or string")
        self._did = did
        return self

    def set_parameter(self, name: str, value: Optional[str] = None) -> "DIDURLBuilder":
        check_parameter(name, value)
        self._params[name] = value
        return self

    def set_parameters(
        self, params: Optional[Mapping[str, Optional[str]]]
    ) -> "DIDURLBuilder":
        """Replace all matrix parameters."""
        params = dict(params or {})
        for name, value in params.items():
            check_parameter(name, value)
        self._params = params
        return self

    def remove_parameter(self, name: str) -> "DIDURLBuilder":
        _check_name(name)
        self._params.pop(name, None)
        return self

    def clear_parameters(self) -> "DIDURLBuilder":
        self._params.clear()
        return self

    def set_path(self, path: Optional[str]) -> "DIDURLBuilder":
        path = path or ""
        check_path(path)
        self._path = path
        return self

    def clear_path(self) -> "DIDURLBuilder":
        self._path = ""
        return self

    def set_query_parameter(
        self, name: str, value: Optional[str] = None
    ) -> "DIDURLBuilder":
        check_query_parameter(name, value)
        self._query[name] = value
        return self

    def set_query_parameters(
        self, params: Optional[Mapping[str, Optional[str]]]
    ) -> "DIDURLBuilder":
        """Replace all query parameters."""
        params = dict(params or {})
        for name, value in params.items():
            check_query_parameter(name, value)
        self._query = params
        return self

    def remove_query_parameter(self, name: str) -> "DIDURLBuilder":
        _check_name(name)
        self._query.pop(name, None)
        return self

    def clear_query_parameters(self) -> "DIDURLBuilder":
        self._query.clear()
        return self

    def set_fragment(self, fragment: Optional[str]) -> "DIDURLBuilder":
        self._fragment = fragment or ""
        return self

    def clear_fragment(self) -> "DIDURLBuilder":
        self._fragment = ""
        return self

    def build(self) -> DIDURLValue:
        """Create the immutable DID URL value."""
        return DIDURLValue(
            did=self._did,
            params=self._params,
            path=self._path,
            query=self._query,
            fragment=self._fragment,
        )


def _check_name(name: str):
    if not isinstance(name, str) or not name:
        raise ValueError("Invalid parameter name")
