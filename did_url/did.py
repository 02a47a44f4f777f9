"""DID reference handling."""

from dataclasses import dataclass

from .const import DID_PREFIX, DID_RESERVED
from .errors import MalformedDIDURLError


@dataclass(frozen=True)
class DIDReference:
    """A DID as defined by Decentralized Identifiers 1.0: did:<method>:<id>."""

    value: str
    method: str
    method_specific_id: str

    @classmethod
    def parse(cls, did: str) -> "DIDReference":
        """Parse a bare DID string.

        The method-specific identifier is kept verbatim, including any colons.

        Raises:
            MalformedDIDURLError: on invalid inputs

        """
        if not isinstance(did, str):
            raise TypeError("Expected string for DID")
        if not did.startswith(DID_PREFIX):
            raise MalformedDIDURLError(did, "did", "missing 'did:' prefix")
        method, sep, method_specific_id = did[len(DID_PREFIX) :].partition(":")
        if not sep:
            raise MalformedDIDURLError(did, "did", "missing method-specific id")
        if not method:
            raise MalformedDIDURLError(did, "did", "empty method")
        if not method_specific_id:
            raise MalformedDIDURLError(did, "did", "empty method-specific id")
        return DIDReference(
            value=did,
            method=method,
            method_specific_id=method_specific_id,
        )

    @classmethod
    def create(cls, method: str, method_specific_id: str) -> "DIDReference":
        """Build a DID from its method and method-specific identifier."""
        if not method or ":" in method or _has_reserved(method):
            raise ValueError("Invalid DID method")
        if not method_specific_id or _has_reserved(method_specific_id):
            raise ValueError("Invalid method-specific id")
        return DIDReference(
            value=f"{DID_PREFIX}{method}:{method_specific_id}",
            method=method,
            method_specific_id=method_specific_id,
        )

    def __str__(self) -> str:
        return self.value


def _has_reserved(text: str) -> bool:
    return any(ch in text for ch in DID_RESERVED)
