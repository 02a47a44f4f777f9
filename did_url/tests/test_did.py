import pytest

from did_url.did import DIDReference
from did_url.errors import MalformedDIDURLError

VALID_DID = [
    ("did:elastos:icJ4z2DULrHEzYSvjKNJpKyhqFDxvYV7pN", "elastos", "icJ4z2DULrHEzYSvjKNJpKyhqFDxvYV7pN"),
    ("did:example:123456789abcdefghi", "example", "123456789abcdefghi"),
    ("did:web:example.com%3A8080:user:alice", "web", "example.com%3A8080:user:alice"),
    ("did:elastos::1234567890", "elastos", ":1234567890"),
]
INVALID_DID = [
    "",
    "did",
    "did:",
    "did:elastos",
    "did:elastos:",
    "did::1234567890",
    "DID:elastos:1234567890",
    "urn:elastos:1234567890",
]


@pytest.mark.parametrize("did,method,method_specific_id", VALID_DID)
def test_parse_did(did: str, method: str, method_specific_id: str):
    ref = DIDReference.parse(did)
    assert ref.value == did
    assert ref.method == method
    assert ref.method_specific_id == method_specific_id
    assert str(ref) == did


@pytest.mark.parametrize("did", INVALID_DID)
def test_parse_invalid_did(did: str):
    with pytest.raises(MalformedDIDURLError) as exc:
        DIDReference.parse(did)
    assert exc.value.url == did
    assert exc.value.component == "did"


def test_create_did():
    ref = DIDReference.create("elastos", "icJ4z2DULrHEzYSvjKNJpKyhqFDxvYV7pN")
    assert ref == DIDReference.parse("did:elastos:icJ4z2DULrHEzYSvjKNJpKyhqFDxvYV7pN")

    with pytest.raises(ValueError):
        DIDReference.create("", "1234567890")
    with pytest.raises(ValueError):
        DIDReference.create("elastos", "")
    with pytest.raises(ValueError):
        DIDReference.create("did:elastos", "1234567890")


def test_did_immutable():
    ref = DIDReference.parse("did:example:123")
    with pytest.raises(AttributeError):
        ref.method = "other"
    assert hash(ref) == hash(DIDReference.parse("did:example:123"))


@pytest.mark.parametrize(
    "method,method_specific_id",
    [
        ("example", "12;3"),
        ("example", "12/3"),
        ("example", "12?3"),
        ("example", "12#3"),
        ("ex;ample", "123"),
        ("ex/ample", "123"),
    ],
)
def test_create_did_reserved(method: str, method_specific_id: str):
    with pytest.raises(ValueError):
        DIDReference.create(method, method_specific_id)
