"""Parsing of DID URL strings."""

import argparse
import json
import sys
from typing import Optional, Union

import jsoncanon

from .const import (
    DID_PREFIX,
    FRAGMENT_SEP,
    PARAM_SEP,
    PATH_SEP,
    QUERY_PARAM_SEP,
    QUERY_SEP,
    URL_SEPARATORS,
    VALUE_SEP,
)
from .did import DIDReference
from .errors import MalformedDIDURLError
from .params import ParamMap
from .url import DIDURLValue, format_url


def parse(url: str) -> DIDURLValue:
    """Parse a string as a DID URL.

    The components are split off in order: fragment, query, path, and finally
    the matrix parameters, leaving the bare DID.

    Raises:
        MalformedDIDURLError: on invalid inputs

    """
    if not isinstance(url, str):
        raise TypeError("Expected string for DID URL")
    rest = url
    fragment = ""
    query = ""
    path = ""
    params = ""
    if (pos := rest.find(FRAGMENT_SEP)) >= 0:
        fragment = rest[pos + 1 :]
        rest = rest[:pos]
    if (pos := rest.find(QUERY_SEP)) >= 0:
        query = rest[pos + 1 :]
        rest = rest[:pos]
    if (pos := rest.find(PATH_SEP)) >= 0:
        path = rest[pos:]
        rest = rest[:pos]
    if (pos := rest.find(PARAM_SEP)) >= 0:
        params = rest[pos:]
        rest = rest[:pos]
    try:
        did = DIDReference.parse(rest)
    except MalformedDIDURLError as err:
        raise MalformedDIDURLError(url, err.component, err.message) from None
    return DIDURLValue(
        did=did,
        params=_parse_pairs(params, PARAM_SEP, url, "parameter"),
        path=path,
        query=_parse_pairs(query, QUERY_PARAM_SEP, url, "query"),
        fragment=fragment,
    )


def _parse_pairs(text: str, sep: str, url: str, component: str) -> ParamMap:
    if text.startswith(sep):
        text = text[1:]
    pairs = []
    for token in text.split(sep):
        # redundant separator
        if not token:
            continue
        key, eq, value = token.partition(VALUE_SEP)
        if not key:
            raise MalformedDIDURLError(url, component, f"empty name in {token!r}")
        pairs.append((key, value if eq else None))
    return ParamMap(pairs)


def parse_relative(url: str, base: Union[DIDReference, str]) -> DIDURLValue:
    """Parse a DID URL which may be relative to a base DID.

    A string without any DID URL separators is taken as a plain fragment.

    Raises:
        MalformedDIDURLError: on invalid inputs

    """
    if not isinstance(url, str):
        raise TypeError("Expected string for DID URL")
    if url.startswith(DID_PREFIX):
        return parse(url)
    if isinstance(base, str):
        base = DIDReference.parse(base)
    elif not isinstance(base, DIDReference):
        raise TypeError("Expected DIDReference or string for base DID")
    if url and not any(sep in url for sep in URL_SEPARATORS):
        url = FRAGMENT_SEP + url
    elif not url.startswith((PARAM_SEP, PATH_SEP, QUERY_SEP, FRAGMENT_SEP)):
        raise MalformedDIDURLError(url, "relative", "not a relative DID URL")
    try:
        return parse(base.value + url)
    except MalformedDIDURLError as err:
        raise MalformedDIDURLError(url, err.component, err.message) from None


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="parse a DID URL")
    parser.add_argument("-b", "--base", help="the base DID for a relative DID URL")
    parser.add_argument(
        "--canonical",
        action="store_true",
        help="output canonical JSON (RFC 8785)",
    )
    parser.add_argument("didurl", help="the DID URL to parse")
    args = parser.parse_args(argv)

    try:
        if args.base:
            value = parse_relative(args.didurl, args.base)
        else:
            value = parse(args.didurl)
    except MalformedDIDURLError as err:
        print(json.dumps(err.serialize(), indent=2), file=sys.stderr)
        return 1

    result = {"url": format_url(value), **value.serialize()}
    if args.canonical:
        print(jsoncanon.canonicalize(result).decode("utf-8"))
    else:
        print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
