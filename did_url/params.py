"""Ordered parameter maps for DID URL matrix and query parameters."""

from collections.abc import Iterable, Iterator, Mapping
from typing import Optional, Tuple, Union

from .const import VALUE_SEP

ParamPairs = Union[Mapping[str, Optional[str]], Iterable[Tuple[str, Optional[str]]]]


class ParamMap(Mapping[str, Optional[str]]):
    """An immutable, ordered mapping of parameter names to optional values.

    A value of `None` marks a valueless key (`keyonly`), as opposed to an
    empty value (`key=`). When a key is repeated, the last value wins and the
    key keeps the position of its first occurrence.

    Two parameter maps are equal only if their pairs are in the same order;
    comparison with any other mapping ignores order.
    """

    __slots__ = ("_entries",)

    def __init__(self, pairs: ParamPairs = ()):
        entries: dict[str, Optional[str]] = {}
        if isinstance(pairs, Mapping):
            pairs = pairs.items()
        for key, value in pairs:
            if not isinstance(key, str):
                raise TypeError("Expected string for parameter name")
            if value is not None and not isinstance(value, str):
                raise TypeError("Expected string or None for parameter value")
            entries[key] = value
        self._entries = entries

    def __getitem__(self, key: str) -> Optional[str]:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other) -> bool:
        # order is part of the canonical form
        if isinstance(other, ParamMap):
            return list(self._entries.items()) == list(other._entries.items())
        return super().__eq__(other)

    def __hash__(self) -> int:
        return hash(tuple(self._entries.items()))

    def __repr__(self) -> str:
        return f"ParamMap({list(self._entries.items())!r})"

    def serialize(self, sep: str) -> str:
        """Join the `key[=value]` pairs with a separator, in map order."""
        return sep.join(
            key if value is None else f"{key}{VALUE_SEP}{value}"
            for key, value in self._entries.items()
        )
