"""
String comparers used for name matching.

A comparer is expressed as a normalizing key function: two names are equal
when their keys are equal, and the key doubles as the hash input. This keeps
equality and hashing consistent by construction.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Callable, Hashable
from typing import Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import CoreSchema, core_schema

from namedcollections.exceptions import InvalidArgumentError


class StringComparer:
    """Immutable equality strategy over names.

    Args:
        key: Function mapping a name to the value it is compared by.
        name: Label used in ``repr``.

    Examples:
        >>> comparer = StringComparer(str.lower, "lower")
        >>> comparer.equals("Foo", "FOO")
        True
        >>> comparer.hash("Foo") == comparer.hash("fOO")
        True
    """

    __slots__ = ("_key", "_name")

    def __init__(self, key: Callable[[str], Hashable], name: str | None = None) -> None:
        object.__setattr__(self, "_key", key)
        object.__setattr__(self, "_name", name or getattr(key, "__name__", "custom"))

    def __setattr__(self, attr: str, value: Any) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    @property
    def name(self) -> str:
        return self._name

    def key(self, value: str) -> Hashable:
        """Return the normalized form ``value`` is compared and hashed by."""
        return self._key(value)

    def equals(self, left: str | None, right: str | None) -> bool:
        """Whether two names are equal under this comparer. ``None`` only equals ``None``."""
        if left is None or right is None:
            return left is right
        return bool(self._key(left) == self._key(right))

    def hash(self, value: str) -> int:
        """Hash consistent with :meth:`equals`."""
        return hash(self._key(value))

    def __copy__(self) -> StringComparer:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> StringComparer:
        return self

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        # validated through coerce, serialized to JSON as the comparer name
        return core_schema.no_info_plain_validator_function(
            cls.coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda comparer: comparer.name, when_used="json"
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {
            "type": "string",
            "description": "Name of a built-in string comparer",
            "examples": sorted(BUILTIN_COMPARERS),
        }

    @classmethod
    def coerce(cls, comparer: Any) -> StringComparer:
        """Turn ``None``, a comparer, a built-in comparer name or a key function into a comparer."""
        if comparer is None:
            return ORDINAL_IGNORE_CASE
        if isinstance(comparer, StringComparer):
            return comparer
        if isinstance(comparer, str):
            try:
                return BUILTIN_COMPARERS[comparer]
            except KeyError:
                msg = f"Unknown string comparer {comparer!r}"
                raise InvalidArgumentError("string_comparer", msg) from None
        if callable(comparer):
            return cls(comparer)
        msg = f"Expected a StringComparer or key function, got {type(comparer).__name__}"
        raise InvalidArgumentError("string_comparer", msg)


def _ordinal(value: str) -> str:
    return value


def _ordinal_ignore_case(value: str) -> str:
    return value.casefold()


def _invariant(value: str) -> str:
    return unicodedata.normalize("NFC", value)


def _invariant_ignore_case(value: str) -> str:
    return unicodedata.normalize("NFC", unicodedata.normalize("NFD", value).casefold())


ORDINAL = StringComparer(_ordinal, "ordinal")
ORDINAL_IGNORE_CASE = StringComparer(_ordinal_ignore_case, "ordinal_ignore_case")
INVARIANT = StringComparer(_invariant, "invariant")
INVARIANT_IGNORE_CASE = StringComparer(_invariant_ignore_case, "invariant_ignore_case")

BUILTIN_COMPARERS = {
    comparer.name: comparer
    for comparer in (ORDINAL, ORDINAL_IGNORE_CASE, INVARIANT, INVARIANT_IGNORE_CASE)
}

__all__ = (
    "BUILTIN_COMPARERS",
    "INVARIANT",
    "INVARIANT_IGNORE_CASE",
    "ORDINAL",
    "ORDINAL_IGNORE_CASE",
    "StringComparer",
)
