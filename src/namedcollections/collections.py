"""Read-only collections of values retrievable by name."""

from __future__ import annotations

import logging
from collections.abc import (
    Callable,
    Hashable,
    ItemsView,
    Iterable,
    Iterator,
    Mapping,
    ValuesView,
)
from typing import Any, Generic, TypeVar, overload

from namedcollections.comparers import StringComparer
from namedcollections.exceptions import (
    DuplicateKeyError,
    InvalidArgumentError,
    NameNotFoundError,
)
from namedcollections.options import DEFAULT_NAME, CollectionOptions

log = logging.getLogger(__name__)

T = TypeVar("T")
D = TypeVar("D")


class NamedCollection(Generic[T]):
    """Collection of values that can be retrieved by name.

    The collection is built once from ``values``: each value's name comes from
    ``get_name``. A value whose name is ``None``, empty, or equal to
    ``default_name`` becomes the default value; every other value is stored
    under its name. Names are matched with ``string_comparer``, which ignores
    case by default.

    A value that is ``None`` is indistinguishable from a missing one: lookups
    report it as not found, and it is neither iterated, named nor counted,
    whether it is the default or a named value. It still occupies its slot
    for duplicate detection and stays in :attr:`named_values`.

    Args:
        values: The values that make up the collection.
        get_name: Function returning the name of a value.
        string_comparer: Equality strategy for names, or a key function.
            Defaults to :data:`~namedcollections.comparers.ORDINAL_IGNORE_CASE`.
        default_name: Name identifying the default value. ``None`` or ``""``
            means ``"default"``.
        strict: If true, more than one default value or more than one value
            with the same name raises :class:`DuplicateKeyError`. Otherwise the
            last value wins.

    Raises:
        InvalidArgumentError: ``values`` or ``get_name`` is missing.
        DuplicateKeyError: Duplicate names in strict mode.

    Examples:
        >>> coll = NamedCollection(["bar", "default"], lambda v: v)
        >>> list(coll)
        ['default', 'bar']
        >>> coll["BAR"]
        'bar'
        >>> coll.is_default_name(None)
        True
    """

    def __init__(
        self,
        values: Iterable[T],
        get_name: Callable[[T], str | None],
        string_comparer: StringComparer | Callable[[str], Hashable] | None = None,
        default_name: str | None = DEFAULT_NAME,
        strict: bool = True,
    ) -> None:
        if values is None:
            raise InvalidArgumentError("values")
        if get_name is None:
            raise InvalidArgumentError("get_name")
        if not callable(get_name):
            msg = f"Argument 'get_name' must be callable, got {type(get_name).__name__}."
            raise InvalidArgumentError("get_name", msg)

        self._options = CollectionOptions(
            string_comparer=string_comparer,
            default_name=default_name,
            strict=strict,
        )
        comparer = self._options.string_comparer

        # key -> (name as first written, value)
        slots: dict[Hashable, tuple[str, T]] = {}
        default_value: T | None = None
        has_default = False

        for value in values:
            name = get_name(value)
            if self.is_default_name(name):
                if has_default:
                    if self.strict:
                        msg = "Cannot have more than one default value."
                        raise DuplicateKeyError(msg)
                    log.debug("Replacing default value of named collection")
                has_default = True
                default_value = value
                continue

            key = comparer.key(name)  # type: ignore[arg-type]
            if key in slots:
                if self.strict:
                    msg = f"Cannot have more than one value with the same name: {name}."
                    raise DuplicateKeyError(msg, name)
                log.debug("Replacing value named '%s' in named collection", name)
                slots[key] = (slots[key][0], value)
            else:
                slots[key] = (name, value)  # type: ignore[assignment]

        self._default_value = default_value
        self._slots = slots
        self._named_values = tuple(value for _, value in slots.values())

    @property
    def default_value(self) -> T | None:
        """The default (unnamed) value, or ``None``."""
        return self._default_value

    @property
    def named_values(self) -> tuple[T, ...]:
        """The named (non-default) values, in first-insertion order."""
        return self._named_values

    @property
    def string_comparer(self) -> StringComparer:
        return self._options.string_comparer

    @property
    def default_name(self) -> str:
        return self._options.default_name

    @property
    def strict(self) -> bool:
        return self._options.strict

    @property
    def options(self) -> CollectionOptions:
        return self._options

    @property
    def count(self) -> int:
        """Number of values that can be retrieved, i.e. those that are not ``None``."""
        named = sum(1 for _, value in self._slots.values() if value is not None)
        return named + (0 if self._default_value is None else 1)

    def is_default_name(self, name: str | None) -> bool:
        """Whether ``name`` refers to the default value.

        True for ``None``, ``""`` and any name equal to :attr:`default_name`
        under :attr:`string_comparer`.
        """
        if name is None or name == "":
            return True
        return self.string_comparer.equals(name, self.default_name)

    def try_get_value(self, name: str | None) -> tuple[bool, T | None]:
        """Look up a value by name without raising.

        Returns:
            ``(True, value)`` when found, otherwise ``(False, None)``.
        """
        if self.is_default_name(name):
            value = self._default_value
        else:
            slot = self._slots.get(self.string_comparer.key(name))  # type: ignore[arg-type]
            value = None if slot is None else slot[1]
        return value is not None, value

    def contains(self, name: str | None) -> bool:
        """Whether a value can be retrieved by ``name``."""
        return self.try_get_value(name)[0]

    @overload
    def get(self, name: str | None) -> T | None: ...

    @overload
    def get(self, name: str | None, default: D) -> T | D: ...

    def get(self, name: str | None, default: Any = None) -> Any:
        """Get a value by name, returning ``default`` if not found."""
        found, value = self.try_get_value(name)
        return value if found else default

    def names(self) -> Iterator[str]:
        """Names resolving to each value, in iteration order.

        The default value is reported under :attr:`default_name`.
        """
        for name, _ in self.items():
            yield name

    def items(self) -> Iterator[tuple[str, T]]:
        """``(name, value)`` pairs in iteration order, skipping ``None`` values."""
        if self._default_value is not None:
            yield self.default_name, self._default_value
        for name, value in self._slots.values():
            if value is not None:
                yield name, value

    def as_mapping(self) -> NamedCollectionMapping[T]:
        """Read-only mapping view over this collection."""
        return NamedCollectionMapping(self)

    def __getitem__(self, name: str | None) -> T:
        found, value = self.try_get_value(name)
        if found:
            return value  # type: ignore[return-value]
        if self.is_default_name(name):
            msg = "The named collection does not have a default value."
        else:
            msg = f"The given name was not present in the named collection: {name}."
        raise NameNotFoundError(msg, name)

    def __contains__(self, name: object) -> bool:
        if name is not None and not isinstance(name, str):
            return False
        return self.contains(name)

    def __iter__(self) -> Iterator[T]:
        for _, value in self.items():
            yield value

    def __len__(self) -> int:
        return self.count

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NamedCollection) or type(other) is not type(self):
            return NotImplemented
        if self._options != other._options:
            return False
        return list(self.items()) == list(other.items())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.names())})"


class _NamedValuesView(ValuesView[T], Generic[T]):
    _mapping: NamedCollectionMapping[T]

    def __iter__(self) -> Iterator[T]:
        return iter(self._mapping.collection)

    def __contains__(self, value: object) -> bool:
        return any(v is value or v == value for v in self)


class _NamedItemsView(ItemsView[str, T], Generic[T]):
    _mapping: NamedCollectionMapping[T]

    def __iter__(self) -> Iterator[tuple[str, T]]:
        return self._mapping.collection.items()


class NamedCollectionMapping(Mapping[str, T], Generic[T]):
    """Read-only ``Mapping`` view of a :class:`NamedCollection`.

    Shares the collection's storage. Keys are the names that resolve back to
    each value, so the default value appears under the collection's
    ``default_name`` whatever its original name was.
    """

    def __init__(self, collection: NamedCollection[T]) -> None:
        self._collection = collection

    @property
    def collection(self) -> NamedCollection[T]:
        return self._collection

    def __getitem__(self, name: str) -> T:
        return self._collection[name]

    def __iter__(self) -> Iterator[str]:
        return self._collection.names()

    def __len__(self) -> int:
        return len(self._collection)

    def __contains__(self, name: object) -> bool:
        return name in self._collection

    def values(self) -> _NamedValuesView[T]:
        return _NamedValuesView(self)

    def items(self) -> _NamedItemsView[T]:
        return _NamedItemsView(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.items())!r})"


def to_named_collection(
    values: Iterable[T],
    get_name: Callable[[T], str | None],
    string_comparer: StringComparer | Callable[[str], Hashable] | None = None,
    default_name: str | None = DEFAULT_NAME,
    strict: bool = True,
) -> NamedCollection[T]:
    """Create a :class:`NamedCollection` from ``values``.

    See :class:`NamedCollection` for the meaning of each argument.
    """
    return NamedCollection(
        values,
        get_name,
        string_comparer=string_comparer,
        default_name=default_name,
        strict=strict,
    )


__all__ = ("NamedCollection", "NamedCollectionMapping", "to_named_collection")
