"""Pydantic collection classes for named models."""

from __future__ import annotations

from abc import ABC
from collections.abc import Iterator
from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, PrivateAttr, RootModel, model_validator

from namedcollections.collections import NamedCollection
from namedcollections.options import CollectionOptions


class NamedModel(BaseModel, ABC):
    """ABC for models that have a name attribute.

    A ``None`` or empty name marks the model as a default value.
    """

    name: str | None


T = TypeVar("T", bound=NamedModel)


def _model_name(item: NamedModel) -> str | None:
    return item.name


class NamedModelCollection(RootModel[list[T]]):
    """Pydantic collection providing default-aware, dict-like access to named models.

    Wraps a list of models with a ``.name`` attribute and builds a
    :class:`~namedcollections.collections.NamedCollection` from it during
    validation. Subclasses tune name matching through ``collection_options``::

        class Servers(NamedModelCollection[Server]):
            collection_options = CollectionOptions(default_name="primary")

    The raw list is kept as ``root`` and is what gets serialized; lookups and
    iteration follow the named collection (default value first).
    """

    collection_options: ClassVar[CollectionOptions] = CollectionOptions()

    _named: NamedCollection[T] = PrivateAttr()

    @model_validator(mode="after")
    def build_named_collection(self) -> NamedModelCollection[T]:
        """Index the items by name, rejecting duplicates in strict mode."""
        self._named = self._index()
        return self

    def _index(self) -> NamedCollection[T]:
        options = type(self).collection_options
        return NamedCollection(
            self.root,
            _model_name,
            string_comparer=options.string_comparer,
            default_name=options.default_name,
            strict=options.strict,
        )

    @property
    def named(self) -> NamedCollection[T]:
        """The name index; built on first use for ``model_construct`` instances."""
        try:
            return self._named
        except AttributeError:
            self._named = self._index()
            return self._named

    @property
    def default(self) -> T | None:
        """The default model, or ``None``."""
        return self.named.default_value

    def __getitem__(self, item: str | int | None) -> T:
        if isinstance(item, int):
            return self.root[item]
        return self.named[item]

    def get(self, name: str | None, default: T | None = None) -> T | None:
        """Get an item by name, returning default if not found."""
        return self.named.get(name, default)

    def is_default_name(self, name: str | None) -> bool:
        return self.named.is_default_name(name)

    def __contains__(self, name: Any) -> bool:
        return name in self.named

    def __iter__(self) -> Iterator[T]:  # type: ignore[override]
        return iter(self.named)

    def __len__(self) -> int:
        return len(self.named)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.named.names())})"


__all__ = ("NamedModel", "NamedModelCollection")
