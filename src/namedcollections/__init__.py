"""
namedcollections: read-only collections of values retrievable by name,
with one designated default value.
"""

from __future__ import annotations

from namedcollections._version import version as __version__
from namedcollections.collections import (
    NamedCollection,
    NamedCollectionMapping,
    to_named_collection,
)
from namedcollections.comparers import (
    INVARIANT,
    INVARIANT_IGNORE_CASE,
    ORDINAL,
    ORDINAL_IGNORE_CASE,
    StringComparer,
)
from namedcollections.exceptions import (
    DuplicateKeyError,
    InvalidArgumentError,
    NamedCollectionError,
    NameNotFoundError,
)
from namedcollections.models import NamedModel, NamedModelCollection
from namedcollections.options import DEFAULT_NAME, CollectionOptions

__all__ = [
    "DEFAULT_NAME",
    "INVARIANT",
    "INVARIANT_IGNORE_CASE",
    "ORDINAL",
    "ORDINAL_IGNORE_CASE",
    "CollectionOptions",
    "DuplicateKeyError",
    "InvalidArgumentError",
    "NameNotFoundError",
    "NamedCollection",
    "NamedCollectionError",
    "NamedCollectionMapping",
    "NamedModel",
    "NamedModelCollection",
    "StringComparer",
    "__version__",
    "to_named_collection",
]
