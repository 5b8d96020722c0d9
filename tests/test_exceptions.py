"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from namedcollections.exceptions import (
    DuplicateKeyError,
    InvalidArgumentError,
    NamedCollectionError,
    NameNotFoundError,
)


@pytest.mark.parametrize(
    ("exc_type", "builtin"),
    [
        (InvalidArgumentError, TypeError),
        (DuplicateKeyError, ValueError),
        (NameNotFoundError, KeyError),
    ],
)
def test_hierarchy(exc_type, builtin):
    assert issubclass(exc_type, NamedCollectionError)
    assert issubclass(exc_type, builtin)


def test_invalid_argument_default_message():
    exc = InvalidArgumentError("values")
    assert exc.argument == "values"
    assert str(exc) == "Argument 'values' must not be None."


def test_name_not_found_str_is_not_quoted():
    exc = NameNotFoundError("The given name was not present in the named collection: qux.", "qux")
    assert str(exc) == "The given name was not present in the named collection: qux."
    assert exc.name == "qux"
