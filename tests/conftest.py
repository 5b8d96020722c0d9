from __future__ import annotations

from dataclasses import dataclass

import pytest


@dataclass(frozen=True, eq=False)
class Foo:
    """Value with a name; compared by identity."""

    name: str | None


def get_foo_name(foo: Foo) -> str | None:
    return foo.name


@pytest.fixture
def default_foo() -> Foo:
    return Foo("default")


@pytest.fixture
def bar_foo() -> Foo:
    return Foo("bar")


@pytest.fixture
def baz_foo() -> Foo:
    return Foo("baz")


@pytest.fixture
def foos(default_foo: Foo, bar_foo: Foo, baz_foo: Foo) -> list[Foo]:
    return [default_foo, bar_foo, baz_foo]


@pytest.fixture
def make_foo():
    """Factory for ad-hoc values."""
    return Foo


@pytest.fixture
def get_name():
    return get_foo_name
