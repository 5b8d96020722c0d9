"""Tests for the read-only mapping view of a NamedCollection."""

from __future__ import annotations

from collections.abc import Mapping

import pytest

from namedcollections import NamedCollection, NamedCollectionMapping, NameNotFoundError


@pytest.fixture
def collection(bar_foo, default_foo, get_name):
    return NamedCollection([bar_foo, default_foo], get_name)


class TestNamedCollectionMapping:
    """Mapping semantics layered over the collection's storage."""

    def test_is_mapping(self, collection):
        mapping = collection.as_mapping()
        assert isinstance(mapping, Mapping)
        assert isinstance(mapping, NamedCollectionMapping)
        assert mapping.collection is collection

    @pytest.mark.parametrize("default_value_name", ["default", "", None])
    def test_keys(self, make_foo, get_name, default_value_name):
        values = [make_foo("bar"), make_foo(default_value_name)]
        mapping = NamedCollection(values, get_name).as_mapping()
        assert list(mapping.keys()) == ["default", "bar"]
        assert list(mapping) == ["default", "bar"]

    def test_values_iterate_like_collection(self, collection):
        mapping = collection.as_mapping()
        assert list(mapping.values()) == list(collection)

    def test_values_contains(self, collection, bar_foo, make_foo):
        values = collection.as_mapping().values()
        assert bar_foo in values
        assert make_foo("bar") not in values

    @pytest.mark.parametrize("default_value_name", ["default", "", None])
    def test_items(self, make_foo, get_name, default_value_name):
        bar, default = make_foo("bar"), make_foo(default_value_name)
        mapping = NamedCollection([bar, default], get_name).as_mapping()
        assert list(mapping.items()) == [("default", default), ("bar", bar)]

    def test_items_contains(self, collection, bar_foo, default_foo):
        items = collection.as_mapping().items()
        assert ("bar", bar_foo) in items
        assert ("BAR", bar_foo) in items
        assert ("default", default_foo) in items
        assert ("qux", bar_foo) not in items

    def test_getitem(self, collection, bar_foo, default_foo):
        mapping = collection.as_mapping()
        assert mapping["bar"] is bar_foo
        assert mapping["default"] is default_foo
        with pytest.raises(NameNotFoundError):
            mapping["qux"]

    def test_get(self, collection, bar_foo):
        mapping = collection.as_mapping()
        assert mapping.get("BAR") is bar_foo
        assert mapping.get("qux") is None

    @pytest.mark.parametrize("name", ["bar", "BAR", "default", "", None])
    def test_contains_delegates(self, collection, name):
        assert name in collection.as_mapping()

    def test_not_contains(self, get_name, bar_foo):
        mapping = NamedCollection([bar_foo], get_name).as_mapping()
        assert "default" not in mapping
        assert None not in mapping
        assert "qux" not in mapping

    def test_len(self, collection):
        assert len(collection.as_mapping()) == collection.count == 2

    def test_dict_conversion(self, collection, bar_foo, default_foo):
        assert dict(collection.as_mapping()) == {"default": default_foo, "bar": bar_foo}

    def test_shares_storage(self, collection):
        first = collection.as_mapping()
        second = collection.as_mapping()
        assert first == second
        assert first["bar"] is second["bar"]

    def test_none_named_value_has_no_key(self):
        mapping = NamedCollection([None], lambda value: "bar").as_mapping()
        assert list(mapping) == []
        assert len(mapping) == 0
        assert "bar" not in mapping
        assert dict(mapping) == {}

    def test_keys_always_resolve(self, bar_foo, get_name):
        values = [None, bar_foo, None]
        names = iter(["qux", "bar", None])
        mapping = NamedCollection(values, lambda value: next(names)).as_mapping()
        assert len(mapping) == len(list(mapping)) == 1
        for key in mapping:
            assert key in mapping
            assert mapping[key] is bar_foo
        assert dict(mapping) == {"bar": bar_foo}
