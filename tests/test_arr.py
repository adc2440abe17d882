"""Tests for the Arr helpers."""

from __future__ import annotations

from typing import Any

import pytest

from keyed_collection import InvalidArgumentException, InvalidKeyException
from keyed_collection.Support import Arr


class TestArrKeys:
    """Key validation and indexing helpers."""

    @pytest.mark.parametrize("key", [0, 7, -1, '', 'a'])
    def test_valid_keys(self, key: Any) -> None:
        assert Arr.is_array_key(key)
        assert Arr.assert_key(key) == key

    @pytest.mark.parametrize("key", [True, False, None, 1.0, (0,), frozenset()])
    def test_invalid_keys(self, key: Any) -> None:
        assert not Arr.is_array_key(key)
        with pytest.raises(InvalidKeyException):
            Arr.assert_key(key)

    def test_next_index(self) -> None:
        assert Arr.next_index([]) == 0
        assert Arr.next_index(['a', 'b']) == 0
        assert Arr.next_index([0, 4, 'x', 2]) == 5
        assert Arr.next_index([-3, True]) == 0

    def test_renumber(self) -> None:
        result = Arr.renumber({7: 'a', 'k': 'v', 3: 'b'})

        assert list(result.items()) == [(0, 'a'), ('k', 'v'), (1, 'b')]


class TestArrConversion:
    """Array coercion helpers."""

    def test_to_array(self) -> None:
        source = {'x': 1}

        copied = Arr.to_array(source)

        assert copied == source
        assert copied is not source
        assert Arr.to_array(['a', 'b']) == {0: 'a', 1: 'b'}
        assert Arr.to_array('scalar') == {0: 'scalar'}
        assert Arr.to_array(None) == {0: None}

    def test_is_array(self) -> None:
        assert Arr.is_array({})
        assert Arr.is_array([])
        assert not Arr.is_array((1, 2))
        assert not Arr.is_array('text')

    def test_normalize(self) -> None:
        assert Arr.normalize({0: 'a', 1: 'b'}) == ['a', 'b']
        assert Arr.normalize({1: 'a', 0: 'b'}) == {1: 'a', 0: 'b'}
        assert Arr.normalize({0: 'a', 'x': 'b'}) == {0: 'a', 'x': 'b'}
        assert Arr.normalize({}) == {}
        assert Arr.normalize({}, empty_as_list=True) == []

    def test_from_source(self) -> None:
        assert Arr.from_source({'a': 1}) == {'a': 1}
        assert Arr.from_source(('a', 'b')) == {0: 'a', 1: 'b'}

        with pytest.raises(InvalidArgumentException) as excinfo:
            Arr.from_source(12, "array")

        assert excinfo.value.argument == "array"
        assert "`int` given" in str(excinfo.value)


class TestArrMergeRecursive:
    """Recursive merge rules."""

    def test_scalar_collision_becomes_list(self) -> None:
        assert Arr.merge_recursive({'a': 1, 'b': 2}, {'b': 3, 'c': 4}) == {'a': 1, 'b': [2, 3], 'c': 4}

    def test_plain_value_appends_to_existing_list(self) -> None:
        assert Arr.merge_recursive({'b': [2, 3]}, {'b': 4}) == {'b': [2, 3, 4]}

    def test_nested_mappings_merge_key_by_key(self) -> None:
        first = {'db': {'host': 'a', 'opts': {'ssl': True}}}
        second = {'db': {'host': 'b', 'opts': {'timeout': 5}}}

        assert Arr.merge_recursive(first, second) == {
            'db': {'host': ['a', 'b'], 'opts': {'ssl': True, 'timeout': 5}},
        }

    def test_nested_integer_keys_append(self) -> None:
        assert Arr.merge_recursive({'x': {3: 'a'}}, {'x': {3: 'b'}}) == {'x': {3: 'a', 4: 'b'}}

    def test_top_level_integer_keys_append(self) -> None:
        assert Arr.merge_recursive({0: 'a', 1: 'b'}, {0: 'c'}) == {0: 'a', 1: 'b', 2: 'c'}

    def test_uniform_integer_keys(self) -> None:
        result = Arr.merge_recursive({0: 'a', 1: 'b'}, {0: 'c'}, append_integer_keys=False)

        assert result == {0: ['a', 'c'], 1: 'b'}

    def test_absent_nested_value_inserted_as_is(self) -> None:
        nested = {'deep': [1, 2]}

        result = Arr.merge_recursive({}, {'n': nested})

        assert result['n'] is nested

    def test_inputs_are_not_mutated(self) -> None:
        first = {'a': [1], 'b': {'x': 1}}
        second = {'a': [2], 'b': {'x': 2}}

        Arr.merge_recursive(first, second)

        assert first == {'a': [1], 'b': {'x': 1}}
        assert second == {'a': [2], 'b': {'x': 2}}

    def test_empty_arrays_keep_their_shape(self) -> None:
        assert Arr.merge_recursive({'a': {}}, {'a': {}}) == {'a': {}}
        assert Arr.merge_recursive({'a': []}, {'a': []}) == {'a': []}
        assert Arr.merge_recursive({'a': {}}, {'a': {'x': 1}}) == {'a': {'x': 1}}
