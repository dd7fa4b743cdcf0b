"""Tests for the predicate algorithms."""

import pytest

from underbarlib import (
    InvalidCollection,
    contains,
    every,
    filter,
    index_of,
    reject,
    some,
)
from underbarlib.predicates import strict_equal


def is_even(n):
    return n % 2 == 0


class TestStrictEqual:
    def test_same_type_and_value(self):
        assert strict_equal(1, 1)
        assert strict_equal('a', 'a')
        assert strict_equal([1, 2], [1, 2])

    def test_no_cross_type_equality(self):
        assert not strict_equal(1, 1.0)
        assert not strict_equal(1, True)
        assert not strict_equal(0, False)
        assert not strict_equal('1', 1)

    def test_nan_equals_nothing(self):
        nan = float('nan')
        assert not strict_equal(nan, nan)
        assert index_of([nan], nan) == -1
        assert contains([1.0, nan], nan) is False

    def test_nested_elements_compared_strictly(self):
        assert not strict_equal([1], [True])
        assert not strict_equal({'a': 1}, {'a': 1.0})
        assert not strict_equal([[1, 2]], [[1, 2.0]])
        assert strict_equal([[1, 'x'], {'k': (2,)}], [[1, 'x'], {'k': (2,)}])
        assert contains([[1]], [True]) is False

    def test_mappings_with_different_keys(self):
        assert not strict_equal({'a': 1}, {'b': 1})
        assert not strict_equal({'a': 1}, {'a': 1, 'b': 2})

    def test_identity(self):
        marker = object()
        assert strict_equal(marker, marker)
        assert not strict_equal(object(), object())


class TestIndexOf:
    def test_first_match_wins(self):
        assert index_of([10, 20, 10, 30], 10) == 0
        assert index_of([10, 20, 10, 30], 30) == 3

    def test_absent_is_minus_one(self):
        assert index_of([1, 2, 3], 4) == -1
        assert index_of([], 1) == -1

    def test_strict_equality(self):
        assert index_of([1, 2, 3], 2.0) == -1
        assert index_of([True, 1], 1) == 1

    def test_mapping_returns_key(self):
        assert index_of({'a': 1, 'b': 2}, 2) == 'b'


class TestFilterReject:
    def test_filter_keeps_passing_in_order(self):
        assert filter([1, 2, 3, 4, 5, 6], is_even) == [2, 4, 6]

    def test_reject_drops_passing(self):
        assert reject([1, 2, 3, 4, 5, 6], is_even) == [1, 3, 5]

    def test_reject_is_filter_negated(self):
        numbers = list(range(10))
        assert sorted(filter(numbers, is_even) + reject(numbers, is_even)) == numbers

    def test_returns_new_list(self):
        numbers = [2, 4]
        result = filter(numbers, is_even)
        assert result == numbers
        assert result is not numbers

    def test_mapping_values(self):
        assert filter({'a': 1, 'b': 2}, is_even) == [2]

    def test_uses_predicate_truthiness(self):
        assert filter([0, 1, '', 'x', None], lambda v: v) == [1, 'x']

    def test_rejects_non_collection(self):
        with pytest.raises(InvalidCollection):
            filter(None, is_even)


class TestContains:
    def test_found(self):
        assert contains([1, 2, 3], 3) is True

    def test_not_found(self):
        assert contains([1, 2, 3], 4) is False
        assert contains([], 4) is False

    def test_strict(self):
        assert contains([1, 2, 3], '3') is False

    def test_mapping_values(self):
        assert contains({'moe': 1, 'curly': 2}, 2) is True
        assert contains({'moe': 1}, 'moe') is False


class TestEvery:
    def test_vacuous_truth(self):
        assert every([]) is True
        assert every([], is_even) is True

    def test_all_pass(self):
        assert every([2, 4, 6], is_even) is True

    def test_one_fails(self):
        assert every([2, 3, 6], is_even) is False

    def test_default_truthiness(self):
        assert every([1, 'a', [0]]) is True
        assert every([1, 0]) is False
        assert every([None]) is False

    def test_stops_calling_predicate_after_failure(self):
        calls = []

        def check(n):
            calls.append(n)
            return n < 2

        assert every([1, 5, 0], check) is False
        assert calls == [1, 5]


class TestSome:
    def test_vacuous_false(self):
        assert some([]) is False
        assert some([], is_even) is False

    def test_one_passes(self):
        assert some([1, 3, 4], is_even) is True

    def test_none_pass(self):
        assert some([1, 3, 5], is_even) is False

    def test_default_truthiness(self):
        assert some([0, '', None, 'yes']) is True
        assert some([0, '', None]) is False

    def test_mapping_values(self):
        assert some({'a': 1, 'b': 4}, is_even) is True
