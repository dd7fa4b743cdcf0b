"""Tests for the accessor and object-merging helpers."""

import unittest

from underbarlib import (
    InvalidCollection,
    TypeMismatch,
    defaults,
    extend,
    first,
    invoke,
    last,
    pluck,
)
from underbarlib.testing import Record, people


class TestFirstLast(unittest.TestCase):
    """first() and last() with and without a count."""

    def setUp(self):
        self.numbers = [1, 2, 3]

    def test_first_element(self):
        self.assertEqual(first(self.numbers), 1)

    def test_first_n(self):
        self.assertEqual(first(self.numbers, 2), [1, 2])
        self.assertEqual(first(self.numbers, 0), [])
        self.assertEqual(first(self.numbers, 5), [1, 2, 3])

    def test_first_of_empty(self):
        self.assertIsNone(first([]))

    def test_last_element(self):
        self.assertEqual(last(self.numbers), 3)

    def test_last_n(self):
        self.assertEqual(last(self.numbers, 2), [2, 3])
        self.assertEqual(last(self.numbers, 5), [1, 2, 3])

    def test_last_zero_is_empty(self):
        self.assertEqual(last(self.numbers, 0), [])

    def test_last_does_not_modify(self):
        last(self.numbers)
        self.assertEqual(self.numbers, [1, 2, 3])

    def test_tuples_return_lists(self):
        self.assertEqual(first((1, 2, 3), 2), [1, 2])
        self.assertEqual(last((1, 2, 3), 1), [3])

    def test_require_sequence(self):
        with self.assertRaises(InvalidCollection):
            first({'a': 1})
        with self.assertRaises(InvalidCollection):
            last(None)


class TestPluck(unittest.TestCase):
    def test_mapping_field(self):
        self.assertEqual(pluck(people(), 'name'), ['curly', 'moe', 'larry'])

    def test_attribute_field(self):
        self.assertEqual(pluck([Record('a', 1), Record('b', 2)], 'age'), [1, 2])

    def test_missing_field_is_none(self):
        self.assertEqual(pluck([{'a': 1}, {}], 'a'), [1, None])


class TestInvoke(unittest.TestCase):
    def test_method_by_name(self):
        self.assertEqual(invoke(['a', 'b'], 'upper'), ['A', 'B'])

    def test_method_by_name_with_args(self):
        self.assertEqual(invoke(['a-b', 'c-d'], 'split', ['-']), [['a', 'b'], ['c', 'd']])

    def test_function_reference(self):
        self.assertEqual(invoke([[3, 1], [2]], sorted), [[1, 3], [2]])
        self.assertEqual(invoke(['x', 'y'], str.center, (3, '*')), ['*x*', '*y*'])

    def test_bad_method_type(self):
        with self.assertRaises(TypeMismatch):
            invoke([1], 42)

    def test_unknown_method_name(self):
        with self.assertRaises(AttributeError):
            invoke([1], 'no_such_method')


class TestExtend(unittest.TestCase):
    def test_later_sources_win(self):
        target = {'a': 1}
        result = extend(target, {'b': 2}, {'a': 3, 'c': 4})
        self.assertIs(result, target)
        self.assertEqual(target, {'a': 3, 'b': 2, 'c': 4})

    def test_no_sources(self):
        self.assertEqual(extend({'a': 1}), {'a': 1})

    def test_sequence_source_uses_indices(self):
        self.assertEqual(extend({}, ['x', 'y']), {0: 'x', 1: 'y'})

    def test_target_must_be_mutable_mapping(self):
        with self.assertRaises(InvalidCollection):
            extend([], {'a': 1})

    def test_source_must_be_collection(self):
        with self.assertRaises(InvalidCollection):
            extend({}, 5)


class TestDefaults(unittest.TestCase):
    def test_only_fills_absent_keys(self):
        target = {'a': 1, 'b': None}
        result = defaults(target, {'a': 9, 'b': 9, 'c': 3})
        self.assertIs(result, target)
        self.assertEqual(target, {'a': 1, 'b': None, 'c': 3})

    def test_first_source_wins(self):
        self.assertEqual(defaults({}, {'a': 1}, {'a': 2}), {'a': 1})

    def test_target_must_be_mutable_mapping(self):
        with self.assertRaises(InvalidCollection):
            defaults(('a',), {'a': 1})


if __name__ == '__main__':
    unittest.main()
