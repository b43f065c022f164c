import os
import sys
import unittest

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from rendezvous import (
    Hasher,
    InvalidArgumentError,
    UnsupportedTypeError,
    hash_key,
    rank_by_value,
    reorder_by_positional_rank,
    reorder_by_value,
)
from rendezvous.hashing import element_hash, element_rules

FOO_SEED = 10946295980933913585


class Item:
    def __init__(self, name, value):
        self.name = name
        self.value = value

    def hash64(self):
        return self.value

    def __repr__(self):
        return f"Item({self.name!r})"


class ReorderByPositionalRankTest(unittest.TestCase):
    def test_regression_fixture(self):
        actual = ["a", "b", "c", "d", "e", "f"]
        reorder_by_positional_rank(actual, FOO_SEED)
        self.assertEqual(actual, ["f", "e", "b", "a", "d", "c"])

    def test_independent_of_values(self):
        actual = [object(), 3.5, None, b"x", "s", 0]
        expected = [actual[i] for i in (5, 4, 1, 0, 3, 2)]
        reorder_by_positional_rank(actual, FOO_SEED)
        self.assertEqual(actual, expected)

    def test_short_sequences(self):
        for seq in ([], ["only"]):
            copy = list(seq)
            reorder_by_positional_rank(copy, FOO_SEED)
            self.assertEqual(copy, seq)

    def test_requires_mutable_sequence(self):
        with self.assertRaises(InvalidArgumentError):
            reorder_by_positional_rank(("a", "b"), FOO_SEED)
        with self.assertRaises(InvalidArgumentError):
            reorder_by_positional_rank({"a": 1}, FOO_SEED)


class ReorderByValueTest(unittest.TestCase):
    def test_string_fixture(self):
        actual = ["a", "b", "c", "d", "e", "f"]
        reorder_by_value(actual, FOO_SEED)
        self.assertEqual(actual, ["e", "b", "c", "a", "f", "d"])

    def test_int_fixture(self):
        actual = [0, 1, 2, 3, 4, 5]
        reorder_by_value(actual, FOO_SEED)
        self.assertEqual(actual, [4, 3, 0, 5, 2, 1])

    def test_servers(self):
        servers = ["one", "two", "three", "four", "five", "six"]
        reorder_by_value(servers, FOO_SEED)
        self.assertEqual(servers, ["six", "four", "one", "two", "five", "three"])

    def test_hasher_capability(self):
        items = [Item(name, value) for name, value in zip("abcde", (10, 20, 30, 40, 50))]
        self.assertIsInstance(items[0], Hasher)
        self.assertEqual(rank_by_value(items, FOO_SEED), [0, 2, 4, 3, 1])
        reorder_by_value(items, FOO_SEED)
        self.assertEqual([i.name for i in items], ["a", "c", "e", "d", "b"])

    def test_differs_from_positional(self):
        by_value = list("abcdef")
        by_index = list("abcdef")
        reorder_by_value(by_value, FOO_SEED)
        reorder_by_positional_rank(by_index, FOO_SEED)
        self.assertNotEqual(by_value, by_index)

    def test_order_follows_values_not_positions(self):
        forward = ["one", "two", "three", "four", "five", "six"]
        backward = list(reversed(forward))
        reorder_by_value(forward, FOO_SEED)
        reorder_by_value(backward, FOO_SEED)
        self.assertEqual(forward, backward)

    def test_fixed_point(self):
        actual = [f"10.0.0.{i}" for i in range(12)]
        reorder_by_value(actual, FOO_SEED)
        once = list(actual)
        reorder_by_value(actual, FOO_SEED)
        self.assertEqual(actual, once)
        self.assertEqual(rank_by_value(actual, FOO_SEED), list(range(12)))

    def test_deterministic_across_calls(self):
        seed = hash_key(b"/examples/object-key")
        first = [f"node-{i}" for i in range(30)]
        second = [f"node-{i}" for i in range(30)]
        reorder_by_value(first, seed)
        reorder_by_value(second, seed)
        self.assertEqual(first, second)

    def test_mixed_supported_types(self):
        actual = ["a", 7, Item("x", 99)]
        reorder_by_value(actual, FOO_SEED)
        self.assertEqual(len(actual), 3)
        self.assertEqual(sorted(map(repr, actual)), sorted(map(repr, ["a", 7, Item("x", 99)])))

    def test_rank_by_value_accepts_tuples(self):
        ranking = rank_by_value(("a", "b", "c", "d", "e", "f"), FOO_SEED)
        self.assertEqual(ranking, [4, 1, 2, 0, 5, 3])

    def test_empty_sequence(self):
        actual = []
        reorder_by_value(actual, FOO_SEED)
        self.assertEqual(actual, [])

    def test_non_sequence(self):
        with self.assertRaises(InvalidArgumentError):
            reorder_by_value(10, FOO_SEED)
        with self.assertRaises(InvalidArgumentError):
            reorder_by_value("abc", FOO_SEED)
        with self.assertRaises(InvalidArgumentError):
            reorder_by_value(("a", "b"), FOO_SEED)

    def test_unsupported_type_leaves_sequence_untouched(self):
        for actual in ([b"a", b"b", b"c"], ["a", 1.5, "c", "d"], [True, False], ["a", "b", None]):
            before = list(actual)
            with self.assertRaises(UnsupportedTypeError):
                reorder_by_value(actual, FOO_SEED)
            self.assertEqual(actual, before)

    def test_invalid_seed(self):
        actual = ["a", "b"]
        with self.assertRaises(InvalidArgumentError):
            reorder_by_value(actual, -5)
        self.assertEqual(actual, ["a", "b"])


def test_element_hash_encodings():
    assert element_hash("abc") == hash_key(b"abc")
    assert element_hash(-12) == hash_key(b"-12")
    assert element_hash(Item("neg", -1)) == (1 << 64) - 1


def test_element_rules_empty():
    assert element_rules([], FOO_SEED) == []


def test_element_rules_rejects_sets():
    with pytest.raises(InvalidArgumentError):
        element_rules({"a", "b"}, FOO_SEED)


def test_errors_are_type_errors():
    with pytest.raises(TypeError):
        reorder_by_value([object()], FOO_SEED)


class BrokenHash:
    hash64 = None


class TextHash:
    def hash64(self):
        return "not a number"


def test_broken_hash64_is_unsupported():
    for broken in ([BrokenHash(), BrokenHash()], [TextHash(), TextHash()], ["a", TextHash()]):
        before = list(broken)
        with pytest.raises(UnsupportedTypeError):
            reorder_by_value(broken, FOO_SEED)
        assert broken == before
