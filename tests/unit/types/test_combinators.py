# tests/unit/types/test_combinators.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""Tests for type combinators."""

import unittest

import pytest

from tenet.core.values import MISSING
from tenet.types import Enum, EnumType, LiteralUnionType, Nullable, Optional, TArray, TNumber, TString, Union


class TestNullableOptional(unittest.TestCase):
    def test_nullable_accepts_none_but_not_missing(self):
        NullableString = Nullable(TString)
        self.assertEqual(NullableString.description, "string or null")
        self.assertTrue(NullableString.check("x"))
        self.assertTrue(NullableString.check(None))
        self.assertFalse(NullableString.check(MISSING))
        self.assertFalse(NullableString.check(1))

    def test_optional_accepts_none_and_missing(self):
        OptionalNumber = Optional(TNumber)
        self.assertEqual(OptionalNumber.description, "number (optional)")
        self.assertTrue(OptionalNumber.check(MISSING))
        self.assertTrue(OptionalNumber.check(None))
        self.assertTrue(OptionalNumber.check(3))
        self.assertFalse(OptionalNumber.check("3"))


class TestUnion(unittest.TestCase):
    def test_type_union(self):
        StringOrNumber = Union(TString, TNumber)
        self.assertEqual(StringOrNumber.description, "string | number")
        self.assertTrue(StringOrNumber.check("a"))
        self.assertTrue(StringOrNumber.check(1))
        self.assertFalse(StringOrNumber.check(None))

    def test_literal_union(self):
        Direction = Union("cardinal direction", ["up", "down", "left", "right"])
        self.assertIsInstance(Direction, LiteralUnionType)
        self.assertEqual(Direction.values, ("up", "down", "left", "right"))
        self.assertTrue(Direction.check("left"))
        self.assertFalse(Direction.check("sideways"))

    def test_literal_union_is_type_strict(self):
        Flags = Union("flag", [1, 0])
        self.assertTrue(Flags.check(1))
        self.assertFalse(Flags.check(True))
        self.assertFalse(Flags.check(False))

    def test_literal_union_with_unhashable_members(self):
        Shapes = Union("shape", [[0, 0], {"r": 1}])
        self.assertTrue(Shapes.check([0, 0]))
        self.assertTrue(Shapes.check({"r": 1}))
        self.assertFalse(Shapes.check([0, 1]))

    def test_rejects_non_types(self):
        with self.assertRaises(TypeError):
            Union(TString, "number")


# -----------------------------------------------------------------------------
# ARRAY TESTS
# -----------------------------------------------------------------------------


def test_array():
    Numbers = TArray(TNumber)
    assert Numbers.description == "array of number"
    assert Numbers.check([])
    assert Numbers.check((1, 2.5))
    assert not Numbers.check([1, "2"])
    assert not Numbers.check("12")


def test_nested_array():
    Matrix = TArray(TArray(TNumber))
    assert Matrix.description == "array of array of number"
    assert Matrix.check([[1], [2, 3]])
    assert not Matrix.check([1, 2])


# -----------------------------------------------------------------------------
# ENUM TESTS
# -----------------------------------------------------------------------------


@pytest.fixture
def status() -> EnumType:
    return Enum("task status", {"Pending": 0, "Active": 1, "Done": 2})


def test_enum_membership(status):
    assert status.check(1)
    assert not status.check(3)
    assert not status.check(True)
    assert not status.check("Active")


def test_enum_lookup_both_ways(status):
    assert status.Active == 1
    assert status.members["Done"] == 2
    assert status.names[1] == "Active"
    assert status.values == (0, 1, 2)
    assert status.keys == ("Pending", "Active", "Done")


def test_enum_unknown_member(status):
    with pytest.raises(AttributeError):
        status.Archived


def test_enum_string_values():
    Color = Enum("color", {"Red": "red", "Green": "green"})
    assert Color.check("red")
    assert Color.names["green"] == "Green"


def test_enum_duplicate_values_rejected():
    with pytest.raises(ValueError):
        Enum("broken", {"A": 1, "B": 1})


@pytest.mark.parametrize("members", [{"One": 1, "Yes": True}, {"Zero": 0, "No": False}, {"One": 1, "Float": 1.0}])
def test_enum_values_equal_as_keys_rejected(members):
    with pytest.raises(ValueError, match="duplicate value"):
        Enum("flags", members)


def test_enum_names_match_checked_values():
    Flags = Enum("flags", {"Off": False, "Two": 2})
    assert Flags.names[False] == "Off"
    assert Flags.names[2] == "Two"
    assert not Flags.check(0)
