# tests/unit/runtime/test_classes.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""Tests for class wrapping."""

import unittest

from tenet.runtime.classes import WrappedClass, wrap_class


class Shape:
    """A shape."""

    count = 0

    def __init__(self, name):
        self.name = name
        Shape.count += 1

    @staticmethod
    def unit():
        return 1

    @classmethod
    def named(cls, name):
        return cls(name)


class Circle(Shape):
    def __init__(self, radius):
        super().__init__("circle")
        self.radius = radius


class TestWrapClass(unittest.TestCase):
    """Test cases for wrap_class.

    Tests verify:
    1. Both entry points build real instances
    2. Identity attributes mirror the class
    3. Static members are shared with the class
    4. Instance and subclass checks still hold
    """

    def setUp(self):
        Shape.count = 0
        self.WrappedShape = wrap_class(Shape)

    def test_call_and_construct(self):
        called = self.WrappedShape("square")
        constructed = self.WrappedShape.construct("triangle")
        self.assertIs(type(called), Shape)
        self.assertIs(type(constructed), Shape)
        self.assertEqual(called.name, "square")
        self.assertEqual(constructed.name, "triangle")

    def test_identity_attributes(self):
        self.assertEqual(self.WrappedShape.__name__, "Shape")
        self.assertEqual(self.WrappedShape.__qualname__, "Shape")
        self.assertEqual(self.WrappedShape.__module__, Shape.__module__)
        self.assertEqual(self.WrappedShape.__doc__, "A shape.")
        self.assertIs(self.WrappedShape.__wrapped__, Shape)
        self.assertIn("Shape", repr(self.WrappedShape))

    def test_static_members(self):
        self.assertEqual(self.WrappedShape.unit(), 1)
        self.assertIsInstance(self.WrappedShape.named("hex"), Shape)
        self.WrappedShape("a")
        self.assertEqual(self.WrappedShape.count, 1)
        self.WrappedShape.count = 10
        self.assertEqual(Shape.count, 10)
        self.WrappedShape.color = "red"
        self.assertEqual(Shape.color, "red")
        del self.WrappedShape.color
        self.assertFalse(hasattr(Shape, "color"))

    def test_instance_checks(self):
        self.assertIsInstance(self.WrappedShape("a"), self.WrappedShape)
        self.assertIsInstance(Shape("b"), self.WrappedShape)
        self.assertIsInstance(Circle(2), self.WrappedShape)
        self.assertNotIsInstance(object(), self.WrappedShape)

    def test_subclass_checks(self):
        WrappedCircle = wrap_class(Circle)
        self.assertTrue(issubclass(Circle, self.WrappedShape))
        self.assertIsInstance(WrappedCircle(1), Shape)
        self.assertIsInstance(WrappedCircle(1), self.WrappedShape)

    def test_wrapping_is_idempotent(self):
        self.assertIs(wrap_class(self.WrappedShape), self.WrappedShape)
        self.assertIsInstance(self.WrappedShape, WrappedClass)

    def test_equality_with_class(self):
        self.assertEqual(self.WrappedShape, wrap_class(Shape))
        self.assertEqual(self.WrappedShape, Shape)
        self.assertEqual(hash(self.WrappedShape), hash(Shape))

    def test_rejects_non_classes(self):
        with self.assertRaises(TypeError):
            wrap_class(lambda: None)
        with self.assertRaises(TypeError):
            wrap_class(Shape("x"))
