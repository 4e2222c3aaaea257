# tenet/core/values.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Value tagging primitives.

Provides the absent-value sentinel and a "fixed" type-of operator that keeps
null, absent values and sequences apart from generic objects, and reports the
class name for everything that is not a basic value.
"""

import functools
import inspect
from typing import Any, List

PRIMITIVE_TAGS = frozenset({"string", "number", "boolean", "null", "undefined"})


class _MissingType:
    """
    Singleton marking a value that was never supplied. Distinct from None,
    which is an explicit null.
    """

    _instance = None

    def __new__(cls) -> "_MissingType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_MissingType":
        return self

    def __deepcopy__(self, memo) -> "_MissingType":
        return self

    def __reduce__(self):
        return (_MissingType, ())


MISSING = _MissingType()


def is_missing(value: Any) -> bool:
    return value is MISSING


def is_nullish(value: Any) -> bool:
    """True for None and MISSING."""
    return value is None or value is MISSING


def is_function(value: Any) -> bool:
    return inspect.isroutine(value) or inspect.isclass(value) or isinstance(value, functools.partial)


def type_of(value: Any) -> str:
    """
    Return the tag for a value.

    None is "null", MISSING is "undefined", plain lists and tuples are
    "array", plain dicts are "object". Other objects, including subclasses of
    list, tuple and dict, report their class name, so callers can test for
    "datetime", "OrderedDict" or "MyClass" without importing the class.
    """
    if value is None:
        return "null"
    if value is MISSING:
        return "undefined"
    # bool is an int subclass, test it first
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if type(value) in (list, tuple):
        return "array"
    if type(value) is dict:
        return "object"
    if is_function(value):
        return "function"
    return type(value).__name__


def is_primitive(value: Any) -> bool:
    return type_of(value) in PRIMITIVE_TAGS


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_whole_number(value: Any) -> bool:
    if not is_number(value):
        return False
    return isinstance(value, int) or value.is_integer()


def class_chain(value: Any) -> List[str]:
    """Class names from the value's own class up to object, in MRO order."""
    return [klass.__name__ for klass in type(value).__mro__]


def is_native_type(value: Any, type_name: str) -> bool:
    """
    Check whether any class in the value's ancestry is named type_name.

    Matches by name so that checks work across module boundaries. Always
    False for null, absent and primitive values.
    """
    if is_nullish(value) or isinstance(value, (str, int, float, bool)):
        return False
    return type_name in class_chain(value)
