# tenet/core/equality.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Structural equality without coercion.

Is() compares values by structure: sequences element-wise, dicts by key set
and values, plain instances by their attributes. It never coerces across
basic types, so 0 and False differ, but None and MISSING are treated as the
same "nullish" value. Values with different type_of tags never match,
so an OrderedDict is not equal to a plain dict with the same items.

Objects can take over the comparison through the EQUALS protocol method or a
conventional Equals() method. The protocol is checked on the left operand
first, then the right, which lets proxies delegate equality to the value
they wrap.

There is no cycle guard: comparing self-referencing structures
recurses until Python raises RecursionError.
"""

from typing import Any, Callable, Optional

from tenet.core.values import is_nullish, type_of

EQUALS = "__tenet_equals__"


def _protocol(value: Any, name: str) -> Optional[Callable[[Any], Any]]:
    if is_nullish(value):
        return None
    method = getattr(value, name, None)
    return method if callable(method) else None


def _has_default_eq(value: Any) -> bool:
    return type(value).__eq__ is object.__eq__


def Is(a: Any, b: Any) -> bool:
    """Structural equality. See module docstring for the resolution order."""
    for name in (EQUALS, "Equals"):
        left = _protocol(a, name)
        if left is not None:
            return bool(left(b))
        right = _protocol(b, name)
        if right is not None:
            return bool(right(a))

    if a is b:
        return True

    if is_nullish(a) or is_nullish(b):
        return is_nullish(a) and is_nullish(b)

    if type_of(a) != type_of(b):
        return False

    if isinstance(a, (list, tuple)):
        if not isinstance(b, (list, tuple)) or len(a) != len(b):
            return False
        return all(Is(x, y) for x, y in zip(a, b))

    if isinstance(a, dict):
        if not isinstance(b, dict) or a.keys() != b.keys():
            return False
        return all(Is(a[key], b[key]) for key in a)

    # Same class, no custom __eq__: compare attributes like plain objects
    if type(a) is type(b) and _has_default_eq(a) and hasattr(a, "__dict__"):
        return Is(vars(a), vars(b))

    return bool(a == b)


def IsNot(a: Any, b: Any) -> bool:
    return not Is(a, b)
