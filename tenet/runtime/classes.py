# tenet/runtime/classes.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Class wrapping.

wrap_class() returns a WrappedClass: a tagged value holding the original
class that exposes explicit construct() and call entry points. It mirrors the
class's identity (name, qualname, module, docstring), forwards attribute reads
and writes to the class so static members behave as before, and answers
isinstance()/issubclass() for the original class and its ancestors' instances.
"""

from typing import Any, Type


class WrappedClass:
    """
    Callable stand-in for a class.

    Class Invariants:
    1. construct() and __call__ produce instances of the original class
    2. isinstance(x, wrapped) == isinstance(x, wrapped.__wrapped__)
    3. attribute access goes to the original class
    """

    def __init__(self, cls: Type) -> None:
        object.__setattr__(self, "__wrapped__", cls)
        for attr in ("__name__", "__qualname__", "__module__", "__doc__"):
            object.__setattr__(self, attr, getattr(cls, attr, None))

    def construct(self, *args: Any, **kwargs: Any) -> Any:
        return self.__wrapped__(*args, **kwargs)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.construct(*args, **kwargs)

    def __instancecheck__(self, instance: Any) -> bool:
        return isinstance(instance, self.__wrapped__)

    def __subclasscheck__(self, subclass: type) -> bool:
        return issubclass(subclass, self.__wrapped__)

    def __getattr__(self, name: str) -> Any:
        return getattr(object.__getattribute__(self, "__wrapped__"), name)

    def __setattr__(self, name: str, value: Any) -> None:
        setattr(self.__wrapped__, name, value)

    def __delattr__(self, name: str) -> None:
        delattr(self.__wrapped__, name)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, WrappedClass):
            return self.__wrapped__ is other.__wrapped__
        return self.__wrapped__ is other

    def __hash__(self) -> int:
        return hash(self.__wrapped__)

    def __repr__(self) -> str:
        return f"<wrapped class {self.__wrapped__.__qualname__}>"


def wrap_class(cls: Any) -> WrappedClass:
    """
    Wrap a class so it can be used through explicit construct/call entry
    points while keeping its identity, statics and instance checks.

    Raises:
        TypeError: if cls is not a class
    """
    if isinstance(cls, WrappedClass):
        return cls
    if not isinstance(cls, type):
        raise TypeError(f"wrap_class() expects a class, got {type(cls).__name__}")
    return WrappedClass(cls)
