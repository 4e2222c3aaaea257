# tenet/extensions/registry.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Extension method registry.

Lets code attach methods to existing types, built-in or user-defined, without
touching their definitions. Methods are registered per type name and resolved
by walking the value's type-name chain:

    type_of tag -> declared parents -> ... -> "object"

Built-in tags have a fixed parent table. Class instances use the names in
their MRO, unless parents were declared explicitly with declare_parents().
Built-in classes in an MRO read as their tags, so a dict subclass walks
its own class name, then "object", and a tuple subclass passes "array".
Registering under a built-in class such as str or dict is the same as
registering under its tag.
The "object" table is the catch-all consulted last.
"""

import threading
import types
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

from tenet.core.errors import ExtensionNotFoundError
from tenet.core.values import class_chain, type_of

BASE_TYPE = "object"

_BUILTIN_PARENTS: Dict[str, List[str]] = {
    "string": [BASE_TYPE],
    "number": [BASE_TYPE],
    "boolean": [BASE_TYPE],
    "array": [BASE_TYPE],
    "function": [BASE_TYPE],
    "object": [],
    "null": [],
    "undefined": [],
}

TypeKey = Union[str, type]

# Built-in classes register under the tag their instances carry
_BUILTIN_TAGS: Dict[type, str] = {
    str: "string",
    int: "number",
    float: "number",
    bool: "boolean",
    list: "array",
    tuple: "array",
    dict: BASE_TYPE,
    object: BASE_TYPE,
    types.FunctionType: "function",
}

_BUILTIN_NAMES: Dict[str, str] = {klass.__name__: tag for klass, tag in _BUILTIN_TAGS.items()}


def _type_name(type_key: TypeKey) -> str:
    if isinstance(type_key, type):
        return _BUILTIN_TAGS.get(type_key, type_key.__name__)
    return type_key


def _ancestry(value: Any) -> List[str]:
    chain: List[str] = []
    for name in class_chain(value):
        name = _BUILTIN_NAMES.get(name, name)
        if name not in chain:
            chain.append(name)
    return chain


class ExtensionRegistry:
    """
    Per-runtime table of type name -> method name -> implementation.

    Registration is additive; re-registering the same (type, method) pair
    replaces the previous implementation.
    """

    def __init__(self) -> None:
        self._methods: Dict[str, Dict[str, Callable[..., Any]]] = {}
        self._parents: Dict[str, List[str]] = {}
        self._lock = threading.RLock()

    def register(self, type_key: TypeKey, method_name: str, fn: Callable[..., Any]) -> None:
        if not callable(fn):
            raise TypeError(f"Extension '{method_name}' must be callable")
        with self._lock:
            self._methods.setdefault(_type_name(type_key), {})[method_name] = fn

    def declare_parents(self, type_key: TypeKey, parents: Sequence[TypeKey]) -> None:
        """Declare the ordered parent names used when resolving for type_key."""
        with self._lock:
            self._parents[_type_name(type_key)] = [_type_name(parent) for parent in parents]

    def type_chain(self, value: Any) -> List[str]:
        """Ordered type names consulted for a value, ending at "object"."""
        tag = type_of(value)
        if tag in self._parents:
            chain = [tag] + self._parents[tag]
        elif tag in _BUILTIN_PARENTS:
            chain = [tag] + _BUILTIN_PARENTS[tag]
        else:
            chain = _ancestry(value)
        if tag not in ("null", "undefined") and chain[-1] != BASE_TYPE:
            chain.append(BASE_TYPE)
        return chain

    def resolve(self, value: Any, method_name: str) -> Optional[Callable[..., Any]]:
        """Find the implementation of method_name for value, or None."""
        with self._lock:
            for name in self.type_chain(value):
                fn = self._methods.get(name, {}).get(method_name)
                if fn is not None:
                    return fn
            return self._methods.get(BASE_TYPE, {}).get(method_name)

    def has(self, value: Any, method_name: str) -> bool:
        return self.resolve(value, method_name) is not None

    def call(self, value: Any, method_name: str, *args: Any, **kwargs: Any) -> Any:
        """
        Invoke an extension with value as its first argument.

        Raises:
            ExtensionNotFoundError: if nothing resolves
        """
        fn = self.resolve(value, method_name)
        if fn is None:
            raise ExtensionNotFoundError(type_of(value), method_name)
        return fn(value, *args, **kwargs)

    def methods_for(self, type_key: TypeKey) -> Dict[str, Callable[..., Any]]:
        with self._lock:
            return dict(self._methods.get(_type_name(type_key), {}))

    def clear(self) -> None:
        with self._lock:
            self._methods.clear()
            self._parents.clear()
