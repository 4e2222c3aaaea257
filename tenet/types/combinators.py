# tenet/types/combinators.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Type combinators.

Combinators are value transformers over RuntimeType: each takes types (or
literal values) and returns a new RuntimeType. None of them subclass the
types they combine.

Note that Optional, Union and Enum intentionally shadow the typing/enum names
inside this module; import them from tenet.types.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Mapping, Tuple

from tenet.core.equality import Is
from tenet.core.values import MISSING, type_of
from tenet.types.base import RuntimeType, Type, is_runtime_type


def _literal_key(value: Any) -> Tuple[str, Hashable]:
    # Tagging keeps True from matching 1 the way plain set membership would
    return (type_of(value), value)


class _LiteralSet:
    """Type-strict membership test over concrete values."""

    def __init__(self, values: List[Any]) -> None:
        self._keys = set()
        self._unhashable = []
        for value in values:
            try:
                self._keys.add(_literal_key(value))
            except TypeError:
                self._unhashable.append(value)

    def __contains__(self, value: Any) -> bool:
        try:
            if _literal_key(value) in self._keys:
                return True
        except TypeError:
            pass
        return any(Is(value, candidate) for candidate in self._unhashable)


@dataclass(frozen=True, eq=False)
class LiteralUnionType(RuntimeType):
    """Union over concrete values; exposes them as .values."""

    values: Tuple[Any, ...] = ()


@dataclass(frozen=True, eq=False)
class EnumType(RuntimeType):
    """
    Enumeration with bidirectional lookup.

    Attributes:
        members: name -> value
        names: value -> name
        values: all values, in declaration order
        keys: all names, in declaration order
    """

    members: Mapping[str, Any] = field(default_factory=dict)
    names: Mapping[Any, str] = field(default_factory=dict)
    values: Tuple[Any, ...] = ()
    keys: Tuple[str, ...] = ()

    def __getattr__(self, name: str) -> Any:
        # Status.Pending reads the member value
        members = self.__dict__.get("members", {})
        if name in members:
            return members[name]
        raise AttributeError(name)


def Nullable(type_: RuntimeType) -> RuntimeType:
    """Accept the type's values or None."""
    return Type(f"{type_.description} or null", lambda v: v is None or type_.check(v))


def Optional(type_: RuntimeType) -> RuntimeType:
    """Accept the type's values, None, or MISSING."""
    return Type(
        f"{type_.description} (optional)",
        lambda v: v is None or v is MISSING or type_.check(v),
    )


def Union(*args: Any) -> RuntimeType:
    """
    Create a union type.

    Two forms:
        Union(*types)                 accept if any member type accepts
        Union(description, values)    accept any of the literal values

    Example:
        StringOrNumber = Union(TString, TNumber)
        Direction = Union("cardinal direction", ["up", "down", "left", "right"])
    """
    if len(args) == 2 and isinstance(args[0], str) and isinstance(args[1], (list, tuple)):
        description, values = args
        members = _LiteralSet(list(values))
        return LiteralUnionType(description, predicate=lambda v: v in members, values=tuple(values))

    types = [arg for arg in args if is_runtime_type(arg)]
    if len(types) != len(args):
        raise TypeError("Union() members must be RuntimeTypes")
    description = " | ".join(t.description for t in types)
    return Type(description, lambda v: any(t.check(v) for t in types))


def TArray(item_type: RuntimeType) -> RuntimeType:
    """Accept lists or tuples whose every element matches item_type."""
    return Type(
        f"array of {item_type.description}",
        lambda v: isinstance(v, (list, tuple)) and all(item_type.check(item) for item in v),
    )


def Enum(description: str, members: Mapping[str, Any]) -> EnumType:
    """
    Create an enum type with bidirectional lookup.

    Example:
        Status = Enum("task status", {"Pending": 0, "Active": 1, "Done": 2})
        Status.check(1)      # True
        Status.names[1]      # "Active"
        Status.values        # (0, 1, 2)

    Raises:
        ValueError: if two members share a value, or have values that are
            equal as dict keys (1 and True), which would make reverse lookup
            ambiguous
    """
    names: Dict[Any, str] = {}
    for name, value in members.items():
        # Dict keys, so 1 and True collide even though checks tell them apart
        if value in names:
            raise ValueError(
                f"Enum {description!r} has duplicate value {value!r} (member {name!r}, already {names[value]!r})"
            )
        names[value] = name

    values = tuple(members.values())
    valid = _LiteralSet(list(values))
    return EnumType(
        description,
        predicate=lambda v: v in valid,
        members=dict(members),
        names=names,
        values=values,
        keys=tuple(members),
    )
