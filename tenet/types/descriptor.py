# tenet/types/descriptor.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Serializable type descriptors.

A TypeDescriptor is the plain-data encoding of a type, used where a live
RuntimeType predicate cannot travel (cached metadata, emitted source text).
"ref" descriptors name a registered type and are resolved at validation time;
a ref that cannot be resolved is skipped with a warning rather than failing.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from tenet.core.values import MISSING, is_number, is_whole_number, type_of
from tenet.types.base import RuntimeType

logger = logging.getLogger(__name__)

KINDS = frozenset(
    {
        "string",
        "number",
        "integer",
        "non-negative-integer",
        "boolean",
        "null",
        "undefined",
        "any",
        "array",
        "object",
        "union",
        "ref",
    }
)

Resolver = Callable[[str], Optional[RuntimeType]]

_SCALAR_CHECKS: Dict[str, Callable[[Any], bool]] = {
    "string": lambda v: isinstance(v, str),
    "number": is_number,
    "integer": is_whole_number,
    "non-negative-integer": lambda v: is_whole_number(v) and v >= 0,
    "boolean": lambda v: isinstance(v, bool),
    "null": lambda v: v is None,
    "undefined": lambda v: v is MISSING,
    "any": lambda v: True,
}


@dataclass(frozen=True)
class TypeDescriptor:
    kind: str
    items: Optional["TypeDescriptor"] = None
    shape: Optional[Mapping[str, "TypeDescriptor"]] = None
    members: Optional[Tuple["TypeDescriptor", ...]] = None
    ref_name: Optional[str] = None
    nullable: bool = False

    def __post_init__(self) -> None:
        if self.kind not in KINDS:
            raise ValueError(f"Unknown type descriptor kind: {self.kind!r}")
        if self.kind == "ref" and not self.ref_name:
            raise ValueError("A 'ref' descriptor requires ref_name")
        if self.members is not None:
            object.__setattr__(self, "members", tuple(self.members))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TypeDescriptor":
        items = data.get("items")
        shape = data.get("shape")
        members = data.get("members")
        return cls(
            kind=data["kind"],
            items=cls.from_dict(items) if items is not None else None,
            shape={key: cls.from_dict(value) for key, value in shape.items()} if shape is not None else None,
            members=tuple(cls.from_dict(m) for m in members) if members is not None else None,
            ref_name=data.get("refName", data.get("ref_name")),
            nullable=data.get("nullable", False),
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"kind": self.kind}
        if self.items is not None:
            data["items"] = self.items.to_dict()
        if self.shape is not None:
            data["shape"] = {key: value.to_dict() for key, value in self.shape.items()}
        if self.members is not None:
            data["members"] = [member.to_dict() for member in self.members]
        if self.ref_name is not None:
            data["refName"] = self.ref_name
        if self.nullable:
            data["nullable"] = True
        return data

    def describe(self) -> str:
        if self.kind == "array":
            text = f"array of {self.items.describe()}" if self.items is not None else "array"
        elif self.kind == "object" and self.shape:
            fields = ", ".join(f"{key}: {value.describe()}" for key, value in self.shape.items())
            text = f"{{{fields}}}"
        elif self.kind == "union" and self.members:
            text = " | ".join(member.describe() for member in self.members)
        elif self.kind == "ref":
            text = self.ref_name
        else:
            text = self.kind
        return f"{text} or null" if self.nullable else text

    def check(self, value: Any, resolver: Optional[Resolver] = None) -> bool:
        """
        Test a value against this descriptor.

        Unresolvable refs accept the value; see module docstring.
        """
        if self.nullable and value is None:
            return True
        kind = self.kind
        if kind in _SCALAR_CHECKS:
            return _SCALAR_CHECKS[kind](value)
        if kind == "array":
            if not isinstance(value, (list, tuple)):
                return False
            return self.items is None or all(self.items.check(item, resolver) for item in value)
        if kind == "object":
            if type_of(value) in ("null", "undefined", "array", "string", "number", "boolean"):
                return False
            if isinstance(value, (list, tuple)):
                return False
            if not self.shape:
                return True
            if not isinstance(value, Mapping):
                return False
            return all(spec.check(value.get(key, MISSING), resolver) for key, spec in self.shape.items())
        if kind == "union":
            return any(member.check(value, resolver) for member in self.members or ())
        # ref
        target = resolver(self.ref_name) if resolver is not None else None
        if target is None:
            logger.warning("Unresolved type reference %r; skipping validation", self.ref_name)
            return True
        return target.check(value)


def is_descriptor_dict(value: Any) -> bool:
    return isinstance(value, Mapping) and isinstance(value.get("kind"), str)


def as_descriptor(value: Any) -> TypeDescriptor:
    if isinstance(value, TypeDescriptor):
        return value
    return TypeDescriptor.from_dict(value)
