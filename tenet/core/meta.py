# tenet/core/meta.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Function contract metadata.

The metadata producer emits one FunctionMeta per function: the declared
parameters in declaration order, an optional return contract and the
per-function safety flags. Producers that cross a serialization boundary hand
over plain dicts instead; FunctionMeta.coerce() normalizes both forms.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from tenet.core.values import MISSING

META_ATTR = "__contract__"

# TypeSpec: str | RuntimeType | TypeDescriptor | descriptor dict
TypeSpec = Any


@dataclass(frozen=True)
class Loc:
    """Source span of a declaration, in character offsets."""

    start: int
    end: int
    line: Optional[int] = None

    @classmethod
    def coerce(cls, value: Any) -> Optional["Loc"]:
        if value is None or isinstance(value, Loc):
            return value
        return cls(start=value["start"], end=value["end"], line=value.get("line"))

    def to_dict(self) -> Dict[str, int]:
        data = {"start": self.start, "end": self.end}
        if self.line is not None:
            data["line"] = self.line
        return data


@dataclass(frozen=True)
class ParamMeta:
    type: TypeSpec
    required: bool = True
    default: Any = MISSING
    loc: Optional[Loc] = None

    @classmethod
    def coerce(cls, value: Any) -> "ParamMeta":
        if isinstance(value, ParamMeta):
            return value
        if isinstance(value, Mapping) and "type" in value:
            return cls(
                type=value["type"],
                required=value.get("required", True),
                default=value.get("default", MISSING),
                loc=Loc.coerce(value.get("loc")),
            )
        # Bare type spec shorthand
        return cls(type=value)


@dataclass(frozen=True)
class ReturnMeta:
    type: TypeSpec
    safe: bool = False
    unsafe_return: bool = False
    defaults: Optional[Mapping[str, Any]] = None

    @classmethod
    def coerce(cls, value: Any) -> Optional["ReturnMeta"]:
        if value is None or isinstance(value, ReturnMeta):
            return value
        if isinstance(value, Mapping) and "type" in value:
            defaults = value.get("defaults")
            return cls(
                type=value["type"],
                safe=value.get("safe", False),
                unsafe_return=value.get("unsafe_return", value.get("unsafeReturn", False)),
                defaults=MappingProxyType(dict(defaults)) if defaults else None,
            )
        return cls(type=value)


@dataclass(frozen=True)
class FunctionMeta:
    """
    Declarative contract for one function.

    Runtime Invariants:
    - params preserves declaration order (positional decoding relies on it)
    - the instance is immutable; params is exposed read-only
    """

    params: Mapping[str, ParamMeta] = field(default_factory=dict)
    returns: Optional[ReturnMeta] = None
    unsafe: bool = False
    safe: bool = False
    unsafe_return: bool = False
    safe_return: bool = False
    name: Optional[str] = None
    polymorphic: bool = False
    source: Optional[str] = None

    def __post_init__(self) -> None:
        params = {name: ParamMeta.coerce(param) for name, param in self.params.items()}
        object.__setattr__(self, "params", MappingProxyType(params))
        object.__setattr__(self, "returns", ReturnMeta.coerce(self.returns))

    @classmethod
    def coerce(cls, value: Any) -> "FunctionMeta":
        if isinstance(value, FunctionMeta):
            return value
        if value is None:
            return cls()
        return cls(
            params=value.get("params") or {},
            returns=value.get("returns"),
            unsafe=value.get("unsafe", False),
            safe=value.get("safe", False),
            unsafe_return=value.get("unsafe_return", value.get("unsafeReturn", False)),
            safe_return=value.get("safe_return", value.get("safeReturn", False)),
            name=value.get("name"),
            polymorphic=value.get("polymorphic", False),
            source=value.get("source"),
        )

    @property
    def param_names(self) -> Tuple[str, ...]:
        return tuple(self.params)

    def param_path(self, func_name: str, param_name: str) -> str:
        """Diagnostic path for a parameter, source-qualified when possible."""
        param = self.params.get(param_name)
        line = param.loc.line if param is not None and param.loc is not None else None
        if self.source and line is not None:
            return f"{self.source}:{line}:{func_name}.{param_name}"
        return f"{func_name}.{param_name}"


def attach_meta(fn: Callable, meta: FunctionMeta) -> None:
    setattr(fn, META_ATTR, meta)


def get_meta(fn: Any) -> Optional[FunctionMeta]:
    """Return the contract attached to a callable, if any."""
    return getattr(fn, META_ATTR, None)
