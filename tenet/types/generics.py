# tenet/types/generics.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Parameterized type families.

Generic() returns a factory. Calling the factory with concrete type arguments
resolves each parameter to a check function and yields a plain RuntimeType
whose predicate receives (value, *checks). A type argument can be a
RuntimeType, a schema, or an example value whose shape is inferred.

Example:
    Box = Generic(["T"], lambda x, check_t: isinstance(x, dict) and check_t(x.get("value")), "Box<T>")
    StringBox = Box(TString)       # or Box("") with an example
    StringBox.description          # "Box<string>"
"""

import json
import re
from typing import Any, Callable, List, Sequence, Tuple, Union

from tenet.core.values import MISSING
from tenet.types.base import RuntimeType, Type, compile_schema, infer_schema, is_runtime_type, is_schema, schema_of

Check = Callable[[Any], bool]
ParamSpec = Union[str, Tuple[str, Any]]


def _accept_any(value: Any) -> bool:
    return True


def type_param_check(arg: Any) -> Check:
    """Resolve a type argument to a check function."""
    if is_runtime_type(arg):
        return arg.check
    if is_schema(arg):
        return compile_schema(schema_of(arg))
    return compile_schema(infer_schema(arg))


def type_param_description(arg: Any) -> str:
    if arg is MISSING:
        return "any"
    if is_runtime_type(arg):
        return arg.description
    if isinstance(arg, str):
        return "string"
    try:
        return json.dumps(arg)
    except (TypeError, ValueError):
        return repr(arg)


class GenericType:
    """
    Factory for a family of RuntimeTypes.

    Attributes:
        params: type parameter names, in order
        description: description template, e.g. "Pair<T, U>"
    """

    def __init__(self, params: Sequence[ParamSpec], predicate: Callable[..., bool], description: str) -> None:
        names: List[str] = []
        defaults: List[Any] = []
        for param in params:
            if isinstance(param, str):
                names.append(param)
                defaults.append(MISSING)
            else:
                name, default = param
                names.append(name)
                defaults.append(default)
        self.params: Tuple[str, ...] = tuple(names)
        self.description = description
        self._defaults = tuple(defaults)
        self._predicate = predicate

    def __call__(self, *type_args: Any) -> RuntimeType:
        if len(type_args) > len(self.params):
            raise TypeError(f"{self.description} takes {len(self.params)} type arguments, got {len(type_args)}")

        resolved = [type_args[i] if i < len(type_args) else self._defaults[i] for i in range(len(self.params))]
        checks = [_accept_any if arg is MISSING else type_param_check(arg) for arg in resolved]

        description = self.description
        for name, arg in zip(self.params, resolved):
            replacement = type_param_description(arg)
            description = re.sub(rf"\b{re.escape(name)}\b", lambda _: replacement, description)

        predicate = self._predicate
        return Type(description, lambda value: predicate(value, *checks))

    def __repr__(self) -> str:
        return f"GenericType({self.description!r})"


def Generic(params: Sequence[ParamSpec], predicate: Callable[..., bool], description: str) -> GenericType:
    """
    Create a generic type factory.

    Args:
        params: parameter names, with optional defaults: ["T", ("U", "")]
        predicate: receives (value, *checks), one check per parameter
        description: template; parameter names are replaced by the
            descriptions of the resolved type arguments
    """
    return GenericType(params, predicate, description)


def _is_pair(value: Any, check_t: Check, check_u: Check) -> bool:
    return isinstance(value, (list, tuple)) and len(value) == 2 and check_t(value[0]) and check_u(value[1])


def _is_record(value: Any, check_v: Check) -> bool:
    return isinstance(value, dict) and all(check_v(item) for item in value.values())


TPair = Generic(["T", "U"], _is_pair, "Pair<T, U>")

TRecord = Generic(["V"], _is_record, "Record<string, V>")
