# tenet/core/validation.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Value and argument validation against contract metadata.

Both entry points return None on success and an error value on failure; they
never raise for a bad value. An error value given as input is handed back
unchanged without any checking.
"""

from typing import Any, Callable, List, Mapping, Optional

from tenet.core.errors import ErrorValue, MissingParameterError, TypeMismatchError, is_error
from tenet.core.meta import FunctionMeta, Loc, ParamMeta, TypeSpec
from tenet.core.values import MISSING, PRIMITIVE_TAGS, is_native_type, is_number, is_whole_number, type_of
from tenet.types.base import RuntimeType
from tenet.types.descriptor import TypeDescriptor, as_descriptor, is_descriptor_dict

Resolver = Callable[[str], Optional[RuntimeType]]

_NOT_OBJECT = PRIMITIVE_TAGS | {"array", "function"}


def describe_spec(spec: TypeSpec) -> str:
    """Human-readable description of any TypeSpec form."""
    if isinstance(spec, RuntimeType):
        return spec.description
    if isinstance(spec, TypeDescriptor) or is_descriptor_dict(spec):
        return as_descriptor(spec).describe()
    return str(spec)


def _check_named(value: Any, name: str, resolver: Optional[Resolver]) -> bool:
    if name == "any":
        return True
    if name == "number":
        return is_number(value)
    if name == "integer":
        return is_whole_number(value)
    actual = type_of(value)
    if name == "object":
        return actual not in _NOT_OBJECT and not isinstance(value, (list, tuple))
    if name == actual:
        return True
    if name == "array":
        return isinstance(value, (list, tuple))
    if resolver is not None:
        registered = resolver(name)
        if registered is not None:
            return registered.check(value)
    return is_native_type(value, name)


def _matches(value: Any, spec: TypeSpec, resolver: Optional[Resolver]) -> bool:
    if isinstance(spec, RuntimeType):
        return spec.check(value)
    if isinstance(spec, TypeDescriptor) or is_descriptor_dict(spec):
        return as_descriptor(spec).check(value, resolver)
    if isinstance(spec, str):
        return _check_named(value, spec, resolver)
    raise TypeError(f"Unsupported type spec: {spec!r}")


def check_type(
    value: Any,
    expected: TypeSpec,
    path: Optional[str] = None,
    resolver: Optional[Resolver] = None,
    loc: Optional[Loc] = None,
) -> Optional[ErrorValue]:
    """
    Check one value against a type spec.

    Args:
        value: the value to check
        expected: RuntimeType, TypeDescriptor (or its dict form), or type name
        path: diagnostic path, e.g. "greet.name"
        resolver: registry lookup for "ref" descriptors and registered names
        loc: source span carried into the error

    Returns:
        None if the value matches, otherwise a TypeMismatchError. Error values
        are returned unchanged.
    """
    if is_error(value):
        return value
    if _matches(value, expected, resolver):
        return None

    description = describe_spec(expected)
    actual = type_of(value)
    if path:
        message = f"Expected {description} for '{path}', got {actual}"
    else:
        message = f"Expected {description} but got {actual}"
    return TypeMismatchError(message, path=path, expected=description, actual=actual, loc=loc)


def check_param(
    value: Any,
    name: str,
    param: ParamMeta,
    path: str,
    resolver: Optional[Resolver] = None,
) -> Optional[ErrorValue]:
    """Check one bound parameter value, accounting for absence."""
    if is_error(value):
        return value
    if value is MISSING:
        if not param.required:
            return None
        return MissingParameterError(
            f"Missing required parameter '{name}'",
            path=path,
            expected=describe_spec(param.type),
            actual="undefined",
            loc=param.loc,
        )
    return check_type(value, param.type, path, resolver, loc=param.loc)


def validate_args(
    args: Mapping[str, Any],
    meta: Any,
    func_name: Optional[str] = None,
    resolver: Optional[Resolver] = None,
) -> Optional[ErrorValue]:
    """
    Validate an argument mapping against FunctionMeta.

    Parameters are checked in declaration order and the first failure wins.
    An error value bound to any parameter is returned as-is, ahead of any
    mismatch.
    """
    meta = FunctionMeta.coerce(meta)
    for name in meta.params:
        if is_error(args.get(name)):
            return args[name]
    for name, param in meta.params.items():
        path = meta.param_path(func_name, name) if func_name else name
        failure = check_param(args.get(name, MISSING), name, param, path, resolver)
        if failure is not None:
            return failure
    return None


def collect_arg_errors(
    args: Mapping[str, Any],
    meta: FunctionMeta,
    func_name: str,
    resolver: Optional[Resolver] = None,
) -> List[ErrorValue]:
    """Like validate_args, but keeps going and returns every failure."""
    failures = []
    for name, param in meta.params.items():
        failure = check_param(args.get(name, MISSING), name, param, meta.param_path(func_name, name), resolver)
        if failure is not None:
            failures.append(failure)
    return failures
