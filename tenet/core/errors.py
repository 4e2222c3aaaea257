# tenet/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Error hierarchy and the monadic error value.

Contract failures are represented by ContractError instances that are
returned, not raised: a function receiving one as an argument forwards it
without doing any work. The older tagged-dict representation
({"$error": True, ...}) is still recognized by is_error() and can be
converted in both directions.
"""

from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from tenet.core.meta import Loc

LEGACY_TAG = "$error"


class TenetError(Exception):
    """
    Base exception class for errors within the tenet library.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(TenetError, ValueError):
    """
    Raised when a runtime is configured with an unknown key or invalid value.
    """


class ExtensionNotFoundError(TenetError, AttributeError):
    """
    Raised when no extension method resolves for a value.
    """

    def __init__(self, type_name: str, method_name: str) -> None:
        super().__init__(
            f"No extension method '{method_name}' for type '{type_name}'",
            {"type_name": type_name, "method_name": method_name},
        )
        self.type_name = type_name
        self.method_name = method_name


class ContractError(TenetError):
    """
    A contract violation carried as a value.

    Attributes:
        path: "func.param", "func()" for return values, or a source-qualified
            "file:line:func.param"
        expected: description of the expected type
        actual: tag of the value that was received
        loc: source span of the failing declaration
        cause: the native exception this error was converted from
        errors: member errors of a composite
        call_stack: bounded call-stack snapshot (debug mode only)
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        expected: Optional[str] = None,
        actual: Optional[str] = None,
        loc: Optional[Loc] = None,
        cause: Optional[BaseException] = None,
        errors: Optional[List["ContractError"]] = None,
        call_stack: Optional[List[str]] = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.expected = expected
        self.actual = actual
        self.loc = Loc.coerce(loc)
        self.cause = cause
        self.errors = errors
        self.call_stack = call_stack
        if cause is not None:
            self.__cause__ = cause
        self.details = {
            key: value
            for key, value in (("path", path), ("expected", expected), ("actual", actual))
            if value is not None
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, path={self.path!r})"

    def with_call_stack(self, stack: Sequence[str]) -> "ContractError":
        """Attach a call-stack snapshot, ending with this error's path."""
        snapshot = list(stack)
        if self.path:
            snapshot.append(self.path)
        self.call_stack = snapshot
        return self

    def to_legacy(self) -> Dict[str, Any]:
        """Tagged-dict view of this error."""
        data: Dict[str, Any] = {LEGACY_TAG: True, "message": self.message}
        for key in ("path", "expected", "actual", "cause"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        if self.loc is not None:
            data["loc"] = self.loc.to_dict()
        if self.errors is not None:
            data["errors"] = [as_contract_error(err).to_legacy() for err in self.errors]
        if self.call_stack is not None:
            data["callStack"] = list(self.call_stack)
        return data

    @classmethod
    def from_legacy(cls, data: Dict[str, Any]) -> "ContractError":
        errors = data.get("errors")
        return cls(
            data.get("message", ""),
            path=data.get("path"),
            expected=data.get("expected"),
            actual=data.get("actual"),
            loc=data.get("loc"),
            cause=data.get("cause"),
            errors=[as_contract_error(err) for err in errors] if errors is not None else None,
            call_stack=data.get("callStack"),
        )


class MissingParameterError(ContractError):
    """A required parameter received no value."""


class TypeMismatchError(ContractError):
    """An input or return value failed its declared type."""


class CompositeError(ContractError):
    """Two or more parameters failed in the same call."""


class FaultError(ContractError):
    """A native exception raised inside a wrapped call, converted to a value."""


ErrorValue = Union[ContractError, Dict[str, Any]]


def is_error(value: Any) -> bool:
    """True for ContractError instances and legacy tagged dicts."""
    if isinstance(value, ContractError):
        return True
    return isinstance(value, dict) and value.get(LEGACY_TAG) is True


def error(message: str, **details: Any) -> ContractError:
    """Create a contract error value."""
    return ContractError(message, **details)


def as_contract_error(value: ErrorValue) -> ContractError:
    if isinstance(value, ContractError):
        return value
    return ContractError.from_legacy(value)


def _error_field(err: ErrorValue, name: str) -> Any:
    if isinstance(err, dict):
        return err.get(name)
    return getattr(err, name, None)


def compose_errors(errors: Iterable[ErrorValue], func_name: Optional[str] = None) -> Optional[ErrorValue]:
    """
    Merge simultaneous parameter failures.

    A single error is returned unchanged. Several errors become one
    CompositeError listing the failing parameter names in the given order.
    """
    errors = list(errors)
    if not errors:
        return None
    if len(errors) == 1:
        return errors[0]

    names = []
    for err in errors:
        path = _error_field(err, "path") or "?"
        names.append(path.rsplit(".", 1)[-1])
    where = f" in {func_name}" if func_name else ""
    return CompositeError(
        f"Multiple parameter errors{where}: {', '.join(names)}",
        path=func_name,
        errors=errors,
    )
