"""
Core package: value tagging, structural equality, errors, contract metadata
and validation.

Architecture:
- values.py: absent-value sentinel and the fixed type-of operator
- equality.py: structural Is/IsNot
- errors.py: error hierarchy and monadic error values
- meta.py: FunctionMeta / ParamMeta contract metadata
- validation.py: check_type / validate_args

validation.py depends on the types package and is not imported here.
"""

from .equality import EQUALS, Is, IsNot
from .errors import (
    CompositeError,
    ConfigurationError,
    ContractError,
    ExtensionNotFoundError,
    FaultError,
    MissingParameterError,
    TenetError,
    TypeMismatchError,
    compose_errors,
    error,
    is_error,
)
from .meta import FunctionMeta, Loc, ParamMeta, ReturnMeta, get_meta
from .values import MISSING, is_native_type, type_of

__all__ = [
    "EQUALS",
    "MISSING",
    "CompositeError",
    "ConfigurationError",
    "ContractError",
    "ExtensionNotFoundError",
    "FaultError",
    "FunctionMeta",
    "Is",
    "IsNot",
    "Loc",
    "MissingParameterError",
    "ParamMeta",
    "ReturnMeta",
    "TenetError",
    "TypeMismatchError",
    "compose_errors",
    "error",
    "get_meta",
    "is_error",
    "is_native_type",
    "type_of",
]
