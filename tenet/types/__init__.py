"""
Types package for runtime type descriptions.

Architecture:
- RuntimeType model and the Type() constructor
- Combinators over RuntimeType (Nullable, Optional, Union, TArray, Enum)
- Generic type families (Generic, TPair, TRecord)
- Serializable TypeDescriptor for metadata that crosses a process boundary

Design Patterns:
- Factory Pattern: Type(), Generic()
- Decorator Pattern: combinators wrap existing types
- Interpreter Pattern: TypeDescriptor.check
"""

from .base import RuntimeType, Type, infer_schema, is_runtime_type, schema_to_description
from .builtins import (
    LegalDate,
    TBoolean,
    TEmail,
    TInteger,
    TNonEmptyString,
    TNumber,
    TPositiveInt,
    TString,
    TUrl,
    TUuid,
    Timestamp,
)
from .combinators import Enum, EnumType, LiteralUnionType, Nullable, Optional, TArray, Union
from .descriptor import TypeDescriptor
from .generics import Generic, GenericType, TPair, TRecord

__all__ = [
    "Enum",
    "EnumType",
    "Generic",
    "GenericType",
    "LegalDate",
    "LiteralUnionType",
    "Nullable",
    "Optional",
    "RuntimeType",
    "TArray",
    "TBoolean",
    "TEmail",
    "TInteger",
    "TNonEmptyString",
    "TNumber",
    "TPair",
    "TPositiveInt",
    "TRecord",
    "TString",
    "TUrl",
    "TUuid",
    "Timestamp",
    "Type",
    "TypeDescriptor",
    "Union",
    "infer_schema",
    "is_runtime_type",
    "schema_to_description",
]
