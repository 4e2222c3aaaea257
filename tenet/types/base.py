# tenet/types/base.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Runtime type descriptions.

Architecture:
- RuntimeType pairs a human-readable description with a total predicate
- Type() builds one from a predicate, a JSON Schema, or an example value
- Schemas are validated with jsonschema and compiled once per type

Forms:
    Type(description, predicate)   custom validation function
    Type(description, schema)      JSON Schema dict or a schema holder
    Type(description, example)     schema inferred from the example
    Type(schema)                   description derived from the schema

Usage:
    ZipCode = Type("5-digit US zip code", lambda s: isinstance(s, str) and len(s) == 5)
    Age = Type({"type": "number", "minimum": 0, "maximum": 150})

    ZipCode.check("12345")   # True
    Age.description          # "number (0-150)"
"""

import inspect
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional

from jsonschema.validators import validator_for

from tenet.core.values import MISSING

logger = logging.getLogger(__name__)

Predicate = Callable[[Any], bool]


def _jsonable(value: Any) -> Any:
    """Normalize tuples to lists so jsonschema treats them as arrays."""
    if isinstance(value, tuple):
        return [_jsonable(item) for item in value]
    if isinstance(value, list):
        return [_jsonable(item) for item in value]
    if isinstance(value, dict):
        return {key: _jsonable(item) for key, item in value.items()}
    return value


def is_schema(value: Any) -> bool:
    """
    True for a JSON Schema dict (one with a string "type") or a schema holder,
    i.e. an object exposing the schema dict as .schema (jsonschema validators
    do).
    """
    if isinstance(value, RuntimeType):
        return False
    if isinstance(value, Mapping):
        return isinstance(value.get("type"), str)
    return isinstance(getattr(value, "schema", None), Mapping)


def schema_of(value: Any) -> Dict[str, Any]:
    if isinstance(value, Mapping):
        return dict(value)
    return dict(value.schema)


def compile_schema(schema: Mapping[str, Any]) -> Predicate:
    validator = validator_for(schema)(schema)
    return lambda value: validator.is_valid(_jsonable(value))


def infer_schema(example: Any) -> Dict[str, Any]:
    """Infer a JSON Schema from the shape of an example value."""
    if example is None:
        return {"type": "null"}
    if isinstance(example, bool):
        return {"type": "boolean"}
    if isinstance(example, (int, float)):
        return {"type": "number"}
    if isinstance(example, str):
        return {"type": "string"}
    if isinstance(example, (list, tuple)):
        schema: Dict[str, Any] = {"type": "array"}
        if example:
            schema["items"] = infer_schema(example[0])
        return schema
    if isinstance(example, dict):
        return {
            "type": "object",
            "properties": {key: infer_schema(value) for key, value in example.items()},
            "required": list(example),
        }
    return {}


def schema_to_description(schema: Mapping[str, Any]) -> str:
    kind = schema.get("type")
    if kind == "string":
        if "format" in schema:
            return f"string ({schema['format']})"
        if "pattern" in schema:
            return f"string matching {schema['pattern']}"
        if "minLength" in schema and "maxLength" in schema:
            return f"string ({schema['minLength']}-{schema['maxLength']} chars)"
        return "string"
    if kind in ("number", "integer"):
        low, high = schema.get("minimum"), schema.get("maximum")
        if low is not None and high is not None:
            return f"{kind} ({low}-{high})"
        if low is not None:
            return f"{kind} >= {low}"
        if high is not None:
            return f"{kind} <= {high}"
        return kind
    if kind in ("boolean", "array", "object", "null"):
        return kind
    return "value"


@dataclass(frozen=True, eq=False)
class RuntimeType:
    """
    An immutable type: a description plus a total predicate.

    Class Invariants:
    1. check() never raises; a predicate fault counts as a mismatch
    2. instances are never mutated after construction
    """

    description: str
    predicate: Optional[Predicate] = None
    schema: Optional[Dict[str, Any]] = None
    example: Any = MISSING
    default: Any = MISSING
    _schema_check: Optional[Predicate] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.schema is not None and self._schema_check is None:
            object.__setattr__(self, "_schema_check", compile_schema(self.schema))

    def check(self, value: Any) -> bool:
        try:
            if self.predicate is not None:
                return bool(self.predicate(value))
            if self._schema_check is not None:
                return self._schema_check(value)
        except Exception:
            logger.debug("Check for %r raised; treating as mismatch", self.description, exc_info=True)
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.description!r})"


def is_runtime_type(value: Any) -> bool:
    return isinstance(value, RuntimeType)


def Type(
    description_or_schema: Any,
    predicate_or_schema_or_example: Any = MISSING,
    example: Any = MISSING,
    default: Any = MISSING,
) -> RuntimeType:
    """
    Create a RuntimeType.

    Args:
        description_or_schema: description string, or a schema for the
            self-describing form
        predicate_or_schema_or_example: predicate (a class means isinstance),
            schema, or example value
        example: example value for documentation and implicit testing
        default: default value; the simple example form uses the example

    Raises:
        ValueError: if a description is given with no way to validate
    """
    if not isinstance(description_or_schema, str):
        schema = schema_of(description_or_schema)
        return RuntimeType(description=schema_to_description(schema), schema=schema)

    description = description_or_schema
    second = predicate_or_schema_or_example

    if inspect.isclass(second):
        klass = second
        return RuntimeType(description, predicate=lambda v: isinstance(v, klass), example=example, default=default)

    if callable(second) and not is_schema(second):
        schema = infer_schema(example) if example is not MISSING else None
        return RuntimeType(description, predicate=second, schema=schema, example=example, default=default)

    if second is MISSING and example is not MISSING:
        return RuntimeType(description, schema=infer_schema(example), example=example, default=default)

    if second is not MISSING and is_schema(second):
        return RuntimeType(description, schema=schema_of(second), example=example, default=default)

    if second is not MISSING:
        # Simple form: the example doubles as the default
        return RuntimeType(
            description,
            schema=infer_schema(second),
            example=second,
            default=second if default is MISSING else default,
        )

    raise ValueError("Type(description) requires a predicate, schema, or example")
