# tests/unit/core/test_validation.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""Tests for check_type and validate_args."""

from collections import OrderedDict
from datetime import datetime

import pytest

from tenet.core.errors import MissingParameterError, TypeMismatchError, error
from tenet.core.meta import Loc
from tenet.core.validation import check_type, collect_arg_errors, describe_spec, validate_args
from tenet.core.values import MISSING
from tenet.types import TArray, TNumber, TString, Type, TypeDescriptor


class Animal:
    pass


class Cat(Animal):
    pass


class Settings(dict):
    pass


class Steps(list):
    pass


# -----------------------------------------------------------------------------
# CHECK_TYPE TESTS
# -----------------------------------------------------------------------------


def test_check_type_success_returns_none():
    assert check_type("x", TString) is None
    assert check_type(3, "number") is None
    assert check_type({"a": 1}, {"kind": "object"}) is None


def test_check_type_message_with_path():
    failure = check_type(42, TString, "greet.name")
    assert isinstance(failure, TypeMismatchError)
    assert failure.message == "Expected string for 'greet.name', got number"
    assert failure.path == "greet.name"
    assert failure.expected == "string"
    assert failure.actual == "number"


def test_check_type_message_without_path():
    failure = check_type(None, TNumber)
    assert failure.message == "Expected number but got null"


def test_check_type_passes_errors_through():
    upstream = error("earlier failure")
    assert check_type(upstream, TString, "f.x") is upstream


def test_check_type_carries_loc():
    failure = check_type(1, "string", "f.a", loc=Loc(4, 10))
    assert failure.loc == Loc(4, 10)


@pytest.mark.parametrize(
    "value,name,ok",
    [
        ("a", "string", True),
        (1.5, "number", True),
        (True, "number", False),
        (2.0, "integer", True),
        (2.5, "integer", False),
        ({}, "object", True),
        (Cat(), "object", True),
        ([], "object", False),
        ("a", "object", False),
        ([], "array", True),
        (None, "null", True),
        (MISSING, "undefined", True),
        (object(), "any", True),
        (Cat(), "Cat", True),
        (Cat(), "Animal", True),
        (Animal(), "Cat", False),
        (datetime(2024, 1, 1), "datetime", True),
        (Settings(), "object", True),
        (OrderedDict(), "object", True),
        (Settings(), "Settings", True),
        (Settings(), "array", False),
        (Steps([1]), "array", True),
        (Steps(), "object", False),
        (Steps(), "Steps", True),
    ],
)
def test_named_types(value, name, ok):
    assert (check_type(value, name) is None) == ok


def test_named_type_through_resolver():
    Even = Type("even number", lambda v: isinstance(v, int) and v % 2 == 0)
    registry = {"Even": Even}
    assert check_type(4, "Even", resolver=registry.get) is None
    failure = check_type(3, "Even", "f.n", resolver=registry.get)
    assert failure.expected == "Even"


def test_descriptor_specs():
    spec = {"kind": "array", "items": {"kind": "string"}}
    assert check_type(["a", "b"], spec) is None
    failure = check_type(["a", 1], spec, "f.tags")
    assert failure.expected == "array of string"
    assert check_type(["a"], TypeDescriptor.from_dict(spec)) is None


def test_descriptor_specs_accept_builtin_subclasses():
    assert check_type(Steps(["a"]), {"kind": "array", "items": {"kind": "string"}}) is None
    assert check_type(Settings(name="x"), {"kind": "object", "shape": {"name": {"kind": "string"}}}) is None
    assert check_type(Steps(), {"kind": "object"}) is not None


def test_unsupported_spec_raises():
    with pytest.raises(TypeError):
        check_type(1, 42)


def test_describe_spec():
    assert describe_spec(TArray(TNumber)) == "array of number"
    assert describe_spec({"kind": "string", "nullable": True}) == "string or null"
    assert describe_spec("Cat") == "Cat"


# -----------------------------------------------------------------------------
# VALIDATE_ARGS TESTS
# -----------------------------------------------------------------------------


def test_validate_args_success(greet_meta):
    assert validate_args({"name": "Ada", "times": 2}, greet_meta, "greet") is None


def test_validate_args_first_failure_wins(greet_meta):
    failure = validate_args({"name": 1, "times": "x"}, greet_meta, "greet")
    assert failure.path == "greet.name"


def test_validate_args_missing_required(greet_meta):
    failure = validate_args({"name": "Ada"}, greet_meta, "greet")
    assert isinstance(failure, MissingParameterError)
    assert failure.message == "Missing required parameter 'times'"
    assert failure.actual == "undefined"


def test_validate_args_optional_params_may_be_absent():
    meta = {"params": {"a": {"type": "number", "required": False}}}
    assert validate_args({}, meta) is None
    assert validate_args({"a": MISSING}, meta) is None
    assert validate_args({"a": "x"}, meta).path == "a"


def test_validate_args_returns_upstream_error_as_is(greet_meta):
    upstream = error("upstream")
    assert validate_args({"name": "Ada", "times": upstream}, greet_meta, "greet") is upstream
    assert validate_args({"name": 1, "times": upstream}, greet_meta, "greet") is upstream


def test_collect_arg_errors_keeps_declaration_order(greet_meta):
    failures = collect_arg_errors({"times": "x", "name": 1}, greet_meta, "greet")
    assert [failure.path for failure in failures] == ["greet.name", "greet.times"]
