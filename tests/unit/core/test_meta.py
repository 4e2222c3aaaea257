# tests/unit/core/test_meta.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""Tests for function contract metadata."""

import pytest

from tenet.core.meta import META_ATTR, FunctionMeta, Loc, ParamMeta, ReturnMeta, attach_meta, get_meta
from tenet.core.values import MISSING
from tenet.types import TNumber, TString


def test_loc_coerce():
    assert Loc.coerce(None) is None
    loc = Loc.coerce({"start": 3, "end": 9, "line": 2})
    assert loc == Loc(3, 9, 2)
    assert Loc.coerce(loc) is loc
    assert loc.to_dict() == {"start": 3, "end": 9, "line": 2}
    assert Loc(0, 1).to_dict() == {"start": 0, "end": 1}


def test_param_coerce_forms():
    full = ParamMeta.coerce({"type": TString, "required": False, "default": "x", "loc": {"start": 0, "end": 4}})
    assert full.type is TString
    assert not full.required
    assert full.default == "x"
    assert full.loc == Loc(0, 4)

    bare = ParamMeta.coerce("number")
    assert bare.type == "number"
    assert bare.required
    assert bare.default is MISSING


def test_return_coerce_accepts_camel_case():
    returns = ReturnMeta.coerce({"type": TNumber, "unsafeReturn": True, "defaults": {"ok": True}})
    assert returns.unsafe_return
    assert dict(returns.defaults) == {"ok": True}
    assert ReturnMeta.coerce(None) is None
    assert ReturnMeta.coerce(TNumber).type is TNumber


def test_function_meta_preserves_declaration_order():
    meta = FunctionMeta.coerce({"params": {"b": "number", "a": "string", "c": "any"}})
    assert meta.param_names == ("b", "a", "c")
    assert isinstance(meta.params["a"], ParamMeta)


def test_function_meta_is_read_only():
    meta = FunctionMeta.coerce({"params": {"a": "number"}})
    with pytest.raises(TypeError):
        meta.params["b"] = ParamMeta("string")
    with pytest.raises(AttributeError):
        meta.safe = True


def test_function_meta_coerce_flags():
    meta = FunctionMeta.coerce({"safeReturn": True, "unsafeReturn": False, "unsafe": True, "name": "f"})
    assert meta.safe_return
    assert meta.unsafe
    assert meta.name == "f"
    assert FunctionMeta.coerce(None) == FunctionMeta()
    assert FunctionMeta.coerce(meta) is meta


def test_param_path():
    meta = FunctionMeta.coerce(
        {"params": {"a": {"type": "number", "loc": {"start": 0, "end": 1, "line": 7}}, "b": "string"}, "source": "m.tj"}
    )
    assert meta.param_path("f", "a") == "m.tj:7:f.a"
    assert meta.param_path("f", "b") == "f.b"
    assert FunctionMeta.coerce({"params": {"a": "number"}}).param_path("f", "a") == "f.a"


def test_attach_and_get():
    def f():
        pass

    assert get_meta(f) is None
    meta = FunctionMeta()
    attach_meta(f, meta)
    assert getattr(f, META_ATTR) is meta
    assert get_meta(f) is meta
