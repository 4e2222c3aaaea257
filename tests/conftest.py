# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import builtins

import pytest

from tenet.core.meta import FunctionMeta
from tenet.runtime import shared
from tenet.runtime.instance import RuntimeInstance, create_runtime
from tenet.types import TNumber, TString


def pytest_configure(config):
    """Register custom marks."""
    config.addinivalue_line("markers", "property: mark test as a property-based test")


@pytest.fixture(autouse=True)
def shared_runtime(monkeypatch):
    """A fresh shared runtime per test; whatever was installed is restored afterwards."""
    monkeypatch.delattr(builtins, shared.SLOT, raising=False)
    monkeypatch.setattr(shared, "_negotiated", False)
    return shared.get_runtime()


@pytest.fixture
def runtime() -> RuntimeInstance:
    """An isolated runtime with default configuration."""
    return create_runtime()


@pytest.fixture
def debug_runtime() -> RuntimeInstance:
    """An isolated runtime with debug call stacks enabled."""
    return create_runtime(debug=True)


@pytest.fixture
def greet_meta() -> FunctionMeta:
    """Contract for greet(name: str, times: number) -> str."""
    return FunctionMeta.coerce(
        {
            "params": {
                "name": {"type": TString, "required": True},
                "times": {"type": TNumber, "required": True},
            },
            "returns": {"type": TString},
        }
    )


@pytest.fixture
def greet():
    def greet(name, times):
        return " ".join([f"Hello, {name}"] * int(times))

    return greet
