# tenet/runtime/instance.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Runtime instances.

A RuntimeInstance owns every piece of mutable enforcement state: its
configuration, the debug call stack, the unsafe-scope depth, the extension
registry and the table of named types. Instances never share any of it, so a
library or a concurrent logical thread can run under its own policy by
creating one with create_runtime().
"""

import logging
import threading
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Sequence

from tenet.core.errors import ErrorValue
from tenet.core.meta import Loc, TypeSpec
from tenet.core.validation import check_type as _check_type
from tenet.core.validation import validate_args as _validate_args
from tenet.extensions.registry import ExtensionRegistry, TypeKey
from tenet.runtime.classes import WrappedClass, wrap_class
from tenet.runtime.config import RuntimeConfig
from tenet.runtime.stack import CallStack
from tenet.runtime.wrapper import wrap as _wrap
from tenet.types.base import RuntimeType

logger = logging.getLogger(__name__)

VERSION = "0.1.0"


class RuntimeInstance:
    """
    Isolated enforcement state plus the operations that act on it.

    Runtime Invariants:
    1. unsafe depth never drops below zero
    2. the call stack never exceeds config.max_stack_size
    3. config is replaced as a whole, never mutated in place
    """

    def __init__(self, config: Optional[RuntimeConfig] = None, version: str = VERSION) -> None:
        self.version = version
        self._config = config or RuntimeConfig()
        self._lock = threading.RLock()
        self._stack = CallStack(self._config.max_stack_size)
        self._unsafe_depth = 0
        self._extensions = ExtensionRegistry()
        self._types: Dict[str, RuntimeType] = {}

    def __repr__(self) -> str:
        return f"RuntimeInstance(version={self.version!r}, config={self._config!r})"

    # -----------------------------------------------------------------------
    # Configuration
    # -----------------------------------------------------------------------
    @property
    def config(self) -> RuntimeConfig:
        return self._config

    def configure(self, **changes: Any) -> RuntimeConfig:
        """
        Update configuration. Unspecified keys keep their current value.

        Raises:
            ConfigurationError: on unknown keys or invalid values
        """
        with self._lock:
            config = self._config.updated(**changes)
            self._stack.resize(config.max_stack_size)
            self._config = config
        logger.debug("Runtime configured: %s", config.to_dict())
        return config

    def get_config(self) -> Dict[str, Any]:
        return self._config.to_dict()

    def reset(self) -> None:
        """Restore defaults and drop all stack, scope and registry state."""
        with self._lock:
            self._config = RuntimeConfig()
            self._stack = CallStack(self._config.max_stack_size)
            self._unsafe_depth = 0
            self._extensions.clear()
            self._types.clear()

    # -----------------------------------------------------------------------
    # Call stack
    # -----------------------------------------------------------------------
    def get_stack(self) -> List[str]:
        return self._stack.snapshot()

    def push_stack(self, name: str) -> None:
        self._stack.push(name)

    def pop_stack(self) -> Optional[str]:
        return self._stack.pop()

    # -----------------------------------------------------------------------
    # Unsafe scopes
    # -----------------------------------------------------------------------
    def enter_unsafe(self) -> None:
        self._unsafe_depth += 1

    def exit_unsafe(self) -> None:
        if self._unsafe_depth > 0:
            self._unsafe_depth -= 1

    def is_unsafe_mode(self) -> bool:
        return self._unsafe_depth > 0

    @property
    def unsafe_depth(self) -> int:
        return self._unsafe_depth

    @contextmanager
    def unsafe(self) -> Iterator["RuntimeInstance"]:
        """Run a block with all validation skipped; scopes nest."""
        self.enter_unsafe()
        try:
            yield self
        finally:
            self.exit_unsafe()

    # -----------------------------------------------------------------------
    # Wrapping
    # -----------------------------------------------------------------------
    def wrap(self, fn: Callable, meta: Any = None) -> Callable:
        return _wrap(self, fn, meta)

    def wrap_class(self, cls: Any) -> WrappedClass:
        return wrap_class(cls)

    # -----------------------------------------------------------------------
    # Extensions
    # -----------------------------------------------------------------------
    @property
    def extensions(self) -> ExtensionRegistry:
        return self._extensions

    def register_extension(self, type_key: TypeKey, method_name: str, fn: Callable[..., Any]) -> None:
        self._extensions.register(type_key, method_name, fn)

    def declare_parents(self, type_key: TypeKey, parents: Sequence[TypeKey]) -> None:
        self._extensions.declare_parents(type_key, parents)

    def resolve_extension(self, value: Any, method_name: str) -> Optional[Callable[..., Any]]:
        return self._extensions.resolve(value, method_name)

    def call_extension(self, value: Any, method_name: str, *args: Any, **kwargs: Any) -> Any:
        return self._extensions.call(value, method_name, *args, **kwargs)

    # -----------------------------------------------------------------------
    # Named types
    # -----------------------------------------------------------------------
    def register_type(self, name: str, runtime_type: RuntimeType) -> RuntimeType:
        """Make a RuntimeType resolvable by name from type specs and refs."""
        if not isinstance(runtime_type, RuntimeType):
            raise TypeError(f"register_type() expects a RuntimeType, got {type(runtime_type).__name__}")
        with self._lock:
            self._types[name] = runtime_type
        return runtime_type

    def resolve_type(self, name: str) -> Optional[RuntimeType]:
        return self._types.get(name)

    # -----------------------------------------------------------------------
    # Validation
    # -----------------------------------------------------------------------
    def check_type(
        self, value: Any, expected: TypeSpec, path: Optional[str] = None, loc: Optional[Loc] = None
    ) -> Optional[ErrorValue]:
        return _check_type(value, expected, path, self.resolve_type, loc=loc)

    def validate_args(
        self, args: Mapping[str, Any], meta: Any, func_name: Optional[str] = None
    ) -> Optional[ErrorValue]:
        return _validate_args(args, meta, func_name, self.resolve_type)


def create_runtime(**config: Any) -> RuntimeInstance:
    """
    Create a fully isolated runtime.

    Keyword arguments are applied as with configure().
    """
    return RuntimeInstance(RuntimeConfig().updated(**config))
