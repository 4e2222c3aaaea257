"""
Runtime package for contract enforcement.

Architecture:
- config.py: RuntimeConfig and SafetyLevel
- stack.py: bounded debug call stack
- wrapper.py: function wrapping and the safety matrix
- classes.py: class wrapping
- instance.py: isolated RuntimeInstance and create_runtime()
- shared.py: versioned process-wide runtime and module-level bindings

Design Patterns:
- Decorator Pattern for wrapped functions
- Proxy Pattern for wrapped classes
- Factory Pattern for isolated runtimes
- Singleton Pattern for the shared runtime

Cross-cutting:
- Errors are returned as values across the wrapper boundary
- Configuration and registries are guarded by a per-instance lock
"""

from .classes import WrappedClass, wrap_class
from .config import DEFAULT_MAX_STACK_SIZE, RuntimeConfig, SafetyLevel
from .instance import VERSION, RuntimeInstance, create_runtime
from .stack import CallStack
from .shared import get_runtime, install_runtime

__all__ = [
    "DEFAULT_MAX_STACK_SIZE",
    "VERSION",
    "CallStack",
    "RuntimeConfig",
    "RuntimeInstance",
    "SafetyLevel",
    "WrappedClass",
    "create_runtime",
    "get_runtime",
    "install_runtime",
    "wrap_class",
]
