# tenet/runtime/config.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""Runtime configuration."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Union

from tenet.core.errors import ConfigurationError

DEFAULT_MAX_STACK_SIZE = 100

# Producer-side spellings accepted by configure()
_ALIASES = {
    "requireReturnTypes": "require_return_types",
    "maxStackSize": "max_stack_size",
}


class SafetyLevel(Enum):
    """
    Process-wide default validation policy.

    Per-function flags (safe, unsafe, safe_return, unsafe_return) always
    override the level.
    """

    NONE = "none"  # Validate nothing unless a function opts in
    INPUTS = "inputs"  # Validate arguments only
    ALL = "all"  # Validate arguments and return values

    @classmethod
    def coerce(cls, value: Union[str, "SafetyLevel"]) -> "SafetyLevel":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            choices = ", ".join(level.value for level in cls)
            raise ConfigurationError(f"Invalid safety level {value!r}; expected one of: {choices}") from None


@dataclass(frozen=True)
class RuntimeConfig:
    debug: bool = False
    safety: SafetyLevel = SafetyLevel.INPUTS
    require_return_types: bool = False
    max_stack_size: int = DEFAULT_MAX_STACK_SIZE

    def __post_init__(self) -> None:
        object.__setattr__(self, "safety", SafetyLevel.coerce(self.safety))
        if isinstance(self.max_stack_size, bool) or not isinstance(self.max_stack_size, int):
            raise ConfigurationError("max_stack_size must be an integer")
        if self.max_stack_size < 1:
            raise ConfigurationError("max_stack_size must be at least 1")

    def updated(self, **changes: Any) -> "RuntimeConfig":
        """
        Return a copy with the given fields replaced. None values are ignored
        so callers can pass optional arguments straight through.

        Raises:
            ConfigurationError: on unknown keys or invalid values
        """
        normalized: Dict[str, Any] = {}
        for key, value in changes.items():
            key = _ALIASES.get(key, key)
            if key not in self.__dataclass_fields__:
                raise ConfigurationError(f"Unknown configuration key: {key!r}")
            if value is not None:
                normalized[key] = value
        return replace(self, **normalized)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "debug": self.debug,
            "safety": self.safety.value,
            "require_return_types": self.require_return_types,
            "max_stack_size": self.max_stack_size,
        }
