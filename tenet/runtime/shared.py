# tenet/runtime/shared.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
The process-wide shared runtime.

Several copies of tenet can end up loaded in one process (vendored copies,
plugin environments). They agree on a single authoritative runtime stored on
builtins.__tenet_runtime__. install_runtime() negotiates with whatever is
already there:

    nothing installed              -> install ours
    malformed prior (bad version)  -> overwrite, warning
    same version                   -> reuse the prior
    same major version             -> keep the newer, info
    different major version        -> keep the newer, warning

The module-level functions below are thin bindings over get_runtime().
"""

import builtins
import logging
import re
import threading
from typing import Any, Callable, ContextManager, Dict, List, Mapping, Optional, Sequence, Tuple

from tenet.core.errors import ConfigurationError, ErrorValue
from tenet.core.meta import Loc, TypeSpec
from tenet.extensions.registry import TypeKey
from tenet.runtime.classes import WrappedClass
from tenet.runtime.classes import wrap_class as _wrap_class
from tenet.runtime.config import RuntimeConfig
from tenet.runtime.instance import VERSION, RuntimeInstance
from tenet.types.base import RuntimeType

logger = logging.getLogger(__name__)

SLOT = "__tenet_runtime__"

_VERSION_RE = re.compile(r"^(\d+)\.(\d+)\.(\d+)$")
_install_lock = threading.Lock()
_negotiated = False


def parse_version(version: Any) -> Optional[Tuple[int, int, int]]:
    """Parse "MAJOR.MINOR.PATCH"; None for anything else."""
    if not isinstance(version, str):
        return None
    match = _VERSION_RE.match(version)
    if match is None:
        return None
    major, minor, patch = (int(part) for part in match.groups())
    return major, minor, patch


def _install(runtime: RuntimeInstance) -> RuntimeInstance:
    setattr(builtins, SLOT, runtime)
    return runtime


def install_runtime(runtime: Optional[RuntimeInstance] = None) -> RuntimeInstance:
    """
    Install runtime (or a fresh default one) as the shared runtime, unless
    a compatible or newer one is already installed.

    Returns:
        The runtime that is authoritative after negotiation.

    Raises:
        ConfigurationError: if runtime carries a malformed version
    """
    global _negotiated
    ours = parse_version(runtime.version if runtime is not None else VERSION)
    if ours is None:
        raise ConfigurationError(f"Runtime version {runtime.version!r} is not MAJOR.MINOR.PATCH")

    with _install_lock:
        _negotiated = True
        prior = getattr(builtins, SLOT, None)
        if prior is None:
            return _install(runtime or RuntimeInstance())
        if prior is runtime:
            return prior

        prior_version = getattr(prior, "version", None)
        theirs = parse_version(prior_version)
        if theirs is None:
            logger.warning("Replacing installed runtime with malformed version %r", prior_version)
            return _install(runtime or RuntimeInstance())
        if theirs == ours:
            return prior

        candidate_version = ".".join(str(part) for part in ours)
        newer = candidate_version if ours > theirs else prior_version
        if ours[0] == theirs[0]:
            logger.info("Runtime versions %s and %s both loaded; using %s", prior_version, candidate_version, newer)
        else:
            logger.warning(
                "Runtime major versions differ (%s vs %s); using %s, which may be incompatible",
                prior_version,
                candidate_version,
                newer,
            )
        if ours > theirs:
            return _install(runtime or RuntimeInstance())
        return prior


def get_runtime() -> RuntimeInstance:
    """The shared runtime, installed on first use."""
    if _negotiated:
        prior = getattr(builtins, SLOT, None)
        if prior is not None and parse_version(getattr(prior, "version", None)) is not None:
            return prior
    return install_runtime()


# ---------------------------------------------------------------------------
# Bindings over the shared runtime
# ---------------------------------------------------------------------------
def configure(**changes: Any) -> RuntimeConfig:
    return get_runtime().configure(**changes)


def get_config() -> Dict[str, Any]:
    return get_runtime().get_config()


def reset_runtime() -> None:
    get_runtime().reset()


def get_stack() -> List[str]:
    return get_runtime().get_stack()


def push_stack(name: str) -> None:
    get_runtime().push_stack(name)


def pop_stack() -> Optional[str]:
    return get_runtime().pop_stack()


def enter_unsafe() -> None:
    get_runtime().enter_unsafe()


def exit_unsafe() -> None:
    get_runtime().exit_unsafe()


def is_unsafe_mode() -> bool:
    return get_runtime().is_unsafe_mode()


def unsafe() -> ContextManager[RuntimeInstance]:
    return get_runtime().unsafe()


def wrap(fn: Callable, meta: Any = None) -> Callable:
    return get_runtime().wrap(fn, meta)


def wrap_class(cls: Any) -> WrappedClass:
    return _wrap_class(cls)


def register_extension(type_key: TypeKey, method_name: str, fn: Callable[..., Any]) -> None:
    get_runtime().register_extension(type_key, method_name, fn)


def declare_parents(type_key: TypeKey, parents: Sequence[TypeKey]) -> None:
    get_runtime().declare_parents(type_key, parents)


def resolve_extension(value: Any, method_name: str) -> Optional[Callable[..., Any]]:
    return get_runtime().resolve_extension(value, method_name)


def call_extension(value: Any, method_name: str, *args: Any, **kwargs: Any) -> Any:
    return get_runtime().call_extension(value, method_name, *args, **kwargs)


def register_type(name: str, runtime_type: RuntimeType) -> RuntimeType:
    return get_runtime().register_type(name, runtime_type)


def resolve_type(name: str) -> Optional[RuntimeType]:
    return get_runtime().resolve_type(name)


def check_type(
    value: Any, expected: TypeSpec, path: Optional[str] = None, loc: Optional[Loc] = None
) -> Optional[ErrorValue]:
    return get_runtime().check_type(value, expected, path, loc)


def validate_args(args: Mapping[str, Any], meta: Any, func_name: Optional[str] = None) -> Optional[ErrorValue]:
    return get_runtime().validate_args(args, meta, func_name)
