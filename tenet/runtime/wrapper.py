# tenet/runtime/wrapper.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Function wrapping.

wrap() runs in two phases. The build phase runs once: it attaches the
contract to the function, decides whether a guard is needed at all and, if
not, hands back the original function untouched. The call phase runs on every
invocation of a guarded function:

    1. inside an unsafe scope         -> call through, no checks
    2. nothing to check this call     -> call through
    3. first argument is an error     -> return it unchanged
    4. validate all inputs            -> any argument that is an error is
                                         returned unchanged, otherwise a
                                         composite error on failure
    5. push stack, call, pop stack    -> exceptions become FaultError values
    6. validate the return value      -> error on mismatch

Async functions are not awaited: the coroutine they return is validated as
an opaque value against the declared return type.

Errors never escape as raised exceptions except BaseExceptions that are not
Exceptions (KeyboardInterrupt, SystemExit).
"""

import functools
import logging
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional, Sequence, Tuple

from tenet.core.errors import ContractError, FaultError, compose_errors, is_error
from tenet.core.meta import FunctionMeta, ReturnMeta, attach_meta, get_meta
from tenet.core.validation import check_type, collect_arg_errors
from tenet.core.values import MISSING
from tenet.runtime.config import SafetyLevel

if TYPE_CHECKING:
    from tenet.runtime.instance import RuntimeInstance

logger = logging.getLogger(__name__)

ANONYMOUS = "anonymous"


def display_name(fn: Callable, meta: FunctionMeta) -> str:
    name = getattr(fn, "__name__", "") or ""
    if name == "<lambda>":
        name = ""
    return name or meta.name or ANONYMOUS


def needs_guard(meta: FunctionMeta, level: SafetyLevel) -> bool:
    """Build-phase decision: does this function need a validating wrapper?"""
    if meta.polymorphic:
        # Dispatchers route and validate on their own
        return False
    if meta.safe or meta.safe_return:
        return True
    if meta.returns is not None and meta.returns.safe:
        return True
    if meta.unsafe:
        return False
    return level is not SafetyLevel.NONE


def should_check_inputs(meta: FunctionMeta, level: SafetyLevel) -> bool:
    if meta.safe:
        return True
    if meta.unsafe:
        return False
    return level is not SafetyLevel.NONE


def should_check_outputs(meta: FunctionMeta, returns: Optional[ReturnMeta], level: SafetyLevel) -> bool:
    if returns is None:
        return False
    if meta.safe_return or returns.safe:
        return True
    if meta.unsafe_return or returns.unsafe_return or meta.unsafe:
        return False
    return level is SafetyLevel.ALL


def bind_arguments(
    param_names: Sequence[str], args: Tuple[Any, ...], kwargs: Dict[str, Any]
) -> Dict[str, Any]:
    """
    Map call arguments to declared parameter names for validation.

    A lone dict argument whose keys are all declared parameter names is the
    named-argument convention; keyword arguments are matched by name.
    """
    if not kwargs and len(args) == 1 and type(args[0]) is dict:
        bag = args[0]
        if bag and all(key in param_names for key in bag):
            return dict(bag)
    bound = dict(zip(param_names, args))
    bound.update(kwargs)
    return bound


def _first_argument(args: Tuple[Any, ...], kwargs: Dict[str, Any]) -> Any:
    if args:
        return args[0]
    return next(iter(kwargs.values()), MISSING)


def wrap(runtime: "RuntimeInstance", fn: Callable, meta: Any = None) -> Callable:
    """
    Wrap fn so calls are checked against its contract.

    Args:
        runtime: the runtime whose configuration and call stack apply
        fn: the function to wrap
        meta: FunctionMeta or its dict form; defaults to the contract
            already attached to fn

    Returns:
        A guarded function, or fn itself when no guard is needed.
    """
    meta = FunctionMeta.coerce(meta if meta is not None else get_meta(fn))
    try:
        attach_meta(fn, meta)
    except AttributeError:
        logger.debug("Cannot attach contract to %r", fn)

    config = runtime.config
    if not needs_guard(meta, config.safety):
        return fn

    param_names = meta.param_names
    returns = meta.returns
    name = display_name(fn, meta)
    return_path = f"{name}()"
    resolver = runtime.resolve_type

    if config.require_return_types and returns is None:
        logger.warning("Function %s declares no return type", name)

    def stamp(err: Any) -> Any:
        if runtime.config.debug and isinstance(err, ContractError):
            err.with_call_stack(runtime.get_stack())
        return err

    @functools.wraps(fn)
    def guarded(*args: Any, **kwargs: Any) -> Any:
        if runtime.is_unsafe_mode():
            return fn(*args, **kwargs)

        config = runtime.config
        check_inputs = should_check_inputs(meta, config.safety)
        check_outputs = should_check_outputs(meta, returns, config.safety)
        if not check_inputs and not check_outputs:
            return fn(*args, **kwargs)

        first = _first_argument(args, kwargs)
        if is_error(first):
            return first

        if check_inputs:
            bound = bind_arguments(param_names, args, kwargs)
            upstream = next((value for value in bound.values() if is_error(value)), None)
            if upstream is not None:
                return upstream
            failures = collect_arg_errors(bound, meta, name, resolver)
            if failures:
                return stamp(compose_errors(failures, name))

        debug = config.debug
        if debug:
            runtime.push_stack(name)
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            logger.debug("Converted exception raised by %s", name, exc_info=True)
            fault = FaultError(str(exc) or type(exc).__name__, path=name, cause=exc)
            if debug:
                fault.call_stack = runtime.get_stack()
            return fault
        finally:
            if debug:
                runtime.pop_stack()

        if check_outputs and not is_error(result):
            if returns.defaults and isinstance(result, dict):
                result = {**returns.defaults, **result}
            failure = check_type(result, returns.type, return_path, resolver)
            if failure is not None:
                return stamp(failure)
        return result

    attach_meta(guarded, meta)
    return guarded
