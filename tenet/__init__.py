"""tenet: runtime contract enforcement for declared function signatures

Functions carry declarative parameter and return contracts. Wrapping a
function enforces its contract on every call and reports violations as
error values instead of raised exceptions: an error handed to a wrapped
function is returned unchanged, so failures flow through call chains
without any intermediate step acting on them.

Responsibilities:
    - Runtime type model and combinators
    - Structural equality
    - Argument and return validation
    - Function and class wrapping under a configurable safety policy
    - Bounded debug call stacks
    - Extension methods for existing types

Interactions:
    - Metadata producers attach FunctionMeta (or its dict form) to functions
    - Client code through the module-level API bound to the shared runtime
    - Isolated runtimes through create_runtime()
    - jsonschema for schema-based types
    - Logging system for diagnostics

Cross-cutting Concerns:
    Thread Safety:
        - Configuration and registries are guarded by a per-instance lock
        - The call stack and unsafe depth model one logical thread; use one
          runtime per concurrent thread of control

    Error Handling:
        - Contract failures are ContractError values, returned not raised
        - Misuse (bad configuration, malformed types) raises TenetError,
          ValueError or TypeError immediately

    Logging:
        - Module-level loggers, no handlers configured by the library

    Performance:
        - Functions that need no checks are returned unwrapped
"""

from tenet.core.equality import EQUALS, Is, IsNot
from tenet.core.errors import (
    CompositeError,
    ConfigurationError,
    ContractError,
    ExtensionNotFoundError,
    FaultError,
    MissingParameterError,
    TenetError,
    TypeMismatchError,
    compose_errors,
    error,
    is_error,
)
from tenet.core.meta import FunctionMeta, Loc, ParamMeta, ReturnMeta, get_meta
from tenet.core.values import MISSING, is_native_type, type_of
from tenet.runtime.classes import WrappedClass
from tenet.runtime.config import RuntimeConfig, SafetyLevel
from tenet.runtime.instance import VERSION, RuntimeInstance, create_runtime
from tenet.runtime.shared import (
    call_extension,
    check_type,
    configure,
    declare_parents,
    enter_unsafe,
    exit_unsafe,
    get_config,
    get_runtime,
    get_stack,
    install_runtime,
    is_unsafe_mode,
    pop_stack,
    push_stack,
    register_extension,
    register_type,
    reset_runtime,
    resolve_extension,
    resolve_type,
    unsafe,
    validate_args,
    wrap,
    wrap_class,
)
from tenet.types import (
    Enum,
    Generic,
    LegalDate,
    Nullable,
    Optional,
    RuntimeType,
    TArray,
    TBoolean,
    TEmail,
    TInteger,
    TNonEmptyString,
    TNumber,
    TPair,
    TPositiveInt,
    TRecord,
    TString,
    TUrl,
    TUuid,
    Timestamp,
    Type,
    TypeDescriptor,
    Union,
)

__version__ = VERSION

# Producer-side spellings
typeOf = type_of
isError = is_error
checkType = check_type
validateArgs = validate_args
wrapClass = wrap_class
createRuntime = create_runtime
resetRuntime = reset_runtime
getConfig = get_config
getStack = get_stack
