"""
Fatal error classification.

Classifies an error by membership in a fixed set of unrecoverable runtime
conditions. Classification is advisory: nothing here terminates the process.
"""

from enum import Enum
from typing import Dict, Optional, Type

from .exceptions import FatalRuntimeError


class FatalCondition(str, Enum):
    """Runtime conditions after which continued execution is unsafe."""

    MEMORY_EXHAUSTION = "memory_exhaustion"
    STACK_EXHAUSTION = "stack_exhaustion"
    CORRUPTED_EXECUTABLE_IMAGE = "corrupted_executable_image"
    INVALID_PROGRAM_STATE = "invalid_program_state"
    EXECUTION_CONTEXT_UNLOADED = "execution_context_unloaded"
    FORCED_THREAD_TERMINATION = "forced_thread_termination"


# First matching isinstance check wins.
BUILTIN_FATAL_ERRORS: Dict[Type[BaseException], FatalCondition] = {
    MemoryError: FatalCondition.MEMORY_EXHAUSTION,
    RecursionError: FatalCondition.STACK_EXHAUSTION,
    SystemError: FatalCondition.INVALID_PROGRAM_STATE,
}


def fatal_condition(error: Optional[BaseException]) -> Optional[FatalCondition]:
    """
    Get the fatal condition an error belongs to.

    Args:
        error: Error to classify, may be None

    Returns:
        The matching FatalCondition, or None if the error is not fatal
    """
    if error is None:
        return None

    if isinstance(error, FatalRuntimeError):
        return error.condition

    for error_type, condition in BUILTIN_FATAL_ERRORS.items():
        if isinstance(error, error_type):
            return condition

    return None


def is_fatal(error: Optional[BaseException]) -> bool:
    """
    Check if an error is fatal and the process should not continue.

    Never raises. Returns False for None and for any unrecognized error.
    """
    return fatal_condition(error) is not None
