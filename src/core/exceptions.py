"""
================================================================================
FILE: src/core/exceptions.py
================================================================================

PURPOSE:
    Business error type for the hosting application. A BusinessError marks an
    application-level failure (as opposed to a lower-level system failure)
    and records which module raised it, so a higher layer can decide what to
    do (log, retry, abort) based on where it came from.

WORKFLOW:
    1. Caller detects a failure and raises BusinessError(message, module_name)
    2. The constructor captures the call stack, starting at the raiser
    3. The error propagates unchanged until some outer layer handles it

IMPORTS:
    - None (only Python builtins)

INPUTS:
    - Exception message (str)
    - Name of the raising module (str)

OUTPUTS:
    - BusinessError instances (raised by application code)

KEY FACTS:
    - NO imports from src or config modules (prevents circular dependencies)
    - Classification is an explicit ErrorKind tag, not the class name
    - Fields are read-only once the error is built
    - The captured stack never contains the error's own constructor frames
    - Nothing in this module catches exceptions
"""

# ================================================================================
# IMPORTS
# ================================================================================

import sys
import traceback
from enum import Enum
from typing import Any, Dict

# ================================================================================
# ERROR KINDS
# ================================================================================

class ErrorKind(str, Enum):
    """Classification tags carried by application errors."""
    BUSINESS_ERROR = "BusinessError"

# ================================================================================
# BUSINESS ERROR
# ================================================================================

class BusinessError(Exception):
    """
    Application-level failure tagged with the module that raised it.

    Attributes:
        message (str): Human-readable error message
        module_name (str): Identifier of the raising subsystem
        kind (ErrorKind): Classification tag (always BUSINESS_ERROR)
        stack_trace (StackSummary): Call stack at the raise site

    Example:
        raise BusinessError("Order total is negative", "billing")
    """

    KIND = ErrorKind.BUSINESS_ERROR

    def __init__(self, message: str, module_name: str):
        super().__init__(message)
        self._message = message
        self._module_name = module_name
        self._stack_trace = self._capture_stack()

    def _capture_stack(self) -> traceback.StackSummary:
        # Skip every frame that is still building this instance, so subclass
        # __init__ chains are dropped too.
        frame = sys._getframe(1)
        while frame is not None and frame.f_locals.get("self") is self:
            frame = frame.f_back
        return traceback.extract_stack(frame)

    @property
    def message(self) -> str:
        return self._message

    @property
    def module_name(self) -> str:
        return self._module_name

    @property
    def kind(self) -> ErrorKind:
        return self.KIND

    @property
    def stack_trace(self) -> traceback.StackSummary:
        return self._stack_trace

    def __str__(self) -> str:
        if not self._module_name:
            return self._message
        return f"[{self._module_name}] {self._message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(message={self._message!r}, "
            f"module_name={self._module_name!r})"
        )

    def __reduce__(self):
        # Restored errors keep the raise-site stack; __init__ is not re-run.
        frames = [
            (frame.filename, frame.lineno, frame.name, frame.line)
            for frame in self._stack_trace
        ]
        state = {
            key: value for key, value in self.__dict__.items() if key != "_stack_trace"
        }
        return (_restore_business_error, (self.__class__, self.args, state, frames))

    def format_stack(self) -> str:
        """Render the captured call stack the way tracebacks print it."""
        return "".join(self._stack_trace.format())

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dict for logging and JSON responses"""
        return {
            "error": self.kind.value,
            "module": self._module_name,
            "message": self._message,
        }


def _restore_business_error(cls, args, state, frames):
    """Unpickle hook for BusinessError and its subclasses."""
    error = cls.__new__(cls, *args)
    error.args = args
    error.__dict__.update(state)
    error._stack_trace = traceback.StackSummary.from_list(frames)
    return error
