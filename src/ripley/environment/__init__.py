"""Ripley environment: configuration, errors and debug logging."""

from ripley.environment.debug import disable_debug_log, enable_debug_log
from ripley.environment.exceptions import (
    CompileError,
    ErrorCode,
    MalformedSpecialForm,
    RipleyError,
    UndefinedError,
    UnsupportedNodeShape,
)
from ripley.environment.core import Environment

__all__ = [
    "CompileError",
    "Environment",
    "ErrorCode",
    "MalformedSpecialForm",
    "RipleyError",
    "UndefinedError",
    "UnsupportedNodeShape",
    "disable_debug_log",
    "enable_debug_log",
]
