"""Core module exports."""

from codedelta.core.errors import (
    CodeDeltaError,
    ConfigError,
    ErrorCode,
    InputError,
    InternalError,
    RefactorError,
)
from codedelta.core.logging import (
    clear_operation_id,
    configure_logging,
    get_logger,
    get_operation_id,
    set_operation_id,
)

__all__ = [
    # Errors
    "CodeDeltaError",
    "ConfigError",
    "ErrorCode",
    "InputError",
    "InternalError",
    "RefactorError",
    # Logging
    "clear_operation_id",
    "configure_logging",
    "get_logger",
    "get_operation_id",
    "set_operation_id",
]
