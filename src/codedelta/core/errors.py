"""codedelta error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Input (missing paths, wrong path shape, undecodable content)
- 4xxx: Refactor
- 9xxx: Internal
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Input (3xxx)
    INPUT_NOT_FOUND = 3001
    INPUT_INVALID_SHAPE = 3002
    INPUT_UNREADABLE = 3003

    # Refactor (4xxx)
    REFACTOR_GUARD_REJECTED = 4001
    REFACTOR_UNSUPPORTED_RULE = 4002

    # Internal (9xxx)
    INTERNAL_ERROR = 9001


@dataclass(frozen=True, slots=True)
class CodeDeltaError(Exception):
    """Base error with structured context for CLI and JSON responses."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'INPUT_NOT_FOUND')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(CodeDeltaError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class InputError(CodeDeltaError):
    """Errors about the paths handed to an operation."""

    @classmethod
    def not_found(cls, path: str) -> "InputError":
        return cls(
            code=ErrorCode.INPUT_NOT_FOUND,
            message=f"Path does not exist: {path}",
            details={"path": path},
        )

    @classmethod
    def invalid_shape(cls, path: str, expected: str) -> "InputError":
        actual = "file" if expected == "directory" else "directory"
        return cls(
            code=ErrorCode.INPUT_INVALID_SHAPE,
            message=f"Expected a {expected} but found a {actual}: {path}",
            details={"path": path, "expected": expected},
        )

    @classmethod
    def unreadable(cls, path: str, reason: str) -> "InputError":
        return cls(
            code=ErrorCode.INPUT_UNREADABLE,
            message=f"Cannot read {path} as text: {reason}",
            details={"path": path, "reason": reason},
        )


class RefactorError(CodeDeltaError):
    """Refactoring errors. A guard rejection aborts the whole call."""

    @classmethod
    def guard_rejected(cls, path: str, reason: str) -> "RefactorError":
        return cls(
            code=ErrorCode.REFACTOR_GUARD_REJECTED,
            message=f"Logic verification failed for {path}: {reason}. Refactoring aborted.",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def unsupported_rule(cls, rule: str, known: list[str]) -> "RefactorError":
        return cls(
            code=ErrorCode.REFACTOR_UNSUPPORTED_RULE,
            message=f"Unsupported refactoring rule: {rule}",
            details={"rule": rule, "known_rules": known},
        )


class InternalError(CodeDeltaError):
    """Internal/unexpected errors."""

    @classmethod
    def unexpected(cls, reason: str, **details: Any) -> "InternalError":
        return cls(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Internal error: {reason}",
            details=details,
        )
