"""nixfns error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Search
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

    # Search (3xxx)
    SEARCH_READ_ERROR = 3001
    SEARCH_PARSE_ERROR = 3002
    SEARCH_INVALID_PATTERN = 3003

    # Internal (9xxx)
    INTERNAL_ERROR = 9001
    INTERNAL_POOL_CLOSED = 9002


@dataclass(frozen=True, slots=True)
class NixFnsError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'SEARCH_PARSE_ERROR')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(NixFnsError):
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


class SearchError(NixFnsError):
    """Errors raised while reading, parsing or matching source files.

    Read and parse errors are per-file: the orchestrator reports them and
    moves on. An invalid pattern aborts the run before any file is touched.
    """

    @classmethod
    def read_failed(cls, path: str, reason: str) -> "SearchError":
        return cls(
            code=ErrorCode.SEARCH_READ_ERROR,
            message=f"cannot read file: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def parse_failed(cls, path: str, line: int, column: int) -> "SearchError":
        return cls(
            code=ErrorCode.SEARCH_PARSE_ERROR,
            message=f"syntax error at {line}:{column}",
            details={"path": path, "line": line, "column": column},
        )

    @classmethod
    def invalid_pattern(cls, pattern: str, reason: str) -> "SearchError":
        return cls(
            code=ErrorCode.SEARCH_INVALID_PATTERN,
            message=f"Invalid pattern {pattern!r}: {reason}",
            details={"pattern": pattern, "reason": reason},
        )


class InternalError(NixFnsError):
    """Internal/unexpected errors."""

    @classmethod
    def unexpected(cls, reason: str, **details: Any) -> "InternalError":
        return cls(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Internal error: {reason}",
            details=details,
        )

    @classmethod
    def pool_closed(cls) -> "InternalError":
        return cls(
            code=ErrorCode.INTERNAL_POOL_CLOSED,
            message="Internal error: task pushed after the worker pool was drained",
        )
