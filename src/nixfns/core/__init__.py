"""Core module exports."""

from nixfns.core.errors import (
    ConfigError,
    ErrorCode,
    InternalError,
    NixFnsError,
    SearchError,
)
from nixfns.core.logging import (
    configure_logging,
    get_logger,
)

__all__ = [
    # Errors
    "ConfigError",
    "ErrorCode",
    "InternalError",
    "NixFnsError",
    "SearchError",
    # Logging
    "configure_logging",
    "get_logger",
]
