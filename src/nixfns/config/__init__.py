"""Config module exports."""

from nixfns.config.loader import load_config
from nixfns.config.models import (
    LoggingConfig,
    NixFnsConfig,
    OutputConfig,
    SearchConfig,
)

__all__ = [
    "load_config",
    "NixFnsConfig",
    "LoggingConfig",
    "OutputConfig",
    "SearchConfig",
]
