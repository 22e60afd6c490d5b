"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (NIXFNS__SECTION__KEY)
3. Global YAML (~/.config/nixfns/config.yaml)
4. Built-in defaults (this file)

Environment Variable Format:
    NIXFNS__<SECTION>__<KEY>=<VALUE>

Examples:
    NIXFNS__LOGGING__LEVEL=DEBUG
    NIXFNS__SEARCH__WORKERS=8
    NIXFNS__SEARCH__FILE_PATTERN=
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        NIXFNS__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. Results and failure diagnostics are printed "
        "regardless; DEBUG adds per-file tracing.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class SearchConfig(BaseModel):
    """File selection and parallelism.

    Env vars:
        NIXFNS__SEARCH__WORKERS: Worker threads parsing files in parallel
        NIXFNS__SEARCH__EXTENSION: Source file extension to consider
        NIXFNS__SEARCH__FILE_PATTERN: Substring a path must contain ("" = any)
    """

    workers: int = Field(
        default=4,
        description="Worker threads parsing files in parallel. Fixed for the whole run.",
    )
    extension: str = Field(
        default=".nix",
        description="Only paths ending with this extension are searched.",
    )
    file_pattern: str = Field(
        default="lib",
        description="Only paths containing this substring are searched. "
        "Approximation: a 'lib' directory above the tree root matches every file.",
    )

    @field_validator("workers")
    @classmethod
    def validate_workers(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"workers must be at least 1, got {v}")
        return v


class OutputConfig(BaseModel):
    """Result rendering.

    Env vars:
        NIXFNS__OUTPUT__DOC_INDENT: Spaces before each documentation line
    """

    doc_indent: int = Field(
        default=3,
        description="Spaces prepended to every documentation line.",
    )

    @field_validator("doc_indent")
    @classmethod
    def validate_doc_indent(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"doc_indent must be non-negative, got {v}")
        return v


class NixFnsConfig(BaseModel):
    """Root configuration for nixfns.

    All settings can be configured via:
    1. Environment variables: NIXFNS__SECTION__KEY
    2. The global YAML config file
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
