"""Configuration constants.

This module contains truly constant values that should NOT be user-configurable.
These are grammar facts and output format details.

For configurable values, see models.py (SearchConfig, OutputConfig, etc.).
"""

# =============================================================================
# Grammar
# =============================================================================

GRAMMAR_NAME = "nix"
"""Language name passed to tree-sitter-language-pack."""

# =============================================================================
# Output
# =============================================================================

FAILURE_PREFIX = "Failure handling"
"""Leading text of the per-file diagnostic written to stderr."""

USAGE_PROG_NAME = "list-fns"
"""Program name shown in usage and --version output."""
