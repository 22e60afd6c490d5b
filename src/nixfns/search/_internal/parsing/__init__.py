"""Nix parsing on top of tree-sitter."""

from nixfns.search._internal.parsing.treesitter import (
    ParseResult,
    SyntaxCursor,
    TriviaKind,
    nix_language,
    parse_nix,
)

__all__ = [
    "ParseResult",
    "SyntaxCursor",
    "TriviaKind",
    "nix_language",
    "parse_nix",
]
