"""Tree-sitter parsing for Nix sources.

This module provides:
- Parsing Nix text into a tree-sitter tree, rejecting trees with syntax errors
- A read-only cursor over parsed trees with sibling/parent lookups
- A closed trivia classification (comment / other trivia / significant)

Everything above this module works in terms of ``SyntaxCursor`` and
``TriviaKind`` and never inspects raw grammar node types for trivia.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from enum import Enum
from typing import Any

import tree_sitter
from tree_sitter_language_pack import get_language

from nixfns.config.constants import GRAMMAR_NAME
from nixfns.core.errors import SearchError

# Grammar node types (tree-sitter-nix)
COMMENT_TYPE = "comment"
ERROR_TYPE = "ERROR"


class TriviaKind(Enum):
    """How a tree element participates in comment recovery."""

    COMMENT = "comment"  # A comment token: collected
    TRIVIA = "trivia"  # Other insignificant token: skipped
    SIGNIFICANT = "significant"  # Anything else: ends the comment run


@dataclass(frozen=True)
class SyntaxCursor:
    """Immutable position in a parsed tree.

    Lookups return new cursors and never mutate the tree or this cursor.
    """

    node: Any  # tree_sitter.Node

    def previous_sibling(self) -> SyntaxCursor | None:
        """The element just before this one under the same parent, tokens included."""
        prev = self.node.prev_sibling
        return SyntaxCursor(prev) if prev is not None else None

    def parent(self) -> SyntaxCursor | None:
        parent = self.node.parent
        return SyntaxCursor(parent) if parent is not None else None

    @property
    def kind(self) -> TriviaKind:
        if self.node.type == COMMENT_TYPE:
            return TriviaKind.COMMENT
        if self.node.is_extra:
            return TriviaKind.TRIVIA
        return TriviaKind.SIGNIFICANT

    @property
    def text(self) -> str:
        return self.node.text.decode("utf-8")


@dataclass
class ParseResult:
    """Result of parsing a file."""

    tree: Any  # Tree-sitter Tree
    root_node: Any  # Tree-sitter Node
    content: bytes

    @property
    def root(self) -> SyntaxCursor:
        return SyntaxCursor(self.root_node)


@functools.cache
def nix_language() -> tree_sitter.Language:
    """Load the Nix grammar once per process."""
    return get_language(GRAMMAR_NAME)


def _first_error(root: Any) -> Any | None:
    """Return the first ERROR or MISSING node in document order."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == ERROR_TYPE or node.is_missing:
            return node
        if node.has_error:
            stack.extend(reversed(node.children))
    return None


def parse_nix(content: bytes, path: str = "<string>") -> ParseResult:
    """Parse Nix source text.

    A fresh ``Parser`` is built for every call so parses can run on several
    threads at once; the ``Language`` is shared.

    Raises:
        SearchError: If the tree contains syntax errors. The message names
            the 1-based line and column of the first one.
    """
    parser = tree_sitter.Parser(nix_language())
    tree = parser.parse(content)
    root = tree.root_node

    if root.has_error:
        error = _first_error(root) or root
        row, column = error.start_point
        raise SearchError.parse_failed(path, row + 1, column + 1)

    return ParseResult(tree=tree, root_node=root, content=content)
