"""Tests for the tree-sitter Nix adapter."""

from __future__ import annotations

import pytest

from nixfns.core.errors import ErrorCode, SearchError
from nixfns.search._internal.parsing import SyntaxCursor, TriviaKind, parse_nix


def _find(node, type_name: str):
    if node.type == type_name:
        return node
    for child in node.children:
        found = _find(child, type_name)
        if found is not None:
            return found
    return None


class TestParseNix:
    """parse_nix tests."""

    def test_valid_source(self) -> None:
        result = parse_nix(b"{ a = 1; }")
        assert result.root_node.type == "source_code"
        assert not result.root_node.has_error
        assert result.content == b"{ a = 1; }"

    def test_empty_source_parses(self) -> None:
        assert parse_nix(b"").root_node.type == "source_code"

    def test_syntax_error_raises_with_position(self) -> None:
        with pytest.raises(SearchError) as exc_info:
            parse_nix(b"{\n  broken = ;\n}\n", "lib/broken.nix")

        error = exc_info.value
        assert error.code == ErrorCode.SEARCH_PARSE_ERROR
        assert error.details["path"] == "lib/broken.nix"
        assert error.details["line"] >= 1
        assert error.message.startswith("syntax error at ")


class TestSyntaxCursor:
    """SyntaxCursor lookups and classification."""

    def test_comment_classified(self) -> None:
        result = parse_nix(b"{\n  # hello\n  a = 1;\n}\n")
        comment = _find(result.root_node, "comment")

        cursor = SyntaxCursor(comment)

        assert cursor.kind is TriviaKind.COMMENT
        assert cursor.text == "# hello"

    def test_significant_node(self) -> None:
        result = parse_nix(b"{ a = 1; }")
        binding = _find(result.root_node, "binding")

        assert SyntaxCursor(binding).kind is TriviaKind.SIGNIFICANT

    def test_parent_and_previous_sibling(self) -> None:
        result = parse_nix(b"{ a = 1; }")
        attrpath = _find(result.root_node, "attrpath")
        cursor = SyntaxCursor(attrpath)

        assert cursor.previous_sibling() is None
        parent = cursor.parent()
        assert parent is not None
        assert parent.node.type == "binding"

    def test_root_has_no_parent(self) -> None:
        result = parse_nix(b"{ a = 1; }")
        assert result.root.parent() is None

    def test_lookups_do_not_move_cursor(self) -> None:
        result = parse_nix(b"{ a = 1; b = 2; }")
        bindings = [n for n in _find(result.root_node, "binding_set").named_children]
        cursor = SyntaxCursor(bindings[1])

        prev = cursor.previous_sibling()

        assert prev is not None
        assert prev.node.type == "binding"
        assert cursor.node == bindings[1]
