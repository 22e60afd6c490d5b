"""Documented function definitions in attribute sets.

A definition is an attribute set binding whose value is a lambda::

    {
      # Documentation for double
      double = x: x * 2;
    }

Attribute sets are visited in pre-order, nested ones included, and bindings
within a set in source order.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from typing import Any

from nixfns.search._internal.comments import find_comment
from nixfns.search._internal.parsing import ParseResult, SyntaxCursor
from nixfns.search.models import SearchResult

# Grammar node types (tree-sitter-nix)
ATTRSET_TYPES = frozenset({"attrset_expression", "rec_attrset_expression"})
BINDING_SET_TYPE = "binding_set"
BINDING_TYPE = "binding"
LAMBDA_TYPE = "function_expression"
IDENTIFIER_TYPE = "identifier"


def _preorder(root: Any) -> Iterator[Any]:
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.named_children))


def _bindings(attrset: Any) -> Iterator[Any]:
    for child in attrset.named_children:
        if child.type != BINDING_SET_TYPE:
            continue
        for binding in child.named_children:
            # inherit / inherit_from never define lambdas
            if binding.type == BINDING_TYPE:
                yield binding


def visit_attrset(pattern: re.Pattern[str], attrset: Any) -> list[SearchResult]:
    """Match the lambda bindings of a single attribute set."""
    results: list[SearchResult] = []
    for binding in _bindings(attrset):
        value = binding.child_by_field_name("expression")
        if value is None or value.type != LAMBDA_TYPE:
            continue

        attrpath = binding.child_by_field_name("attrpath")
        if attrpath is None:
            continue
        segments = attrpath.children_by_field_name("attr")
        if not segments or segments[-1].type != IDENTIFIER_TYPE:
            continue
        ident = segments[-1]

        name = ident.text.decode("utf-8")
        if not pattern.search(name):
            continue

        doc = find_comment(SyntaxCursor(attrpath))
        if doc is None:
            # Undocumented: most likely a re-export or an override
            continue

        results.append(
            SearchResult(identifier=name, doc=doc, defined_at_start=ident.start_byte)
        )
    return results


def search_tree(pattern: re.Pattern[str], parsed: ParseResult) -> list[SearchResult]:
    """Find documented lambda definitions whose name matches ``pattern``."""
    results: list[SearchResult] = []
    for node in _preorder(parsed.root_node):
        if node.type in ATTRSET_TYPES:
            results.extend(visit_attrset(pattern, node))
    return results
