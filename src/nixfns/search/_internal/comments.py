"""Documentation comment recovery.

The documentation of a definition is the run of comments directly before it.
``find_comment`` walks backward from the definition, climbing out of nested
constructs when it runs out of siblings, until it meets something that is not
trivia. Comments are therefore found bottom-up and reversed before joining.
"""

from __future__ import annotations

from collections.abc import Sequence

from nixfns.search._internal.parsing import SyntaxCursor, TriviaKind

_LINE_COMMENT = "#"
_BLOCK_OPEN = "/*"
_BLOCK_CLOSE = "*/"


def _clean_line(line: str) -> str:
    line = line.lstrip()
    while line.startswith(_LINE_COMMENT):
        line = line[len(_LINE_COMMENT) :].lstrip()
    while line.startswith(_BLOCK_OPEN):
        line = line[len(_BLOCK_OPEN) :]
    line = line.strip()
    while line.endswith(_BLOCK_CLOSE):
        line = line[: -len(_BLOCK_CLOSE)]
    return line.rstrip()


def cleanup_comments(comments: Sequence[str]) -> str:
    """Normalize comments collected bottom-up into top-down documentation.

    Each line loses its leading whitespace and ``#`` markers, a ``/*`` opener
    and a ``*/`` closer. A ``#`` opening an inner line of a block comment is
    removed as well.
    """
    return "\n".join(
        "\n".join(_clean_line(line) for line in comment.split("\n"))
        for comment in reversed(comments)
    )


def find_comment(anchor: SyntaxCursor) -> str | None:
    """Return the documentation preceding ``anchor``, or None if there is none."""
    comments: list[str] = []
    cursor: SyntaxCursor | None = anchor

    while cursor is not None:
        # Previous sibling, or the parent's previous sibling, and so on up
        prev = cursor.previous_sibling()
        while prev is None:
            cursor = cursor.parent()
            if cursor is None:
                break
            prev = cursor.previous_sibling()
        if prev is None:
            break
        cursor = prev

        kind = cursor.kind
        if kind is TriviaKind.COMMENT:
            comments.append(cursor.text)
        elif kind is TriviaKind.SIGNIFICANT:
            break

    doc = cleanup_comments(comments)
    return doc or None
