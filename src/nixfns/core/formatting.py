"""Result formatting for terminal output.

A result block is the indented documentation followed by the identifier and
its location::

       Map a function over a list
    map lib/lists.nix:42

Offsets are byte offsets into the file the result came from, so formatting
always takes that file's content alongside the result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.segment import Segment, Segments
from rich.style import Style

if TYPE_CHECKING:
    from nixfns.search.models import SearchResult

_IDENTIFIER_STYLE = Style(bold=True, color="white")


def indented(text: str, indent: int) -> str:
    """Prefix every line of ``text`` with ``indent`` spaces.

    Empty lines are prefixed too, so a trailing newline yields a last line
    made only of spaces.
    """
    prefix = " " * indent
    return "\n".join(prefix + line for line in text.split("\n"))


def find_line(content: bytes, pos: int) -> int:
    """Return the 1-based line number containing byte offset ``pos``."""
    return content.count(b"\n", 0, pos) + 1


def format_result(
    result: SearchResult,
    display_path: str,
    content: bytes,
    *,
    indent: int = 3,
) -> Segments:
    """Render one result block.

    The block is made of raw segments so the console writes documentation and
    paths as they are: tabs are not expanded and control characters are kept.
    The identifier carries a bold style, which Rich only emits on terminals.
    Print it on a soft-wrapping console, otherwise lines get cropped.
    """
    return Segments(
        [
            Segment(indented(result.doc, indent) + "\n"),
            Segment(result.identifier, _IDENTIFIER_STYLE),
            Segment(f" {display_path}:{find_line(content, result.defined_at_start)}\n"),
        ]
    )


def pluralize(count: int, singular: str, plural: str | None = None) -> str:
    """Return grammatically correct singular/plural form.

    Args:
        count: The number of items
        singular: Singular form (e.g., "file")
        plural: Plural form (default: singular + "s")

    Returns:
        Formatted string like "1 file" or "3 files"
    """
    if plural is None:
        plural = singular + "s"
    word = singular if count == 1 else plural
    return f"{count} {word}"


def format_duration(seconds: float) -> str:
    """Format a duration in seconds to a human-readable string.

    Examples:
        0.345 -> "0.3s"
        90.0 -> "1m 30s"
        3661.0 -> "1h 1m"
    """
    if seconds < 0:
        raise ValueError("Duration must be non-negative")

    if seconds < 60:
        return f"{seconds:.1f}s"

    minutes = int(seconds // 60)
    remaining_secs = int(seconds % 60)

    if minutes < 60:
        return f"{minutes}m {remaining_secs}s"

    hours = minutes // 60
    remaining_mins = minutes % 60
    return f"{hours}h {remaining_mins}m"
