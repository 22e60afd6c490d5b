"""Search data models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SearchResult:
    """A documented function definition matching the search pattern."""

    identifier: str  # Name of the function (last attrpath segment)
    doc: str  # Normalized documentation comment, never empty
    defined_at_start: int  # Byte offset of the identifier in its file


@dataclass
class SearchStats:
    """Summary of one search run, counted on the orchestrating thread."""

    files_searched: int = 0
    files_matched: int = 0
    results: int = 0
    duration_seconds: float = 0.0
