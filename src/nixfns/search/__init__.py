"""Documented function search over Nix sources."""

from nixfns.search._internal.discovery import is_searchable, walk_files
from nixfns.search.models import SearchResult, SearchStats
from nixfns.search.ops import compile_pattern, search, search_file

__all__ = [
    "SearchResult",
    "SearchStats",
    "compile_pattern",
    "is_searchable",
    "search",
    "search_file",
    "walk_files",
]
