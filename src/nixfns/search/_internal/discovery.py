"""Candidate file enumeration."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path


def walk_files(root: Path) -> Iterator[Path]:
    """Yield every file path under ``root``, or ``root`` itself if it is a file.

    Order is whatever the filesystem returns. Unreadable directories are
    skipped silently.
    """
    if not root.is_dir():
        yield root
        return
    for dirpath, _dirnames, filenames in os.walk(root):
        for filename in filenames:
            yield Path(dirpath) / filename


def is_searchable(path: Path, *, extension: str = ".nix", name_pattern: str = "lib") -> bool:
    """Should the given path be searched?

    True when the path ends with ``extension`` and contains ``name_pattern``
    anywhere. An empty ``name_pattern`` accepts every file with the extension.
    """
    # XXX: the substring test runs on the whole path, so a tree checked out
    # below any directory named like the pattern is searched entirely.
    text = str(path)
    return text.endswith(extension) and name_pattern in text
