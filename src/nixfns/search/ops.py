"""Search orchestration.

One task per candidate file runs on the worker pool: read, parse, match,
format. Files with at least one result send their formatted batch over a
channel; the calling thread prints the batches once the pool has drained.
Batches from different files arrive in no particular order; within a batch
results keep tree order.
"""

from __future__ import annotations

import re
import time
from collections.abc import Callable
from pathlib import Path

import structlog
from rich.console import Console
from rich.segment import Segment, Segments

from nixfns.config.constants import FAILURE_PREFIX
from nixfns.core.errors import SearchError
from nixfns.core.formatting import format_duration, format_result, pluralize
from nixfns.search._internal.discovery import is_searchable, walk_files
from nixfns.search._internal.matcher import search_tree
from nixfns.search._internal.parsing import parse_nix
from nixfns.search._internal.pool import Channel, WorkerPool
from nixfns.search.models import SearchResult, SearchStats

logger = structlog.get_logger()

DEFAULT_WORKERS = 4
DEFAULT_DOC_INDENT = 3


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a user-supplied identifier pattern.

    Raises:
        SearchError: If the pattern is not a valid regular expression.
    """
    try:
        return re.compile(pattern)
    except re.error as e:
        raise SearchError.invalid_pattern(pattern, str(e)) from e


def read_source(path: Path) -> bytes:
    """Read a file and check it is UTF-8 text."""
    try:
        content = path.read_bytes()
        content.decode("utf-8")
    except OSError as e:
        raise SearchError.read_failed(str(path), e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise SearchError.read_failed(str(path), str(e)) from e
    return content


def search_file(path: Path, pattern: re.Pattern[str]) -> tuple[list[SearchResult], bytes]:
    """Search one file. Returns its results and the content they point into.

    Raises:
        SearchError: If the file cannot be read or does not parse.
    """
    content = read_source(path)
    parsed = parse_nix(content, str(path))
    return search_tree(pattern, parsed), content


def _make_console(*, stderr: bool = False) -> Console:
    # Segments are written as is only when soft wrapping
    return Console(stderr=stderr, markup=False, emoji=False, highlight=False, soft_wrap=True)


def search(
    root: Path,
    pattern: re.Pattern[str],
    should_search: Callable[[Path], bool] = is_searchable,
    *,
    workers: int = DEFAULT_WORKERS,
    indent: int = DEFAULT_DOC_INDENT,
    console: Console | None = None,
    err_console: Console | None = None,
) -> SearchStats:
    """Search ``root`` for documented functions matching ``pattern`` and print them.

    Args:
        root: Directory to walk, or a single file.
        pattern: Compiled identifier pattern (see ``compile_pattern``).
        should_search: Path predicate selecting candidate files.
        workers: Worker pool size.
        indent: Spaces before each documentation line.
        console: Where result blocks go (default: stdout).
        err_console: Where per-file failures go (default: stderr).

    Returns:
        Counts for the run. Unreadable and unparsable files are reported on
        ``err_console`` and otherwise ignored.
    """
    out = console or _make_console()
    err = err_console or _make_console(stderr=True)
    stats = SearchStats()
    started = time.perf_counter()
    channel: Channel[list[Segments]] = Channel()

    def make_task(path: Path) -> Callable[[], None]:
        display = str(path)

        def task() -> None:
            try:
                results, content = search_file(path, pattern)
            except SearchError as e:
                err.print(Segments([Segment(f"{FAILURE_PREFIX} {display}: {e.message}\n")]))
                logger.debug("file_search_failed", path=display, error=e.error_name)
                return

            formatted = [format_result(r, display, content, indent=indent) for r in results]
            logger.debug("file_searched", path=display, results=len(formatted))
            if formatted:
                channel.send(formatted)

        return task

    logger.debug("search_started", root=str(root), pattern=pattern.pattern, workers=workers)

    with WorkerPool(workers) as pool:
        for path in walk_files(root):
            if should_search(path) and path.is_file():
                pool.push(make_task(path))
                stats.files_searched += 1

    channel.close()
    for batch in channel:
        stats.files_matched += 1
        for block in batch:
            out.print(block)
            out.print()
            stats.results += 1

    stats.duration_seconds = time.perf_counter() - started
    logger.debug(
        "search_finished",
        files=pluralize(stats.files_searched, "file"),
        matched=stats.files_matched,
        results=pluralize(stats.results, "result"),
        duration=format_duration(stats.duration_seconds),
    )
    return stats
