"""nixfns CLI - list-fns command."""

from __future__ import annotations

import functools
from pathlib import Path
from typing import Any

import click

from nixfns import __version__
from nixfns.config import load_config
from nixfns.config.constants import USAGE_PROG_NAME
from nixfns.core.errors import ConfigError, SearchError
from nixfns.core.logging import configure_logging
from nixfns.search import compile_pattern, is_searchable, search


@click.command()
@click.version_option(version=__version__, prog_name=USAGE_PROG_NAME)
@click.argument("pattern", required=False)
@click.argument("root", default=".", type=click.Path(exists=True, path_type=Path))
@click.option(
    "-j",
    "--workers",
    type=click.IntRange(min=1),
    default=None,
    help="Files parsed in parallel (default: search.workers, 4)",
)
@click.option(
    "--file-pattern",
    default=None,
    help="Only search paths containing this text (default: 'lib'; '' for all .nix files)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML config file layered over ~/.config/nixfns/config.yaml",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(
    ctx: click.Context,
    pattern: str | None,
    root: Path,
    workers: int | None,
    file_pattern: str | None,
    config_path: Path | None,
    verbose: bool,
) -> None:
    """List documented Nix functions whose name matches PATTERN.

    PATTERN is a regular expression searched for in each function name.
    ROOT is the directory (or file) to search (default: current directory).
    """
    if pattern is None:
        click.echo(ctx.get_usage(), err=True)
        return

    overrides: dict[str, Any] = {}
    search_overrides: dict[str, Any] = {}
    if workers is not None:
        search_overrides["workers"] = workers
    if file_pattern is not None:
        search_overrides["file_pattern"] = file_pattern
    if search_overrides:
        overrides["search"] = search_overrides
    if verbose:
        overrides["logging"] = {"level": "DEBUG"}

    try:
        config = load_config(config_path, **overrides)
    except ConfigError as e:
        raise click.ClickException(e.message) from e

    configure_logging(config=config.logging)

    try:
        regex = compile_pattern(pattern)
    except SearchError as e:
        raise click.ClickException(e.message) from e

    should_search = functools.partial(
        is_searchable,
        extension=config.search.extension,
        name_pattern=config.search.file_pattern,
    )
    search(
        root,
        regex,
        should_search,
        workers=config.search.workers,
        indent=config.output.doc_indent,
    )


if __name__ == "__main__":
    cli()
