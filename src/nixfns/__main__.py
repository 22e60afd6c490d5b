"""Entry point for ``python -m nixfns``."""

from nixfns.cli.main import cli

if __name__ == "__main__":
    cli()
