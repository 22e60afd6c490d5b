"""nixfns - find documented functions in Nix sources."""

__version__ = "0.1.0"
