"""CLI package for dirview.

This package contains the Typer application and all subcommands.
"""

from dirview.cli.main import app

__all__ = ["app"]
