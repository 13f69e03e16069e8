"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from dirview import __version__
from dirview.cli.commands import config, ls
from dirview.utils.formatting import err_console

app = typer.Typer(
    name="dirview",
    help="Filtered, ordered views over a directory's entries.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"dirview version {__version__}")
        raise typer.Exit()


def _enable_debug_logging() -> None:
    """Send dirview debug logs to stderr."""
    logger = logging.getLogger("dirview")
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=err_console, show_path=False))
    logger.setLevel(logging.DEBUG)


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
) -> None:
    """dirview - filtered, ordered views over a directory's entries.

    List the immediate children of a directory, narrowed by kind,
    visibility or name, and sorted by name, extension, size or kind.
    """
    if verbose:
        _enable_debug_logging()


# Register commands
app.command(name="ls")(ls.list_entries)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
