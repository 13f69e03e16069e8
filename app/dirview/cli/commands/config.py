"""Configuration commands.

Shows the effective configuration and writes a default config file.
"""

from typing import Annotated

import typer

from dirview.core.config import DirviewConfig, load_config_or_default, save_config
from dirview.core.paths import get_config_path
from dirview.exceptions import ConfigError
from dirview.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show and initialize the dirview configuration.",
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Show the effective configuration."""
    config_path = get_config_path()
    try:
        config = load_config_or_default()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    source = str(config_path) if config_path.exists() else "defaults"
    console.print(f"[dim]Configuration ({source})[/dim]")
    for field_name, value in config.model_dump(mode="json").items():
        console.print(f"  [header]{field_name}[/] = {value}")


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write the default configuration file."""
    config_path = get_config_path()
    if config_path.exists() and not force:
        print_info(f"Config already exists: {config_path} (use --force to overwrite)")
        return

    try:
        saved = save_config(DirviewConfig(), config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Wrote default configuration to {saved}")
