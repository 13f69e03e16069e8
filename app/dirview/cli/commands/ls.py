"""Directory listing command.

Builds an EntrySet pipeline from the command-line options and the
user configuration, then prints the resulting entries.
"""

import json
import os
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from dirview.core.config import DirviewConfig, load_config_or_default
from dirview.entries.entry_set import EntrySet
from dirview.entries.metadata import get_item_kind, get_size
from dirview.entries.models import (
    ItemFilter,
    OrderBy,
    PipelineStep,
    StepAction,
    TextFilter,
    TextFilterBy,
    VisibilityFilter,
)
from dirview.exceptions import ConfigError, DirectoryUnreadableError
from dirview.utils.formatting import (
    console,
    create_entry_table,
    format_size,
    print_error,
    print_info,
)


class OutputFormat(str, Enum):
    """Output format options for directory listings."""

    TABLE = "table"
    JSON = "json"


def list_entries(
    directory: Annotated[
        Path,
        typer.Argument(help="Directory to list."),
    ] = Path("."),
    kind: Annotated[
        ItemFilter | None,
        typer.Option(
            "--kind", "-k", help="Only show entries of this kind.", case_sensitive=False
        ),
    ] = None,
    exclude_kind: Annotated[
        ItemFilter | None,
        typer.Option(
            "--exclude-kind", "-x", help="Hide entries of this kind.", case_sensitive=False
        ),
    ] = None,
    visibility: Annotated[
        VisibilityFilter | None,
        typer.Option(
            "--visibility", help="Only show hidden or visible entries.", case_sensitive=False
        ),
    ] = None,
    show_all: Annotated[
        bool,
        typer.Option("--all", "-a", help="Include hidden entries."),
    ] = False,
    name_prefix: Annotated[
        str | None,
        typer.Option("--name", help="Only show names starting with this prefix."),
    ] = None,
    ext_prefix: Annotated[
        str | None,
        typer.Option("--ext", help="Only show extensions starting with this prefix."),
    ] = None,
    sort: Annotated[
        OrderBy | None,
        typer.Option("--sort", "-s", help="Sort key.", case_sensitive=False),
    ] = None,
    reverse: Annotated[
        bool,
        typer.Option("--reverse", "-r", help="Reverse the listing."),
    ] = False,
    output_format: Annotated[
        OutputFormat | None,
        typer.Option("--format", "-f", help="Output format.", case_sensitive=False),
    ] = None,
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-l", min=1, help="Limit number of results."),
    ] = None,
) -> None:
    """List the entries of a directory."""
    try:
        config = load_config_or_default()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    steps = build_pipeline(
        config,
        kind=kind,
        exclude_kind=exclude_kind,
        visibility=visibility,
        show_all=show_all,
        name_prefix=name_prefix,
        ext_prefix=ext_prefix,
        sort=sort,
        reverse=reverse,
    )

    try:
        entries = EntrySet(directory).apply(steps)
    except DirectoryUnreadableError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    paths = entries.to_list()
    display_paths = paths[:limit] if limit else paths
    fmt = output_format or OutputFormat(config.output_format)

    if fmt == OutputFormat.JSON:
        _print_json(display_paths)
        return

    if not display_paths:
        print_info("No matching entries.")
        return

    _print_table(directory, display_paths)
    if limit and len(display_paths) < len(paths):
        console.print(
            f"[dim](showing {len(display_paths)} of {len(paths)}, limited to {limit})[/dim]"
        )


def build_pipeline(
    config: DirviewConfig,
    *,
    kind: ItemFilter | None = None,
    exclude_kind: ItemFilter | None = None,
    visibility: VisibilityFilter | None = None,
    show_all: bool = False,
    name_prefix: str | None = None,
    ext_prefix: str | None = None,
    sort: OrderBy | None = None,
    reverse: bool = False,
) -> list[PipelineStep]:
    """Translate listing options into pipeline steps.

    Explicit options win over configuration defaults. Filters run
    before ordering, ordering before reversal.

    Args:
        config: User configuration supplying defaults.

    Returns:
        Pipeline steps in application order.
    """
    steps: list[PipelineStep] = []

    if visibility is not None:
        steps.append(PipelineStep(StepAction.FILTER, criterion=visibility))
    elif not show_all and not config.show_hidden:
        steps.append(PipelineStep(StepAction.EXCLUDE, criterion=VisibilityFilter.HIDDEN))

    if kind is not None:
        steps.append(PipelineStep(StepAction.FILTER, criterion=kind))
    if exclude_kind is not None:
        steps.append(PipelineStep(StepAction.EXCLUDE, criterion=exclude_kind))
    if name_prefix is not None:
        steps.append(
            PipelineStep(StepAction.FILTER, criterion=TextFilter(TextFilterBy.NAME, name_prefix))
        )
    if ext_prefix is not None:
        steps.append(
            PipelineStep(
                StepAction.FILTER, criterion=TextFilter(TextFilterBy.EXTENSION, ext_prefix)
            )
        )

    key = sort or config.order_by
    if key is not None:
        steps.append(PipelineStep(StepAction.ORDER, key=key))
    if reverse or config.descending:
        steps.append(PipelineStep(StepAction.REVERSE))

    return steps


# === Private helper functions ===


def _print_table(directory: Path, paths: list[Path]) -> None:
    """Display entries as a Rich table."""
    table = create_entry_table(title=escape(_display(directory)))
    for path in paths:
        item_kind = get_item_kind(path)
        if item_kind is None:
            table.add_row(escape(_display(path.name)), "-", "-")
            continue
        size_str = "-" if item_kind == ItemFilter.DIRECTORY else format_size(get_size(path))
        name = f"[entry.{item_kind.value}]{escape(_display(path.name))}[/]"
        table.add_row(name, item_kind.value, size_str)
    console.print(table)


def _print_json(paths: list[Path]) -> None:
    """Display entries as JSON."""
    data = []
    for path in paths:
        item_kind = get_item_kind(path)
        data.append(
            {
                "path": _display(path),
                "name": _display(path.name),
                "kind": item_kind.value if item_kind else None,
                "size_bytes": get_size(path),
            }
        )
    console.print_json(json.dumps(data))


def _display(value: str | Path) -> str:
    """Render a filesystem name for output.

    Undecodable bytes (kept by Python as lone surrogates) become U+FFFD.
    """
    return os.fsencode(value).decode("utf-8", "replace")
