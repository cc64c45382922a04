"""Get command for looking up a single property."""

from pathlib import Path
from typing import Annotated

import typer

from propbag.cli.utils import handle_cli_errors
from propbag.config.settings import DocumentFormat


@handle_cli_errors("Failed to read property")
def get_command(
    ctx: typer.Context,
    source: Annotated[
        Path, typer.Argument(help="Property document (YAML or JSON)")
    ],
    key: Annotated[str, typer.Argument(help="Property name")],
    all_values: Annotated[
        bool, typer.Option("--all", "-a", help="Print every value, one per line")
    ] = False,
    fmt: Annotated[
        DocumentFormat | None,
        typer.Option("--format", "-f", help="Document format (default: from PROPBAG_DEFAULT_FORMAT)"),
    ] = None,
):
    """
    Print the first value of a property, or all of them with --all.

    Exits with status 1 when the property is not present.
    """
    cli_ctx = ctx.obj

    bag = cli_ctx.load_bag_or_exit(str(source), fmt)

    if not bag.contains_key(key):
        cli_ctx.print_error(f"Property '{key}' not found in {source}")
        raise typer.Exit(1)

    values = bag[key] if all_values else [bag.get(key)]
    for value in values:
        cli_ctx.printer.print_raw(str(value))
