"""Show command for listing the properties of a document."""

from pathlib import Path
from typing import Annotated

import typer

from propbag.cli.utils import handle_cli_errors
from propbag.config.settings import DocumentFormat


@handle_cli_errors("Failed to show properties")
def show_command(
    ctx: typer.Context,
    source: Annotated[
        Path, typer.Argument(help="Property document (YAML or JSON)")
    ],
    fmt: Annotated[
        DocumentFormat | None,
        typer.Option("--format", "-f", help="Document format (default: from PROPBAG_DEFAULT_FORMAT)"),
    ] = None,
    json_output: Annotated[
        bool, typer.Option("--json", help="Output in JSON format")
    ] = False,
):
    """
    Show the properties of a document as a table.

    With --json, prints an object mapping each key to the list of its values
    rendered as strings.
    """
    cli_ctx = ctx.obj
    cli_ctx.set_json_mode(json_output)

    bag = cli_ctx.load_bag_or_exit(str(source), fmt)

    if json_output:
        cli_ctx.print_json(
            data={key: [str(value) for value in values] for key, values in bag.items()}
        )
        return

    title = cli_ctx.document.name if cli_ctx.document else None
    cli_ctx.printer.print_property_table(bag, title=title)
