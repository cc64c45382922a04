"""Render command for printing the properties XML fragment."""

from pathlib import Path
from typing import Annotated

import typer

from propbag.cli.utils import handle_cli_errors, write_output_file
from propbag.config.settings import DocumentFormat


@handle_cli_errors("Failed to render properties")
def render_command(
    ctx: typer.Context,
    source: Annotated[
        Path, typer.Argument(help="Property document (YAML or JSON)")
    ],
    fmt: Annotated[
        DocumentFormat | None,
        typer.Option("--format", "-f", help="Document format (default: from PROPBAG_DEFAULT_FORMAT)"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the XML to a file instead of stdout"),
    ] = None,
    compact: Annotated[
        bool, typer.Option("--compact", help="Render on a single line without indentation")
    ] = False,
):
    """
    Render a property document as a <properties> XML fragment.

    Every value becomes one <property name=... value=.../> element, keys in
    document order and list values in list order.
    """
    cli_ctx = ctx.obj

    bag = cli_ctx.load_bag_or_exit(str(source), fmt)

    pretty = cli_ctx.config.pretty_print and not compact
    xml_text = bag.to_xml(recursive=False).to_xml_string(pretty=pretty)

    if output:
        cli_ctx.print_progress(f"Writing properties to {output}")
        write_output_file(output, xml_text + "\n")
        cli_ctx.print_success(f"Properties written to {output}")
    else:
        cli_ctx.printer.print_raw(xml_text)
