"""propbag CLI - Typer-based command line interface."""

import logging
from typing import Annotated

import typer
from rich.console import Console

from propbag.cli.commands import get_command, render_command, show_command
from propbag.cli.utils import CLIContext
from propbag.common.exceptions import ConfigurationError
from propbag.config.constants import ENVIRONMENT_VARIABLE_DOCS
from propbag.config.settings import PropBagConfig

# Create main app and console
app = typer.Typer(
    name="propbag",
    help="propbag: render test property documents as XML property fragments",
    epilog=ENVIRONMENT_VARIABLE_DOCS,
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable verbose output")
    ] = False,
):
    """
    propbag CLI callback - sets up context for all commands.

    Reads PROPBAG_* settings from the environment and shares a CLIContext
    with every command through ctx.obj.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

    try:
        config = PropBagConfig.from_env()
    except ConfigurationError as e:
        CLIContext(console=console).report_error(str(e), e)
        raise typer.Exit(1) from e

    ctx.obj = CLIContext(console=console, verbose=verbose, config=config)


app.command(name="render")(render_command)
app.command(name="show")(show_command)
app.command(name="get")(get_command)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
