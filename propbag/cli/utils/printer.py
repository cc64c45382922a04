"""CLI Printer for consistent output formatting."""

from typing import Any

from rich.console import Console
from rich.table import Table

from propbag.core.property_bag import PropertyBag


class CliPrinter:
    """Centralized printer for CLI output.

    This class handles all printing operations for the CLI, ensuring consistent
    formatting across commands and proper handling of verbose/JSON modes.
    """

    def __init__(
        self, console: Console, verbose: bool = False, json_mode: bool = False
    ):
        """Initialize printer with console and mode settings.

        Args:
            console: Rich console for output
            verbose: Whether to show detailed output
            json_mode: Whether to output in JSON format (can be set later)
        """
        self.console = console
        self.verbose = verbose
        self.json_mode = json_mode

    def print_raw(self, text: str) -> None:
        """Print text verbatim, without markup, highlighting or wrapping."""
        self.console.out(text, highlight=False)

    def print_property_table(self, bag: PropertyBag, title: str | None = None) -> None:
        """Print one row per property value, in serialization order.

        Args:
            bag: PropertyBag to display
            title: Optional table title, usually the document name
        """
        table = Table(title=title)
        table.add_column("Name", style="cyan")
        table.add_column("Value")

        for key, values in bag.items():
            for value in values:
                table.add_row(str(key), str(value))

        self.console.print(table)
        if self.verbose:
            self.console.print(f"[dim]{len(bag)} key(s)[/dim]")

    def show_progress(self, message: str) -> None:
        """Show progress message.

        Args:
            message: Progress message
        """
        if not self.json_mode:
            self.console.print(f"🔄 {message}")

    def show_success(self, message: str) -> None:
        """Show success message.

        Args:
            message: Success message
        """
        self.console.print(f"✅ {message}", soft_wrap=True)

    def print_json(self, data: Any) -> None:
        """Print data as JSON.

        Args:
            data: Data to serialize
        """
        self.console.print_json(data=data)

    def print(self, message: str, **kwargs) -> None:
        """Print message to console.

        Args:
            message: Message to print
            **kwargs: Additional arguments for rich.console.print
        """
        self.console.print(message, **kwargs)

    def print_error(self, message: str) -> None:
        """Print error message.

        Args:
            message: Error message
        """
        self.console.print(f"[red]❌ Error:[/red] {message}", soft_wrap=True)
