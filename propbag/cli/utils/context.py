"""
CLI Context for propbag.

Provides centralized document loading and context management for all CLI commands.
"""

from dataclasses import dataclass, field
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape

from propbag.cli.utils.decorators import error_details, error_payload
from propbag.cli.utils.printer import CliPrinter
from propbag.common.exceptions import LoaderError, PropBagError
from propbag.config.settings import DocumentFormat, PropBagConfig
from propbag.core.property_bag import PropertyBag
from propbag.loaders import get_loader
from propbag.models.document import PropertyDocument


@dataclass
class CLIContext:
    """
    Context object for CLI commands.

    This context is created once and passed to all commands via Typer's
    context injection. It centralizes:
    - Property document loading
    - Error handling and reporting
    - Console output management
    - Verbose mode control
    - JSON mode control (suppresses all non-JSON output)

    Attributes:
        console: Rich console for output
        verbose: Enable verbose output (ignored when json_mode is True)
        config: Loader and rendering configuration
        printer: CLI printer for formatted output (always initialized)
        document: Last loaded document (if loading succeeded)
        bag: PropertyBag built from the last loaded document
        json_mode: When True, suppress all non-JSON output (set by commands)
    """

    console: Console
    verbose: bool = False
    config: PropBagConfig = field(default_factory=PropBagConfig)
    printer: CliPrinter = field(init=False)  # Will be initialized in __post_init__
    document: PropertyDocument | None = None
    bag: PropertyBag | None = None
    json_mode: bool = False

    def __post_init__(self):
        """Initialize printer."""
        self.printer = CliPrinter(console=self.console, verbose=self.verbose)

    def set_json_mode(self, json_mode: bool) -> None:
        """Switch JSON mode on the context and its printer."""
        self.json_mode = json_mode
        self.printer.json_mode = json_mode

    def _should_print_verbose(self) -> bool:
        """Check if verbose output should be printed (not in JSON mode)."""
        return self.verbose and not self.json_mode

    def print_verbose(self, message: str, **kwargs) -> None:
        """Print a message only if verbose mode is enabled and not in JSON mode."""
        if self._should_print_verbose():
            self.console.print(message, **kwargs)

    def print_progress(self, message: str) -> None:
        """Print a progress message (only in verbose mode, not in JSON mode)."""
        if self._should_print_verbose():
            self.printer.show_progress(message)

    def print_error(self, message: str) -> None:
        """Print an error message (always prints unless in JSON mode)."""
        if not self.json_mode:
            self.printer.print_error(message)

    def print_success(self, message: str) -> None:
        """Print a success message (always prints unless in JSON mode)."""
        if not self.json_mode:
            self.printer.show_success(message)

    def print_json(self, data: Any) -> None:
        """Print data as JSON (always prints, even in JSON mode)."""
        self.printer.print_json(data=data)

    def load_bag_or_exit(self, source: str, fmt: DocumentFormat | None = None) -> PropertyBag:
        """
        Load a property document into a PropertyBag and exit on failure.

        Args:
            source: Property document path
            fmt: Explicit document format, overrides the configured default

        Returns:
            PropertyBag built from the document (only if successful; otherwise exits)

        Raises:
            typer.Exit: If loading fails
        """
        self.print_progress(f"Loading properties from {source}")

        try:
            loader = get_loader(source, fmt, self.config)
            self.document = loader.load_document(source)
            self.bag = self.document.to_property_bag(self.config.drop_nulls, file_path=source)
        except FileNotFoundError as e:
            self.report_error(str(e))
            raise typer.Exit(code=1) from e
        except LoaderError as e:
            self.report_error(str(e), e)
            raise typer.Exit(code=1) from e

        self.print_verbose(f"[green]✓ Loaded {len(self.bag)} key(s)[/green]")
        return self.bag

    def report_error(self, message: str, error: PropBagError | None = None) -> None:
        """
        Report a failure as a JSON object in JSON mode, otherwise as a red
        error line followed by one bullet per detail of ``error``.
        """
        if self.json_mode:
            self.print_json(data=error_payload(message, error))
            return
        self.print_error(message)
        if error is not None:
            for detail in error_details(error):
                self.printer.print(f"  [red]• {escape(detail)}[/red]", soft_wrap=True)
