"""CLI utilities package.

This package provides utilities for CLI commands including:
- CLIContext: Context management for commands
- CliPrinter: Console output formatting
- Decorators: Error reporting for commands
- write_output_file: Writing rendered output to disk
"""

import logging
from pathlib import Path

import click

from propbag.cli.utils.context import CLIContext
from propbag.cli.utils.decorators import error_details, error_payload, handle_cli_errors
from propbag.cli.utils.printer import CliPrinter
from propbag.common.exceptions import PropBagError

__all__ = [
    "CLIContext",
    "CliPrinter",
    "error_details",
    "error_payload",
    "handle_cli_errors",
    "write_output_file",
]

logger = logging.getLogger(__name__)


def write_output_file(file_path: Path, content: str) -> None:
    """Write rendered output to a file, creating missing parent directories.

    The content goes to a temporary file that replaces ``file_path`` only once
    it is complete, so an existing file is never left half written.

    Args:
        file_path: Path to output file
        content: Text to write

    Raises:
        PropBagError: If the file cannot be written, with ``output`` in its context
    """
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with click.open_file(str(file_path), "w", encoding="utf-8", atomic=True) as f:
            f.write(content)
    except OSError as e:
        raise PropBagError(
            f"Cannot write {file_path}: {e.strerror or e}",
            context={"output": str(file_path)},
        ) from e

    logger.debug("Wrote %d characters to %s", len(content), file_path)
