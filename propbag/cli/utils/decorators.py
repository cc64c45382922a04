"""Error reporting for CLI commands.

Turns propbag exceptions into the lines printed in plain mode and the object
printed in JSON mode, and wraps commands so every failure ends in exit code 1.
"""

from collections.abc import Callable
from functools import wraps
from typing import Any

import typer

from propbag.common.exceptions import (
    ArgumentNullError,
    ConfigurationError,
    DocumentValidationError,
    LoaderError,
    PropBagError,
)


def error_details(error: PropBagError) -> list[str]:
    """
    Detail lines for a propbag error, printed as bullets under the message.

    Args:
        error: The error being reported

    Returns:
        Parameter, file and config key lines when the error carries them,
        then the individual validation errors, then the context entries
    """
    details = []
    if isinstance(error, ArgumentNullError):
        details.append(f"parameter: {error.param_name}")
    if isinstance(error, LoaderError) and error.file_path:
        details.append(f"file: {error.file_path}")
    if isinstance(error, ConfigurationError) and error.config_key:
        details.append(f"setting: {error.config_key}")
    if isinstance(error, DocumentValidationError):
        details.extend(error.errors)
    details.extend(f"{key}: {value}" for key, value in error.context.items())
    return details


def error_payload(message: str, error: PropBagError | None = None) -> dict[str, Any]:
    """
    JSON object describing a failure.

    Always holds ``error`` and ``details``. Propbag errors add their type name
    and whichever of ``param``, ``file``, ``config_key`` and ``context`` apply.
    """
    if error is None:
        return {"error": message, "details": []}

    payload: dict[str, Any] = {
        "error": message,
        "type": type(error).__name__,
        "details": list(error.errors) if isinstance(error, DocumentValidationError) else [],
    }
    if isinstance(error, ArgumentNullError):
        payload["param"] = error.param_name
    if isinstance(error, LoaderError):
        payload["file"] = error.file_path
    if isinstance(error, ConfigurationError):
        payload["config_key"] = error.config_key
    if error.context:
        payload["context"] = {key: str(value) for key, value in error.context.items()}
    return payload


def _format_message(error_message: str, error: Exception) -> str:
    if "{error}" in error_message:
        return error_message.format(error=error)
    return f"{error_message}: {error}"


def handle_cli_errors(error_message: str) -> Callable:
    """Decorator reporting command failures and exiting with status 1.

    Propbag errors are reported through the context with their details
    (offending parameter, source file, validation errors, context entries),
    in JSON when the command switched the context to JSON mode. Any other
    exception is reported by its message alone. ``typer.Exit`` passes through.

    Args:
        error_message: Message prefix, or a template with an {error} placeholder

    Example:
        ```python
        @handle_cli_errors("Failed to render properties")
        def render_command(ctx: typer.Context, ...):
            ...
        ```
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            ctx = args[0] if args else kwargs.get("ctx")
            if not ctx or not hasattr(ctx, "obj"):
                return func(*args, **kwargs)

            cli_ctx = ctx.obj

            try:
                return func(*args, **kwargs)
            except typer.Exit:
                raise
            except PropBagError as e:
                cli_ctx.report_error(_format_message(error_message, e), e)
                raise typer.Exit(1) from e
            except Exception as e:
                cli_ctx.report_error(_format_message(error_message, e))
                raise typer.Exit(1) from e

        return wrapper

    return decorator
