"""Argument guards shared by propbag components."""

from typing import Any

from .exceptions import ArgumentNullError


def argument_not_null(value: Any, name: str) -> None:
    """Raise ArgumentNullError if value is None."""
    if value is None:
        raise ArgumentNullError(name)
