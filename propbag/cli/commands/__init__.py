"""CLI commands module for propbag."""

from propbag.cli.commands.get import get_command
from propbag.cli.commands.render import render_command
from propbag.cli.commands.show import show_command

__all__ = [
    "get_command",
    "render_command",
    "show_command",
]
