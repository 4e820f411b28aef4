"""CLI entry point for dchlog.

This module provides the main CLI application that combines all commands
and subcommands into a single unified interface.
"""

import typer

from dchlog.cli.config import config_app
from dchlog.cli.format import format_command
from dchlog.cli.log import log_command
from dchlog.cli.main import main_command

# Main application
app = typer.Typer(
    name="dchlog",
    help="dchlog: Debian changelog entries from git history",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(config_app, name="config")

# Add individual commands
app.command("log")(log_command)
app.command("format")(format_command)

# Set the main callback for default behavior (includes --version flag)
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "config_app",
    "format_command",
    "log_command",
    "main_command",
]
