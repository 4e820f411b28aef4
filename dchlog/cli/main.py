"""Top-level callback for the dchlog CLI."""

import typer

from dchlog import __version__


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"dchlog {__version__}")
        raise typer.Exit()


def main_command(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show the dchlog version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Generate Debian changelog entries from git history."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
