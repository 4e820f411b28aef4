"""CLI command that formats a previously captured git log."""

import sys
from typing import Optional

import typer

from dchlog.changelog import format_changelog
from dchlog.global_config import GlobalConfigError
from dchlog.cli.utils import echo_lines, get_effective_formatter_config, get_repo_root_safe


def format_command(
    log_file: Optional[typer.FileText] = typer.Argument(
        None,
        metavar="FILE",
        help="File with `git log --format=full` output ('-' or omitted for stdin)",
    ),
    no_bugs: bool = typer.Option(
        False,
        "--no-bugs",
        help="Do not append (LP: ...) bug references",
    ),
) -> None:
    """Format `git log --format=full` output as changelog entries."""
    try:
        config = get_effective_formatter_config(
            get_repo_root_safe(),
            collect_bugs=False if no_bugs else None,
        )
    except GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    stream = log_file if log_file is not None else sys.stdin
    echo_lines(format_changelog(stream, config))
