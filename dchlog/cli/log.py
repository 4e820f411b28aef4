"""CLI command that renders changelog entries for a git revision range."""

from pathlib import Path
from typing import Optional

import typer

from dchlog.changelog import format_changelog
from dchlog.debian import (
    DebianChangelogError,
    get_changelog_path,
    has_sru_placeholder,
    read_top_version,
)
from dchlog.git import GitError, get_last_tag, get_log_lines, get_repo_root
from dchlog.global_config import GlobalConfigError
from dchlog.cli.utils import echo_lines, get_effective_formatter_config


def log_command(
    from_rev: Optional[str] = typer.Argument(
        None,
        metavar="FROM",
        help="Start of the range (exclusive). Defaults to the most recent tag.",
    ),
    to_rev: str = typer.Argument(
        "HEAD",
        metavar="TO",
        help="End of the range (inclusive)",
    ),
    no_bugs: bool = typer.Option(
        False,
        "--no-bugs",
        help="Do not append (LP: ...) bug references",
    ),
    auto_sru: bool = typer.Option(
        True,
        "--auto-sru/--no-auto-sru",
        help="Drop bug references when debian/changelog has an SRU placeholder bug",
    ),
    changelog: Optional[Path] = typer.Option(
        None,
        "--changelog",
        help="Path to debian/changelog (defaults to the one in the repo root)",
    ),
    all_parents: bool = typer.Option(
        False,
        "--all-parents",
        help="Include commits from merged branches instead of first parents only",
    ),
) -> None:
    """Print changelog entries for the commits in FROM..TO."""
    try:
        repo_root = get_repo_root()
        changelog_path = changelog or get_changelog_path(repo_root)

        collect_bugs: Optional[bool] = None
        if no_bugs:
            collect_bugs = False
        elif auto_sru and has_sru_placeholder(changelog_path):
            typer.echo(f"SRU placeholder bug found in {changelog_path}; omitting bug references.", err=True)
            collect_bugs = False

        config = get_effective_formatter_config(
            repo_root,
            collect_bugs=collect_bugs,
            first_parent=False if all_parents else None,
        )

        if from_rev is None:
            from_rev = get_last_tag(to_rev, cwd=repo_root)
            if from_rev is None:
                typer.echo("Error: No tag found to start from. Pass FROM explicitly.", err=True)
                raise typer.Exit(1)

        lines = get_log_lines(from_rev, to_rev, first_parent=config.first_parent, cwd=repo_root)

        version = read_top_version(changelog_path)
        target = f" for {version}" if version else ""
        typer.echo(f"Changes {from_rev}..{to_rev}{target}:", err=True)

        if echo_lines(format_changelog(lines, config)) == 0:
            typer.echo("No commits in range.", err=True)

    except (GitError, GlobalConfigError, DebianChangelogError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
