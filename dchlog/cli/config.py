"""CLI commands for core team and changelog configuration."""

import typer

from dchlog import global_config
from dchlog.changelog import DEFAULT_CORE_TEAM
from dchlog.git import GitError, get_repo_root
from dchlog.user_config import get_repo_core_team, set_repo_core_team
from dchlog.cli.utils import get_effective_formatter_config, get_repo_root_safe

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage dchlog configuration in ~/.dchlog/ and .dchlog/",
    add_completion=False,
)


def _load_core_team(repo: bool) -> list[str]:
    """Get the configured core team list for the chosen scope."""
    if repo:
        names = get_repo_core_team(get_repo_root())
    else:
        names = global_config.get_core_team()
    if names is None:
        names = sorted(DEFAULT_CORE_TEAM)
    return names


def _save_core_team(repo: bool, names: list[str]) -> str:
    """Save the core team list and return a label for the scope used."""
    if repo:
        set_repo_core_team(get_repo_root(), names)
        return "repo"
    global_config.set_core_team(names)
    return "global"


@config_app.command("show")
def config_show() -> None:
    """Show the effective changelog configuration."""
    try:
        repo_root = get_repo_root_safe()
        config = get_effective_formatter_config(repo_root)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo("Effective dchlog configuration:")
    typer.echo()
    typer.echo(f"  Line width: {config.width}")
    typer.echo(f"  Collect bugs: {config.collect_bugs}")
    typer.echo(f"  First parent only: {config.first_parent}")
    typer.echo()
    typer.echo("  Core team (never credited):")
    for name in sorted(config.core_team):
        typer.echo(f"    - {name}")
    typer.echo()
    if repo_root is not None:
        typer.echo(f"Repo config: {repo_root / '.dchlog' / 'config.yaml'}")
    typer.echo(f"Global config: {global_config.get_config_file_path()}")


@config_app.command("set-core-team")
def config_set_core_team(
    names: list[str] = typer.Argument(
        ...,
        help="Display names exempt from credit, e.g. \"Scott Moser\"",
    ),
    repo: bool = typer.Option(
        False,
        "--repo",
        help="Set in repository config instead of global",
    ),
) -> None:
    """Replace the core team list."""
    try:
        cleaned = [name.strip() for name in names if name.strip()]
        scope = _save_core_team(repo, cleaned)
        typer.echo(f"✓ Core team set in {scope} config ({len(cleaned)} name(s))")
    except (GitError, global_config.GlobalConfigError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@config_app.command("add-core")
def config_add_core(
    name: str = typer.Argument(..., help="Display name to exempt from credit"),
    repo: bool = typer.Option(False, "--repo", help="Change repository config instead of global"),
) -> None:
    """Add a name to the core team list."""
    try:
        names = _load_core_team(repo)
        if name in names:
            typer.echo(f"Already in core team: {name}")
            raise typer.Exit(0)
        names.append(name)
        scope = _save_core_team(repo, names)
        typer.echo(f"Added to {scope} core team: {name}")
    except (GitError, global_config.GlobalConfigError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@config_app.command("remove-core")
def config_remove_core(
    name: str = typer.Argument(..., help="Display name to remove"),
    repo: bool = typer.Option(False, "--repo", help="Change repository config instead of global"),
) -> None:
    """Remove a name from the core team list."""
    try:
        names = _load_core_team(repo)
        if name not in names:
            typer.echo(f"Not in core team: {name}", err=True)
            raise typer.Exit(1)
        names.remove(name)
        scope = _save_core_team(repo, names)
        typer.echo(f"Removed from {scope} core team: {name}")
    except (GitError, global_config.GlobalConfigError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
