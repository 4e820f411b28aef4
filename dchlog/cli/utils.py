"""Shared utility functions for CLI commands."""

from pathlib import Path
from typing import Optional

import typer

from dchlog import global_config
from dchlog.changelog import FormatterConfig, load_formatter_config_from_dict
from dchlog.git import GitError, get_repo_root
from dchlog.user_config import get_repo_changelog_config


def get_repo_root_safe() -> Optional[Path]:
    """Get the repository root, or None when not inside a repository."""
    try:
        return get_repo_root()
    except GitError:
        return None


def get_effective_formatter_config(
    repo_root: Optional[Path] = None,
    collect_bugs: Optional[bool] = None,
    first_parent: Optional[bool] = None,
) -> FormatterConfig:
    """Get the effective formatter configuration (repo overrides global).

    Args:
        repo_root: Repository whose .dchlog/config.yaml is merged, if any.
        collect_bugs: Command line override for bug collection.
        first_parent: Command line override for first-parent traversal.

    Returns:
        The merged FormatterConfig.
    """
    # Start with defaults
    config_dict: dict = {"changelog": {}}

    # Merge global config
    global_changelog = global_config.get_changelog_config()
    if global_changelog:
        config_dict["changelog"].update(global_changelog)

    # Merge repo config (overrides global)
    if repo_root is not None:
        repo_changelog = get_repo_changelog_config(repo_root)
        if repo_changelog:
            config_dict["changelog"].update(repo_changelog)

    # Command line flags win over both
    if collect_bugs is not None:
        config_dict["changelog"]["collect_bugs"] = collect_bugs
    if first_parent is not None:
        config_dict["changelog"]["first_parent"] = first_parent

    return load_formatter_config_from_dict(config_dict)


def echo_lines(lines) -> int:
    """Write changelog lines to stdout.

    Returns:
        Number of lines written.
    """
    count = 0
    for line in lines:
        typer.echo(line)
        count += 1
    return count