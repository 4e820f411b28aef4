"""Repository configuration management for dchlog.

Handles reading and writing the .dchlog/config.yaml file in each repository.
Settings here override the global ~/.dchlog/config.yaml.
"""

from pathlib import Path
from typing import Optional

import yaml


def get_config_dir(repo_root: Path) -> Path:
    """Get the repository config directory.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Path to .dchlog/
    """
    return repo_root / ".dchlog"


def get_config_file(repo_root: Path) -> Path:
    """Return path to the config.yaml file.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Path to .dchlog/config.yaml.
    """
    return get_config_dir(repo_root) / "config.yaml"


def load_config(repo_root: Path) -> dict:
    """Load the repository configuration.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Configuration dictionary. Empty if the file is missing or corrupted.
    """
    config_file = get_config_file(repo_root)

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError):
        # If config is corrupted, fall back to global/defaults
        return {}

    if not isinstance(config, dict):
        return {}
    return config


def save_config(repo_root: Path, config: dict) -> None:
    """Save the configuration to config.yaml.

    Args:
        repo_root: The root directory of the git repository.
        config: Configuration dictionary to save.
    """
    config_file = get_config_file(repo_root)

    # Ensure directory exists
    config_file.parent.mkdir(exist_ok=True)

    with open(config_file, "w") as f:
        yaml.dump(
            config,
            f,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )


def get_repo_changelog_config(repo_root: Path) -> dict:
    """Get the changelog section from repository config.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Dictionary with changelog configuration (may be empty).
    """
    return load_config(repo_root).get("changelog") or {}


def get_repo_core_team(repo_root: Path) -> Optional[list[str]]:
    """Get the core team list from repository config.

    Returns:
        List of names, or None if not configured for this repo.
    """
    core_team = get_repo_changelog_config(repo_root).get("core_team")
    if core_team is None:
        return None
    return list(core_team)


def set_repo_core_team(repo_root: Path, names: list[str]) -> None:
    """Set the core team list in repository config.

    Args:
        repo_root: The root directory of the git repository.
        names: Display names exempt from credit.
    """
    config = load_config(repo_root)
    changelog = config.get("changelog") or {}
    changelog["core_team"] = list(names)
    config["changelog"] = changelog
    save_config(repo_root, config)
