"""Global configuration management for dchlog.

Handles user-level configuration stored in ~/.dchlog/config.yaml:
- changelog.core_team: Names that never receive a credit suffix
- changelog.collect_bugs: Whether LP bug references are emitted
- changelog.first_parent: Whether history follows only first parents
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml


class GlobalConfigError(Exception):
    """Raised when there's an error with global configuration."""
    pass


_CONFIG_DIR = Path.home() / ".dchlog"


def get_global_config_dir() -> Path:
    """Get the global dchlog configuration directory.

    Returns:
        Path to ~/.dchlog/
    """
    return _CONFIG_DIR


def ensure_global_config_dir() -> Path:
    """Ensure the global config directory exists.

    Returns:
        Path to ~/.dchlog/
    """
    config_dir = get_global_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_file_path() -> Path:
    """Get path to config.yaml file.

    Returns:
        Path to ~/.dchlog/config.yaml
    """
    return get_global_config_dir() / "config.yaml"


def load_global_config() -> Dict[str, Any]:
    """Load global configuration from ~/.dchlog/config.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
        return config
    except Exception as e:
        raise GlobalConfigError(f"Failed to load config from {config_file}: {e}")


def save_global_config(config: Dict[str, Any]) -> None:
    """Save global configuration to ~/.dchlog/config.yaml.

    Args:
        config: Configuration dictionary to save.
    """
    ensure_global_config_dir()
    config_file = get_config_file_path()

    try:
        with open(config_file, "w") as f:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False)
    except Exception as e:
        raise GlobalConfigError(f"Failed to save config to {config_file}: {e}")


def get_changelog_config() -> dict:
    """Get the changelog section from global config.

    Returns:
        Dictionary with changelog configuration.
    """
    config = load_global_config()
    return config.get("changelog") or {}


def set_changelog_config(changelog_config: dict) -> None:
    """Set the changelog section in global config.

    Args:
        changelog_config: Dictionary with changelog configuration.
    """
    config = load_global_config()
    config["changelog"] = changelog_config
    save_global_config(config)


def get_core_team() -> Optional[List[str]]:
    """Get the core team list from global config.

    Returns:
        List of names, or None if not configured.
    """
    core_team = get_changelog_config().get("core_team")
    if core_team is None:
        return None
    return list(core_team)


def set_core_team(names: List[str]) -> None:
    """Set the core team list in global config.

    Args:
        names: Display names exempt from credit.
    """
    changelog_config = get_changelog_config()
    changelog_config["core_team"] = list(names)
    set_changelog_config(changelog_config)
