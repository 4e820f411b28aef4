"""Configuration utilities for the changelog formatter.

Contains functions for:
- Loading FormatterConfig from a configuration dictionary
- Converting FormatterConfig to a dictionary for saving
"""

from dchlog.changelog.constants import DEFAULT_CORE_TEAM
from dchlog.changelog.models import FormatterConfig


def load_formatter_config_from_dict(config_dict: dict) -> FormatterConfig:
    """Load FormatterConfig from a configuration dictionary.

    Args:
        config_dict: Dictionary with a "changelog" section.

    Returns:
        FormatterConfig instance.
    """
    section = config_dict.get("changelog") or {}

    core_team = section.get("core_team")
    if isinstance(core_team, (list, tuple, set, frozenset)):
        core_team = frozenset(str(name).strip() for name in core_team if name)
    else:
        core_team = DEFAULT_CORE_TEAM

    collect_bugs = section.get("collect_bugs", True)
    if not isinstance(collect_bugs, bool):
        collect_bugs = True

    first_parent = section.get("first_parent", True)
    if not isinstance(first_parent, bool):
        first_parent = True

    return FormatterConfig(
        core_team=core_team,
        collect_bugs=collect_bugs,
        first_parent=first_parent,
    )


def formatter_config_to_dict(config: FormatterConfig) -> dict:
    """Convert FormatterConfig to a dictionary for saving.

    Args:
        config: FormatterConfig instance.

    Returns:
        Dictionary representation.
    """
    return {
        "changelog": {
            "core_team": sorted(config.core_team),
            "collect_bugs": config.collect_bugs,
            "first_parent": config.first_parent,
        }
    }
