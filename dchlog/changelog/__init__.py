"""Changelog entry formatting for dchlog.

This package turns `git log --format=full` output into Debian changelog
entries with:
- constants: CHANGELOG_WIDTH, ENTRY_INDENT, CONTINUATION_INDENT, DEFAULT_CORE_TEAM
- models: CommitRecord, FormatterConfig, get_display_name
- parser: iter_commits, parse_log, parse_bug_references
- renderer: build_suffix, render_entry, render_record, format_changelog
- config: load_formatter_config_from_dict, formatter_config_to_dict
"""

# Constants
from dchlog.changelog.constants import (
    CHANGELOG_WIDTH,
    CONTINUATION_INDENT,
    DEFAULT_CORE_TEAM,
    ENTRY_INDENT,
)

# Models
from dchlog.changelog.models import (
    CommitRecord,
    FormatterConfig,
    get_display_name,
)

# Parser
from dchlog.changelog.parser import (
    iter_commits,
    parse_bug_references,
    parse_log,
)

# Renderer
from dchlog.changelog.renderer import (
    build_suffix,
    format_changelog,
    render_entry,
    render_record,
)

# Configuration utilities
from dchlog.changelog.config import (
    formatter_config_to_dict,
    load_formatter_config_from_dict,
)


__all__ = [
    # Constants
    "CHANGELOG_WIDTH",
    "CONTINUATION_INDENT",
    "DEFAULT_CORE_TEAM",
    "ENTRY_INDENT",
    # Models
    "CommitRecord",
    "FormatterConfig",
    "get_display_name",
    # Parser
    "iter_commits",
    "parse_bug_references",
    "parse_log",
    # Renderer
    "build_suffix",
    "format_changelog",
    "render_entry",
    "render_record",
    # Configuration
    "formatter_config_to_dict",
    "load_formatter_config_from_dict",
]
