"""Read-only helpers for debian/changelog.

Only the top stanza is inspected: its header line for the version being
prepared, and its body for an SRU bug placeholder such as "(LP: #XXXXXX)".
When the placeholder is present the generated entries must not carry their
own bug references.
"""

import re
from pathlib import Path
from typing import Optional


class DebianChangelogError(Exception):
    """Raised when debian/changelog cannot be read."""
    pass


# "cloud-init (23.1-0ubuntu1) lunar; urgency=medium"
_HEADER_REGEX = re.compile(r"^(?P<package>\S+)\s+\((?P<version>[^)]+)\)\s+(?P<dists>[^;]*);")

# Placeholder bug left for the SRU tracking bug: "LP: #XXXXXX", "LP: #SRU"
_SRU_PLACEHOLDER_REGEX = re.compile(r"LP:\s*#(?:X+|SRU)\b", re.IGNORECASE)

# Stanza trailer: " -- Name <email>  date"
_TRAILER_PREFIX = " -- "


def get_changelog_path(repo_root: Path) -> Path:
    """Get path to debian/changelog in a repository.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Path to debian/changelog.
    """
    return repo_root / "debian" / "changelog"


def read_top_stanza(changelog_path: Path) -> list[str]:
    """Read the lines of the first stanza of a changelog.

    Args:
        changelog_path: Path to debian/changelog.

    Returns:
        Lines from the first header up to and including its trailer.
        Empty list if the file doesn't exist.

    Raises:
        DebianChangelogError: If the file exists but cannot be read.
    """
    if not changelog_path.exists():
        return []

    stanza: list[str] = []
    try:
        with open(changelog_path, "r", encoding="utf-8") as f:
            for line in f:
                line = line.rstrip("\n")
                if not stanza and not line.strip():
                    continue
                stanza.append(line)
                if line.startswith(_TRAILER_PREFIX):
                    break
    except (OSError, UnicodeDecodeError) as e:
        raise DebianChangelogError(f"Failed to read {changelog_path}: {e}")

    return stanza


def read_top_version(changelog_path: Path) -> Optional[str]:
    """Get the version of the newest changelog stanza.

    Returns:
        The version string, or None if the header is missing or malformed.
    """
    stanza = read_top_stanza(changelog_path)
    if not stanza:
        return None
    match = _HEADER_REGEX.match(stanza[0])
    if not match:
        return None
    return match.group("version")


def has_sru_placeholder(changelog_path: Path) -> bool:
    """Check whether the newest stanza already names an SRU placeholder bug.

    Args:
        changelog_path: Path to debian/changelog.

    Returns:
        True if a placeholder such as "(LP: #XXXXXX)" is present.
    """
    return any(_SRU_PLACEHOLDER_REGEX.search(line) for line in read_top_stanza(changelog_path))
