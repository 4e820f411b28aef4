"""Constants for the dchlog changelog formatter.

Contains:
- CHANGELOG_WIDTH: Maximum width of a rendered changelog line
- ENTRY_INDENT / CONTINUATION_INDENT: Bullet and continuation prefixes
- BUG_TAG_REGEX / BUG_ID_REGEX: Launchpad bug reference markers
- DEFAULT_CORE_TEAM: Committers that never get a credit suffix
"""

import re

CHANGELOG_WIDTH = 79

ENTRY_INDENT = "    - "
CONTINUATION_INDENT = "      "

# "commit <sha>" as emitted by git log --format=full
COMMIT_BOUNDARY_REGEX = re.compile(r"^commit\s+([0-9a-fA-F]+)")

AUTHOR_PREFIX = "Author:"

# Body lines like "    LP: #1234567, #7654321"
BUG_TAG_REGEX = re.compile(r"^\s*LP:\s*(.*)$")
BUG_ID_REGEX = re.compile(r"(\d+)")
# When any "#" is present only "#<digits>" groups are bug ids
HASHED_BUG_ID_REGEX = re.compile(r"#(\d+)")

DEFAULT_CORE_TEAM = frozenset([
    "Chad Smith",
    "Daniel Watkins",
    "Joshua Powers",
    "Ryan Harper",
    "Scott Moser",
])
