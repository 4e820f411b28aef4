"""Data models for the dchlog changelog formatter.

Contains:
- get_display_name: Strip the email part of an author string
- CommitRecord: Pydantic model for one commit parsed from git log output
- FormatterConfig: Configuration dataclass for changelog rendering
"""

from dataclasses import dataclass, field

from pydantic import BaseModel, field_validator

from dchlog.changelog.constants import (
    CHANGELOG_WIDTH,
    CONTINUATION_INDENT,
    DEFAULT_CORE_TEAM,
    ENTRY_INDENT,
)


def get_display_name(author: str) -> str:
    """Strip the trailing "<email>" from an author string.

    Args:
        author: Author as "Display Name <email>".

    Returns:
        The display name.
    """
    return author.split(" <", 1)[0]


@dataclass(frozen=True)
class FormatterConfig:
    """Configuration for changelog entry rendering."""

    width: int = CHANGELOG_WIDTH
    indent: str = ENTRY_INDENT
    continuation_indent: str = CONTINUATION_INDENT
    core_team: frozenset[str] = field(default_factory=lambda: DEFAULT_CORE_TEAM)

    # Discard LP bug references (target changelog already carries an SRU bug)
    collect_bugs: bool = True

    # Follow only the first parent when reading history
    first_parent: bool = True

    @property
    def available_width(self) -> int:
        """Width left for text once the bullet indent is applied."""
        return self.width - len(self.indent)


class CommitRecord(BaseModel):
    """A single commit read from git log output.

    Attributes:
        commit: Commit identifier from the boundary line.
        subject: First line of the commit message.
        author: Author as "Display Name <email>".
        bug_references: Launchpad bug ids in the order they were found.
    """

    commit: str = ""
    subject: str = ""
    author: str = ""
    bug_references: list[str] = []

    @field_validator("commit", "subject", "author", mode="before")
    @classmethod
    def ensure_string(cls, v):
        """Ensure text fields default to an empty string."""
        if v is None:
            return ""
        return v

    @field_validator("bug_references", mode="before")
    @classmethod
    def ensure_bug_list(cls, v):
        """Ensure bug_references is a list."""
        if v is None:
            return []
        return v

    @property
    def display_name(self) -> str:
        """Author name without the trailing email address."""
        return get_display_name(self.author)

    @property
    def bugs(self) -> str:
        """Bug references joined the way changelogs list them."""
        return ", ".join(self.bug_references)
