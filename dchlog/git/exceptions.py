"""Git-related exception classes.

Contains:
- GitError: Base exception for git-related errors
- InvalidRevisionError: Raised when a revision cannot be resolved
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class InvalidRevisionError(GitError):
    """Raised when a revision does not name a commit."""

    pass
