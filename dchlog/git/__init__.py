"""Git access for dchlog.

This package wraps the git command line with:
- exceptions: GitError, InvalidRevisionError
- runner: _run_git_command, get_repo_root
- history: resolve_revision, get_last_tag, get_log_lines
"""

# Exceptions
from dchlog.git.exceptions import (
    GitError,
    InvalidRevisionError,
)

# Runner utilities
from dchlog.git.runner import (
    _run_git_command,
    get_repo_root,
)

# History utilities
from dchlog.git.history import (
    get_last_tag,
    get_log_lines,
    resolve_revision,
)


__all__ = [
    # Exceptions
    "GitError",
    "InvalidRevisionError",
    # Runner
    "_run_git_command",
    "get_repo_root",
    # History
    "get_last_tag",
    "get_log_lines",
    "resolve_revision",
]
