"""Git history retrieval for changelog generation.

Contains:
- resolve_revision: Verify that a revision names a commit
- get_last_tag: Get the most recent tag reachable from a revision
- get_log_lines: Get `git log --format=full` output for a revision range
"""

from pathlib import Path
from typing import Optional

from dchlog.git.exceptions import GitError, InvalidRevisionError
from dchlog.git.runner import _run_git_command


def resolve_revision(rev: str, cwd: Optional[Path] = None) -> str:
    """Resolve a revision to a full commit hash.

    Args:
        rev: Any revision git understands (tag, branch, sha, HEAD~3).
        cwd: Repository directory.

    Returns:
        The full commit hash.

    Raises:
        InvalidRevisionError: If the revision does not name a commit.
    """
    try:
        return _run_git_command(["rev-parse", "--verify", "--quiet", f"{rev}^{{commit}}"], cwd=cwd)
    except GitError:
        raise InvalidRevisionError(f"Unknown revision: {rev}")


def get_last_tag(rev: str = "HEAD", cwd: Optional[Path] = None) -> Optional[str]:
    """Get the most recent tag reachable from the parent of rev.

    A tag on rev itself is skipped, so a freshly tagged release still
    yields the previous release as the start of the range.

    Returns:
        The tag name, or None if no tag is reachable.
    """
    try:
        tag = _run_git_command(["describe", "--tags", "--abbrev=0", f"{rev}^"], cwd=cwd)
    except GitError:
        # No tags yet, or rev is the root commit
        return None
    return tag or None


def get_log_lines(
    from_rev: str,
    to_rev: str = "HEAD",
    first_parent: bool = True,
    cwd: Optional[Path] = None,
) -> list[str]:
    """Get the full-format log for from_rev..to_rev.

    Args:
        from_rev: Exclusive start of the range.
        to_rev: Inclusive end of the range.
        first_parent: Only follow the first parent of merge commits.
        cwd: Repository directory.

    Returns:
        Log output split into lines, newest commit first.

    Raises:
        InvalidRevisionError: If either end of the range is unknown.
        GitError: If git log fails.
    """
    for rev in (from_rev, to_rev):
        resolve_revision(rev, cwd=cwd)

    args = ["log"]
    if first_parent:
        args.append("--first-parent")
    args += ["--no-color", "--format=full", f"{from_rev}..{to_rev}"]

    output = _run_git_command(args, cwd=cwd)
    if not output:
        return []
    return output.split("\n")
