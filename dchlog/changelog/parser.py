"""Parser for `git log --format=full` output.

Contains:
- parse_bug_references: Extract Launchpad bug ids from a body line
- iter_commits: Lazily turn log lines into CommitRecord values
- parse_log: Parse a complete log text into a list of records
"""

from typing import Iterable, Iterator, Optional

from dchlog.changelog.constants import (
    AUTHOR_PREFIX,
    BUG_ID_REGEX,
    BUG_TAG_REGEX,
    COMMIT_BOUNDARY_REGEX,
    HASHED_BUG_ID_REGEX,
)
from dchlog.changelog.models import CommitRecord


def parse_bug_references(line: str) -> Optional[list[str]]:
    """Extract bug ids from an "LP: #123, #456" line.

    Args:
        line: A single line of the commit body.

    Returns:
        List of bug ids (possibly empty) if the line is a bug tag line,
        None otherwise.
    """
    match = BUG_TAG_REGEX.match(line)
    if not match:
        return None
    refs = match.group(1)
    if "#" in refs:
        return HASHED_BUG_ID_REGEX.findall(refs)
    return BUG_ID_REGEX.findall(refs)


def iter_commits(lines: Iterable[str], collect_bugs: bool = True) -> Iterator[CommitRecord]:
    """Parse git log lines into commit records.

    A record is emitted only once the next "commit" line or the end of the
    input is seen. Lines before the first commit are ignored.

    Args:
        lines: Lines of `git log --format=full` output.
        collect_bugs: If False, bug references are dropped as they are parsed.

    Yields:
        One CommitRecord per commit, in input order.
    """
    current: Optional[dict] = None
    subject_next = False

    for raw_line in lines:
        line = raw_line.rstrip("\r\n")

        boundary = COMMIT_BOUNDARY_REGEX.match(line)
        if boundary:
            if current is not None:
                yield CommitRecord(**current)
            current = {"commit": boundary.group(1), "bug_references": []}
            subject_next = False
            continue

        if current is None:
            continue

        if subject_next:
            current["subject"] = line.strip()
            subject_next = False
            continue

        if "subject" not in current:
            if line.startswith(AUTHOR_PREFIX):
                current["author"] = line[len(AUTHOR_PREFIX):].strip()
            elif not line.strip():
                subject_next = True
            continue

        bugs = parse_bug_references(line)
        if bugs and collect_bugs:
            current["bug_references"].extend(bugs)

    if current is not None:
        yield CommitRecord(**current)


def parse_log(text: str, collect_bugs: bool = True) -> list[CommitRecord]:
    """Parse a complete git log text.

    Args:
        text: Full `git log --format=full` output.
        collect_bugs: If False, bug references are dropped.

    Returns:
        List of commit records in input order.
    """
    return list(iter_commits(text.splitlines(), collect_bugs=collect_bugs))
