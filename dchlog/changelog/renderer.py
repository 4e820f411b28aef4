"""Changelog entry renderer.

Format:
    - <subject> [<author>] (LP: <bugs>)

Entries are indented four spaces, wrapped to 79 columns and continued with
a six space indent. Core team members are not credited.
"""

import textwrap
from typing import Iterable, Iterator, Optional

from dchlog.changelog.models import CommitRecord, FormatterConfig, get_display_name
from dchlog.changelog.parser import iter_commits


def build_suffix(display_name: str, bugs: str, core_team: Iterable[str] = ()) -> str:
    """Build the credit and bug suffix for an entry.

    Args:
        display_name: Author display name.
        bugs: Comma separated bug ids, or empty.
        core_team: Names that are never credited.

    Returns:
        Suffix such as " [Jane Doe] (LP: 123)", or an empty string.
    """
    if display_name in core_team:
        display_name = ""

    suffix = ""
    if display_name:
        suffix += f" [{display_name}]"
    if bugs:
        suffix += f" (LP: {bugs})"
    return suffix


def _wrap_paragraphs(paragraphs: list[str], width: int) -> list[str]:
    """Wrap each paragraph to width, separating them with a blank line."""
    wrapped: list[str] = []
    for i, paragraph in enumerate(paragraphs):
        if i:
            wrapped.append("")
        wrapped.extend(
            textwrap.wrap(
                paragraph,
                width=width,
                break_on_hyphens=False,
            )
        )
    return wrapped


def _indent_lines(lines: list[str], config: FormatterConfig) -> list[str]:
    """Apply bullet and continuation indents, dropping blank lines."""
    result: list[str] = []
    for line in lines:
        line = line.strip()
        if not line:
            continue
        prefix = config.continuation_indent if result else config.indent
        result.append((prefix + line).rstrip())
    return result


def render_entry(
    subject: str,
    author: str,
    bugs: str = "",
    config: Optional[FormatterConfig] = None,
) -> list[str]:
    """Render one commit as changelog lines.

    Args:
        subject: Commit subject line.
        author: Commit author as "Display Name <email>".
        bugs: Comma separated bug ids, or empty.
        config: Formatter configuration. Defaults to FormatterConfig().

    Returns:
        The rendered lines, without trailing newlines.
    """
    if config is None:
        config = FormatterConfig()

    # Measure display columns, not characters
    subject = subject.expandtabs()
    suffix = build_suffix(get_display_name(author), bugs, config.core_team)
    avail = config.available_width

    if len(subject) + len(suffix) <= avail:
        return [config.indent + subject + suffix]

    if len(subject) >= avail:
        # Subject alone overflows: wrap everything as one block
        wrapped = _wrap_paragraphs([subject + suffix], avail)
    else:
        # Keep the suffix from being split across the subject's last word
        wrapped = _wrap_paragraphs([subject, suffix], avail)

    return _indent_lines(wrapped, config)


def render_record(record: CommitRecord, config: Optional[FormatterConfig] = None) -> list[str]:
    """Render a parsed commit record as changelog lines.

    Args:
        record: The commit to render.
        config: Formatter configuration.

    Returns:
        The rendered lines.
    """
    return render_entry(record.subject, record.author, record.bugs, config)


def format_changelog(lines: Iterable[str], config: Optional[FormatterConfig] = None) -> Iterator[str]:
    """Parse git log lines and render every commit.

    Args:
        lines: Lines of `git log --format=full` output.
        config: Formatter configuration.

    Yields:
        Changelog lines in commit order.
    """
    if config is None:
        config = FormatterConfig()

    for record in iter_commits(lines, collect_bugs=config.collect_bugs):
        yield from render_record(record, config)
