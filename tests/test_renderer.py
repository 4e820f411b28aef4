"""Tests for dchlog.changelog.renderer module."""

import pytest

from dchlog.changelog import (
    CHANGELOG_WIDTH,
    CommitRecord,
    FormatterConfig,
    build_suffix,
    format_changelog,
    get_display_name,
    render_entry,
    render_record,
)


LONG_SUBJECT = (
    "add feature X with a much longer description that will not fit on one "
    "single eighty column line at all"
)


class TestGetDisplayName:
    """Tests for get_display_name function."""

    def test_strips_email(self):
        """Test that the email part is removed."""
        assert get_display_name("Jane Doe <jane@x.com>") == "Jane Doe"

    def test_no_email(self):
        """Test author without an email."""
        assert get_display_name("Jane Doe") == "Jane Doe"

    def test_empty(self):
        """Test empty author."""
        assert get_display_name("") == ""


class TestBuildSuffix:
    """Tests for build_suffix function."""

    def test_name_and_bugs(self):
        """Test suffix with credit and bugs."""
        assert build_suffix("Jane Doe", "1, 2") == " [Jane Doe] (LP: 1, 2)"

    def test_name_only(self):
        """Test suffix with credit only."""
        assert build_suffix("Jane Doe", "") == " [Jane Doe]"

    def test_bugs_only(self):
        """Test suffix with bugs only."""
        assert build_suffix("", "123456") == " (LP: 123456)"

    def test_core_team_not_credited(self):
        """Test that core team names are dropped."""
        assert build_suffix("Scott Moser", "", {"Scott Moser"}) == ""
        assert build_suffix("Scott Moser", "7", {"Scott Moser"}) == " (LP: 7)"

    def test_core_team_requires_exact_match(self):
        """Test that partial names are still credited."""
        assert build_suffix("Scott", "", {"Scott Moser"}) == " [Scott]"


class TestRenderEntry:
    """Tests for render_entry function."""

    def test_short_entry_is_one_line(self):
        """Test that a short entry renders on one line."""
        lines = render_entry("fix the thing", "Jane Doe <jane@x.com>", "123456")
        assert lines == ["    - fix the thing [Jane Doe] (LP: 123456)"]

    def test_core_team_author_not_credited(self):
        """Test that core team members get no credit regardless of email."""
        lines = render_entry("fix the thing", "Scott Moser <someone@else.org>")
        assert lines == ["    - fix the thing"]

    def test_exactly_full_width_is_one_line(self):
        """Test the single line boundary."""
        subject = "a" * (73 - len(" [Jane Doe]"))
        lines = render_entry(subject, "Jane Doe <jane@x.com>")

        assert lines == ["    - " + subject + " [Jane Doe]"]
        assert len(lines[0]) == CHANGELOG_WIDTH

    def test_suffix_moves_to_continuation_line(self):
        """Test that a fitting subject keeps its suffix on its own line."""
        subject = "Fix network configuration rendering for bonded interfaces"
        lines = render_entry(subject, "Jane Doe <jane@x.com>", "1234567")

        assert lines == [
            "    - Fix network configuration rendering for bonded interfaces",
            "      [Jane Doe] (LP: 1234567)",
        ]

    def test_one_past_full_width_wraps(self):
        """Test the first width that no longer fits on one line."""
        subject = "a" * (74 - len(" [Jane Doe]"))
        lines = render_entry(subject, "Jane Doe <jane@x.com>")

        assert lines == ["    - " + subject, "      [Jane Doe]"]

    def test_long_subject_wraps_as_one_block(self):
        """Test that a long subject wraps together with its suffix."""
        lines = render_entry(LONG_SUBJECT, "Jane Doe <jane@x.com>", "99999")

        assert lines == [
            "    - add feature X with a much longer description that will not fit on one",
            "      single eighty column line at all [Jane Doe] (LP: 99999)",
        ]

    def test_long_suffix_wraps(self):
        """Test that many bugs wrap onto several continuation lines."""
        bugs = ", ".join(str(1000000 + i) for i in range(15))
        lines = render_entry("fix the thing", "Jane Doe <jane@x.com>", bugs)

        assert lines[0] == "    - fix the thing"
        assert all(line.startswith("      ") for line in lines[1:])
        assert len(lines) > 2
        joined = " ".join(line.strip() for line in lines[1:])
        assert joined == f"[Jane Doe] (LP: {bugs})"

    def test_unbreakable_word_respects_width(self):
        """Test that a word longer than the line is split."""
        lines = render_entry("x" * 100, "")

        assert lines == ["    - " + "x" * 73, "      " + "x" * 27]

    def test_no_line_exceeds_width(self):
        """Test width invariant across subject lengths."""
        for size in range(1, 200, 7):
            subject = " ".join(["word"] * size)
            for line in render_entry(subject, "Jane Doe <jane@x.com>", "1, 2, 3"):
                assert len(line) <= CHANGELOG_WIDTH
                assert line == line.rstrip()
                assert line.strip()

    def test_continuation_lines_have_no_extra_indent(self):
        """Test leading whitespace from wrapping is stripped."""
        lines = render_entry(LONG_SUBJECT + "  trailing", "Jane Doe <jane@x.com>")
        for line in lines[1:]:
            assert line.startswith("      ")
            assert not line.startswith("       ")

    def test_tabs_count_as_display_columns(self):
        """Test that a tab is measured by the columns it expands to."""
        subject = "x" * 60 + "\t" + "y" * 12
        lines = render_entry(subject, "")

        assert "\t" not in "".join(lines)
        assert all(len(line) <= CHANGELOG_WIDTH for line in lines)
        assert lines == ["    - " + "x" * 60, "      " + "y" * 12]

    def test_custom_core_team(self):
        """Test that the core team comes from the config."""
        config = FormatterConfig(core_team=frozenset(["Jane Doe"]))

        assert render_entry("fix", "Jane Doe <j@x>", config=config) == ["    - fix"]
        assert render_entry("fix", "Scott Moser <s@x>", config=config) == ["    - fix [Scott Moser]"]

    def test_empty_subject(self):
        """Test malformed record still renders."""
        assert render_entry("", "") == ["    - "]


class TestRenderRecord:
    """Tests for render_record function."""

    def test_renders_bugs(self):
        """Test that bug references are joined."""
        record = CommitRecord(subject="fix", author="Jane Doe <j@x>", bug_references=["1", "2"])
        assert render_record(record) == ["    - fix [Jane Doe] (LP: 1, 2)"]


class TestFormatChangelog:
    """Tests for format_changelog function."""

    def test_end_to_end(self, sample_git_log):
        """Test the full parse and render pipeline."""
        lines = list(format_changelog(sample_git_log.splitlines()))

        assert lines[0] == "    - fix the thing"
        assert lines[1].startswith("    - add feature X")
        assert len(lines) > 2
        for line in lines[2:]:
            assert line.startswith("      ")
        assert lines[-1].endswith("Doe] (LP: 99999)")
        assert all(len(line) <= CHANGELOG_WIDTH for line in lines)

    def test_suppress_mode(self, sample_git_log):
        """Test that no bug references appear in suppress mode."""
        config = FormatterConfig(collect_bugs=False)
        lines = list(format_changelog(sample_git_log.splitlines(), config))

        assert not any("(LP:" in line for line in lines)
        assert lines[-1].endswith("[Jane Doe]")

    def test_duplicate_bugs_are_kept(self):
        """Test that repeated bug ids are not collapsed."""
        log = [
            "commit abc",
            "Author: Jane Doe <j@x>",
            "",
            "    fix",
            "",
            "    LP: #1",
            "    LP: #1, #2",
        ]
        assert list(format_changelog(log)) == ["    - fix [Jane Doe] (LP: 1, 1, 2)"]

    @pytest.mark.parametrize("lines", [[], [""], ["not a commit"]])
    def test_empty_input(self, lines):
        """Test that input without commits produces no output."""
        assert list(format_changelog(lines)) == []
