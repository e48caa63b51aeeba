"""Unit tests for intake text normalization helpers."""

import pytest

from cvtex.contexts.intake.normalizer import (
    count_bold_markers,
    is_separator_line,
    normalize_bullet_marker,
    normalize_unicode,
    split_entry_parts,
    strip_asterisks,
    strip_bold_markers,
)


@pytest.mark.unit
class TestNormalizeBulletMarker:
    @pytest.mark.parametrize("line", ["- Built features", "• Built features", "* Built features"])
    def test_bullet_glyphs(self, line):
        assert normalize_bullet_marker(line) == (True, "Built features")

    def test_bold_zero_artifact(self):
        assert normalize_bullet_marker("BOLD 0 Led the team") == (True, "Led the team")

    def test_surrounding_whitespace_ignored(self):
        assert normalize_bullet_marker("   -   Indented  ") == (True, "Indented")

    def test_non_bullet_returns_trimmed_line(self):
        assert normalize_bullet_marker("  **Developer** | Acme ") == (False, "**Developer** | Acme")

    def test_hyphen_needs_following_space(self):
        assert normalize_bullet_marker("-5% churn") == (False, "-5% churn")

    def test_bold_line_is_not_bullet(self):
        assert normalize_bullet_marker("**Languages**: Python")[0] is False


@pytest.mark.unit
class TestSeparatorLines:
    @pytest.mark.parametrize("line", ["—", "---", "***", "___", "-----", "======", "———", "  ---  "])
    def test_separators(self, line):
        assert is_separator_line(line)

    @pytest.mark.parametrize("line", ["", "- item", "--", "Experience", "a---b"])
    def test_non_separators(self, line):
        assert not is_separator_line(line)


@pytest.mark.unit
def test_normalize_unicode_replaces_invisible_characters():
    text = "Jane\u00a0Smith\u200b\r\nSenior\u202fEngineer\ufeff"
    assert normalize_unicode(text) == "Jane Smith\nSenior Engineer"


@pytest.mark.unit
def test_normalize_unicode_keeps_dashes_and_bullets():
    text = "Jan 2020 – Present\n• Item — note"
    assert normalize_unicode(text) == text


@pytest.mark.unit
def test_count_bold_markers():
    assert count_bold_markers("**a** and **b") == 3
    assert count_bold_markers("plain") == 0


@pytest.mark.unit
def test_strip_bold_markers_only_strips_edges():
    assert strip_bold_markers("**Software Engineer**") == "Software Engineer"
    assert strip_bold_markers("**Lead** Engineer") == "Lead** Engineer"


@pytest.mark.unit
def test_strip_asterisks():
    assert strip_asterisks("***Title* ") == "Title"


@pytest.mark.unit
class TestSplitEntryParts:
    def test_pipes(self):
        assert split_entry_parts("**Developer** | Acme Inc. | Jan 2020 - Dec 2022") == [
            "**Developer**",
            "Acme Inc.",
            "Jan 2020 - Dec 2022",
        ]

    def test_em_dashes(self):
        assert split_entry_parts("Developer — Acme — 2020 - 2022") == [
            "Developer",
            "Acme",
            "2020 - 2022",
        ]

    def test_hyphenated_words_survive(self):
        assert split_entry_parts("Full-Stack Developer") == ["Full-Stack Developer"]

    def test_empty_parts_dropped(self):
        assert split_entry_parts("| Acme ||") == ["Acme"]
