"""Unit tests for the contact block parser."""

import pytest

from cvtex.contexts.intake.contact_parser import (
    MAX_CONTACT_LINES,
    clean_name,
    collect_contact_lines,
    parse_contact_block,
    url_display_text,
)
from cvtex.contexts.intake.cv_data_structure import ContactInfo, Link


def _contact(text: str) -> ContactInfo:
    contact, _ = parse_contact_block(text.split("\n"))
    return contact


@pytest.mark.unit
class TestName:
    @pytest.mark.parametrize("line", ["John Doe", "# John Doe", "**John Doe**", "## **John Doe**"])
    def test_name_markers_removed(self, line):
        assert _contact(f"{line}\njohn@email.com").name == "John Doe"

    def test_unicode_name(self):
        assert _contact("José García\njosé@email.com").name == "José García"

    def test_clean_name(self):
        assert clean_name("# **Jane Smith**") == "Jane Smith"


@pytest.mark.unit
class TestFields:
    def test_email(self):
        assert _contact("John Doe\njohn.doe@example.com\n555-123-4567").email == "john.doe@example.com"

    @pytest.mark.parametrize("phone", ["(555) 123-4567", "+1-555-123-4567", "555-123-4567"])
    def test_phone_formats(self, phone):
        assert _contact(f"John Doe\njohn@email.com\n{phone}").phone == phone

    def test_linkedin_without_scheme(self):
        contact = _contact("John Doe\njohn@email.com\nlinkedin.com/in/johndoe")
        assert contact.linkedin == "linkedin.com/in/johndoe"
        assert contact.website is None

    def test_linkedin_with_scheme_and_slash(self):
        contact = _contact("John Doe\nhttps://www.linkedin.com/in/johndoe/")
        assert contact.linkedin == "https://www.linkedin.com/in/johndoe/"
        assert contact.website is None

    def test_github(self):
        assert _contact("John Doe\ngithub.com/johndoe").github == "github.com/johndoe"

    def test_website_and_additional_links(self):
        contact = _contact(
            "John Doe\njohn@email.com\nhttps://portfolio.com\nhttps://blog.johndoe.com"
        )
        assert contact.website == "https://portfolio.com"
        assert contact.additional_links == (
            Link(url="https://blog.johndoe.com", text="blog.johndoe.com"),
        )

    def test_url_trailing_punctuation_trimmed(self):
        assert _contact("John Doe\nSite: https://johndoe.com).").website == "https://johndoe.com"

    def test_location_on_its_own_line(self):
        contact = _contact("John Doe\nSan Francisco, California\njohn@email.com")
        assert contact.location == "San Francisco, California"

    def test_location_not_taken_from_email_line(self):
        contact = _contact("Jane Smith\nSan Francisco, CA | jane@email.com | +1 (555) 123-4567")
        assert contact.location is None
        assert contact.email == "jane@email.com"
        assert contact.phone == "+1 (555) 123-4567"

    def test_first_match_wins(self):
        contact = _contact("John Doe\nfirst@a.com\nsecond@b.com")
        assert contact.email == "first@a.com"


@pytest.mark.unit
class TestBlockBoundary:
    def test_stops_before_section_header(self):
        lines = ["John Doe", "john@email.com", "", "## Experience", "Some content"]
        collected, consumed = collect_contact_lines(lines)
        assert collected == ["John Doe", "john@email.com"]
        assert consumed == 2

    def test_separator_is_consumed(self):
        lines = ["John Doe", "john@email.com", "---", "## Experience"]
        collected, consumed = collect_contact_lines(lines)
        assert collected == ["John Doe", "john@email.com"]
        assert consumed == 3

    def test_header_on_first_line_is_the_name(self):
        collected, consumed = collect_contact_lines(["EXPERIENCE", "john@email.com"])
        assert collected == ["EXPERIENCE", "john@email.com"]
        assert consumed == 2

    def test_at_most_ten_lines(self):
        lines = ["John Doe"] + [f"line {i}" for i in range(20)]
        collected, consumed = collect_contact_lines(lines)
        assert len(collected) == MAX_CONTACT_LINES
        assert consumed == MAX_CONTACT_LINES

    def test_empty_input(self):
        contact, consumed = parse_contact_block([""])
        assert contact == ContactInfo()
        assert consumed == 0


@pytest.mark.unit
def test_url_display_text():
    assert url_display_text("https://www.blog.example.com") == "blog.example.com"
    assert url_display_text("http://example.com/x") == "example.com/x"
