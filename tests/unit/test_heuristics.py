"""Unit tests for the tunable parsing heuristics."""

import pytest

from cvtex.contexts.intake.heuristics import (
    DEFAULT_HEURISTICS_PATH,
    compile_heuristics,
    load_heuristics,
)
from cvtex.contexts.intake.section_parsers import parse_experience_header

CUSTOM_HEURISTICS = """\
experience:
  title_keywords: [Wizard]
  location_tokens: [Hogsmeade]
education:
  entry_keywords: [Academy]
  institution_keywords: [Academy]
  degree_keywords: [Diploma]
  grade_keywords: [Outstanding]
projects:
  technology_keywords: [Wand]
  header_cues: [Spell]
  date_range_cues: ['\\d{4}']
"""


@pytest.mark.unit
def test_packaged_config_exists():
    assert DEFAULT_HEURISTICS_PATH.is_file()


@pytest.mark.unit
def test_load_is_cached():
    assert load_heuristics() is load_heuristics()


@pytest.mark.unit
class TestPackagedKeywords:
    def test_job_title_is_word_bounded(self):
        heuristics = load_heuristics()
        assert heuristics.job_title.search("Senior Software Engineer")
        assert not heuristics.job_title.search("Engineering Team")

    def test_location_token_is_whole_part(self):
        heuristics = load_heuristics()
        assert heuristics.location_token.match("remote")
        assert not heuristics.location_token.match("Remote-first company")

    def test_degree_with_optional_dot(self):
        heuristics = load_heuristics()
        assert heuristics.degree.search("PhD in Physics")
        assert heuristics.degree.search("Ph.D in Physics")

    def test_technology_parenthetical_captures_contents(self):
        match = load_heuristics().technology_parenthetical.search("Bot (Python, Redis)")
        assert match.group(1) == "Python, Redis"


@pytest.mark.unit
def test_custom_config_file(tmp_path):
    config_path = tmp_path / "heuristics.yaml"
    config_path.write_text(CUSTOM_HEURISTICS, encoding="utf-8")

    heuristics = load_heuristics(config_path)

    assert heuristics.job_title.search("Head Wizard")
    assert not heuristics.job_title.search("Software Engineer")
    assert heuristics.location_token.match("Hogsmeade")


@pytest.mark.unit
def test_custom_heuristics_change_header_parsing():
    heuristics = compile_heuristics(
        {
            "experience": {"title_keywords": ["Wizard"], "location_tokens": ["Hogsmeade"]},
            "education": {
                "entry_keywords": ["Academy"],
                "institution_keywords": ["Academy"],
                "degree_keywords": ["Diploma"],
                "grade_keywords": ["Outstanding"],
            },
            "projects": {
                "technology_keywords": ["Wand"],
                "header_cues": ["Spell"],
                "date_range_cues": [r"\d{4}"],
            },
        }
    )

    default_header = parse_experience_header("Wizard | Hogwarts | 2020 - 2022")
    custom_header = parse_experience_header("Wizard | Hogwarts | 2020 - 2022", heuristics)

    assert default_header["company"] == "Wizard"
    assert custom_header["position"] == "Wizard"
    assert custom_header["company"] == "Hogwarts"
