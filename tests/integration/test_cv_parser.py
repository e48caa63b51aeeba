"""Integration tests for parse_cv: contact block, section splitting and assembly."""

import pytest

from cvtex.contexts.intake.cv_data_structure import (
    ExperienceEntry,
    GenericSection,
    ParsedCV,
    SkillCategory,
)
from cvtex.contexts.intake.cv_parser import parse_cv, split_sections

EXPERIENCE_ENTRY = ExperienceEntry(
    company="Acme Inc.",
    position="Developer",
    date_range="Jan 2020 - Dec 2022",
    bullets=("Built features",),
)


@pytest.mark.integration
def test_contact_and_experience():
    cv = parse_cv(
        "John Doe\njohn@email.com\n\n## Experience\n"
        "**Developer** | Acme Inc. | Jan 2020 - Dec 2022\n- Built features\n"
    )

    assert cv.contact.name == "John Doe"
    assert cv.contact.email == "john@email.com"
    assert cv.experience == (EXPERIENCE_ENTRY,)


@pytest.mark.integration
@pytest.mark.parametrize(
    "header", ["## Experience", "EXPERIENCE", "**Experience**", "Experience:", "Work History"]
)
def test_header_style_does_not_change_result(header):
    cv = parse_cv(
        f"John Doe\njohn@email.com\n\n{header}\n"
        "**Developer** | Acme Inc. | Jan 2020 - Dec 2022\n- Built features\n"
    )
    assert cv.experience == (EXPERIENCE_ENTRY,)


@pytest.mark.integration
def test_empty_input():
    cv = parse_cv("")
    assert cv == ParsedCV()
    assert cv.contact.name == ""


@pytest.mark.integration
def test_two_skill_categories():
    cv = parse_cv("Jane Doe\n\n## Skills\n**Languages**: Python, Go\n**Databases**: Redis")
    assert cv.skills == (
        SkillCategory(category="Languages", skills="Python, Go"),
        SkillCategory(category="Databases", skills="Redis"),
    )


@pytest.mark.integration
def test_unknown_header_becomes_generic_section():
    cv = parse_cv("Jane Doe\n\n## Volunteer Work\n- Helped at shelter")
    assert cv.generic_sections == (
        GenericSection(title="Volunteer Work", content=("Helped at shelter",)),
    )


@pytest.mark.integration
def test_empty_generic_section_is_dropped():
    cv = parse_cv("Jane Doe\n\n## Volunteer Work\n\n## Skills\nPython")
    assert cv.generic_sections == ()
    assert len(cv.skills) == 1


@pytest.mark.integration
def test_repeated_section_types_accumulate():
    cv = parse_cv(
        "Jane Doe\n\n## Summary\nFirst part.\n\n## Skills\nA: Python\n\n"
        "## About Me\nSecond part.\n\n## Technical Skills\nB: Go"
    )
    assert cv.summary == "First part.\n\nSecond part."
    assert [skill.category for skill in cv.skills] == ["A", "B"]


@pytest.mark.integration
def test_lines_before_first_header_are_dropped():
    cv = parse_cv("Jane Doe\n---\nstray line\n## Skills\nPython")
    assert cv.contact.name == "Jane Doe"
    assert cv.skills == (SkillCategory(category="", skills="Python"),)


@pytest.mark.integration
def test_separator_inside_section_breaks_paragraphs():
    cv = parse_cv("Jane Doe\n\n## Certifications\nAWS Certified\n---\nKubernetes Admin")
    assert cv.certifications == ("AWS Certified", "Kubernetes Admin")


@pytest.mark.integration
def test_all_caps_line_inside_section_opens_a_new_section():
    cv = parse_cv("Jane Doe\n\n## Certifications\nAWS Certified\n---\nCKA\nGo expert")
    assert cv.certifications == ("AWS Certified",)
    assert cv.generic_sections == (GenericSection(title="CKA", content=("Go expert",)),)


@pytest.mark.integration
def test_windows_line_endings_and_invisible_characters():
    cv = parse_cv("John Doe\r\njohn@email.com\r\n\r\n## Skills\r\nPython\u00a0Go\u200b")
    assert cv.contact.email == "john@email.com"
    assert cv.skills[0].skills == "Python Go"


@pytest.mark.integration
def test_education_edge_case_short_degree():
    cv = parse_cv("Jane Doe\n\n## Education\nBSc | University | 2020")
    assert len(cv.education) == 1
    assert cv.education[0].institution == "University"


@pytest.mark.integration
def test_split_sections_keeps_source_titles():
    sections = split_sections(["## **Work History**", "line", "VOLUNTEERING", "helped"])
    assert [(section.section_type.value, section.title) for section in sections] == [
        ("experience", "Work History"),
        ("generic", "VOLUNTEERING"),
    ]
    assert sections[0].raw_text == "line"


@pytest.mark.integration
def test_parsed_cv_is_immutable(sample_cv):
    with pytest.raises(AttributeError):
        sample_cv.summary = "changed"


@pytest.mark.integration
class TestSampleCV:
    def test_contact(self, sample_cv):
        contact = sample_cv.contact
        assert contact.name == "Jane Smith"
        assert contact.email == "jane.smith@email.com"
        assert contact.phone == "+1 (555) 123-4567"
        assert contact.linkedin == "linkedin.com/in/janesmith"
        assert contact.github == "github.com/janesmith"

    def test_summary(self, sample_cv):
        assert sample_cv.summary.startswith("Senior Software Engineer with 6+ years")

    def test_skills(self, sample_cv):
        assert [skill.category for skill in sample_cv.skills] == [
            "Languages",
            "Frameworks",
            "Cloud & DevOps",
            "Databases",
            "Other",
        ]

    def test_experience(self, sample_cv):
        assert [(entry.position, entry.company) for entry in sample_cv.experience] == [
            ("Senior Software Engineer", "TechCorp Inc."),
            ("Software Engineer", "StartupXYZ"),
            ("Junior Software Engineer", "WebAgency Co."),
        ]
        assert [len(entry.bullets) for entry in sample_cv.experience] == [4, 4, 3]
        assert sample_cv.experience[0].date_range == "Jan 2022 - Present"

    def test_projects(self, sample_cv):
        cloudscale, datasync = sample_cv.projects
        assert cloudscale.name == "CloudScale"
        assert cloudscale.technologies == "Go, Kubernetes, AWS, Terraform"
        assert cloudscale.date_range is None
        assert len(cloudscale.bullets) == 3
        assert datasync.technologies == "Python, Apache Kafka, PostgreSQL"

    def test_education(self, sample_cv):
        stanford, berkeley = sample_cv.education
        assert stanford.institution == "Stanford University"
        assert stanford.degree == "Master of Science in Computer Science"
        assert stanford.date_range == "Sept 2015 - Jun 2017"
        assert stanford.details == ("GPA: 3.9/4.0 | Focus: Distributed Systems",)
        assert berkeley.date_range == "Aug 2011 - May 2015"

    def test_awards(self, sample_cv):
        assert len(sample_cv.awards) == 3
        assert sample_cv.awards[0].startswith("**AWS Solutions Architect Professional** Certified")

    def test_to_dict_uses_lists(self, sample_cv):
        data = sample_cv.to_dict()
        assert isinstance(data["experience"], list)
        assert isinstance(data["experience"][0]["bullets"], list)
        assert data["contact"]["name"] == "Jane Smith"
