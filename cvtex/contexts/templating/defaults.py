"""
Default values for CV generation.

Shared by the template registry (fallbacks for style.yaml fields a template
leaves out) and the LaTeX generator.
"""

from typing import Dict, Tuple

from cvtex.contexts.intake.cv_data_structure import SectionType

DEFAULT_TEMPLATE_ID = "professional"

# Used when a template defines no order of its own
DEFAULT_SECTION_ORDER: Tuple[SectionType, ...] = (
    SectionType.SUMMARY,
    SectionType.SKILLS,
    SectionType.EXPERIENCE,
    SectionType.PROJECTS,
    SectionType.EDUCATION,
    SectionType.AWARDS,
    SectionType.CERTIFICATIONS,
    SectionType.PUBLICATIONS,
    SectionType.LANGUAGES,
    SectionType.INTERESTS,
)

# \section{} headings per section type (templates may override any of them)
DEFAULT_SECTION_TITLES: Dict[SectionType, str] = {
    SectionType.SUMMARY: "Professional Summary",
    SectionType.EXPERIENCE: "Professional Experience",
    SectionType.SKILLS: "Technical Skills",
    SectionType.PROJECTS: "Industry Projects",
    SectionType.EDUCATION: "Education",
    SectionType.AWARDS: "Achievements",
    SectionType.CERTIFICATIONS: "Certifications",
    SectionType.PUBLICATIONS: "Publications",
    SectionType.LANGUAGES: "Languages",
    SectionType.INTERESTS: "Interests",
}

# Joins the fields of the contact line under the name
CONTACT_DELIMITER = " $|$ "

# Longest run of blank lines allowed in the generated body
MAX_CONSECUTIVE_BLANK_LINES = 1
