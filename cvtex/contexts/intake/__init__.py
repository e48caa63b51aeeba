"""
Intake Context

Responsibilities:
- Normalizes raw CV text (line endings, invisible unicode, bullet glyphs)
- Recognizes section headers and the contact block
- Parses section bodies into typed entries (experience, education, skills...)

Owns: Text → ParsedCV conversion
Never: Produces LaTeX or decides section order
"""

from cvtex.contexts.intake.cv_data_structure import (
    SECTION_LABELS,
    ContactInfo,
    EducationEntry,
    ExperienceEntry,
    GenericSection,
    Link,
    ParsedCV,
    ProjectEntry,
    SectionType,
    SkillCategory,
)
from cvtex.contexts.intake.cv_parser import parse_cv
from cvtex.contexts.intake.diagnostics import analyze_parse_quality

__all__ = [
    # Orchestration
    "parse_cv",
    "analyze_parse_quality",
    # Data structure classes
    "ParsedCV",
    "ContactInfo",
    "ExperienceEntry",
    "EducationEntry",
    "ProjectEntry",
    "SkillCategory",
    "GenericSection",
    "Link",
    "SectionType",
    "SECTION_LABELS",
]
