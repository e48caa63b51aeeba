"""
Section alias table for CV header identification.

Maps normalized header titles to canonical section types. The table is static
read-only data; it is never written after import, so concurrent parses can
share it.

These aren't meant to be exhaustive. Add synonyms as new CV conventions come
up.
"""

import re
from types import MappingProxyType
from typing import Mapping

from cvtex.contexts.intake.cv_data_structure import SectionType
from cvtex.contexts.intake.patterns import HeaderPatterns

SECTION_PATTERNS: Mapping[str, SectionType] = MappingProxyType(
    {
        "summary": SectionType.SUMMARY,
        "professional summary": SectionType.SUMMARY,
        "profile": SectionType.SUMMARY,
        "objective": SectionType.SUMMARY,
        "about": SectionType.SUMMARY,
        "about me": SectionType.SUMMARY,
        "experience": SectionType.EXPERIENCE,
        "work experience": SectionType.EXPERIENCE,
        "professional experience": SectionType.EXPERIENCE,
        "employment": SectionType.EXPERIENCE,
        "employment history": SectionType.EXPERIENCE,
        "work history": SectionType.EXPERIENCE,
        "education": SectionType.EDUCATION,
        "academic background": SectionType.EDUCATION,
        "qualifications": SectionType.EDUCATION,
        "skills": SectionType.SKILLS,
        "technical skills": SectionType.SKILLS,
        "core competencies": SectionType.SKILLS,
        "competencies": SectionType.SKILLS,
        "technologies": SectionType.SKILLS,
        "expertise": SectionType.SKILLS,
        "projects": SectionType.PROJECTS,
        "personal projects": SectionType.PROJECTS,
        "key projects": SectionType.PROJECTS,
        "selected projects": SectionType.PROJECTS,
        "industry projects": SectionType.PROJECTS,
        "certifications": SectionType.CERTIFICATIONS,
        "certificates": SectionType.CERTIFICATIONS,
        "licenses": SectionType.CERTIFICATIONS,
        "publications": SectionType.PUBLICATIONS,
        "papers": SectionType.PUBLICATIONS,
        "research": SectionType.PUBLICATIONS,
        "awards": SectionType.AWARDS,
        "honors": SectionType.AWARDS,
        "achievements": SectionType.AWARDS,
        "languages": SectionType.LANGUAGES,
        "interests": SectionType.INTERESTS,
        "hobbies": SectionType.INTERESTS,
        "activities": SectionType.INTERESTS,
    }
)


def normalize_section_name(name: str) -> str:
    """
    Normalize a header title for alias lookup.

    Lowercases, turns ":", "-" and "_" into spaces, collapses whitespace and
    trims.

    Example:
        >>> normalize_section_name("  Work-History: ")
        'work history'
    """
    normalized = name.lower()
    normalized = re.sub(HeaderPatterns.TITLE_PUNCTUATION, " ", normalized)
    normalized = re.sub(r"\s+", " ", normalized)
    return normalized.strip()


def match_section_type(title: str) -> SectionType:
    """
    Look up the canonical section type for a header title.

    Args:
        title: Header title as found in the source

    Returns:
        Matching SectionType, or SectionType.GENERIC when no alias matches
    """
    return SECTION_PATTERNS.get(normalize_section_name(title), SectionType.GENERIC)


def is_known_section(title: str) -> bool:
    """Check whether a title matches a known alias."""
    return normalize_section_name(title) in SECTION_PATTERNS
