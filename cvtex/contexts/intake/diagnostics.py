"""
Parse-quality diagnostics.

Advisory checks over a ParsedCV, for callers that want to tell the user why a
generated document looks thin. Nothing here affects parsing or generation.
"""

from typing import List

from cvtex.contexts.intake.cv_data_structure import SECTION_LABELS, ParsedCV, SectionType
from cvtex.contexts.intake.logger import _log_warning


def analyze_parse_quality(cv: ParsedCV) -> List[str]:
    """
    List human-readable warnings about likely parse gaps.

    Checks:
    - contact: missing name, email or phone
    - no recognized section with content
    - experience entries without a date range or without bullets
    - education entries without an institution

    Args:
        cv: Parsed CV

    Returns:
        Warning messages (empty when nothing looks off)
    """
    warnings = []

    if not cv.contact.name:
        warnings.append("No name found in the contact block")
    if not cv.contact.email:
        warnings.append("No email address found in the contact block")
    if not cv.contact.phone:
        warnings.append("No phone number found in the contact block")

    content_sections = [
        section_type
        for section_type in SectionType
        if section_type != SectionType.CONTACT and cv.has_content(section_type)
    ]
    if not content_sections:
        warnings.append("No sections recognized; check that section headers are on their own lines")

    for index, entry in enumerate(cv.experience, start=1):
        label = entry.position or entry.company or f"entry {index}"
        if not entry.date_range:
            warnings.append(f"{SECTION_LABELS[SectionType.EXPERIENCE]} '{label}' has no date range")
        if not entry.bullets:
            warnings.append(f"{SECTION_LABELS[SectionType.EXPERIENCE]} '{label}' has no bullet points")

    for index, entry in enumerate(cv.education, start=1):
        if not entry.institution:
            warnings.append(
                f"{SECTION_LABELS[SectionType.EDUCATION]} entry {index} has no institution"
            )

    for warning in warnings:
        _log_warning(warning)

    return warnings
