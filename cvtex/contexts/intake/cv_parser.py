"""
CV Parser

Turns free-form CV text into a ParsedCV in one forward pass:

    contact block → section splitting → per-section field parsing → assembly

Parsing is total: any string yields a ParsedCV. Lines that fit no heuristic
are kept as paragraph text or dropped, never raised on.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from cvtex.contexts.intake.contact_parser import parse_contact_block
from cvtex.contexts.intake.cv_data_structure import (
    LIST_SECTION_TYPES,
    ContactInfo,
    GenericSection,
    ParsedCV,
    RawSection,
    SectionType,
)
from cvtex.contexts.intake.header_classifier import classify_header
from cvtex.contexts.intake.logger import _log_debug
from cvtex.contexts.intake.normalizer import is_separator_line, normalize_unicode
from cvtex.contexts.intake.section_parsers import (
    parse_education_section,
    parse_experience_section,
    parse_projects_section,
    parse_simple_list_section,
    parse_skills_section,
)

# Field parser per section type (summary and generic are handled inline)
SECTION_PARSERS: Dict[SectionType, Callable[[str], tuple]] = {
    SectionType.EXPERIENCE: parse_experience_section,
    SectionType.EDUCATION: parse_education_section,
    SectionType.SKILLS: parse_skills_section,
    SectionType.PROJECTS: parse_projects_section,
    **{section_type: parse_simple_list_section for section_type in LIST_SECTION_TYPES},
}


@dataclass
class SectionState:
    """The section currently being collected."""

    section_type: SectionType
    title: str
    lines: List[str] = field(default_factory=list)

    def close(self) -> RawSection:
        return RawSection(
            section_type=self.section_type,
            title=self.title,
            raw_text="\n".join(self.lines),
        )


def split_sections(lines: Sequence[str]) -> List[RawSection]:
    """
    Split body lines into raw sections at each section header.

    Lines before the first header are dropped. Separator lines inside a
    section become blank lines so they still act as paragraph breaks.

    Args:
        lines: Lines following the contact block

    Returns:
        Raw sections in source order
    """
    sections: List[RawSection] = []
    state: Optional[SectionState] = None

    for line in lines:
        header = classify_header(line)

        if header.is_header:
            if state is not None:
                sections.append(state.close())
            state = SectionState(section_type=header.section_type, title=header.title)
        elif state is not None:
            state.lines.append("" if is_separator_line(line) else line)

    if state is not None:
        sections.append(state.close())

    return sections


def assemble_cv(contact: ContactInfo, sections: Sequence[RawSection]) -> ParsedCV:
    """
    Run the field parsers over raw sections and build the ParsedCV.

    A section type that appears more than once extends the earlier result;
    repeated summaries are joined with a blank line.

    Args:
        contact: Parsed contact block
        sections: Raw sections in source order

    Returns:
        Immutable ParsedCV
    """
    summaries: List[str] = []
    collected: Dict[SectionType, list] = {section_type: [] for section_type in SECTION_PARSERS}
    generic_sections: List[GenericSection] = []

    for section in sections:
        section_type = section.section_type

        if section_type == SectionType.SUMMARY:
            text = section.raw_text.strip()
            if text:
                summaries.append(text)
        elif section_type in SECTION_PARSERS:
            collected[section_type].extend(SECTION_PARSERS[section_type](section.raw_text))
        elif section.raw_text.strip():
            generic_sections.append(
                GenericSection(
                    title=section.title,
                    content=parse_simple_list_section(section.raw_text),
                )
            )

    def entries(section_type: SectionType) -> Tuple:
        return tuple(collected[section_type])

    return ParsedCV(
        contact=contact,
        summary="\n\n".join(summaries) or None,
        experience=entries(SectionType.EXPERIENCE),
        education=entries(SectionType.EDUCATION),
        skills=entries(SectionType.SKILLS),
        projects=entries(SectionType.PROJECTS),
        certifications=entries(SectionType.CERTIFICATIONS),
        publications=entries(SectionType.PUBLICATIONS),
        awards=entries(SectionType.AWARDS),
        languages=entries(SectionType.LANGUAGES),
        interests=entries(SectionType.INTERESTS),
        generic_sections=tuple(generic_sections),
    )


def parse_cv(raw_text: str) -> ParsedCV:
    """
    Parse free-form CV text into a structured ParsedCV.

    Args:
        raw_text: CV as plain text or markdown

    Returns:
        ParsedCV (possibly empty, never None)

    Example:
        >>> cv = parse_cv("# Jane Doe\\njane@x.com\\n\\n## Skills\\nPython, Go")
        >>> cv.contact.email, cv.skills[0].skills
        ('jane@x.com', 'Python, Go')
    """
    lines = normalize_unicode(raw_text).split("\n")

    contact, consumed = parse_contact_block(lines)
    sections = split_sections(lines[consumed:])

    _log_debug(
        f"Contact block: {consumed} lines, name={contact.name!r}; "
        f"sections: {[section.section_type.value for section in sections]}"
    )

    return assemble_cv(contact, sections)
