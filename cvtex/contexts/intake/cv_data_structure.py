"""
CV data structures for the Intake context.

Defines the structured model produced by the CV parser and consumed by the
templating context. Every class is a frozen dataclass holding tuples, so a
ParsedCV cannot be changed once the parser returns it.
"""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class SectionType(str, Enum):
    """
    Closed vocabulary of CV sections.

    Drives both parser dispatch (which field parser handles a section body)
    and generator dispatch (which block renderer emits a section).
    """

    CONTACT = "contact"
    SUMMARY = "summary"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    SKILLS = "skills"
    PROJECTS = "projects"
    CERTIFICATIONS = "certifications"
    PUBLICATIONS = "publications"
    AWARDS = "awards"
    LANGUAGES = "languages"
    INTERESTS = "interests"
    GENERIC = "generic"

    @classmethod
    def coerce(cls, value: Any) -> Optional["SectionType"]:
        """
        Convert a member or its string value to a SectionType.

        Returns None for anything outside the vocabulary instead of raising.

        Example:
            >>> SectionType.coerce("skills")
            <SectionType.SKILLS: 'skills'>
            >>> SectionType.coerce("hobbies") is None
            True
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                return None
        return None


# Human-readable labels for section selection UIs
SECTION_LABELS: Dict[SectionType, str] = {
    SectionType.CONTACT: "Contact",
    SectionType.SUMMARY: "Summary",
    SectionType.EXPERIENCE: "Experience",
    SectionType.EDUCATION: "Education",
    SectionType.SKILLS: "Skills",
    SectionType.PROJECTS: "Projects",
    SectionType.CERTIFICATIONS: "Certifications",
    SectionType.PUBLICATIONS: "Publications",
    SectionType.AWARDS: "Awards",
    SectionType.LANGUAGES: "Languages",
    SectionType.INTERESTS: "Interests",
    SectionType.GENERIC: "Other",
}

# Section types whose body is parsed by the simple-list parser
LIST_SECTION_TYPES = (
    SectionType.CERTIFICATIONS,
    SectionType.PUBLICATIONS,
    SectionType.AWARDS,
    SectionType.LANGUAGES,
    SectionType.INTERESTS,
)


@dataclass(frozen=True)
class Link:
    """Hyperlink with its display text."""

    url: str
    text: str


@dataclass(frozen=True)
class ContactInfo:
    """
    Contact block recovered from the lines before the first section header.

    Attributes:
        name: Candidate name (empty string when not found)
        location: "City, Region" style location
        email: First email address found
        phone: First phone number found
        linkedin: First LinkedIn profile URL found
        github: First GitHub profile URL found
        website: First generic URL found
        additional_links: Every further generic URL, in source order
    """

    name: str = ""
    location: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    linkedin: Optional[str] = None
    github: Optional[str] = None
    website: Optional[str] = None
    additional_links: Tuple[Link, ...] = ()


@dataclass(frozen=True)
class ExperienceEntry:
    """
    Single job entry.

    date_range keeps the wording of the source ("Jan 2020 - Present").
    Bullets may still contain **bold** and [text](url) markup.
    """

    company: str
    position: str
    date_range: str
    location: Optional[str] = None
    bullets: Tuple[str, ...] = ()


@dataclass(frozen=True)
class EducationEntry:
    """Single education entry; details hold GPA, honors and other free text."""

    institution: str
    degree: str
    date_range: str
    location: Optional[str] = None
    details: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ProjectEntry:
    """
    Single project entry.

    date_range may hold an award string ("1st Place, HackTech 2023") instead
    of calendar dates.
    """

    name: str
    technologies: Optional[str] = None
    date_range: Optional[str] = None
    bullets: Tuple[str, ...] = ()


@dataclass(frozen=True)
class SkillCategory:
    """One skills line; category is empty when the line had no label."""

    category: str
    skills: str


@dataclass(frozen=True)
class GenericSection:
    """Section whose header matched no known alias."""

    title: str
    content: Tuple[str, ...] = ()


@dataclass(frozen=True)
class RawSection:
    """
    Section body as split by the orchestrator, before field parsing.

    Attributes:
        section_type: Canonical type of the header
        title: Header text as found in the source (asterisks stripped)
        raw_text: Body lines joined with newlines
    """

    section_type: SectionType
    title: str
    raw_text: str


@dataclass(frozen=True)
class ParsedCV:
    """Structured CV: the single model shared by parsing and generation."""

    contact: ContactInfo = field(default_factory=ContactInfo)
    summary: Optional[str] = None
    experience: Tuple[ExperienceEntry, ...] = ()
    education: Tuple[EducationEntry, ...] = ()
    skills: Tuple[SkillCategory, ...] = ()
    projects: Tuple[ProjectEntry, ...] = ()
    certifications: Tuple[str, ...] = ()
    publications: Tuple[str, ...] = ()
    awards: Tuple[str, ...] = ()
    languages: Tuple[str, ...] = ()
    interests: Tuple[str, ...] = ()
    generic_sections: Tuple[GenericSection, ...] = ()

    def has_content(self, section_type: SectionType) -> bool:
        """
        Check whether a section would produce output.

        Contact always counts as present; generic counts when at least one
        generic section has items.
        """
        if section_type == SectionType.CONTACT:
            return True
        if section_type == SectionType.SUMMARY:
            return bool(self.summary)
        if section_type == SectionType.GENERIC:
            return any(section.content for section in self.generic_sections)
        return len(getattr(self, section_type.value)) > 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to plain dicts and lists (tuples become lists) for serialization."""
        return _tuples_to_lists(asdict(self))


def _tuples_to_lists(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: _tuples_to_lists(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_tuples_to_lists(item) for item in value]
    return value
