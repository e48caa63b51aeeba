"""
LaTeX Generator

Converts a ParsedCV to a complete LaTeX document.

Each section block is rendered through its Jinja2 template from
types/{type_name}/template.tex.jinja; the body is wrapped by the chosen
style's preamble and epilogue, which are emitted verbatim.
"""

import re
from functools import lru_cache
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from jinja2 import TemplateError

from cvtex.contexts.intake.cv_data_structure import (
    ContactInfo,
    GenericSection,
    ParsedCV,
    SectionType,
)
from cvtex.contexts.templating.defaults import (
    CONTACT_DELIMITER,
    DEFAULT_TEMPLATE_ID,
    MAX_CONSECUTIVE_BLANK_LINES,
)
from cvtex.contexts.templating.exceptions import TemplateRenderError
from cvtex.contexts.templating.latex_escaping import (
    escape_latex,
    format_email,
    format_link,
    format_phone,
    format_profile_link,
    link_display_text,
)
from cvtex.contexts.templating.latex_patterns import MarkdownPatterns
from cvtex.contexts.templating.logger import _log_debug, _log_warning
from cvtex.contexts.templating.registries import StyleConfig, StyleRegistry, TemplateRegistry
from cvtex.utils.text_processing import set_max_consecutive_blank_lines

SectionToken = Union[SectionType, str]

# Section types that are never positioned by an ordering
UNORDERED_SECTION_TYPES = (SectionType.CONTACT, SectionType.GENERIC)

# Section templates by type; every list section not listed here uses simple_list
SECTION_TEMPLATE_TYPES = {
    SectionType.SUMMARY: "summary",
    SectionType.EXPERIENCE: "experience",
    SectionType.EDUCATION: "education",
    SectionType.SKILLS: "skills",
    SectionType.PROJECTS: "projects",
    SectionType.AWARDS: "awards",
}


def resolve_section_order(
    section_order: Optional[Iterable[SectionToken]], style: StyleConfig
) -> List[SectionType]:
    """
    Turn a requested ordering into the list of section types to emit.

    None means the style's default order. Unknown tokens are skipped with a
    warning, "contact" and "generic" are ignored, and repeated types keep
    their first position.

    Args:
        section_order: Requested ordering (types or their string values)
        style: Style whose default order applies when section_order is None

    Returns:
        Ordered, duplicate-free section types

    Example:
        ["skills", "bogus", "skills", "generic", "summary"] resolves to
        [SectionType.SKILLS, SectionType.SUMMARY]
    """
    if section_order is None:
        section_order = style.section_order

    resolved: List[SectionType] = []
    for token in section_order:
        section_type = SectionType.coerce(token)
        if section_type is None:
            _log_warning(f"Ignoring unknown section '{token}' in section order")
            continue
        if section_type in UNORDERED_SECTION_TYPES or section_type in resolved:
            continue
        resolved.append(section_type)

    return resolved


def format_contact_parts(contact: ContactInfo) -> List[str]:
    """
    Format the contact line fields, each already LaTeX-safe.

    Order: location, email, phone, LinkedIn, GitHub, website, additional links.
    """
    parts = []

    if contact.location:
        parts.append(escape_latex(contact.location))
    if contact.email:
        parts.append(format_email(contact.email))
    if contact.phone:
        parts.append(format_phone(contact.phone))
    if contact.linkedin:
        parts.append(format_profile_link(contact.linkedin))
    if contact.github:
        parts.append(format_profile_link(contact.github))
    if contact.website:
        parts.append(format_link(contact.website, link_display_text(contact.website)))
    for link in contact.additional_links:
        parts.append(format_link(link.url, link.text))

    return parts


def split_award(item: str) -> Dict[str, str]:
    """
    Split an award item into a bold title and its description.

    Items without a leading **Title** keep their whole text in "text".
    """
    match = re.match(MarkdownPatterns.LEADING_BOLD_TITLE, item, re.DOTALL)
    if match:
        return {"title": match.group(1), "description": match.group(2).strip(), "text": item}
    return {"title": "", "description": "", "text": item}


class CVToLaTeXConverter:
    """Converts a ParsedCV to LaTeX format."""

    def __init__(
        self,
        template_registry: TemplateRegistry = None,
        style_registry: StyleRegistry = None,
    ):
        self.template_registry = template_registry or TemplateRegistry()
        self.style_registry = style_registry or StyleRegistry()

    def _render(self, type_name: str, **context: Any) -> str:
        """
        Render one section template.

        Raises:
            TemplateRenderError: If the template is missing or fails to render
        """
        try:
            template = self.template_registry.get_template(type_name)
            return template.render(**context).strip()
        except TemplateError as e:
            raise TemplateRenderError(
                f"Failed to render section template '{type_name}'",
                type_name=type_name,
                template_path=self.template_registry.get_template_path(type_name),
                original_error=e,
            ) from e

    def generate_contact_header(self, contact: ContactInfo) -> str:
        return self._render(
            "contact_header",
            name=contact.name,
            contact_parts=format_contact_parts(contact),
            delimiter=CONTACT_DELIMITER,
        )

    def generate_section(self, cv: ParsedCV, section_type: SectionType, style: StyleConfig) -> str:
        """
        Render one known section block.

        Args:
            cv: Parsed CV
            section_type: Section to render
            style: Style providing the section heading

        Returns:
            LaTeX for the block, or "" when the section has no content
        """
        if not cv.has_content(section_type):
            return ""

        title = style.section_title(section_type)
        type_name = SECTION_TEMPLATE_TYPES.get(section_type, "simple_list")

        if section_type == SectionType.SUMMARY:
            return self._render(type_name, title=title, summary=cv.summary)
        if section_type == SectionType.EXPERIENCE:
            return self._render(type_name, title=title, entries=cv.experience)
        if section_type == SectionType.EDUCATION:
            return self._render(type_name, title=title, entries=cv.education)
        if section_type == SectionType.SKILLS:
            return self._render(type_name, title=title, skills=cv.skills)
        if section_type == SectionType.PROJECTS:
            return self._render(type_name, title=title, projects=cv.projects)
        if section_type == SectionType.AWARDS:
            return self._render(
                type_name, title=title, awards=[split_award(item) for item in cv.awards]
            )

        return self._render(type_name, title=title, items=getattr(cv, section_type.value))

    def generate_generic_section(self, section: GenericSection) -> str:
        if not section.content:
            return ""
        return self._render("simple_list", title=section.title, items=section.content)

    def generate_body(
        self,
        cv: ParsedCV,
        style: StyleConfig,
        section_order: Optional[Sequence[SectionToken]] = None,
    ) -> str:
        """
        Generate the document body: contact header, ordered sections, generic sections.

        Blocks are separated by one blank line.
        """
        blocks = [self.generate_contact_header(cv.contact)]

        for section_type in resolve_section_order(section_order, style):
            block = self.generate_section(cv, section_type, style)
            if block:
                blocks.append(block)

        for section in cv.generic_sections:
            block = self.generate_generic_section(section)
            if block:
                blocks.append(block)

        _log_debug(f"Rendered {len(blocks) - 1} section blocks")

        body = "\n\n".join(blocks)
        return set_max_consecutive_blank_lines(body, MAX_CONSECUTIVE_BLANK_LINES)

    def generate_document(
        self,
        cv: ParsedCV,
        template_id: Optional[str] = DEFAULT_TEMPLATE_ID,
        section_order: Optional[Sequence[SectionToken]] = None,
    ) -> str:
        """
        Generate a complete LaTeX document.

        Args:
            cv: Parsed CV
            template_id: Visual style id (unknown ids fall back to the default)
            section_order: Section ordering (None means the style's default)

        Returns:
            Complete LaTeX document string
        """
        style = self.style_registry.resolve_style(template_id)
        body = self.generate_body(cv, style, section_order)
        return f"{style.preamble}{body}{style.epilogue}"


@lru_cache(maxsize=1)
def get_default_converter() -> CVToLaTeXConverter:
    """Shared converter over the packaged styles and section templates."""
    return CVToLaTeXConverter()


def generate_latex(
    cv: ParsedCV,
    template_id: Optional[str] = DEFAULT_TEMPLATE_ID,
    section_order: Optional[Sequence[SectionToken]] = None,
) -> str:
    """
    Generate a complete LaTeX document with the shared converter.

    Args:
        cv: Parsed CV
        template_id: Visual style id (unknown ids fall back to the default)
        section_order: Section ordering (None means the style's default)

    Returns:
        Complete LaTeX document string
    """
    return get_default_converter().generate_document(cv, template_id, section_order)
