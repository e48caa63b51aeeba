"""
Section header classifier.

Decides whether a line is a section header and which canonical section it
maps to. The checks form an ordered cascade; the first rule that accepts the
line wins:

1. Markdown header (1-3 "#"): always a header.
2. Fully bolded line (**Title** or *Title*): header only for a known alias,
   so ordinary bold content lines are not mistaken for headers.
3. ALL-CAPS line of letters and spaces, longer than 2 chars: always a header.
4. "Letters and spaces:" line: always a header.
5. Whole line (asterisks stripped, optional trailing colon) equal to a known
   alias: header.

Rules 1, 3 and 4 accept unknown titles as generic sections.
"""

import re
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from cvtex.contexts.intake.cv_data_structure import SectionType
from cvtex.contexts.intake.normalizer import is_separator_line, strip_asterisks
from cvtex.contexts.intake.patterns import HeaderPatterns
from cvtex.contexts.intake.section_patterns import (
    SECTION_PATTERNS,
    is_known_section,
    match_section_type,
)


@dataclass(frozen=True)
class HeaderMatch:
    """Classifier verdict for one line."""

    is_header: bool
    section_type: SectionType = SectionType.GENERIC
    title: str = ""


NOT_A_HEADER = HeaderMatch(is_header=False)


def _markdown_header(trimmed: str) -> Optional[HeaderMatch]:
    match = re.match(HeaderPatterns.MARKDOWN, trimmed)
    if not match:
        return None
    title = strip_asterisks(match.group(1))
    return HeaderMatch(True, match_section_type(title), title)


def _bold_header(trimmed: str) -> Optional[HeaderMatch]:
    match = re.match(HeaderPatterns.FULLY_BOLD, trimmed)
    if not match:
        return None
    title = match.group(1).strip()
    if not is_known_section(title):
        return None
    return HeaderMatch(True, match_section_type(title), title)


def _all_caps_header(trimmed: str) -> Optional[HeaderMatch]:
    if len(trimmed) <= 2 or not re.match(HeaderPatterns.ALL_CAPS, trimmed):
        return None
    return HeaderMatch(True, match_section_type(trimmed), trimmed)


def _colon_header(trimmed: str) -> Optional[HeaderMatch]:
    match = re.match(HeaderPatterns.COLON_SUFFIXED, trimmed)
    if not match:
        return None
    title = match.group(1).strip()
    return HeaderMatch(True, match_section_type(title), title)


def _alias_line_header(trimmed: str) -> Optional[HeaderMatch]:
    stripped = strip_asterisks(trimmed)
    lowered = stripped.lower()
    for alias, section_type in SECTION_PATTERNS.items():
        if lowered == alias or lowered == alias + ":":
            return HeaderMatch(True, section_type, stripped.rstrip(":"))
    return None


# Priority order matters: see module docstring
HEADER_RULES: Tuple[Callable[[str], Optional[HeaderMatch]], ...] = (
    _markdown_header,
    _bold_header,
    _all_caps_header,
    _colon_header,
    _alias_line_header,
)


def classify_header(line: str) -> HeaderMatch:
    """
    Classify a line as section header or content.

    Args:
        line: Raw line (surrounding whitespace ignored)

    Returns:
        HeaderMatch; is_header is False for content, blank and separator lines

    Example:
        >>> classify_header("## Work History").section_type
        <SectionType.EXPERIENCE: 'experience'>
        >>> classify_header("VOLUNTEERING").section_type
        <SectionType.GENERIC: 'generic'>
        >>> classify_header("**Developer** | Acme | 2020 - 2022").is_header
        False
    """
    trimmed = line.strip()

    if not trimmed or is_separator_line(trimmed):
        return NOT_A_HEADER

    for rule in HEADER_RULES:
        match = rule(trimmed)
        if match is not None:
            return match

    return NOT_A_HEADER


def is_section_header(line: str) -> bool:
    """Shortcut for classify_header(line).is_header."""
    return classify_header(line).is_header
