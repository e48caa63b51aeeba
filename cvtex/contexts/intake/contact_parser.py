"""
Contact block parser.

Consumes the leading lines of a CV (before the first recognized section
header) and extracts the name and contact fields.
"""

import re
from typing import List, Optional, Sequence, Tuple

from cvtex.contexts.intake.cv_data_structure import ContactInfo, Link
from cvtex.contexts.intake.header_classifier import is_section_header
from cvtex.contexts.intake.normalizer import is_separator_line
from cvtex.contexts.intake.patterns import ContactPatterns

# The contact block never extends past this many lines
MAX_CONTACT_LINES = 10

_EMAIL = re.compile(ContactPatterns.EMAIL, re.I)
_PHONE = re.compile(ContactPatterns.PHONE)
_LINKEDIN = re.compile(ContactPatterns.LINKEDIN, re.I)
_GITHUB = re.compile(ContactPatterns.GITHUB, re.I)
_URL = re.compile(ContactPatterns.URL, re.I)
_LOCATION = re.compile(ContactPatterns.LOCATION)


def collect_contact_lines(lines: Sequence[str]) -> Tuple[List[str], int]:
    """
    Collect the non-empty lines of the contact block.

    Stops before a section header found after the first line, or right after
    a separator line (the separator is consumed).

    Args:
        lines: All input lines

    Returns:
        (collected_lines, consumed_lines) where consumed_lines is the index
        at which section scanning should resume
    """
    collected = []
    consumed = 0

    for index, raw_line in enumerate(lines[:MAX_CONTACT_LINES]):
        line = raw_line.strip()

        if is_separator_line(line):
            consumed = index + 1
            break

        if index > 0 and is_section_header(line):
            break

        if line:
            collected.append(line)
            consumed = index + 1

    return collected, consumed


def clean_name(line: str) -> str:
    """
    Strip markdown header and bold markers from the name line.

    Example:
        >>> clean_name("# **Jane Smith**")
        'Jane Smith'
    """
    name = re.sub(ContactPatterns.MARKDOWN_HEADER_MARKER, "", line)
    return name.replace("**", "").strip()


def _trim_url(url: str) -> str:
    return url.rstrip(ContactPatterns.URL_TRAILING_PUNCTUATION)


def url_display_text(url: str) -> str:
    """
    Display text for a URL: scheme and "www." removed.

    Example:
        >>> url_display_text("https://www.blog.example.com")
        'blog.example.com'
    """
    return re.sub(ContactPatterns.URL_DISPLAY_PREFIX, "", url, flags=re.I)


def _first(pattern: re.Pattern, line: str) -> Optional[str]:
    match = pattern.search(line)
    return match.group(0) if match else None


def parse_contact_block(lines: Sequence[str]) -> Tuple[ContactInfo, int]:
    """
    Parse the contact block at the top of a CV.

    The first collected line is the name. Every later line is scanned for
    each field independently, so one "email | phone | url" line fills several
    fields. The first match of each kind wins. The first generic URL becomes
    the website; later ones go to additional_links. Location is taken once,
    only from a line with neither an email nor a phone on it.

    Args:
        lines: All input lines

    Returns:
        (ContactInfo, consumed_lines)
    """
    collected, consumed = collect_contact_lines(lines)

    if not collected:
        return ContactInfo(), consumed

    name = clean_name(collected[0])
    email = phone = linkedin = github = website = location = None
    additional_links: List[Link] = []

    for line in collected[1:]:
        line_email = _first(_EMAIL, line)
        line_phone = _first(_PHONE, line)

        email = email or line_email
        phone = phone or line_phone
        linkedin = linkedin or _first(_LINKEDIN, line)
        github = github or _first(_GITHUB, line)

        for raw_url in _URL.findall(line):
            url = _trim_url(raw_url)
            lowered = url.lower()
            if "linkedin.com" in lowered or "github.com" in lowered:
                continue
            if website is None:
                website = url
            else:
                additional_links.append(Link(url=url, text=url_display_text(url)))

        if location is None and line_email is None and line_phone is None:
            location_match = _LOCATION.search(line)
            if location_match:
                location = location_match.group(1).strip()

    contact = ContactInfo(
        name=name,
        location=location,
        email=email,
        phone=phone,
        linkedin=linkedin,
        github=github,
        website=website,
        additional_links=tuple(additional_links),
    )
    return contact, consumed
