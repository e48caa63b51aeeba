"""
Text normalizer for the Intake context.

Line-level helpers shared by every section parser: bullet-marker
normalization, separator-line detection and bold-marker inspection. Also
cleans up the invisible unicode that copy-paste from PDFs and word
processors leaves behind.

Design principle: normalize BEFORE parsing. Dashes and bullet glyphs are
deliberately left alone because the parsers use them as separators and
bullet markers.
"""

import re
from typing import Tuple

from cvtex.contexts.intake.patterns import LinePatterns

# Unicode replacements: problematic char → ASCII equivalent
UNICODE_REPLACEMENTS = {
    # Spaces
    "\u00a0": " ",  # non-breaking space
    "\u202f": " ",  # narrow no-break space
    "\u2009": " ",  # thin space
    # Zero-width characters → remove
    "\u200b": "",  # zero-width space
    "\u200c": "",  # zero-width non-joiner
    "\u200d": "",  # zero-width joiner
    "\u2060": "",  # word joiner
    "\ufeff": "",  # BOM / zero-width no-break space
}


def normalize_unicode(text: str) -> str:
    """
    Normalize line endings and invisible unicode characters.

    Args:
        text: Raw CV text

    Returns:
        Text with LF line endings and problematic spaces replaced
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")

    for char, replacement in UNICODE_REPLACEMENTS.items():
        text = text.replace(char, replacement)

    return text


def normalize_bullet_marker(line: str) -> Tuple[bool, str]:
    """
    Detect and strip a bullet marker.

    Recognizes the "BOLD 0" copy-paste artifact and the glyphs -, • and *
    followed by whitespace.

    Args:
        line: Raw line

    Returns:
        (is_bullet, content) where content is the trimmed line without marker

    Example:
        >>> normalize_bullet_marker("  - Built features")
        (True, 'Built features')
        >>> normalize_bullet_marker("BOLD 0 Led the team")
        (True, 'Led the team')
        >>> normalize_bullet_marker("**Developer** | Acme")
        (False, '**Developer** | Acme')
    """
    trimmed = line.strip()

    if trimmed.startswith(LinePatterns.ARTIFACT_BULLET_PREFIX):
        return True, re.sub(LinePatterns.ARTIFACT_BULLET, "", trimmed).strip()

    bullet_match = re.match(LinePatterns.BULLET, trimmed, re.DOTALL)
    if bullet_match:
        return True, bullet_match.group(1)

    return False, trimmed


def is_separator_line(line: str) -> bool:
    """
    Check whether a line is a visual separator (---, ***, ___, a lone em-dash...).

    Example:
        >>> is_separator_line("———")
        True
        >>> is_separator_line("- item")
        False
    """
    trimmed = line.strip()
    return trimmed in LinePatterns.SEPARATOR_LITERALS or bool(
        re.fullmatch(LinePatterns.SEPARATOR_RUN, trimmed)
    )


def count_bold_markers(text: str) -> int:
    """Count "**" markers (non-overlapping)."""
    return text.count("**")


def strip_bold_markers(text: str) -> str:
    """
    Remove a leading and/or trailing "**" and surrounding whitespace.

    Example:
        >>> strip_bold_markers("**Software Engineer**")
        'Software Engineer'
    """
    return re.sub(LinePatterns.EDGE_BOLD, "", text).strip()


def strip_asterisks(text: str) -> str:
    """Remove every asterisk run and trim."""
    return re.sub(r"\*+", "", text).strip()


def split_entry_parts(line: str) -> list:
    """
    Split an entry header line into its non-empty parts.

    Pipes take priority over en/em-dashes. Plain hyphens never split, so
    "Full-Stack Developer" stays whole.

    Example:
        >>> split_entry_parts("**Developer** | Acme Inc. | Jan 2020 - Dec 2022")
        ['**Developer**', 'Acme Inc.', 'Jan 2020 - Dec 2022']
    """
    if "|" in line:
        parts = re.split(LinePatterns.PIPE_SPLIT, line)
    else:
        parts = re.split(LinePatterns.LONG_DASH_SPLIT, line)
    return [part.strip() for part in parts if part.strip()]
