"""
LaTeX escaping and inline formatting.

Every piece of CV text reaches the output through one of these functions.
escape_latex() is total over strings and never re-escapes its own output, so
the output of a generated document can be regenerated without drift.
"""

import re
from typing import Optional

from cvtex.contexts.templating.latex_patterns import (
    EscapePatterns,
    LinkPatterns,
    MarkdownPatterns,
    PlaceholderPatterns,
)
from cvtex.utils.text_processing import prepend_without_overlap

_TEXT_ESCAPES = str.maketrans(dict(EscapePatterns.TEXT_REPLACEMENTS))
_URL_ESCAPES = str.maketrans(dict(EscapePatterns.URL_REPLACEMENTS))
_SENTINELS = str.maketrans({PlaceholderPatterns.OPEN: None, PlaceholderPatterns.CLOSE: None})


def escape_latex(text: Optional[str]) -> str:
    """
    Escape LaTeX special characters: \\ % & $ # _ { } ~ ^

    Example:
        >>> escape_latex("R&D at 50% off")
        'R\\\\&D at 50\\\\% off'
    """
    if not text:
        return ""
    return text.translate(_TEXT_ESCAPES)


def escape_url(url: str) -> str:
    """Escape the characters that break the URL argument of \\href."""
    return url.translate(_URL_ESCAPES)


def escape_latex_preserve_formatting(text: Optional[str]) -> str:
    """
    Escape text while turning inline markdown into LaTeX commands.

    **bold** (and *bold*, *bold**) becomes \\textbf{...}; [text](url) becomes
    \\href{url}{\\underline{text}}, also inside bold text. Formatting is
    swapped for placeholders, the rest is escaped, then placeholders are
    restored.

    Args:
        text: CV text possibly containing inline markdown

    Returns:
        LaTeX-safe string

    Example:
        >>> escape_latex_preserve_formatting("Cut costs by **40%**")
        'Cut costs by \\\\textbf{40\\\\%}'
    """
    if not text:
        return ""

    replacements = []

    def protect(latex: str) -> str:
        replacements.append(latex)
        return f"{PlaceholderPatterns.OPEN}{len(replacements) - 1}{PlaceholderPatterns.CLOSE}"

    processed = text.translate(_SENTINELS)

    processed = re.sub(
        MarkdownPatterns.BOLD,
        lambda match: protect(
            rf"\textbf{{{escape_latex_preserve_formatting(match.group(1).strip())}}}"
        ),
        processed,
    )
    processed = re.sub(
        MarkdownPatterns.LINK,
        lambda match: protect(
            rf"\href{{{escape_url(match.group(2))}}}{{\underline{{{escape_latex(match.group(1))}}}}}"
        ),
        processed,
    )

    processed = escape_latex(processed)

    # Links may wrap bold placeholders, so restore newest first
    for index in reversed(range(len(replacements))):
        placeholder = f"{PlaceholderPatterns.OPEN}{index}{PlaceholderPatterns.CLOSE}"
        processed = processed.replace(placeholder, replacements[index])

    return processed


def strip_markdown(text: Optional[str]) -> str:
    """
    Remove bold/italic markers and link syntax, keeping the text.

    Example:
        >>> strip_markdown("**Senior** [Engineer](https://x.io)")
        'Senior Engineer'
    """
    if not text:
        return ""
    text = re.sub(MarkdownPatterns.BOLD, r"\1", text)
    text = re.sub(MarkdownPatterns.ITALIC, r"\1", text)
    text = re.sub(MarkdownPatterns.LINK, r"\1", text)
    return text.strip()


def link_display_text(url: str) -> str:
    """
    Display form of a URL: scheme, "www." and trailing slash removed.

    Example:
        >>> link_display_text("https://www.linkedin.com/in/jdoe/")
        'linkedin.com/in/jdoe'
    """
    text = re.sub(LinkPatterns.SCHEME_PREFIX, "", url, flags=re.I)
    return re.sub(LinkPatterns.TRAILING_SLASH, "", text)


def format_link(url: str, display_text: Optional[str] = None) -> str:
    """Underlined \\href; display text defaults to the URL without scheme."""
    text = display_text or re.sub(LinkPatterns.SCHEME_PREFIX, "", url, flags=re.I)
    return rf"\href{{{escape_url(url)}}}{{\underline{{{escape_latex(text)}}}}}"


def format_profile_link(url: str) -> str:
    """
    Link for a LinkedIn/GitHub profile, adding https:// when no scheme is given.
    """
    if not url.lower().startswith(LinkPatterns.HTTP_PREFIX):
        url = prepend_without_overlap(LinkPatterns.HTTPS_PREFIX, url)
    return format_link(url, link_display_text(url))


def format_email(email: str) -> str:
    return rf"\href{{{LinkPatterns.MAILTO_PREFIX}{escape_url(email)}}}{{\underline{{{escape_latex(email)}}}}}"


def format_phone(phone: str) -> str:
    """
    Phone number link; the tel: target keeps only digits and "+".

    Example:
        >>> format_phone("+1 (555) 123-4567")
        '\\\\href{tel:+15551234567}{\\\\underline{+1 (555) 123-4567}}'
    """
    target = re.sub(LinkPatterns.PHONE_NOISE, "", phone)
    return rf"\href{{{LinkPatterns.TEL_PREFIX}{target}}}{{\underline{{{escape_latex(phone)}}}}}"
