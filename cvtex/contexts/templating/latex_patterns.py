"""
LaTeX Pattern Constants

Centralized pattern strings used for LaTeX generation.
Organized into frozen dataclasses by category for immutability and clear grouping.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DocumentPatterns:
    """
    Document-level LaTeX patterns.

    Every preamble must end by opening the document; every epilogue closes it.
    """
    BEGIN_DOCUMENT: str = r'\begin{document}'
    END_DOCUMENT: str = r'\end{document}'


@dataclass(frozen=True)
class EscapePatterns:
    """
    Characters with special meaning in LaTeX text and their escaped form.

    Applied in a single pass, so no replacement is ever re-escaped.
    """
    TEXT_REPLACEMENTS: tuple = (
        ('\\', r'\textbackslash{}'),
        ('%', r'\%'),
        ('&', r'\&'),
        ('$', r'\$'),
        ('#', r'\#'),
        ('_', r'\_'),
        ('{', r'\{'),
        ('}', r'\}'),
        ('~', r'\textasciitilde{}'),
        ('^', r'\textasciicircum{}'),
    )

    # Only these break the first argument of \href
    URL_REPLACEMENTS: tuple = (
        ('%', r'\%'),
        ('#', r'\#'),
    )


@dataclass(frozen=True)
class MarkdownPatterns:
    """
    Inline markdown recognized inside CV text.

    BOLD also accepts malformed mixes like *text** and single-star emphasis,
    all rendered as bold.
    """
    BOLD: str = r'\*{1,2}([^*]+)\*{1,2}'
    ITALIC: str = r'\*([^*]+)\*'
    LINK: str = r'\[([^\]]+)\]\(([^)]+)\)'
    LEADING_BOLD_TITLE: str = r'^\*\*([^*]+)\*\*\s*(.*)$'


@dataclass(frozen=True)
class PlaceholderPatterns:
    """
    Private-use sentinels wrapping placeholder indexes during escaping.

    Sentinels are stripped from the input first, so user text can never
    collide with a placeholder.
    """
    OPEN: str = '\uE000'
    CLOSE: str = '\uE001'


@dataclass(frozen=True)
class LinkPatterns:
    """
    URL shapes used when building contact links.
    """
    SCHEME_PREFIX: str = r'^https?://(?:www\.)?'
    TRAILING_SLASH: str = r'/$'
    HTTP_PREFIX: str = 'http'
    HTTPS_PREFIX: str = 'https://'
    MAILTO_PREFIX: str = 'mailto:'
    TEL_PREFIX: str = 'tel:'
    # Everything but digits and "+" is dropped from tel: links
    PHONE_NOISE: str = r'[^\d+]'
