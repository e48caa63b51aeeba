"""
Regex pattern constants for CV text parsing.

Organized into frozen dataclasses by category for immutability and clear
grouping. Keyword lists that are expected to grow (job titles, technologies,
education keywords...) are not here; they live in config/heuristics.yaml and
are compiled by heuristics.py.
"""

from dataclasses import dataclass

MONTHS = (
    r"Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|Jun(?:e)?|Jul(?:y)?"
    r"|Aug(?:ust)?|Sep(?:tember)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?"
)
ONGOING = r"Present|Current|Now"
RANGE_DASH = r"\s*[-–—]\s*"


@dataclass(frozen=True)
class LinePatterns:
    """
    Line-level markers: bullets, separators, bold edges, part splitting.
    """

    # "BOLD 0" is what some editors paste in place of a bullet glyph
    ARTIFACT_BULLET_PREFIX: str = "BOLD 0"
    ARTIFACT_BULLET: str = r"^BOLD\s*0\s*"
    BULLET: str = r"^[-•*]\s+(.*)$"

    SEPARATOR_LITERALS: tuple = ("—", "---", "***", "___")
    SEPARATOR_RUN: str = r"[-—=]{3,}"

    EDGE_BOLD: str = r"^\*\*|\*\*$"

    PIPE_SPLIT: str = r"\s*\|\s*"
    LONG_DASH_SPLIT: str = r"\s*[—–]\s*"
    # Dash surrounded by whitespace, so hyphenated words survive
    SPACED_DASH_SPLIT: str = r"\s+[—–-]\s+"

    LEADING_DASH: str = r"^[—–-]\s*"


@dataclass(frozen=True)
class HeaderPatterns:
    """
    Section header shapes, in the order the classifier tries them.
    """

    MARKDOWN: str = r"^#{1,3}\s+(.+)$"
    # **Title**, *Title*, and malformed mixes like *Title**
    FULLY_BOLD: str = r"^\*{1,2}([^*]+)\*{1,2}\s*$"
    ALL_CAPS: str = r"^[A-Z\s]+$"
    COLON_SUFFIXED: str = r"^([A-Za-z\s]+):$"
    # Characters replaced by spaces before alias lookup
    TITLE_PUNCTUATION: str = r"[:\-_]"


@dataclass(frozen=True)
class ContactPatterns:
    """
    Contact field patterns for the lines before the first section header.
    """

    EMAIL: str = r"[\w.-]+@[\w.-]+\.\w+"
    # Optional country code, grouped or ungrouped digits
    PHONE: str = r"(?:\+\d{1,3}[-.\s]?)?\(?\d{2,4}\)?[-.\s]?\d{3,4}[-.\s]?\d{3,4}"
    LINKEDIN: str = r"(?:https?://)?(?:www\.)?linkedin\.com/in/[\w-]+/?"
    GITHUB: str = r"(?:https?://)?(?:www\.)?github\.com/[\w-]+/?"
    URL: str = r"https?://[^\s]+"
    # Punctuation that wraps URLs in prose or markdown links
    URL_TRAILING_PUNCTUATION: str = ").,;|]>"
    URL_DISPLAY_PREFIX: str = r"^https?://(?:www\.)?"
    LOCATION: str = r"([A-Z][a-zA-Z\s]+,\s*[A-Z][a-zA-Z\s]+)"
    MARKDOWN_HEADER_MARKER: str = r"^#+\s*"


@dataclass(frozen=True)
class ExperienceDatePatterns:
    """
    Date ranges that mark an experience entry header, tried in order.
    """

    MONTH_NAME_RANGE: str = (
        rf"\b({MONTHS})\s+\d{{4}}{RANGE_DASH}({ONGOING}|(?:{MONTHS})\s+\d{{4}})\b"
    )
    SEPT_RANGE: str = (
        rf"\b(Sept?)\s+\d{{4}}{RANGE_DASH}"
        rf"({ONGOING}|(?:Sept?|Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Oct|Nov|Dec)\s+\d{{4}})\b"
    )
    YEAR_RANGE: str = rf"\b\d{{4}}{RANGE_DASH}({ONGOING}|\d{{4}})\b"
    NUMERIC_MONTH_RANGE: str = (
        rf"\b\d{{1,2}}/\d{{4}}{RANGE_DASH}({ONGOING}|\d{{1,2}}/\d{{4}})\b"
    )

    @classmethod
    def ordered(cls) -> tuple:
        return (
            cls.MONTH_NAME_RANGE,
            cls.SEPT_RANGE,
            cls.YEAR_RANGE,
            cls.NUMERIC_MONTH_RANGE,
        )


@dataclass(frozen=True)
class EducationDatePatterns:
    """
    Date ranges that mark an education entry header, tried in order.
    """

    ABBREVIATED_MONTH_RANGE: str = (
        r"\b(Sept?|Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Oct|Nov|Dec)\s+\d{4}"
        + RANGE_DASH
        + r"(Present|Sept?|Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Oct|Nov|Dec)\s+\d{4}\b"
    )
    YEAR_RANGE: str = r"\b(\d{4})" + RANGE_DASH + r"(Present|\d{4})\b"
    ACADEMIC_YEAR_RANGE: str = (
        r"\b(Aug|Sep|Sept)\s+\d{4}" + RANGE_DASH + r"(Jun|Jul|Aug|Sep|Sept)\s+\d{4}\b"
    )

    @classmethod
    def ordered(cls) -> tuple:
        return (cls.ABBREVIATED_MONTH_RANGE, cls.YEAR_RANGE, cls.ACADEMIC_YEAR_RANGE)


@dataclass(frozen=True)
class ListPatterns:
    """
    Bold-span patterns used by the simple-list parser.
    """

    BOLD_SPAN: str = r"\*\*[^*]+\*\*"
    BEFORE_BOLD_SPAN: str = r"(?=\*\*[^*]+\*\*)"
    LEADING_BOLD_SPAN: str = r"^\*\*[^*]+\*\*"
    SPACED_BOLD_PAIR: str = r"\*\*\s+\*\*"
    EMPTY_BOLD_PAIR: str = r"\*\*\*\*"


@dataclass(frozen=True)
class SkillPatterns:
    """
    Category shapes on a skills line.
    """

    BOLD_CATEGORY: str = r"^\*\*([^*]+)\*\*[:\s]*(.*)$"
    COLON_CATEGORY: str = r"^([^:]+):\s*(.+)$"
