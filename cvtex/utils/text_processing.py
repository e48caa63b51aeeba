"""
Small string helpers shared by the CLI and the LaTeX generator.
"""

from typing import List


def truncate_display(text: str, max_len: int) -> str:
    """
    Shorten text for one-line display, ending with "..." when cut.

    Example:
        >>> truncate_display("this is a very long string", 10)
        'this is...'
    """
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."


def prepend_without_overlap(prefix: str, value: str) -> str:
    """
    Prepend prefix to value unless value already starts with it.

    Comparison is case-insensitive so "HTTPS://..." is not prefixed twice.

    Example:
        >>> prepend_without_overlap("https://", "github.com/jdoe")
        'https://github.com/jdoe'
        >>> prepend_without_overlap("https://", "https://github.com/jdoe")
        'https://github.com/jdoe'
    """
    if value.lower().startswith(prefix.lower()):
        return value
    return prefix + value


def set_max_consecutive_blank_lines(content: str, max_consecutive: int = 1) -> str:
    """
    Cap runs of blank (or whitespace-only) lines at max_consecutive.

    Blank lines inside a kept run come out empty; non-blank lines are
    untouched.

    Args:
        content: Multi-line text
        max_consecutive: Longest run of blank lines to keep (0 drops them all)

    Returns:
        Text with long blank runs shortened

    Example:
        >>> set_max_consecutive_blank_lines("text\\n\\n\\n\\nmore")
        'text\\n\\nmore'
        >>> set_max_consecutive_blank_lines("text\\n\\nmore", max_consecutive=0)
        'text\\nmore'
    """
    kept: List[str] = []
    blank_run = 0

    for line in content.split("\n"):
        if line.strip():
            blank_run = 0
            kept.append(line)
            continue

        blank_run += 1
        if blank_run <= max_consecutive:
            kept.append("")

    return "\n".join(kept)
