"""
Shared utilities for cvtex.

Common functionality used across contexts:
- Logger setup with provenance tracking
- Text processing helpers
- Timestamps for log directories
"""

from cvtex.utils.text_processing import (
    prepend_without_overlap,
    set_max_consecutive_blank_lines,
    truncate_display,
)
from cvtex.utils.timestamp import now

__all__ = ["now", "prepend_without_overlap", "set_max_consecutive_blank_lines", "truncate_display"]
