"""
cvtex - CV/resume text to LaTeX converter

Parses free-form CV text (plain text or markdown, as pasted from a document
or PDF) with ordered heuristics into a structured model, then renders it as a
LaTeX document in one of several visual templates.

Architecture:
- Intake Context: CV text normalization and heuristic parsing
- Templating Context: Visual templates and LaTeX generation

Example:
    import cvtex

    cv = cvtex.parse(open("cv.md").read())
    latex = cvtex.generate(cv, template_id="modern")
"""

from loguru import logger

from cvtex.contexts.templating.converter import generate, list_templates, parse

__version__ = "0.1.0"

# Silent as a library; setup_logger() turns logging back on
logger.disable("cvtex")

__all__ = ["parse", "generate", "list_templates"]
