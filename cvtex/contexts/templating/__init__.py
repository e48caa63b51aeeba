"""
Templating Context

Responsibilities:
- Manages the visual templates (preamble, epilogue, default section order)
- Renders ParsedCV sections through Jinja2 section templates
- Escapes CV text for LaTeX, keeping inline bold and links

Owns: ParsedCV → LaTeX conversion, style and section template registries
Never: Parses CV text
"""

from cvtex.contexts.templating.converter import (
    ConversionResult,
    convert_file,
    generate,
    list_templates,
    parse,
)
from cvtex.contexts.templating.exceptions import TemplateConfigError, TemplateRenderError
from cvtex.contexts.templating.latex_generator import CVToLaTeXConverter, generate_latex
from cvtex.contexts.templating.registries import StyleConfig, StyleRegistry, TemplateRegistry

__all__ = [
    # Convenience functions and orchestration
    "parse",
    "generate",
    "list_templates",
    "convert_file",
    "ConversionResult",
    # Generator and registries
    "CVToLaTeXConverter",
    "generate_latex",
    "StyleConfig",
    "StyleRegistry",
    "TemplateRegistry",
    # Exceptions
    "TemplateRenderError",
    "TemplateConfigError",
]
