"""
Templating errors.

Both point at the file to fix: a section template that failed to render, or a
visual template directory that failed to load.
"""

from pathlib import Path
from typing import Optional


class TemplateRenderError(Exception):
    """
    A section template is missing or failed to render.

    Attributes:
        message: What went wrong
        type_name: Section template name (e.g. "experience")
        template_path: Template file that was being rendered
        original_error: Underlying Jinja2 error
    """

    def __init__(
        self,
        message: str,
        type_name: Optional[str] = None,
        template_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.type_name = type_name
        self.template_path = template_path
        self.original_error = original_error

        lines = [message]
        if template_path:
            lines.append(f"Section template: {type_name} ({template_path})")
        if original_error:
            lines.append(f"Caused by: {type(original_error).__name__}: {original_error}")

        super().__init__("\n".join(lines))


class TemplateConfigError(Exception):
    """
    A visual template directory is missing or malformed.

    Attributes:
        message: What went wrong
        template_id: Visual template id
        config_path: File that failed to load or validate
    """

    def __init__(
        self,
        message: str,
        template_id: Optional[str] = None,
        config_path: Optional[Path] = None,
    ):
        self.message = message
        self.template_id = template_id
        self.config_path = config_path

        location = f" [{template_id}: {config_path}]" if config_path else ""
        super().__init__(f"{message}{location}")
