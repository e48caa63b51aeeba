"""
Templating Registries

Centralized registries for loading and caching visual styles and section
templates.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException
from yaml import YAMLError

from cvtex.contexts.intake.cv_data_structure import SectionType
from cvtex.contexts.templating.defaults import (
    DEFAULT_SECTION_ORDER,
    DEFAULT_SECTION_TITLES,
    DEFAULT_TEMPLATE_ID,
)
from cvtex.contexts.templating.exceptions import TemplateConfigError
from cvtex.contexts.templating.latex_escaping import (
    escape_latex,
    escape_latex_preserve_formatting,
    strip_markdown,
)
from cvtex.contexts.templating.latex_patterns import DocumentPatterns
from cvtex.contexts.templating.logger import _log_debug, _log_warning

load_dotenv()
TEMPLATING_CONTEXT_PATH = Path(__file__).parent
STYLES_PATH = Path(os.getenv("CVTEX_STYLES_PATH", str(TEMPLATING_CONTEXT_PATH / "styles")))
TYPES_PATH = Path(os.getenv("CVTEX_TYPES_PATH", str(TEMPLATING_CONTEXT_PATH / "types")))

STYLE_CONFIG_FILE = "style.yaml"
PREAMBLE_FILE = "preamble.tex"
EPILOGUE_FILE = "epilogue.tex"


@dataclass(frozen=True)
class StyleConfig:
    """
    A visual template: the LaTeX around the body plus its default ordering.

    Attributes:
        id: Identifier used to select the style
        name: Display name
        description: One-line description for listings
        preamble: LaTeX emitted before the body (ends by opening the document)
        epilogue: LaTeX emitted after the body (closes the document)
        section_order: Default order of section blocks
        section_titles: Heading per section type, defaults already merged in
        listing_position: Sort key for list_styles()
    """

    id: str
    name: str
    description: str
    preamble: str
    epilogue: str
    section_order: Tuple[SectionType, ...] = DEFAULT_SECTION_ORDER
    section_titles: Mapping[SectionType, str] = field(
        default_factory=lambda: MappingProxyType(dict(DEFAULT_SECTION_TITLES))
    )
    listing_position: int = 0

    def section_title(self, section_type: SectionType) -> str:
        return self.section_titles.get(section_type, DEFAULT_SECTION_TITLES.get(section_type, ""))

    def summary(self) -> Dict[str, str]:
        return {"id": self.id, "name": self.name, "description": self.description}


class StyleRegistry:
    """
    Registry for loading and caching visual styles.

    Styles are stored in cvtex/contexts/templating/styles/{style_id}/ as:
    - style.yaml: id, name, description, section_order, section_titles
    - preamble.tex: everything up to and including \\begin{document}
    - epilogue.tex: closing of the document
    """

    def __init__(self, styles_base_path: Path = None):
        """
        Initialize the style registry.

        Args:
            styles_base_path: Base path for style directories. Defaults to
                              CVTEX_STYLES_PATH from environment
        """
        if styles_base_path is None:
            styles_base_path = STYLES_PATH

        self.styles_base_path = Path(styles_base_path)
        self._cache: Dict[str, StyleConfig] = {}
        self._style_ids: Optional[List[str]] = None

    def list_style_ids(self) -> List[str]:
        """Ids of every directory holding a style.yaml, sorted by name. Scanned once."""
        if self._style_ids is None:
            if self.styles_base_path.is_dir():
                self._style_ids = sorted(
                    path.name
                    for path in self.styles_base_path.iterdir()
                    if (path / STYLE_CONFIG_FILE).is_file()
                )
            else:
                self._style_ids = []
        return list(self._style_ids)

    def has_style(self, style_id: str) -> bool:
        return style_id in self._cache or style_id in self.list_style_ids()

    def get_style(self, style_id: str) -> StyleConfig:
        """
        Get a style by id, loading and caching it if necessary.

        Args:
            style_id: Name of the style directory (e.g., 'modern')

        Returns:
            StyleConfig

        Raises:
            TemplateConfigError: If the style doesn't exist or is malformed
        """
        if style_id in self._cache:
            return self._cache[style_id]

        style_dir = self.styles_base_path / style_id
        config_path = style_dir / STYLE_CONFIG_FILE

        if not config_path.is_file():
            raise TemplateConfigError(
                f"Style not found. Available: {self.list_style_ids()}",
                template_id=style_id,
                config_path=config_path,
            )

        try:
            config = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)
            preamble = (style_dir / PREAMBLE_FILE).read_text(encoding="utf-8")
            epilogue = (style_dir / EPILOGUE_FILE).read_text(encoding="utf-8")
        except (OSError, YAMLError, OmegaConfBaseException) as e:
            raise TemplateConfigError(
                f"Failed to load style: {e}", template_id=style_id, config_path=config_path
            ) from e

        style = self._build_style(style_id, config, preamble, epilogue, config_path)

        _log_debug(f"Loaded style '{style_id}' from {style_dir}")
        self._cache[style_id] = style
        return style

    def resolve_style(self, style_id: Optional[str]) -> StyleConfig:
        """
        Get a style by id, falling back to the default style for unknown ids.

        Args:
            style_id: Requested style id (None means default)

        Returns:
            The requested StyleConfig, or the default one
        """
        if style_id is None:
            return self.get_style(DEFAULT_TEMPLATE_ID)

        if not self.has_style(style_id):
            _log_warning(f"Unknown template '{style_id}', using '{DEFAULT_TEMPLATE_ID}'")
            return self.get_style(DEFAULT_TEMPLATE_ID)

        return self.get_style(style_id)

    def list_styles(self) -> List[Dict[str, str]]:
        """
        Summaries of every available style, in listing order.

        Returns:
            List of {"id", "name", "description"} dicts
        """
        styles = [self.get_style(style_id) for style_id in self.list_style_ids()]
        styles.sort(key=lambda style: (style.listing_position, style.id))
        return [style.summary() for style in styles]

    def clear_cache(self):
        """Clear the style cache and forget the scanned style ids."""
        self._cache.clear()
        self._style_ids = None

    def is_cached(self, style_id: str) -> bool:
        """
        Check if a style is in the cache.

        Args:
            style_id: Name of the style

        Returns:
            True if cached, False otherwise
        """
        return style_id in self._cache

    @staticmethod
    def _build_style(
        style_id: str, config: Dict[str, Any], preamble: str, epilogue: str, config_path: Path
    ) -> StyleConfig:
        if DocumentPatterns.BEGIN_DOCUMENT not in preamble:
            raise TemplateConfigError(
                f"{PREAMBLE_FILE} must open the document with {DocumentPatterns.BEGIN_DOCUMENT}",
                template_id=style_id,
                config_path=config_path,
            )
        if DocumentPatterns.END_DOCUMENT not in epilogue:
            raise TemplateConfigError(
                f"{EPILOGUE_FILE} must close the document with {DocumentPatterns.END_DOCUMENT}",
                template_id=style_id,
                config_path=config_path,
            )

        section_order = []
        for token in config.get("section_order") or DEFAULT_SECTION_ORDER:
            section_type = SectionType.coerce(token)
            if section_type is None:
                raise TemplateConfigError(
                    f"Unknown section '{token}' in section_order",
                    template_id=style_id,
                    config_path=config_path,
                )
            section_order.append(section_type)

        section_titles = dict(DEFAULT_SECTION_TITLES)
        for token, title in (config.get("section_titles") or {}).items():
            section_type = SectionType.coerce(token)
            if section_type is None:
                raise TemplateConfigError(
                    f"Unknown section '{token}' in section_titles",
                    template_id=style_id,
                    config_path=config_path,
                )
            section_titles[section_type] = str(title)

        return StyleConfig(
            id=style_id,
            name=str(config.get("name", style_id.title())),
            description=str(config.get("description", "")),
            preamble=preamble,
            epilogue=epilogue,
            section_order=tuple(section_order),
            section_titles=MappingProxyType(section_titles),
            listing_position=int(config.get("listing_position", 0)),
        )


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates for LaTeX section blocks.

    Templates are stored in cvtex/contexts/templating/types/{type_name}/template.tex.jinja
    and use custom delimiters to avoid conflicts with LaTeX syntax:
    - Variable: <<< var >>>
    - Block: <%% block %%>
    - Comment: <# comment #>

    Filters available in templates:
    - latex: escape LaTeX special characters
    - latex_inline: escape, keeping **bold** and [text](url) as LaTeX
    - strip_markdown: drop markdown markers, keep the text
    """

    def __init__(self, types_base_path: Path = None):
        """
        Initialize the template registry.

        Args:
            types_base_path: Base path for type directories. Defaults to
                           CVTEX_TYPES_PATH from environment
        """
        if types_base_path is None:
            types_base_path = TYPES_PATH

        self.types_base_path = Path(types_base_path)
        self._cache: Dict[str, Template] = {}

        # Create Jinja2 environment with custom delimiters to avoid LaTeX conflicts
        self.env = Environment(
            loader=FileSystemLoader(str(self.types_base_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            # Custom delimiters to avoid LaTeX brace conflicts
            variable_start_string="<<<",
            variable_end_string=">>>",
            block_start_string="<%%",
            block_end_string="%%>",
            comment_start_string="<#",
            comment_end_string="#>",
            # Block tags sit on their own lines and leave no trace in the output
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["latex"] = escape_latex
        self.env.filters["latex_inline"] = escape_latex_preserve_formatting
        self.env.filters["strip_markdown"] = strip_markdown

    def get_template(self, type_name: str) -> Template:
        """
        Get a template by type name, loading and caching it if necessary.

        Args:
            type_name: Name of the type (e.g., 'experience')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        # Check cache first
        if type_name in self._cache:
            return self._cache[type_name]

        # Load template from file
        template_path = f"{type_name}/template.tex.jinja"

        try:
            template = self.env.get_template(template_path)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found for type '{type_name}' at {self.types_base_path / template_path}"
            ) from e

        # Cache and return
        self._cache[type_name] = template
        return template

    def get_template_path(self, type_name: str) -> Path:
        """
        Get the file path for a type's template.

        Args:
            type_name: Name of the type (e.g., 'experience')

        Returns:
            Path to template file
        """
        return self.types_base_path / type_name / "template.tex.jinja"

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, type_name: str) -> bool:
        """
        Check if a template is in the cache.

        Args:
            type_name: Name of the type

        Returns:
            True if cached, False otherwise
        """
        return type_name in self._cache
