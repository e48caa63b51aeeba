"""
CV → LaTeX Converter

Main module providing the public conversion entry points.

This module exports:
- Convenience functions: parse, generate, list_templates
- Orchestration function: convert_file (file I/O, logging, timing)
"""

import os
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from dotenv import load_dotenv

from cvtex.contexts.intake.cv_data_structure import ParsedCV
from cvtex.contexts.intake.cv_parser import parse_cv
from cvtex.contexts.intake.diagnostics import analyze_parse_quality
from cvtex.contexts.templating.defaults import DEFAULT_TEMPLATE_ID
from cvtex.contexts.templating.latex_generator import (
    SectionToken,
    generate_latex,
    get_default_converter,
)
from cvtex.contexts.templating.logger import (
    _log_debug,
    log_conversion_result,
    log_conversion_start,
    setup_templating_logger,
)
from cvtex.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))


@dataclass
class ConversionResult:
    """Result from convert_file() orchestration function."""

    success: bool
    input_path: Optional[Path] = None
    output_path: Optional[Path] = None
    error: Optional[str] = None
    time_s: float = 0.0
    log_dir: Optional[Path] = None
    template_id: str = DEFAULT_TEMPLATE_ID
    # Parse diagnostics
    warnings: List[str] = field(default_factory=list)


def parse(raw_text: str) -> ParsedCV:
    """Parse CV text into a ParsedCV. Never raises for a string input."""
    return parse_cv(raw_text)


def generate(
    cv: ParsedCV,
    template_id: Optional[str] = DEFAULT_TEMPLATE_ID,
    section_order: Optional[Sequence[SectionToken]] = None,
) -> str:
    """
    Generate a complete LaTeX document from a ParsedCV.

    Args:
        cv: Parsed CV
        template_id: "professional", "modern" or "academic" (unknown ids
                     fall back to "professional")
        section_order: Section types or their names; None for the template's
                       default order

    Returns:
        LaTeX document string
    """
    return generate_latex(cv, template_id, section_order)


def list_templates() -> List[Dict[str, str]]:
    """
    List the available visual templates.

    Returns:
        List of {"id", "name", "description"} dicts, default template first
    """
    return get_default_converter().style_registry.list_styles()


def convert_file(
    input_path: Path,
    output_path: Optional[Path] = None,
    template_id: str = DEFAULT_TEMPLATE_ID,
    section_order: Optional[Sequence[SectionToken]] = None,
    log_dir: Optional[Path] = None,
    console: bool = True,
) -> ConversionResult:
    """
    Convert a CV text file to a .tex file.

    Handles:
    1. Setup logging (log_dir defaults to LOGS_PATH/convert_<timestamp>)
    2. Read, parse and run parse diagnostics
    3. Generate and write the LaTeX document

    Failures (unreadable input, unwritable output, broken templates) are
    captured in the returned result rather than raised.

    Args:
        input_path: CV text or markdown file
        output_path: Destination .tex file (defaults to input with .tex suffix)
        template_id: Visual template id
        section_order: Section ordering (None for the template's default)
        log_dir: Directory for this session's log file
        console: Also log to stderr

    Returns:
        ConversionResult with success status, paths, warnings and timing
    """
    start_time = time.time()
    input_path = Path(input_path)
    cv_name = input_path.stem

    # Setup logging
    if log_dir is None:
        log_dir = LOGS_PATH / f"convert_{now()}"
    log_file = setup_templating_logger(log_dir, template_id=template_id, console=console)
    log_conversion_start(cv_name, input_path, log_file)

    if output_path is None:
        output_path = input_path.with_suffix(".tex")
    output_path = Path(output_path)

    result = ConversionResult(
        success=False, input_path=input_path, log_dir=log_dir, template_id=template_id
    )

    try:
        raw_text = input_path.read_text(encoding="utf-8")
        cv = parse(raw_text)
        result.warnings = analyze_parse_quality(cv)

        latex = generate(cv, template_id, section_order)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(latex, encoding="utf-8")
        _log_debug(f"Wrote {len(latex)} characters")

        result.success = True
        result.output_path = output_path
    except Exception as e:
        result.error = str(e)

    result.time_s = time.time() - start_time
    log_conversion_result(cv_name, result, result.time_s)
    return result
