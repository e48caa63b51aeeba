"""
Templating context logger.

Every templating message carries a [template] prefix. Conversion sessions are
started here so the provenance header records the visual template in use.
"""

from pathlib import Path

from loguru import logger

from cvtex.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[template]"


def setup_templating_logger(log_dir: Path, template_id: str, console: bool = True) -> Path:
    """
    Start a conversion logging session; returns the log file path.

    Example:
        log_file = setup_templating_logger(log_dir, template_id="modern")
    """
    return _setup_logger(
        context_name="template",
        log_dir=log_dir,
        extra_provenance={"Phase": "generate", "Template": template_id},
        console=console,
    )


# Wrapper functions with automatic [template] prefix


def _log_info(message: str) -> None:
    """Log info message with [template] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [template] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [template] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [template] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level templating-specific logging helpers


def log_conversion_start(cv_name: str, input_path: Path, log_file: Path) -> None:
    """Log start of conversion with context."""
    _log_info(f"Starting to convert {cv_name}")
    _log_info(f"Log file: {log_file}")
    _log_debug(f"Source: {input_path}")


def log_conversion_result(
    cv_name: str,
    result,  # ConversionResult
    elapsed_time: float,
) -> None:
    """
    Log conversion result with parse diagnostics.

    Args:
        cv_name: CV identifier (input file stem)
        result: ConversionResult from convert_file()
        elapsed_time: Time taken
    """
    if result.warnings:
        _log_info(f"  {len(result.warnings)} parse warning(s), see above")

    if result.success:
        _log_success(f"{cv_name}: conversion succeeded ({elapsed_time:.2f}s)")
        if result.output_path:
            _log_info(f"  Output: {result.output_path}")
    else:
        _log_error(f"Failed to convert {cv_name} ({elapsed_time:.2f}s)")
        if result.error:
            _log_error(f"  Error: {result.error}")
