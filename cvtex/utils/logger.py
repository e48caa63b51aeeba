"""
Session logging for cvtex.

One call to setup_logger() starts a logging session: a DEBUG log file under
the session directory, an optional colorized console sink on stderr, and a
provenance header recording how the session was started. Context-specific
prefix wrappers live in contexts/{context}/logger.py.

cvtex/__init__.py disables the package's loguru output on import so library
callers stay silent; setup_logger() turns it back on.
"""

import sys
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv
from loguru import logger

load_dotenv()

PACKAGE_NAME = "cvtex"

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"
)

# Console colors for the levels a conversion reports
LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[Dict[str, str]] = None,
    console: bool = True,
) -> Path:
    """
    Start a logging session for one context.

    Replaces any existing sinks, so only the latest session receives output.

    Args:
        context_name: Session name, also the log file stem ("template", ...)
        log_dir: Directory for this session (created if missing)
        extra_provenance: Extra key/value lines for the provenance header
        console: Mirror INFO and above to stderr (stdout stays free for output)

    Returns:
        Path to the session log file

    Example:
        log_file = setup_logger(
            "template",
            Path("outs/logs/convert_20251114_123456"),
            extra_provenance={"Template": "modern"},
        )
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.enable(PACKAGE_NAME)
    logger.remove()

    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    if console:
        logger.add(sys.stderr, format=CONSOLE_FORMAT, level="INFO", colorize=True)

    log_provenance(extra_provenance)

    return log_file


def log_provenance(extra_context: Optional[Dict[str, str]] = None) -> None:
    """
    Write the session header: command line, working directory, interpreter.

    Logged at DEBUG, so it lands in the log file but not on the console.
    """
    header = {
        "Script": sys.argv[0],
        "Command": " ".join(sys.argv),
        "Working directory": str(Path.cwd()),
        "Python": sys.version.split()[0],
        **(extra_context or {}),
    }

    logger.debug("=" * 80)
    for key, value in header.items():
        logger.debug(f"{key}: {value}")
    logger.debug("=" * 80)
