"""Shared pytest fixtures."""

from pathlib import Path

import pytest
from loguru import logger

from cvtex.contexts.intake.cv_parser import parse_cv

FIXTURES_PATH = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def silence_logging():
    """Undo any setup_logger() call so sinks never outlive a test."""
    yield
    logger.remove()
    logger.disable("cvtex")


@pytest.fixture
def sample_cv_text() -> str:
    return (FIXTURES_PATH / "sample_cv.md").read_text(encoding="utf-8")


@pytest.fixture
def sample_cv(sample_cv_text):
    return parse_cv(sample_cv_text)
