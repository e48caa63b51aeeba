"""
Parsing heuristics configuration.

Loads the tunable keyword lists from config/heuristics.yaml (or the file named
by CVTEX_HEURISTICS_PATH) and compiles them into the regexes the section
parsers use. The compiled result is cached; it is read-only after loading, so
every parse call shares the same instance.
"""

import os
import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Optional, Pattern

from dotenv import load_dotenv
from omegaconf import OmegaConf

load_dotenv()
DEFAULT_HEURISTICS_PATH = Path(__file__).parent / "config" / "heuristics.yaml"
HEURISTICS_PATH = Path(os.getenv("CVTEX_HEURISTICS_PATH", str(DEFAULT_HEURISTICS_PATH)))


@dataclass(frozen=True)
class ParsingHeuristics:
    """
    Compiled keyword regexes.

    Attributes:
        job_title: Word-bounded match of any job-title keyword
        location_token: Whole-part match of a known short location
        education_entry: Word-bounded match of any education entry keyword
        institution: Unbounded match of an institution keyword
        degree: Word-bounded match of a degree keyword
        grade: Unbounded match of a grade/honor keyword
        technology_parenthetical: Parenthetical containing a technology keyword
        project_header_cue: Word-bounded match of an award/date cue
        project_date_cue: Unbounded match of a date-range cue
    """

    job_title: Pattern
    location_token: Pattern
    education_entry: Pattern
    institution: Pattern
    degree: Pattern
    grade: Pattern
    technology_parenthetical: Pattern
    project_header_cue: Pattern
    project_date_cue: Pattern


def _alternation(keywords: Iterable[str]) -> str:
    return "|".join(str(keyword) for keyword in keywords)


def compile_heuristics(config: dict) -> ParsingHeuristics:
    """
    Compile a heuristics config dict into regexes.

    Args:
        config: Dict with "experience", "education" and "projects" keyword lists

    Returns:
        ParsingHeuristics with case-insensitive compiled patterns
    """
    experience = config["experience"]
    education = config["education"]
    projects = config["projects"]

    technologies = _alternation(projects["technology_keywords"])

    return ParsingHeuristics(
        job_title=re.compile(rf"\b({_alternation(experience['title_keywords'])})\b", re.I),
        location_token=re.compile(
            rf"^({_alternation(experience['location_tokens'])})$", re.I
        ),
        education_entry=re.compile(rf"\b({_alternation(education['entry_keywords'])})\b", re.I),
        institution=re.compile(_alternation(education["institution_keywords"]), re.I),
        degree=re.compile(rf"\b({_alternation(education['degree_keywords'])})\b", re.I),
        grade=re.compile(_alternation(education["grade_keywords"]), re.I),
        technology_parenthetical=re.compile(
            rf"\(([^)]*(?:{technologies})[^)]*)\)", re.I
        ),
        project_header_cue=re.compile(rf"\b({_alternation(projects['header_cues'])})\b", re.I),
        project_date_cue=re.compile(_alternation(projects["date_range_cues"]), re.I),
    )


@lru_cache(maxsize=None)
def load_heuristics(config_path: Optional[Path] = None) -> ParsingHeuristics:
    """
    Load and compile the heuristics config, caching the result per path.

    Args:
        config_path: Optional YAML path (defaults to CVTEX_HEURISTICS_PATH)

    Returns:
        Compiled ParsingHeuristics
    """
    if config_path is None:
        config_path = HEURISTICS_PATH

    config = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)
    return compile_heuristics(config)
