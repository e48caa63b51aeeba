"""
Section field parsers.

One parser per section shape. Each takes the raw body text of a single
section and returns a tuple of typed entries. None of them raise: lines that
fit no heuristic become paragraph text of the current entry, or are dropped
when no entry is open yet.

Experience and projects share the same paragraph handling: non-bullet lines
accumulate in a buffer that is flushed as one joined bullet when a boundary
is hit (blank or separator line, bullet, new entry header, end of input).
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from cvtex.contexts.intake.cv_data_structure import (
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
    SkillCategory,
)
from cvtex.contexts.intake.heuristics import ParsingHeuristics, load_heuristics
from cvtex.contexts.intake.normalizer import (
    count_bold_markers,
    is_separator_line,
    normalize_bullet_marker,
    split_entry_parts,
    strip_asterisks,
    strip_bold_markers,
)
from cvtex.contexts.intake.patterns import (
    EducationDatePatterns,
    ExperienceDatePatterns,
    LinePatterns,
    ListPatterns,
    SkillPatterns,
)

_EXPERIENCE_DATES = tuple(re.compile(p, re.I) for p in ExperienceDatePatterns.ordered())
_EDUCATION_DATES = tuple(re.compile(p, re.I) for p in EducationDatePatterns.ordered())


def _find_date_range(line: str, patterns: Tuple[re.Pattern, ...]) -> str:
    for pattern in patterns:
        match = pattern.search(line)
        if match:
            return match.group(0)
    return ""


def _is_date_part(part: str, patterns: Tuple[re.Pattern, ...]) -> bool:
    return any(pattern.search(part) for pattern in patterns)


@dataclass
class _EntryDraft:
    """Mutable working copy of the entry currently being filled."""

    header: dict
    lines: List[str] = field(default_factory=list)
    paragraph: List[str] = field(default_factory=list)

    def flush_paragraph(self) -> None:
        if self.paragraph:
            self.lines.append(" ".join(self.paragraph))
            self.paragraph = []


# =============================================================================
# EXPERIENCE
# =============================================================================


def parse_experience_header(
    line: str, heuristics: Optional[ParsingHeuristics] = None
) -> Optional[dict]:
    """
    Try to read a line as an experience entry header.

    A date range is required. The line is split on "|" (or en/em-dash) and
    each non-date part is classified, first rule wins:

    1. Contains a job-title keyword → position (title wins first)
    2. Contains a parenthetical → company
    3. Is a known short location token → location
    4. Starts with "**" → position
    5. Longer than 3 chars → company

    Args:
        line: Line content with any bullet marker already removed
        heuristics: Compiled keyword lists (defaults to the packaged config)

    Returns:
        Dict of header fields, or None when the line has no date range or
        fewer than two parts
    """
    heuristics = heuristics or load_heuristics()

    date_range = _find_date_range(line, _EXPERIENCE_DATES)
    if not date_range:
        return None

    parts = split_entry_parts(line)
    if len(parts) < 2:
        return None

    company = position = location = ""

    for part in parts:
        if _is_date_part(part, _EXPERIENCE_DATES):
            continue

        clean_part = strip_bold_markers(part)

        if not position and heuristics.job_title.search(clean_part):
            position = clean_part
        elif not company and re.search(r"\([^)]+\)", clean_part):
            company = clean_part
        elif not location and heuristics.location_token.match(clean_part):
            location = clean_part
        elif not position and part.startswith("**"):
            position = clean_part
        elif not company and len(clean_part) > 3:
            company = clean_part

    return {
        "company": company,
        "position": position,
        "location": location or None,
        "date_range": date_range,
    }


def parse_experience_section(
    content: str, heuristics: Optional[ParsingHeuristics] = None
) -> Tuple[ExperienceEntry, ...]:
    """
    Parse the body of an experience section.

    Args:
        content: Raw section text
        heuristics: Compiled keyword lists (defaults to the packaged config)

    Returns:
        Experience entries in source order
    """
    heuristics = heuristics or load_heuristics()
    entries: List[ExperienceEntry] = []
    current: Optional[_EntryDraft] = None

    def push_current() -> None:
        if current is not None:
            current.flush_paragraph()
            entries.append(ExperienceEntry(**current.header, bullets=tuple(current.lines)))

    for raw_line in content.split("\n"):
        trimmed = raw_line.strip()

        if not trimmed or is_separator_line(trimmed):
            if current is not None:
                current.flush_paragraph()
            continue

        # Bullets are header candidates too ("- Developer | Acme | 2020 - 2022")
        is_bullet, bullet_content = normalize_bullet_marker(trimmed)
        candidate = bullet_content if is_bullet else trimmed

        header = parse_experience_header(candidate, heuristics)

        if header and (header["company"] or header["position"]):
            push_current()
            current = _EntryDraft(header=header)
        elif current is None:
            continue
        elif is_bullet and bullet_content:
            current.flush_paragraph()
            bullet = re.sub(LinePatterns.LEADING_DASH, "", bullet_content).strip()
            if bullet:
                current.lines.append(bullet)
        else:
            current.paragraph.append(trimmed)

    push_current()
    return tuple(entries)


# =============================================================================
# EDUCATION
# =============================================================================


def parse_education_header(
    line: str, heuristics: Optional[ParsingHeuristics] = None
) -> Optional[dict]:
    """
    Try to read a line as an education entry header.

    Looser than experience: a date range OR an education keyword qualifies.
    Each part is classified, first rule wins:

    1. Date range → skipped
    2. Grade/honor keyword → details
    3. Institution keyword → institution
    4. Degree keyword → degree (first only)
    5. First remaining part longer than 3 chars → degree

    When only a degree was found it is moved to institution, so institution
    is never empty while degree is set.

    Args:
        line: Line content with bullet marker and leading dash removed
        heuristics: Compiled keyword lists (defaults to the packaged config)

    Returns:
        Dict of header fields, or None when the line qualifies neither way
    """
    heuristics = heuristics or load_heuristics()

    date_range = _find_date_range(line, _EDUCATION_DATES)
    if not date_range and not heuristics.education_entry.search(line):
        return None

    parts = split_entry_parts(line)

    institution = degree = ""
    details: List[str] = []

    for part in parts:
        clean_part = strip_bold_markers(part)

        if _is_date_part(clean_part, _EDUCATION_DATES):
            continue

        if heuristics.grade.search(clean_part):
            details.append(clean_part)
        elif heuristics.institution.search(clean_part):
            institution = clean_part
        elif not degree and heuristics.degree.search(clean_part):
            degree = clean_part
        elif not degree and len(clean_part) > 3:
            degree = clean_part

    if not institution and degree:
        institution, degree = degree, ""

    if not institution and parts:
        institution = strip_bold_markers(parts[0])

    return {
        "institution": institution,
        "degree": degree,
        "location": None,
        "date_range": date_range,
        "details": details,
    }


def parse_education_section(
    content: str, heuristics: Optional[ParsingHeuristics] = None
) -> Tuple[EducationEntry, ...]:
    """
    Parse the body of an education section.

    Lines that are not entry headers become details of the current entry.

    Args:
        content: Raw section text
        heuristics: Compiled keyword lists (defaults to the packaged config)

    Returns:
        Education entries in source order
    """
    heuristics = heuristics or load_heuristics()
    entries: List[EducationEntry] = []
    current: Optional[_EntryDraft] = None

    def push_current() -> None:
        if current is not None:
            header = dict(current.header)
            details = tuple(header.pop("details")) + tuple(current.lines)
            entries.append(EducationEntry(**header, details=details))

    for raw_line in content.split("\n"):
        trimmed = raw_line.strip()

        if not trimmed or is_separator_line(trimmed):
            continue

        is_bullet, line_content = normalize_bullet_marker(trimmed)
        line = line_content if is_bullet else trimmed
        line = re.sub(LinePatterns.LEADING_DASH, "", line).strip()

        header = parse_education_header(line, heuristics)

        if header and header["institution"]:
            push_current()
            current = _EntryDraft(header=header)
        elif current is not None and line:
            current.lines.append(line)

    push_current()
    return tuple(entries)


# =============================================================================
# SKILLS
# =============================================================================


def parse_skills_section(content: str) -> Tuple[SkillCategory, ...]:
    """
    Parse the body of a skills section.

    Every non-empty line becomes its own SkillCategory; lines are never
    merged, even when they share a category label. Recognized shapes:

    - "**Category**: skills" (or "**Category** skills")
    - "Category: skills"
    - "skills" (uncategorized)

    Args:
        content: Raw section text

    Returns:
        Skill categories in source order
    """
    categories: List[SkillCategory] = []

    for raw_line in content.split("\n"):
        trimmed = raw_line.strip()

        if not trimmed or is_separator_line(trimmed):
            continue

        _, line_content = normalize_bullet_marker(trimmed)
        line = line_content or trimmed

        category = ""
        skills = line

        bold_match = re.match(SkillPatterns.BOLD_CATEGORY, line)
        if bold_match:
            category = bold_match.group(1).strip().rstrip(":").strip()
            skills = bold_match.group(2).strip() or line
        else:
            colon_match = re.match(SkillPatterns.COLON_CATEGORY, line)
            if colon_match:
                category = colon_match.group(1).strip()
                skills = colon_match.group(2).strip()

        if skills:
            categories.append(SkillCategory(category=category, skills=skills))

    return tuple(categories)


# =============================================================================
# PROJECTS
# =============================================================================


def _split_project_line(line: str) -> List[str]:
    if "|" in line:
        return re.split(LinePatterns.PIPE_SPLIT, line)
    if re.search(LinePatterns.SPACED_DASH_SPLIT, line):
        return re.split(LinePatterns.SPACED_DASH_SPLIT, line)
    return [line]


def parse_project_header(
    line: str, heuristics: Optional[ParsingHeuristics] = None
) -> Optional[dict]:
    """
    Try to read a line as a project header.

    A line is a header when it names a recognized technology inside
    parentheses, or carries an award/date cue (1st, Place, Award, Hackathon,
    a 4-digit year, Present, Research, Prototype).

    Args:
        line: Line content with bullet marker removed
        heuristics: Compiled keyword lists (defaults to the packaged config)

    Returns:
        Dict with name, technologies and date_range, or None

    Example:
        >>> parse_project_header("**API Gateway** (Python, FastAPI) — 2023")
        {'name': 'API Gateway', 'technologies': 'Python, FastAPI', 'date_range': '2023'}
    """
    heuristics = heuristics or load_heuristics()

    tech_match = heuristics.technology_parenthetical.search(line)
    has_cue = heuristics.project_header_cue.search(line)

    if not tech_match and not has_cue:
        return None

    parts = _split_project_line(line)

    name = parts[0].strip()
    technologies = None
    date_range = None

    if tech_match:
        technologies = tech_match.group(1)
        name = name.replace(tech_match.group(0), "").strip()

    for part in parts[1:]:
        if heuristics.project_date_cue.search(part):
            date_range = strip_asterisks(part)

    return {
        "name": strip_asterisks(name),
        "technologies": technologies,
        "date_range": date_range,
    }


def parse_projects_section(
    content: str, heuristics: Optional[ParsingHeuristics] = None
) -> Tuple[ProjectEntry, ...]:
    """
    Parse the body of a projects section.

    Bullets are kept verbatim (bold markers included).

    Args:
        content: Raw section text
        heuristics: Compiled keyword lists (defaults to the packaged config)

    Returns:
        Project entries in source order
    """
    heuristics = heuristics or load_heuristics()
    projects: List[ProjectEntry] = []
    current: Optional[_EntryDraft] = None

    def push_current() -> None:
        if current is not None:
            current.flush_paragraph()
            projects.append(ProjectEntry(**current.header, bullets=tuple(current.lines)))

    for raw_line in content.split("\n"):
        trimmed = raw_line.strip()

        if not trimmed or is_separator_line(trimmed):
            if current is not None:
                current.flush_paragraph()
            continue

        is_bullet, line_content = normalize_bullet_marker(trimmed)
        line = line_content if is_bullet else trimmed

        header = parse_project_header(line, heuristics)

        if header is not None:
            push_current()
            current = _EntryDraft(header=header)
        elif current is None:
            continue
        elif is_bullet:
            current.flush_paragraph()
            current.lines.append(line)
        elif line:
            current.paragraph.append(line)

    push_current()
    return tuple(projects)


# =============================================================================
# SIMPLE LISTS (certifications, publications, awards, languages, interests, generic)
# =============================================================================


def _split_paragraph_items(paragraph: str) -> List[str]:
    """
    Turn a joined paragraph into list items.

    A paragraph with more than one **bold** span is split before each span,
    so "**A** text **B** text" gives two items. Markers left dangling by a
    line break ("Title**" then "**rest") are dropped first.
    """
    combined = re.sub(ListPatterns.SPACED_BOLD_PAIR, " ", paragraph)
    combined = re.sub(ListPatterns.EMPTY_BOLD_PAIR, "", combined).strip()
    if not combined:
        return []

    if len(re.findall(ListPatterns.BOLD_SPAN, combined)) > 1:
        items = []
        for part in re.split(ListPatterns.BEFORE_BOLD_SPAN, combined):
            part = part.strip()
            if part and part != "**":
                items.append(part)
        return items

    return [combined]


def _join_split_bold(items: List[str]) -> List[str]:
    """
    Rejoin items whose bold markers were broken across lines.

    An item with an odd number of "**" is held back; when the next item
    starts with a bold closer ("** rest" rather than "**Title**") the two are
    concatenated.
    """
    joined = []
    pending = ""

    for item in items:
        starts_with_closer = item.startswith("**") and not re.match(
            ListPatterns.LEADING_BOLD_SPAN, item
        )

        if pending and starts_with_closer:
            joined.append(pending + item)
            pending = ""
            continue

        if pending:
            joined.append(pending)
            pending = ""

        if count_bold_markers(item) % 2 != 0:
            pending = item
        else:
            joined.append(item)

    if pending:
        joined.append(pending)

    return joined


def parse_simple_list_section(content: str) -> Tuple[str, ...]:
    """
    Parse a list-like section into item strings.

    Bullets become items directly. Consecutive non-bullet lines are joined
    into one paragraph, flushed on a blank/separator line, a bullet, or end of
    input, and split at bold spans (see _split_paragraph_items).

    Args:
        content: Raw section text

    Returns:
        Items in source order
    """
    items: List[str] = []
    paragraph: List[str] = []

    def flush_paragraph() -> None:
        if paragraph:
            items.extend(_split_paragraph_items(" ".join(paragraph)))
            paragraph.clear()

    for raw_line in content.split("\n"):
        trimmed = raw_line.strip()

        if not trimmed or is_separator_line(trimmed):
            flush_paragraph()
            continue

        is_bullet, line_content = normalize_bullet_marker(trimmed)
        line = line_content if is_bullet else trimmed

        if not line:
            continue

        if is_bullet:
            flush_paragraph()
            items.append(line)
        else:
            paragraph.append(line)

    flush_paragraph()

    return tuple(_join_split_bold(items))
