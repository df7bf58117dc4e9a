"""
planner/catalog/validate_course_file.py

Gatekeeper run before any course is loaded into the catalog.

No catalog access. Pure file I/O + validation. Evaluation is fail-fast:
the first problem found stops the check and is the only one reported.

Reason codes (exhaustive):
    FILE_OPEN_ERROR        - the file could not be opened.
    MISSING_COURSE_NUMBER  - a non-blank line has an empty first field.
    MISSING_COURSE_TITLE   - a non-blank line has no (or an empty) second field.
    INVALID_PREREQUISITE   - a prerequisite is not any line's course number.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from planner.catalog.errors import (
    CatalogError,
    InvalidPrerequisiteError,
    MissingFieldError,
)
from planner.catalog.read_course_lines import iter_course_rows, read_course_lines

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def validate_course_file(path: str | Path) -> dict:
    """Validate the course file at *path* without loading it.

    Args:
        path: Location of the comma-separated course file.

    Returns:
        dict with keys:
            valid        (bool)      - True only when every check passes.
            reason_code  (str|None)  - One of the module reason codes, or None.
            reason       (str|None)  - Human-readable failure description.
            line_number  (int|None)  - Offending line for missing-field
                                       failures; None otherwise.
            course_count (int)       - Course lines accepted (0 on failure).
    """
    try:
        lines = read_course_lines(path)
    except CatalogError as exc:
        return _failure(exc)
    return validate_course_lines(lines)


def validate_course_lines(lines: Iterable[str]) -> dict:
    """Validate already-read course lines. Same result shape as validate_course_file."""
    try:
        course_count = check_course_lines(lines)
    except CatalogError as exc:
        return _failure(exc)

    return {
        "valid": True,
        "reason_code": None,
        "reason": None,
        "line_number": None,
        "course_count": course_count,
    }


def check_course_lines(lines: Iterable[str]) -> int:
    """Run both validation passes over *lines*, raising on the first problem.

    Pass 1 walks every non-blank line, requiring a course number and title
    and collecting course numbers and (deduplicated) prerequisites.
    Pass 2 confirms every collected prerequisite is a known course number.

    Returns:
        Number of course lines seen.

    Raises:
        MissingFieldError: A line lacks its course number or title.
        InvalidPrerequisiteError: A prerequisite has no matching course.
    """
    known_courses: set[str] = set()
    # dict keeps first-seen order so the reported prerequisite is deterministic.
    prerequisites: dict[str, None] = {}
    course_count = 0

    for line_number, fields in iter_course_rows(lines):
        if not fields[0]:
            raise MissingFieldError("course number", line_number)
        known_courses.add(fields[0])

        if len(fields) < 2 or not fields[1]:
            raise MissingFieldError("course title", line_number)

        for prerequisite in fields[2:]:
            if prerequisite:
                prerequisites.setdefault(prerequisite, None)

        course_count += 1

    for prerequisite in prerequisites:
        if prerequisite not in known_courses:
            raise InvalidPrerequisiteError(prerequisite)

    logger.debug(
        "check_course_lines: %d course(s), %d distinct prerequisite(s) OK",
        course_count,
        len(prerequisites),
    )
    return course_count


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _failure(exc: CatalogError) -> dict:
    logger.warning("Course file rejected (%s): %s", exc.reason_code, exc)
    return {
        "valid": False,
        "reason_code": exc.reason_code,
        "reason": str(exc),
        "line_number": getattr(exc, "line_number", None),
        "course_count": 0,
    }
