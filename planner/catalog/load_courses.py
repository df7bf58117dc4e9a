"""
planner/catalog/load_courses.py

Builds Course records from a course file and inserts them into a CourseTree.

load_courses trusts that the file already passed validation; it does not
recheck fields or deduplicate. validate_then_load is the all-or-nothing
entry point used by the shell and the UI.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from planner.catalog.course_record import Course
from planner.catalog.course_tree import CourseTree
from planner.catalog.errors import CatalogError
from planner.catalog.read_course_lines import iter_course_rows, read_course_lines
from planner.catalog.validate_course_file import validate_course_file

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def load_courses(path: str | Path, tree: CourseTree) -> int:
    """Insert every course in the file at *path* into *tree*.

    Args:
        path: Course file that has already passed validate_course_file.
        tree: Destination catalog.

    Returns:
        Number of courses inserted.

    Raises:
        FileOpenError: If the file can no longer be opened (for example it
                       was removed after validation).
    """
    lines = read_course_lines(path)
    count = load_course_lines(lines, tree)
    logger.info("Loaded %d course(s) from %s", count, path)
    return count


def load_course_lines(lines: Iterable[str], tree: CourseTree) -> int:
    """Insert a course for every non-blank line in *lines*. Returns the count."""
    count = 0
    for line_number, fields in iter_course_rows(lines):
        course = build_course(fields)
        logger.debug("line %d -> %s", line_number, course.identifier)
        tree.insert(course)
        count += 1
    return count


def build_course(fields: list[str]) -> Course:
    """Turn split line fields into a Course. Empty prerequisite fields are dropped."""
    identifier = fields[0]
    title = fields[1] if len(fields) > 1 else ""
    prerequisites = tuple(field for field in fields[2:] if field)
    return Course(identifier=identifier, title=title, prerequisites=prerequisites)


def validate_then_load(path: str | Path, tree: CourseTree) -> dict:
    """Validate the file at *path* and, only if it passes, load it into *tree*.

    The file is read once per pass. A failed validation leaves *tree*
    untouched.

    Returns:
        dict with keys:
            loaded      (bool)      - True when courses were inserted.
            count       (int)       - Number of courses inserted.
            reason_code (str|None)  - Failure reason code, None on success.
            reason      (str|None)  - Human-readable failure description.
    """
    validation = validate_course_file(path)
    if not validation["valid"]:
        return _not_loaded(validation["reason_code"], validation["reason"])

    try:
        count = load_courses(path, tree)
    except CatalogError as exc:
        return _not_loaded(exc.reason_code, str(exc))

    return {"loaded": True, "count": count, "reason_code": None, "reason": None}


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _not_loaded(reason_code: str | None, reason: str | None) -> dict:
    logger.warning("Courses not loaded (%s): %s", reason_code, reason)
    return {"loaded": False, "count": 0, "reason_code": reason_code, "reason": reason}
