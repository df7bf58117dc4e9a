"""
planner/catalog/format_course.py

Console presentation of courses: the ordered course list and a single
course lookup.
"""

from __future__ import annotations

import sys
from typing import TextIO

from planner.catalog.course_record import Course
from planner.catalog.course_tree import CourseTree

NOT_FOUND_MESSAGE = "Course Number not found!"


def format_course(course: Course) -> str:
    """Return "<number>, <title>" plus a Prerequisites line when there are any."""
    text = f"{course.identifier}, {course.title}"
    if course.prerequisites:
        text += "\nPrerequisites: " + ", ".join(course.prerequisites)
    return text


def print_course_list(tree: CourseTree, out: TextIO | None = None) -> int:
    """Print every course in order, each followed by a blank line.

    Returns the number of courses printed.
    """
    out = out or sys.stdout
    printed = 0

    def _visit(course: Course) -> None:
        nonlocal printed
        out.write(format_course(course) + "\n\n")
        printed += 1

    tree.traverse(_visit)
    return printed


def print_course(tree: CourseTree, identifier: str, out: TextIO | None = None) -> bool:
    """Look up *identifier* and print it, or the not-found message.

    Returns True when the course was found.
    """
    out = out or sys.stdout
    course = tree.search(identifier)
    if not course.is_found:
        out.write(NOT_FOUND_MESSAGE + "\n")
        return False
    out.write(format_course(course) + "\n\n")
    return True
