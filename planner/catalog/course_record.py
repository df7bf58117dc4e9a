"""
planner/catalog/course_record.py

The Course value stored in the catalog, plus the not-found sentinel.

No file access. No mutation after construction.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Course:
    identifier: str
    title: str
    # Encounter order from the source line; duplicates are kept as-is.
    prerequisites: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_found(self) -> bool:
        """Return False for the NOT_FOUND sentinel (empty identifier)."""
        return self.identifier != ""


# Returned by CourseTree.search when nothing matches.
NOT_FOUND: Course = Course(identifier="", title="")
