"""
planner/catalog/errors.py

Exception types raised by the catalog modules.

Each concrete error also subclasses the builtin that callers would
otherwise expect (OSError for file access, ValueError for bad data), so
`except ValueError` keeps working at call sites that do not care about the
catalog-specific type.
"""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for all course catalog errors."""

    reason_code: str = "CATALOG_ERROR"


class FileOpenError(CatalogError, OSError):
    """The course file could not be opened for reading."""

    reason_code = "FILE_OPEN_ERROR"

    def __init__(self, path: str) -> None:
        super().__init__(f"Error opening file: {path}")
        self.path = path


class MissingFieldError(CatalogError, ValueError):
    """A required field (course number or title) is absent or empty."""

    def __init__(self, field: str, line_number: int) -> None:
        super().__init__(f"Line {line_number}: missing {field}.")
        self.field = field
        self.line_number = line_number

    @property
    def reason_code(self) -> str:  # type: ignore[override]
        return "MISSING_" + self.field.upper().replace(" ", "_")


class InvalidPrerequisiteError(CatalogError, ValueError):
    """A prerequisite names a course that does not appear in the file."""

    reason_code = "INVALID_PREREQUISITE"

    def __init__(self, prerequisite: str) -> None:
        super().__init__(f"Invalid prerequisite: {prerequisite!r}.")
        self.prerequisite = prerequisite
