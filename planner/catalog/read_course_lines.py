"""
planner/catalog/read_course_lines.py

Reads a course file and splits its lines into fields.

Shared by the validator and the loader so both passes see lines the same
way: blank or whitespace-only lines are skipped, fields are separated by
FIELD_DELIMITER and taken verbatim (no whitespace stripping).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator

from planner.catalog.errors import FileOpenError

logger = logging.getLogger(__name__)

FIELD_DELIMITER: str = ","


def read_course_lines(path: str | Path) -> list[str]:
    """Read every line of the course file at *path*.

    The file is opened, read in full and closed within this call; nothing is
    held open between the validation pass and the load pass.

    Raises:
        FileOpenError: If the file does not exist, is not readable, or is not
                       valid UTF-8 text.
    """
    try:
        with open(path, encoding="utf-8") as fh:
            lines = fh.readlines()
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("read_course_lines: cannot open %s: %s", path, exc)
        raise FileOpenError(str(path)) from exc

    logger.debug("read_course_lines: %d line(s) read from %s", len(lines), path)
    return lines


def split_course_line(line: str) -> list[str]:
    """Split one raw line into its comma-separated fields."""
    return line.rstrip("\r\n").split(FIELD_DELIMITER)


def iter_course_rows(lines: Iterable[str]) -> Iterator[tuple[int, list[str]]]:
    """Yield (line_number, fields) for every non-blank line.

    line_number is 1-based and counts skipped blank lines, so it points at
    the physical line in the source file.
    """
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        yield line_number, split_course_line(line)
