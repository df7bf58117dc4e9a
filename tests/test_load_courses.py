"""
tests/test_load_courses.py

Unit tests for planner/catalog/load_courses.py.

Covers load_courses, load_course_lines, build_course and the
all-or-nothing validate_then_load entry point.
"""

import sys
import tempfile
import unittest
from collections import Counter
from pathlib import Path

# ---------------------------------------------------------------------------
# PYTHONPATH bootstrap
# ---------------------------------------------------------------------------
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from planner.catalog.course_tree import CourseTree  # noqa: E402
from planner.catalog.errors import FileOpenError    # noqa: E402
from planner.catalog.load_courses import (          # noqa: E402
    build_course,
    load_course_lines,
    load_courses,
    validate_then_load,
)

_LOGGER = "planner.catalog.load_courses"


class TestLoadCourses(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp_dir = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def write(self, text: str) -> Path:
        path = self.tmp_dir / "courses.csv"
        path.write_text(text, encoding="utf-8")
        return path

    # ------------------------------------------------------------------
    # load_courses / load_course_lines
    # ------------------------------------------------------------------

    def test_no_prerequisites_gives_empty_tuple(self):
        tree = CourseTree()
        count = load_courses(self.write("CS101,Intro to CS,\n"), tree)
        self.assertEqual(count, 1)
        course = tree.search("CS101")
        self.assertEqual(course.title, "Intro to CS")
        self.assertEqual(course.prerequisites, ())

    def test_prerequisites_keep_order_and_duplicates(self):
        tree = CourseTree()
        load_course_lines(["CS300,Algo,CS200,MATH201,CS200\n"], tree)
        self.assertEqual(tree.search("cs300").prerequisites, ("CS200", "MATH201", "CS200"))

    def test_empty_fields_between_prerequisites_dropped(self):
        course = build_course(["CS300", "Algo", "", "CS200", "", "MATH201", ""])
        self.assertEqual(course.prerequisites, ("CS200", "MATH201"))

    def test_build_course_single_field(self):
        """Unvalidated single-field input yields an empty title, not an error."""
        course = build_course(["CS100"])
        self.assertEqual(course.title, "")

    def test_blank_lines_do_not_change_result(self):
        plain = ["CS100,Basics\n", "CS101,Intro,CS100\n"]
        spaced = ["\n", "CS100,Basics\n", "   \n", "CS101,Intro,CS100\n", "\t\n"]
        tree_a, tree_b = CourseTree(), CourseTree()
        self.assertEqual(load_course_lines(plain, tree_a), 2)
        self.assertEqual(load_course_lines(spaced, tree_b), 2)
        self.assertEqual(list(tree_a), list(tree_b))

    def test_round_trip_preserves_duplicate_counts(self):
        text = "CS200,B\nCS100,A\nCS200,B again,CS100\nCS300,C,CS200\nCS100,A again\n"
        tree = CourseTree()
        result = validate_then_load(self.write(text), tree)
        self.assertTrue(result["loaded"])
        self.assertEqual(result["count"], 5)
        expected = Counter(line.split(",")[0] for line in text.splitlines())
        self.assertEqual(Counter(c.identifier for c in tree), expected)

    def test_load_logs_count(self):
        with self.assertLogs(_LOGGER, level="INFO") as cm:
            load_courses(self.write("CS100,Basics\n"), CourseTree())
        self.assertTrue(any("Loaded 1 course(s)" in line for line in cm.output))

    def test_missing_file_raises_file_open_error(self):
        tree = CourseTree()
        with self.assertRaises(FileOpenError) as ctx:
            load_courses(self.tmp_dir / "gone.csv", tree)
        self.assertIsInstance(ctx.exception, OSError)
        self.assertIn("gone.csv", str(ctx.exception))
        self.assertEqual(len(tree), 0)

    # ------------------------------------------------------------------
    # validate_then_load
    # ------------------------------------------------------------------

    def test_valid_file_loads_everything(self):
        tree = CourseTree()
        result = validate_then_load(REPO_ROOT / "course_content" / "abcu_courses.csv", tree)
        self.assertEqual(
            result, {"loaded": True, "count": 8, "reason_code": None, "reason": None}
        )
        ids = [c.identifier for c in tree]
        self.assertEqual(ids, sorted(ids))
        self.assertEqual(tree.search("csci400").prerequisites, ("CSCI301", "CSCI350"))

    def test_invalid_prerequisite_leaves_tree_untouched(self):
        tree = CourseTree()
        with self.assertLogs(_LOGGER, level="WARNING"):
            result = validate_then_load(self.write("CS100,Basics\nCS101,Intro,CS999\n"), tree)
        self.assertFalse(result["loaded"])
        self.assertEqual(result["count"], 0)
        self.assertEqual(result["reason_code"], "INVALID_PREREQUISITE")
        self.assertEqual(len(tree), 0)

    def test_missing_title_leaves_existing_tree_unchanged(self):
        tree = CourseTree()
        load_course_lines(["MATH201,Discrete\n"], tree)
        result = validate_then_load(self.write("CS100,Basics\nCS101\n"), tree)
        self.assertEqual(result["reason_code"], "MISSING_COURSE_TITLE")
        self.assertEqual([c.identifier for c in tree], ["MATH201"])

    def test_missing_file_reported_not_raised(self):
        result = validate_then_load(self.tmp_dir / "gone.csv", CourseTree())
        self.assertFalse(result["loaded"])
        self.assertEqual(result["reason_code"], "FILE_OPEN_ERROR")

    def test_second_load_appends(self):
        """The catalog only grows; loading twice stores each course twice."""
        path = self.write("CS100,Basics\n")
        tree = CourseTree()
        validate_then_load(path, tree)
        validate_then_load(path, tree)
        self.assertEqual(len(tree), 2)


if __name__ == "__main__":
    unittest.main()
