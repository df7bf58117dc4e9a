"""
ui/app.py

Course Catalog Viewer: browse and search a validated course file.

Run from the repository root:
    streamlit run ui/app.py
"""

import logging
import sys
from pathlib import Path

import streamlit as st

# ---------------------------------------------------------------------------
# Ensure repo root is on sys.path so planner.* imports work regardless of
# where Streamlit is launched from.
# ---------------------------------------------------------------------------
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from planner.catalog.course_tree import CourseTree                      # noqa: E402
from planner.catalog.format_course import NOT_FOUND_MESSAGE             # noqa: E402
from planner.catalog.load_courses import (                              # noqa: E402
    load_course_lines,
    validate_then_load,
)
from planner.catalog.validate_course_file import validate_course_lines  # noqa: E402
from planner.shell.course_planner import DEFAULT_COURSE_FILE            # noqa: E402

EM_DASH = "\u2014"

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(page_title="Course Catalog Viewer", layout="centered")
st.title("Course Catalog Viewer")

if "course_tree" not in st.session_state:
    st.session_state["course_tree"] = CourseTree()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _course_row(course) -> dict:
    """One table row per course. No prerequisites → em dash."""
    return {
        "Course Number": course.identifier,
        "Title": course.title,
        "Prerequisites": ", ".join(course.prerequisites) or EM_DASH,
    }


def _load_upload(uploaded) -> dict:
    """Validate and load an uploaded file into a fresh tree."""
    try:
        lines = uploaded.getvalue().decode("utf-8").splitlines(keepends=True)
    except UnicodeDecodeError:
        return {"loaded": False, "reason": "Uploaded file is not UTF-8 text."}

    validation = validate_course_lines(lines)
    if not validation["valid"]:
        return {"loaded": False, "reason": validation["reason"]}

    tree = CourseTree()
    count = load_course_lines(lines, tree)
    st.session_state["course_tree"] = tree
    return {"loaded": True, "count": count}


def _load_path(path: str) -> dict:
    """Validate and load a file on disk into a fresh tree."""
    tree = CourseTree()
    result = validate_then_load(path, tree)
    if result["loaded"]:
        st.session_state["course_tree"] = tree
    return result


# ---------------------------------------------------------------------------
# Load
# ---------------------------------------------------------------------------
st.subheader("Load Courses")
path_input = st.text_input("Course file", value=str(DEFAULT_COURSE_FILE))
uploaded_file = st.file_uploader("…or upload a course file", type=["csv", "txt"])

if st.button("Validate & Load", type="primary"):
    result = None
    try:
        if uploaded_file is not None:
            result = _load_upload(uploaded_file)
        elif not path_input.strip():
            st.error("Course file is required.")
        else:
            result = _load_path(path_input.strip())
    except Exception:
        logging.exception("Unexpected error in Course Catalog Viewer load")
        st.error("An unexpected error occurred. See console for details.")

    if result is not None:
        if result["loaded"]:
            st.success(f"Courses loaded successfully! ({result['count']} courses)")
        else:
            st.error(result["reason"])

tree: CourseTree = st.session_state["course_tree"]

st.divider()

# ---------------------------------------------------------------------------
# Course list
# ---------------------------------------------------------------------------
st.subheader("Course List")
if tree:
    st.caption(f"{len(tree)} courses · tree height {tree.height()}")
    st.dataframe([_course_row(c) for c in tree.iter_in_order()], use_container_width=True)
else:
    st.info("No courses loaded yet.")

st.divider()

# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------
st.subheader("Print Course")
query = st.text_input("Course number", placeholder="e.g. CSCI200")

if st.button("Search"):
    if not query.strip():
        st.error("Course number is required.")
    else:
        course = tree.search(query.strip())
        if not course.is_found:
            st.warning(NOT_FOUND_MESSAGE)
        else:
            st.markdown(f"**{course.identifier}**, {course.title}")
            if course.prerequisites:
                st.write("Prerequisites: " + ", ".join(course.prerequisites))
