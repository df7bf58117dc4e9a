"""
planner/shell/course_planner.py

Interactive console menu over the course catalog.

Run from the repository root:
    python -m planner.shell.course_planner [course_file] [--verbose]

Loop state lives in a ShellState passed to dispatch() on every iteration;
input and output are injectable so the loop can be driven from tests.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, TextIO

from planner.catalog.course_tree import CourseTree
from planner.catalog.format_course import print_course, print_course_list
from planner.catalog.load_courses import validate_then_load

logger = logging.getLogger(__name__)

# Repo root: planner/shell/ -> planner/ -> repo root
_REPO_ROOT: Path = Path(__file__).resolve().parents[2]

DEFAULT_COURSE_FILE: Path = _REPO_ROOT / "course_content" / "abcu_courses.csv"

LOAD_CHOICE = "1"
LIST_CHOICE = "2"
SEARCH_CHOICE = "3"
QUIT_CHOICE = "9"

MENU = (
    f"  {LOAD_CHOICE}. Load Courses\n"
    f"  {LIST_CHOICE}. Print Course List\n"
    f"  {SEARCH_CHOICE}. Print Course\n"
    f"  {QUIT_CHOICE}. Exit\n"
)


@dataclass
class ShellState:
    tree: CourseTree = field(default_factory=CourseTree)
    default_path: Path = DEFAULT_COURSE_FILE
    running: bool = True


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def dispatch(
    choice: str,
    state: ShellState,
    *,
    read: Callable[[str], str] = input,
    out: TextIO | None = None,
) -> ShellState:
    """Carry out one menu selection and return the (updated) state."""
    out = out or sys.stdout
    choice = choice.strip()

    if choice == LOAD_CHOICE:
        _load(state, read, out)
    elif choice == LIST_CHOICE:
        if not state.tree:
            out.write("No courses loaded yet.\n")
        else:
            print_course_list(state.tree, out)
    elif choice == SEARCH_CHOICE:
        identifier = read("What course do you want to know about? ").strip()
        print_course(state.tree, identifier, out)
    elif choice == QUIT_CHOICE:
        state.running = False
        out.write("Good bye.\n")
    else:
        out.write(f"{choice} is not a valid option.\n")

    return state


def run_shell(
    state: ShellState,
    *,
    read: Callable[[str], str] = input,
    out: TextIO | None = None,
) -> ShellState:
    """Show the menu and dispatch selections until the quit choice (or EOF)."""
    out = out or sys.stdout
    out.write("Welcome to the course planner.\n")

    while state.running:
        out.write(MENU)
        try:
            choice = read("\nWhat would you like to do? ")
            state = dispatch(choice, state, read=read, out=out)
        except EOFError:
            logger.debug("run_shell: input closed, leaving loop")
            state.running = False

    return state


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="ABCU course planner")
    parser.add_argument(
        "course_file",
        nargs="?",
        default=str(DEFAULT_COURSE_FILE),
        help="File offered when the load prompt is left blank.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    state = ShellState(default_path=Path(args.course_file))
    run_shell(state)
    return 0


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _load(state: ShellState, read: Callable[[str], str], out: TextIO) -> None:
    path = read(
        f"Please enter the file name to load [{state.default_path}]: "
    ).strip() or str(state.default_path)

    result = validate_then_load(path, state.tree)
    if result["loaded"]:
        out.write("Courses loaded successfully!\n")
    elif result["reason_code"] == "FILE_OPEN_ERROR":
        out.write(f"{result['reason']}\n")
    else:
        out.write(f"*** ERROR ***\n{result['reason']}\n")


if __name__ == "__main__":
    sys.exit(main())
