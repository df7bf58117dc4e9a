"""
planner/catalog/course_tree.py

Unbalanced binary search tree of Course records keyed by course number.

Ordering rules:
    insert   - raw string comparison. A node whose identifier is strictly
               greater than the new one sends it left; everything else,
               duplicates included, goes right.
    search   - case-insensitive. Both identifiers are upper-cased before the
               equality test and before choosing a direction.

The two rules only agree when identifiers share one case convention (the
usual "CSCI101" style). Mixed-case catalogs can make search miss a course
that is present; see DESIGN.md.

No rebalancing: sorted input degenerates into a linked list. All walks are
iterative so a degenerate tree never hits the recursion limit.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterator

from planner.catalog.course_record import NOT_FOUND, Course

logger = logging.getLogger(__name__)


class _Node:
    __slots__ = ("course", "left", "right")

    def __init__(self, course: Course) -> None:
        self.course = course
        self.left: _Node | None = None
        self.right: _Node | None = None


class CourseTree:
    """Ordered in-memory catalog of courses."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._root is not None

    def __iter__(self) -> Iterator[Course]:
        return self.iter_in_order()

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def insert(self, course: Course) -> None:
        """Add *course* to the tree. Duplicate identifiers are kept."""
        new_node = _Node(course)
        self._size += 1

        if self._root is None:
            self._root = new_node
            return

        node = self._root
        while True:
            if node.course.identifier > course.identifier:
                if node.left is None:
                    node.left = new_node
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new_node
                    return
                node = node.right

    def clear(self) -> None:
        """Release every node post-order (children before parent)."""
        released = 0
        stack: list[tuple[_Node, bool]] = []
        if self._root is not None:
            stack.append((self._root, False))

        while stack:
            node, children_done = stack.pop()
            if children_done:
                node.left = None
                node.right = None
                released += 1
                continue
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))

        self._root = None
        self._size = 0
        logger.debug("CourseTree.clear: released %d node(s)", released)

    teardown = clear

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def search(self, identifier: str) -> Course:
        """Return the first course whose identifier matches, ignoring case.

        Returns NOT_FOUND (empty identifier) when no node on the descent path
        matches. Never raises for a miss.
        """
        wanted = identifier.upper()
        node = self._root

        while node is not None:
            current = node.course.identifier.upper()
            if current == wanted:
                return node.course
            if current > wanted:
                node = node.left
            else:
                node = node.right

        logger.info("Course Number not found: %r", identifier)
        return NOT_FOUND

    def traverse(self, visitor: Callable[[Course], object]) -> None:
        """Call *visitor* once per course in ascending identifier order."""
        for course in self.iter_in_order():
            visitor(course)

    def iter_in_order(self) -> Iterator[Course]:
        """Yield courses left subtree, node, right subtree."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.course
            node = node.right

    def height(self) -> int:
        """Nodes on the longest root-to-leaf path; 0 when empty."""
        if self._root is None:
            return 0

        tallest = 0
        stack: list[tuple[_Node, int]] = [(self._root, 1)]
        while stack:
            node, depth = stack.pop()
            tallest = max(tallest, depth)
            if node.left is not None:
                stack.append((node.left, depth + 1))
            if node.right is not None:
                stack.append((node.right, depth + 1))
        return tallest
