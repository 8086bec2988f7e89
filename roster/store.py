"""In-memory roster store.

Maps class name → students in insertion order. Class names are exact keys;
student names compare case-insensitively. A class key, once created, is never
deleted, so an emptied class answers with an empty list rather than
CLASS_NOT_FOUND.
"""

from __future__ import annotations

import logging
from typing import Optional

from roster.models import Lookup, Student

logger = logging.getLogger(__name__)


class RosterStore:
    """Owns the class → students mapping for the lifetime of the process."""

    def __init__(self) -> None:
        self._classes: dict[str, list[Student]] = {}

    def __contains__(self, class_name: object) -> bool:
        return class_name in self._classes

    def __len__(self) -> int:
        return sum(len(students) for students in self._classes.values())

    def add_student(self, class_name: str, student: Student) -> None:
        """Append a student to a class, creating the class if needed."""
        self._classes.setdefault(class_name, []).append(student)
        logger.debug("Added %s to %s", student.name, class_name)

    def get_all_students_by_class(self, class_name: str) -> Lookup[list[Student]]:
        """All students of a class in insertion order (a copy)."""
        students = self._classes.get(class_name)
        if students is None:
            logger.debug("Class %s not found", class_name)
            return Lookup.class_not_found()
        return Lookup.ok(list(students))

    def get_student_by_name_and_class(
        self, class_name: str, student_name: str
    ) -> Lookup[Student]:
        """First student in the class whose name matches, ignoring case."""
        if class_name not in self._classes:
            logger.debug("Class %s not found", class_name)
            return Lookup.class_not_found()

        index = self._find(class_name, student_name)
        if index is None:
            logger.debug("No student %s in %s", student_name, class_name)
            return Lookup.student_not_found()
        return Lookup.ok(self._classes[class_name][index])

    def remove_student(self, class_name: str, student_name: str) -> Lookup[Student]:
        """Remove the first matching student; later duplicates stay put.

        Returns the removed student on success. Nothing is mutated when the
        class or the student is missing.
        """
        if class_name not in self._classes:
            logger.debug("Class %s not found", class_name)
            return Lookup.class_not_found()

        index = self._find(class_name, student_name)
        if index is None:
            logger.debug("No student %s in %s", student_name, class_name)
            return Lookup.student_not_found()

        # Remove by position: two identical records must not both go.
        removed = self._classes[class_name].pop(index)
        logger.debug("Removed %s from %s", removed.name, class_name)
        return Lookup.ok(removed)

    def _find(self, class_name: str, student_name: str) -> Optional[int]:
        for i, student in enumerate(self._classes[class_name]):
            if student.matches(student_name):
                return i
        return None
