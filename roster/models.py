"""Data models for the roster manager.

Student, Status, Lookup — the typed structures that flow through
store → menu → console.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Student:
    """A single student record. Names keep the casing they were entered with."""

    name: str
    age: int

    def matches(self, name: str) -> bool:
        """Case-insensitive name comparison. No Unicode folding ('ß' stays 'ß')."""
        return self.name.lower() == name.lower()

    def describe(self) -> str:
        return f"{self.name}, Age: {self.age}"


class Status(str, Enum):
    """Outcome of a store operation."""

    OK = "ok"
    CLASS_NOT_FOUND = "class-not-found"
    STUDENT_NOT_FOUND = "student-not-found"


@dataclass(frozen=True)
class Lookup(Generic[T]):
    """Result of a store query or mutation.

    Not-found conditions come back as a status rather than an exception, so
    the caller decides how to report them.
    """

    status: Status
    value: Optional[T] = None

    @property
    def found(self) -> bool:
        return self.status is Status.OK

    @classmethod
    def ok(cls, value: T) -> Lookup[T]:
        return cls(Status.OK, value)

    @classmethod
    def class_not_found(cls) -> Lookup[T]:
        return cls(Status.CLASS_NOT_FOUND)

    @classmethod
    def student_not_found(cls) -> Lookup[T]:
        return cls(Status.STUDENT_NOT_FOUND)
