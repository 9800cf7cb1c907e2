"""In-memory student records kept in registration order."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator


@dataclass(frozen=True)
class Student:
    """One student's record."""

    id: int
    name: str
    age: int
    gpa: float


class StudentError(Exception):
    """Base class for registry errors."""


class DuplicateStudentError(StudentError):
    """Raised when a student with the same ID is already registered."""

    def __init__(self, student_id: int) -> None:
        super().__init__(f"student ID {student_id} already exists")
        self.student_id = student_id


class StudentNotFoundError(StudentError, LookupError):
    """Raised when no student has the requested ID."""

    def __init__(self, student_id: int) -> None:
        super().__init__(f"no student with ID {student_id}")
        self.student_id = student_id


def format_student(student: Student) -> str:
    """Render a student as a single report line."""
    return (
        f"ID: {student.id},Name: {student.name},"
        f"Age: {student.age},GPA: {student.gpa:f}"
    )


class StudentRegistry:
    """Students keyed by ID, iterated in the order they were added."""

    def __init__(self) -> None:
        self._students: dict[int, Student] = {}

    def add(self, student: Student) -> None:
        """Register a student; the ID must not be in use."""
        if student.id in self._students:
            raise DuplicateStudentError(student.id)
        self._students[student.id] = student

    def get(self, student_id: int) -> Student:
        """Return the student with the given ID."""
        try:
            return self._students[student_id]
        except KeyError:
            raise StudentNotFoundError(student_id) from None

    def update(self, student_id: int, name: str, age: int, gpa: float) -> Student:
        """Replace name, age and GPA of an existing student and return the new record."""
        updated = replace(self.get(student_id), name=name, age=age, gpa=gpa)
        self._students[student_id] = updated
        return updated

    def remove(self, student_id: int) -> Student:
        """Delete a student and return the removed record."""
        try:
            return self._students.pop(student_id)
        except KeyError:
            raise StudentNotFoundError(student_id) from None

    def average_gpa(self) -> float:
        """Mean GPA of all students, or 0.0 when there are none."""
        if not self._students:
            return 0.0
        return sum(s.gpa for s in self._students.values()) / len(self._students)

    def highest_gpa(self) -> list[Student]:
        """All students sharing the highest GPA, in registration order."""
        if not self._students:
            return []
        best = max(s.gpa for s in self._students.values())
        return [s for s in self._students.values() if s.gpa == best]

    def __iter__(self) -> Iterator[Student]:
        return iter(list(self._students.values()))

    def __len__(self) -> int:
        return len(self._students)