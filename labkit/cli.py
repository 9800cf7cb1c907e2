"""Interactive menu for managing student records."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from labkit.students import (
    DuplicateStudentError,
    Student,
    StudentNotFoundError,
    StudentRegistry,
    format_student,
)

MENU = (
    "1. Add student\n"
    "2. Display students\n"
    "3. Search students by ID\n"
    "4. Update student by ID\n"
    "5. Delete student\n"
    "6. Calculate Average GPA\n"
    "7. Search for student with highest GPA\n"
    "8. Exit\n"
    "Enter your choice:"
)

NAME_LIMIT = 49


class _Scanner:
    """Reads whitespace-separated fields from a text stream one character at a time."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending = ""

    def _peek(self) -> str:
        if not self._pending:
            self._pending = self._stream.read(1)
        return self._pending

    def _take(self) -> str:
        ch = self._peek()
        self._pending = ""
        return ch

    def _skip_space(self) -> None:
        while (ch := self._peek()) and ch.isspace():
            self._take()

    def _take_while(self, allowed: str) -> str:
        chars = []
        while (ch := self._peek()) and ch in allowed:
            chars.append(self._take())
        return "".join(chars)

    def char(self) -> str:
        self._skip_space()
        ch = self._take()
        if not ch:
            raise EOFError
        return ch

    def integer(self) -> int:
        self._skip_space()
        if not self._peek():
            raise EOFError
        text = self._take_while("+-")[:1] + self._take_while("0123456789")
        try:
            return int(text)
        except ValueError:
            raise ValueError(f"not an integer: {text!r}") from None

    def real(self) -> float:
        self._skip_space()
        if not self._peek():
            raise EOFError
        text = self._take_while("+-0123456789.eE")
        try:
            return float(text)
        except ValueError:
            raise ValueError(f"not a number: {text!r}") from None

    def line(self, limit: int) -> str:
        self._skip_space()
        if not self._peek():
            raise EOFError
        chars = []
        while len(chars) < limit and (ch := self._peek()) and ch != "\n":
            chars.append(self._take())
        return "".join(chars)

    def discard_line(self) -> None:
        while (ch := self._take()) and ch != "\n":
            pass


def run_menu(
    stdin: TextIO, stdout: TextIO, registry: StudentRegistry | None = None
) -> StudentRegistry:
    """Run the menu loop until the user exits or input ends; return the registry."""
    if registry is None:
        registry = StudentRegistry()
    scanner = _Scanner(stdin)

    def write(text: str) -> None:
        stdout.write(text)
        stdout.flush()

    def add() -> None:
        write("Enter student id:")
        student_id = scanner.integer()
        write("Enter student name:")
        name = scanner.line(NAME_LIMIT)
        write("Enter student age:")
        age = scanner.integer()
        write("Enter student gpa:")
        gpa = scanner.real()
        try:
            registry.add(Student(student_id, name, age, gpa))
        except DuplicateStudentError:
            write("Student ID already exists\n")
        else:
            write("student is successfuly registered\n")

    def display() -> None:
        if not len(registry):
            write("No students' data to print")
            return
        for student in registry:
            write(format_student(student) + "\n")

    def search() -> None:
        write("Enter an id to search:")
        student_id = scanner.integer()
        try:
            write(format_student(registry.get(student_id)) + "\n")
        except StudentNotFoundError:
            write("No student with this id is found\n")

    def update() -> None:
        write("Enter an id to update:")
        student_id = scanner.integer()
        try:
            registry.get(student_id)
        except StudentNotFoundError:
            write("No student id is found\n")
            return
        write("Enter name:")
        name = scanner.line(NAME_LIMIT)
        write("Enter age:")
        age = scanner.integer()
        write("Enter gpa:")
        gpa = scanner.real()
        updated = registry.update(student_id, name, age, gpa)
        write("the updated data is: \n")
        write(format_student(updated) + "\n")

    def delete() -> None:
        write("Enter an id to delete its data:")
        student_id = scanner.integer()
        try:
            registry.remove(student_id)
        except StudentNotFoundError:
            write("No student with this id is found\n")
        else:
            write("Student data is successfuly deleted.\n")

    def average() -> None:
        write(f"{registry.average_gpa():f}")

    def highest() -> None:
        for student in registry.highest_gpa():
            write("this the data of the highest gpa student:\n")
            write(format_student(student) + "\n")

    actions = {
        "1": add,
        "2": display,
        "3": search,
        "4": update,
        "5": delete,
        "6": average,
        "7": highest,
    }

    while True:
        write(MENU)
        try:
            choice = scanner.char()
        except EOFError:
            return registry
        if choice == "8":
            write("Thank you")
            return registry
        action = actions.get(choice)
        if action is None:
            write("invalid input\n")
            continue
        try:
            action()
        except EOFError:
            return registry
        except ValueError:
            write("invalid input\n")
            scanner.discard_line()


def main(argv: list[str] | None = None) -> int:
    """Start the interactive student menu on standard input and output."""
    parser = argparse.ArgumentParser(description="Manage student records interactively.")
    parser.parse_args(argv)
    run_menu(sys.stdin, sys.stdout, StudentRegistry())
    return 0