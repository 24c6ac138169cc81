"""Numbered console menu for managing students.

Usage: student-manager [--db PATH]

Each menu option prompts for its fields on standard input and prints a
confirmation or an error line on standard output. Database failures are
reported and the menu is shown again.
"""

import argparse
import logging
import os
import sqlite3
from typing import Callable, List, Optional

from pydantic import ValidationError

from .dao import StudentDAO, StudentNotFoundError
from .db import default_db_path, init_schema
from .models import StudentIn

logger = logging.getLogger("student_manager")

MENU = """
===== Student Management =====
1. Add student
2. View students
3. Update student
4. Delete student
5. Exit"""


class InvalidInput(Exception):
    """Raised when console input cannot be used for the chosen action."""


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        field = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{field}: {err.get('msg')}")
    return "; ".join(parts)


class StudentConsole:
    """Menu loop over a `StudentDAO`.

    `input_fn` and `output_fn` default to the builtins and are swapped
    out by tests.
    """

    def __init__(
        self,
        dao: StudentDAO,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None,
    ):
        self.dao = dao
        self._input = input_fn or input
        self._print = output_fn or print
        self._actions = {
            "1": self.add_student,
            "2": self.view_students,
            "3": self.update_student,
            "4": self.delete_student,
        }

    def run(self) -> None:
        """Show the menu until the user picks Exit or stdin is closed."""
        while True:
            self._print(MENU)
            try:
                choice = self._input("Choose an option: ").strip()
            except EOFError:
                self._print("Goodbye!")
                return
            if choice == "5":
                self._print("Goodbye!")
                return
            action = self._actions.get(choice)
            if action is None:
                self._print(f"Invalid choice: {choice!r}. Please enter a number from 1 to 5.")
                continue
            try:
                action()
            except EOFError:
                self._print("Goodbye!")
                return
            except InvalidInput as e:
                self._print(f"Invalid input: {e}")
            except ValidationError as e:
                self._print(f"Invalid input: {_describe(e)}")
            except StudentNotFoundError as e:
                self._print(f"Error: {e}")
            except sqlite3.Error as e:
                logger.error("database error during option %s: %s", choice, e)
                self._print(f"Error: {e}")

    def _read_int(self, prompt: str) -> int:
        raw = self._input(prompt).strip()
        try:
            return int(raw)
        except ValueError:
            raise InvalidInput(f"{raw!r} is not a whole number")

    def _read_fields(self) -> StudentIn:
        name = self._input("Name: ")
        email = self._input("Email: ")
        age = self._read_int("Age: ")
        return StudentIn(name=name, email=email, age=age)

    def add_student(self) -> None:
        student = self.dao.add(self._read_fields())
        self._print(f"Student added with id {student.id}.")

    def view_students(self) -> None:
        students = self.dao.list_all()
        if not students:
            self._print("No students found.")
            return
        for s in students:
            self._print(f"ID: {s.id} | Name: {s.name} | Email: {s.email} | Age: {s.age}")

    def update_student(self) -> None:
        student_id = self._read_int("Student id to update: ")
        student = self.dao.update(student_id, self._read_fields())
        self._print(f"Student {student.id} updated.")

    def delete_student(self) -> None:
        student_id = self._read_int("Student id to delete: ")
        self.dao.delete(student_id)
        self._print(f"Student {student_id} deleted.")


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(prog="student-manager", description="Manage students from the console")
    parser.add_argument('--db', help='SQLite database file (default: $STUDENTS_DB_PATH or students.db)')
    args = parser.parse_args(argv)
    # log lines go to stderr so they never mix with the menu on stdout
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "WARNING").upper())
    db_path = args.db or default_db_path()
    try:
        init_schema(db_path)
    except sqlite3.Error as e:
        print(f"Error: could not open database {db_path}: {e}")
        return 1
    try:
        StudentConsole(StudentDAO(db_path)).run()
    except KeyboardInterrupt:
        print("\nGoodbye!")
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
