"""Data access object for the `students` table.

Every statement is parameterized; values entered on the console never
become part of the SQL text.
"""

import logging
import sqlite3
from pathlib import Path
from typing import List, Optional, Union

from .db import connect
from .models import Student, StudentIn

logger = logging.getLogger("student_manager.dao")


class StudentNotFoundError(Exception):
    """Raised when an update or delete targets an unknown id."""

    def __init__(self, student_id: int):
        self.student_id = student_id
        super().__init__(f"Student not found with id {student_id}")


def _row_to_student(row: sqlite3.Row) -> Student:
    return Student(id=row["id"], name=row["name"], email=row["email"], age=row["age"])


class StudentDAO:
    """CRUD operations for students stored at `db_path`."""

    def __init__(self, db_path: Union[str, Path]):
        self.db_path = db_path

    def add(self, student: StudentIn) -> Student:
        """Insert a student and return it with the generated id."""
        with connect(self.db_path) as conn:
            cur = conn.execute(
                "INSERT INTO students (name, email, age) VALUES (?, ?, ?)",
                (student.name, student.email, student.age),
            )
            new_id = cur.lastrowid
        logger.info("student_added id=%s", new_id)
        return Student(id=new_id, **student.model_dump())

    def list_all(self) -> List[Student]:
        with connect(self.db_path) as conn:
            rows = conn.execute("SELECT id, name, email, age FROM students ORDER BY id").fetchall()
        return [_row_to_student(r) for r in rows]

    def get(self, student_id: int) -> Optional[Student]:
        with connect(self.db_path) as conn:
            row = conn.execute("SELECT id, name, email, age FROM students WHERE id = ?", (student_id,)).fetchone()
        return _row_to_student(row) if row else None

    def update(self, student_id: int, student: StudentIn) -> Student:
        """Replace name, email and age of an existing student."""
        with connect(self.db_path) as conn:
            cur = conn.execute(
                "UPDATE students SET name = ?, email = ?, age = ? WHERE id = ?",
                (student.name, student.email, student.age, student_id),
            )
            if cur.rowcount == 0:
                raise StudentNotFoundError(student_id)
        logger.info("student_updated id=%s", student_id)
        return Student(id=student_id, **student.model_dump())

    def delete(self, student_id: int) -> None:
        with connect(self.db_path) as conn:
            cur = conn.execute("DELETE FROM students WHERE id = ?", (student_id,))
            if cur.rowcount == 0:
                raise StudentNotFoundError(student_id)
        logger.info("student_deleted id=%s", student_id)
