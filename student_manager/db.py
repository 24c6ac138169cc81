"""SQLite connection helper for the student database.

A connection is opened for every operation and closed when it finishes;
there is no pooling. The database file defaults to `students.db` in the
working directory and can be moved with `STUDENTS_DB_PATH`.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Union

logger = logging.getLogger("student_manager.db")

SCHEMA = """
CREATE TABLE IF NOT EXISTS students (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    email TEXT NOT NULL,
    age INTEGER NOT NULL
)
"""


def default_db_path() -> Path:
    return Path(os.getenv("STUDENTS_DB_PATH", "students.db")).expanduser()


@contextmanager
def connect(db_path: Union[str, Path]) -> Iterator[sqlite3.Connection]:
    """Open a connection, commit on success, roll back on error, always close."""
    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_schema(db_path: Union[str, Path]) -> None:
    """Create the `students` table if it does not exist yet."""
    logger.debug("Ensuring schema in %s", db_path)
    with connect(db_path) as conn:
        conn.execute(SCHEMA)
