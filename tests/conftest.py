from pathlib import Path
import os
import tempfile
import pytest

# bookstore.config reads the environment at import time, so point the app
# at a throwaway database and known admin login before any test imports it.
_TMP = Path(tempfile.mkdtemp(prefix="bookstore-tests-"))
os.environ["BOOKSTORE_PROFILE"] = "dev"
os.environ["BOOKSTORE_DB_PATH"] = str(_TMP / "bookstore.db")
os.environ["BOOKSTORE_ADMIN_USER"] = "admin"
os.environ["BOOKSTORE_ADMIN_PASSWORD"] = "s3cret"
os.environ["CATALOG_URL"] = ""


@pytest.fixture
def student_db(tmp_path):
    """Fresh student database with the schema applied."""
    from student_manager.db import init_schema
    db_path = tmp_path / "students.db"
    init_schema(db_path)
    return db_path
