import sqlite3

from student_manager import console
from student_manager.console import StudentConsole
from student_manager.dao import StudentDAO


def _run(dao, answers):
    """Drive the menu with scripted answers and return everything printed."""
    it = iter(answers)
    out = []

    def fake_input(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    StudentConsole(dao, input_fn=fake_input, output_fn=out.append).run()
    return "\n".join(out)


def test_menu_lists_five_options(student_db):
    text = _run(StudentDAO(student_db), ['5'])
    for label in ('1. Add student', '2. View students', '3. Update student', '4. Delete student', '5. Exit'):
        assert label in text
    assert text.endswith('Goodbye!')


def test_add_then_view_shows_name_and_email(student_db):
    text = _run(StudentDAO(student_db), ['1', 'Alice', 'alice@example.com', '20', '2', '5'])
    assert 'Student added with id 1.' in text
    assert 'Name: Alice' in text
    assert 'Email: alice@example.com' in text


def test_delete_then_view_omits_id(student_db):
    dao = StudentDAO(student_db)
    _run(dao, ['1', 'Alice', 'alice@example.com', '20', '1', 'Bob', 'bob@example.com', '21', '5'])
    text = _run(dao, ['4', '1', '2', '5'])
    assert 'Student 1 deleted.' in text
    assert 'ID: 1 |' not in text
    assert 'ID: 2 | Name: Bob' in text


def test_update_replaces_fields(student_db):
    dao = StudentDAO(student_db)
    _run(dao, ['1', 'Alice', 'alice@example.com', '20', '5'])
    text = _run(dao, ['3', '1', 'Alicia', 'alicia@example.com', '30', '2', '5'])
    assert 'Student 1 updated.' in text
    assert 'ID: 1 | Name: Alicia | Email: alicia@example.com | Age: 30' in text


def test_errors_are_printed_and_menu_continues(student_db):
    text = _run(StudentDAO(student_db), [
        '9',
        '4', 'abc',
        '4', '77',
        '1', 'Eve', 'no-at-sign', '20',
        '2',
        '5',
    ])
    assert "Invalid choice: '9'" in text
    assert "Invalid input: 'abc' is not a whole number" in text
    assert 'Error: Student not found with id 77' in text
    assert 'Invalid input: email' in text
    assert 'No students found.' in text
    assert text.endswith('Goodbye!')


def test_database_failure_is_printed(student_db):
    class BrokenDAO(StudentDAO):
        def list_all(self):
            raise sqlite3.OperationalError('database is locked')

    text = _run(BrokenDAO(student_db), ['2', '5'])
    assert 'Error: database is locked' in text
    assert text.endswith('Goodbye!')


def test_eof_exits_cleanly(student_db):
    text = _run(StudentDAO(student_db), [])
    assert text.endswith('Goodbye!')


def test_main_initialises_schema(tmp_path, monkeypatch, capsys):
    db_path = tmp_path / 'cli.db'
    answers = iter(['1', 'Zoe', 'zoe@example.com', '19', '2', '5'])
    monkeypatch.setattr('builtins.input', lambda _prompt='': next(answers))
    assert console.main(['--db', str(db_path)]) == 0
    out = capsys.readouterr().out
    assert 'Name: Zoe' in out
    assert db_path.exists()
