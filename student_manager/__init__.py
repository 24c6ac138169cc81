"""Console student management tool.

A numbered menu (`student_manager.console`) drives a small DAO
(`student_manager.dao`) that talks to a SQLite `students` table with
parameterized SQL.
"""
