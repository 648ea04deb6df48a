"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``), running a unit of work inside a single
transaction (``transaction``) and applying migrations on application
start (``init_db``).  It uses SQLite as a lightweight embedded
database; to switch to another DBMS you would replace connection logic
and adapt SQL syntax accordingly.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .config import settings

logger = logging.getLogger(__name__)


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    If ``settings.database_url`` is an absolute path, use it directly.
    Otherwise resolve it relative to the project root.
    """
    db_url = settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # education_api/
    return str((base_dir / db_url).resolve())


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    The connection uses a row factory to access columns by name.
    Foreign key enforcement is switched on for the lifetime of the
    connection; SQLite disables it by default and the ``REFERENCES``
    clauses below would otherwise be ignored.
    """
    conn = sqlite3.connect(get_database_path())
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextmanager
def transaction() -> Iterator[sqlite3.Connection]:
    """Yield a connection whose work is committed as one transaction.

    The transaction is opened with ``BEGIN IMMEDIATE`` so the parent
    existence reads and the following writes see a consistent
    database.  Any exception rolls the whole unit back and is
    re-raised to the caller.
    """
    conn = get_connection()
    try:
        conn.execute("BEGIN IMMEDIATE")
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_db() -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any new migrations defined in
    the ``migrations`` list.  If you add a new migration, append it
    with an incremented version number.
    """
    migrations: list[tuple[int, str]] = [
        # Migration 1: Initial schema
        (
            1,
            """
            CREATE TABLE IF NOT EXISTS colleges (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL,
                address TEXT NOT NULL
            );

            CREATE TABLE IF NOT EXISTS departments (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL,
                code TEXT NOT NULL,
                college_id INTEGER NOT NULL,
                FOREIGN KEY(college_id) REFERENCES colleges(id)
            );

            CREATE TABLE IF NOT EXISTS students (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL,
                email TEXT NOT NULL UNIQUE,
                department_id INTEGER NOT NULL,
                FOREIGN KEY(department_id) REFERENCES departments(id)
            );

            CREATE TABLE IF NOT EXISTS teachers (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL,
                degree TEXT NOT NULL,
                department_id INTEGER NOT NULL,
                FOREIGN KEY(department_id) REFERENCES departments(id)
            );
            """,
        ),
        # Migration 2: indices for natural-key and parent lookups
        (
            2,
            """
            CREATE INDEX IF NOT EXISTS idx_colleges_name ON colleges(name);
            CREATE INDEX IF NOT EXISTS idx_departments_code ON departments(code);
            CREATE INDEX IF NOT EXISTS idx_departments_college_id ON departments(college_id);
            CREATE INDEX IF NOT EXISTS idx_students_department_id ON students(department_id);
            CREATE INDEX IF NOT EXISTS idx_teachers_department_id ON teachers(department_id);
            CREATE INDEX IF NOT EXISTS idx_teachers_degree ON teachers(degree);
            """,
        ),
    ]

    conn = get_connection()
    try:
        cursor = conn.cursor()
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in migrations:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                logger.info("Applied database migration %s", version)
                current_version = version
        conn.commit()
    finally:
        conn.close()
