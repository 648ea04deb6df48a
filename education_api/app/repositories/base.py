"""
Generic SQLite repository.

A repository wraps one table and works on a connection handed in by
the caller, so that a service can run several repository calls inside
the same transaction (see ``core.db.transaction``).  Subclasses
describe their table and the ``SELECT`` that joins in the parent chain;
the query helpers here are shared by all entities.
"""

import logging
import sqlite3
from typing import Any, Dict, Generic, List, Optional, Sequence, Tuple, TypeVar

from pydantic import BaseModel

from ..core.exceptions import ConflictError

ModelT = TypeVar("ModelT", bound=BaseModel)

SQLITE_MAX_INT = 2**63 - 1
SQLITE_MIN_INT = -(2**63)

logger = logging.getLogger(__name__)


class BaseRepository(Generic[ModelT]):
    """Data access for a single entity table.

    Subclasses must set ``table``, ``alias``, ``label`` and
    ``select_sql`` and implement ``from_row``.  ``unique_columns``
    names the columns carrying a ``UNIQUE`` constraint so that
    violations can be reported with the offending value.
    """

    table: str = ""
    alias: str = ""
    label: str = ""
    select_sql: str = ""
    unique_columns: Tuple[str, ...] = ()

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def from_row(self, row: sqlite3.Row) -> ModelT:
        raise NotImplementedError

    # Queries

    def find_all(self) -> List[ModelT]:
        rows = self.conn.execute(f"{self.select_sql} ORDER BY {self.alias}.id").fetchall()
        return [self.from_row(row) for row in rows]

    def find_by_id(self, record_id: int) -> Optional[ModelT]:
        return self.find_one_by("id", record_id)

    def find_one_by(self, column: str, value: Any) -> Optional[ModelT]:
        """Return the first record whose ``column`` equals ``value``.

        Matching is exact and case sensitive.  When several rows match,
        the one with the lowest id wins.
        """
        rows = self._select_where(column, value, " LIMIT 1")
        return self.from_row(rows[0]) if rows else None

    def find_many_by(self, column: str, value: Any) -> List[ModelT]:
        return [self.from_row(row) for row in self._select_where(column, value)]

    def _select_where(self, column: str, value: Any, limit: str = "") -> List[sqlite3.Row]:
        # Integers beyond SQLite's signed 64-bit range cannot be stored,
        # so no row can match them.
        if isinstance(value, int) and not SQLITE_MIN_INT <= value <= SQLITE_MAX_INT:
            return []
        return self.conn.execute(
            f"{self.select_sql} WHERE {self.alias}.{column} = ? ORDER BY {self.alias}.id{limit}",
            (value,),
        ).fetchall()

    def count_by(self, column: str, value: Any) -> int:
        row = self.conn.execute(
            f"SELECT COUNT(*) AS count FROM {self.table} WHERE {column} = ?",
            (value,),
        ).fetchone()
        return row["count"]

    # Writes

    def save(self, values: Dict[str, Any]) -> ModelT:
        """Insert a new row and return it re-read with its parents joined."""
        columns = list(values)
        placeholders = ", ".join("?" for _ in columns)
        cursor = self._execute(
            f"INSERT INTO {self.table} ({', '.join(columns)}) VALUES ({placeholders})",
            tuple(values[c] for c in columns),
            values,
        )
        return self.find_by_id(cursor.lastrowid)

    def save_all(self, records: Sequence[Dict[str, Any]]) -> List[ModelT]:
        return [self.save(values) for values in records]

    def update(self, record_id: int, values: Dict[str, Any]) -> ModelT:
        if values:
            assignments = ", ".join(f"{column} = ?" for column in values)
            self._execute(
                f"UPDATE {self.table} SET {assignments} WHERE id = ?",
                tuple(values.values()) + (record_id,),
                values,
            )
        return self.find_by_id(record_id)

    def delete(self, record_id: int) -> None:
        self._execute(f"DELETE FROM {self.table} WHERE id = ?", (record_id,), {})

    def _execute(self, sql: str, params: tuple, values: Dict[str, Any]) -> sqlite3.Cursor:
        try:
            return self.conn.execute(sql, params)
        except sqlite3.IntegrityError as exc:
            raise ConflictError(self._conflict_message(exc, values)) from exc

    def _conflict_message(self, exc: sqlite3.IntegrityError, values: Dict[str, Any]) -> str:
        text = str(exc)
        for column in self.unique_columns:
            if f"{self.table}.{column}" in text:
                return f"{self.label} already exists with {column}: {values.get(column)}"
        logger.warning("Integrity error on %s: %s", self.table, text)
        return f"{self.label} conflicts with existing data"
