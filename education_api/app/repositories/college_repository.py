"""College data access."""

import sqlite3
from typing import Optional

from ..schemas.college import CollegeRead
from .base import BaseRepository


def college_from_row(row: sqlite3.Row, prefix: str = "") -> CollegeRead:
    """Build a college from a row, reading columns named ``<prefix>id`` etc."""
    return CollegeRead(
        id=row[f"{prefix}id"],
        name=row[f"{prefix}name"],
        address=row[f"{prefix}address"],
    )


class CollegeRepository(BaseRepository[CollegeRead]):
    table = "colleges"
    alias = "c"
    label = "College"
    select_sql = "SELECT c.id, c.name, c.address FROM colleges c"

    def from_row(self, row: sqlite3.Row) -> CollegeRead:
        return college_from_row(row)

    def find_by_name(self, name: str) -> Optional[CollegeRead]:
        return self.find_one_by("name", name)

    def find_by_address(self, address: str) -> Optional[CollegeRead]:
        return self.find_one_by("address", address)
