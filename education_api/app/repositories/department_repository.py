"""Department data access.

Every query joins the owning college so that callers always receive a
fully populated ``college`` reference.
"""

import sqlite3
from typing import List, Optional

from ..schemas.department import DepartmentRead
from .base import BaseRepository
from .college_repository import college_from_row

# Column list reused by the student and teacher repositories, which join
# departments and colleges under the same aliases.
DEPARTMENT_COLUMNS = (
    "d.id AS department_id, d.name AS department_name, d.code AS department_code, "
    "c.id AS college_id, c.name AS college_name, c.address AS college_address"
)


def department_from_row(row: sqlite3.Row, prefix: str = "department_") -> DepartmentRead:
    return DepartmentRead(
        id=row[f"{prefix}id"],
        name=row[f"{prefix}name"],
        code=row[f"{prefix}code"],
        college=college_from_row(row, "college_"),
    )


class DepartmentRepository(BaseRepository[DepartmentRead]):
    table = "departments"
    alias = "d"
    label = "Department"
    select_sql = (
        f"SELECT {DEPARTMENT_COLUMNS} FROM departments d "
        "JOIN colleges c ON c.id = d.college_id"
    )

    def from_row(self, row: sqlite3.Row) -> DepartmentRead:
        return department_from_row(row)

    def find_by_name(self, name: str) -> Optional[DepartmentRead]:
        return self.find_one_by("name", name)

    def find_by_code(self, code: str) -> Optional[DepartmentRead]:
        return self.find_one_by("code", code)

    def find_by_college_id(self, college_id: int) -> List[DepartmentRead]:
        return self.find_many_by("college_id", college_id)
