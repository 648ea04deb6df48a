"""Teacher data access."""

import sqlite3
from typing import List, Optional

from ..schemas.teacher import TeacherRead
from .base import BaseRepository
from .department_repository import DEPARTMENT_COLUMNS, department_from_row


class TeacherRepository(BaseRepository[TeacherRead]):
    table = "teachers"
    alias = "t"
    label = "Teacher"
    select_sql = (
        f"SELECT t.id, t.name, t.degree, {DEPARTMENT_COLUMNS} FROM teachers t "
        "JOIN departments d ON d.id = t.department_id "
        "JOIN colleges c ON c.id = d.college_id"
    )

    def from_row(self, row: sqlite3.Row) -> TeacherRead:
        return TeacherRead(
            id=row["id"],
            name=row["name"],
            degree=row["degree"],
            department=department_from_row(row),
        )

    def find_by_name(self, name: str) -> Optional[TeacherRead]:
        return self.find_one_by("name", name)

    def find_by_degree(self, degree: str) -> List[TeacherRead]:
        return self.find_many_by("degree", degree)

    def find_by_department_id(self, department_id: int) -> List[TeacherRead]:
        return self.find_many_by("department_id", department_id)
