"""Student data access.

Rows are read together with their department and that department's
college.
"""

import sqlite3
from typing import List, Optional

from ..schemas.student import StudentRead
from .base import BaseRepository
from .department_repository import DEPARTMENT_COLUMNS, department_from_row


class StudentRepository(BaseRepository[StudentRead]):
    table = "students"
    alias = "s"
    label = "Student"
    unique_columns = ("email",)
    select_sql = (
        f"SELECT s.id, s.name, s.email, {DEPARTMENT_COLUMNS} FROM students s "
        "JOIN departments d ON d.id = s.department_id "
        "JOIN colleges c ON c.id = d.college_id"
    )

    def from_row(self, row: sqlite3.Row) -> StudentRead:
        return StudentRead(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            department=department_from_row(row),
        )

    def find_by_name(self, name: str) -> Optional[StudentRead]:
        return self.find_one_by("name", name)

    def find_by_email(self, email: str) -> Optional[StudentRead]:
        return self.find_one_by("email", email)

    def find_by_department_id(self, department_id: int) -> List[StudentRead]:
        return self.find_many_by("department_id", department_id)
