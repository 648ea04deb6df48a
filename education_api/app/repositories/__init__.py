"""
Data access layer.

One repository per table.  Repositories never commit; the calling
service owns the connection and the transaction around it.
"""

from .college_repository import CollegeRepository
from .department_repository import DepartmentRepository
from .student_repository import StudentRepository
from .teacher_repository import TeacherRepository

__all__ = [
    "CollegeRepository",
    "DepartmentRepository",
    "StudentRepository",
    "TeacherRepository",
]
