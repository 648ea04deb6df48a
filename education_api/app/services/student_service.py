"""
Business logic for students.

Students belong to a department.  The email address is unique across
all students; a duplicate surfaces from the repository as a
``ConflictError``.
"""

from typing import List

from ..repositories.department_repository import DepartmentRepository
from ..repositories.student_repository import StudentRepository
from ..schemas.student import StudentRead
from .base import EntityService, ParentLink


class StudentService(EntityService):
    """Service for managing students."""

    repository = StudentRepository
    fields = ("name", "email")
    parent = ParentLink("department", "department_id", DepartmentRepository)

    @classmethod
    async def get_by_name(cls, name: str) -> StudentRead:
        return await cls._get_one_by("name", name)

    @classmethod
    async def get_by_email(cls, email: str) -> StudentRead:
        return await cls._get_one_by("email", email)

    @classmethod
    async def list_by_department_id(cls, department_id: int) -> List[StudentRead]:
        return await cls._list_by("department_id", department_id)
