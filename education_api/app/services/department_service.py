"""
Business logic for departments.

Every department must belong to an existing college.  Creation and full
updates require a ``college`` reference with an id; a patch may omit it
to keep the current college.
"""

from typing import List

from ..repositories.college_repository import CollegeRepository
from ..repositories.department_repository import DepartmentRepository
from ..repositories.student_repository import StudentRepository
from ..repositories.teacher_repository import TeacherRepository
from ..schemas.department import DepartmentRead
from .base import ChildLink, EntityService, ParentLink


class DepartmentService(EntityService):
    """Service for managing departments."""

    repository = DepartmentRepository
    fields = ("name", "code")
    parent = ParentLink("college", "college_id", CollegeRepository)
    children = (
        ChildLink(StudentRepository, "department_id", "students"),
        ChildLink(TeacherRepository, "department_id", "teachers"),
    )

    @classmethod
    async def get_by_name(cls, name: str) -> DepartmentRead:
        return await cls._get_one_by("name", name)

    @classmethod
    async def get_by_code(cls, code: str) -> DepartmentRead:
        return await cls._get_one_by("code", code)

    @classmethod
    async def list_by_college_id(cls, college_id: int) -> List[DepartmentRead]:
        """Return the departments of a college, or an empty list."""
        return await cls._list_by("college_id", college_id)
