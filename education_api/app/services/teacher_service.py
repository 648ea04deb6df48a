"""
Business logic for teachers.

Same shape as students, but the secondary lookup is by ``degree``,
which is not unique and therefore returns a list.
"""

from typing import List

from ..repositories.department_repository import DepartmentRepository
from ..repositories.teacher_repository import TeacherRepository
from ..schemas.teacher import TeacherRead
from .base import EntityService, ParentLink


class TeacherService(EntityService):
    """Service for managing teachers."""

    repository = TeacherRepository
    fields = ("name", "degree")
    parent = ParentLink("department", "department_id", DepartmentRepository)

    @classmethod
    async def get_by_name(cls, name: str) -> TeacherRead:
        return await cls._get_one_by("name", name)

    @classmethod
    async def list_by_degree(cls, degree: str) -> List[TeacherRead]:
        """Return all teachers holding ``degree``; empty when none do."""
        return await cls._list_by("degree", degree)

    @classmethod
    async def list_by_department_id(cls, department_id: int) -> List[TeacherRead]:
        return await cls._list_by("department_id", department_id)
