"""
Business logic for colleges.

Colleges are the root of the hierarchy and have no parent to resolve.
A college cannot be deleted while departments still belong to it.
"""

from ..repositories.college_repository import CollegeRepository
from ..repositories.department_repository import DepartmentRepository
from ..schemas.college import CollegeRead
from .base import ChildLink, EntityService


class CollegeService(EntityService):
    """Service for managing colleges."""

    repository = CollegeRepository
    fields = ("name", "address")
    children = (ChildLink(DepartmentRepository, "college_id", "departments"),)

    @classmethod
    async def get_by_name(cls, name: str) -> CollegeRead:
        return await cls._get_one_by("name", name)

    @classmethod
    async def get_by_address(cls, address: str) -> CollegeRead:
        return await cls._get_one_by("address", address)
