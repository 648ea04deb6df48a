"""
Department endpoints for API v1.

Request bodies reference the owning college by id only, e.g.
``{"name": "Computer Science", "code": "CS01", "college": {"id": 1}}``.
Responses embed the full college record.
"""

from typing import List

from fastapi import APIRouter, status

from education_api.app.schemas.department import DepartmentCreate, DepartmentPatch, DepartmentRead
from education_api.app.services.department_service import DepartmentService

router = APIRouter()


@router.post("/", response_model=DepartmentRead, status_code=status.HTTP_201_CREATED)
async def create_department(department: DepartmentCreate) -> DepartmentRead:
    """Create a department.

    Responds with 400 when ``college`` or its id is missing and with 404
    when the college does not exist.
    """
    return await DepartmentService.create(department)


@router.post("/batch", response_model=List[DepartmentRead], status_code=status.HTTP_201_CREATED)
async def create_departments(departments: List[DepartmentCreate]) -> List[DepartmentRead]:
    """Create several departments; nothing is stored if any item fails."""
    return await DepartmentService.create_batch(departments)


@router.get("/", response_model=List[DepartmentRead])
async def list_departments() -> List[DepartmentRead]:
    return await DepartmentService.list_all()


@router.get("/name/{name}", response_model=DepartmentRead)
async def get_department_by_name(name: str) -> DepartmentRead:
    return await DepartmentService.get_by_name(name)


@router.get("/code/{code}", response_model=DepartmentRead)
async def get_department_by_code(code: str) -> DepartmentRead:
    return await DepartmentService.get_by_code(code)


@router.get("/college/{college_id}", response_model=List[DepartmentRead])
async def list_departments_by_college(college_id: int) -> List[DepartmentRead]:
    """List the departments of a college.  An empty list is not an error."""
    return await DepartmentService.list_by_college_id(college_id)


@router.get("/{department_id}", response_model=DepartmentRead)
async def get_department(department_id: int) -> DepartmentRead:
    return await DepartmentService.get_by_id(department_id)


@router.put("/{department_id}", response_model=DepartmentRead)
async def update_department(department_id: int, department: DepartmentCreate) -> DepartmentRead:
    """Replace name, code and college.  The college reference is mandatory."""
    return await DepartmentService.update(department_id, department)


@router.patch("/{department_id}", response_model=DepartmentRead)
async def patch_department(department_id: int, department: DepartmentPatch) -> DepartmentRead:
    """Partially update a department.

    Omitting ``college`` keeps the current college.
    """
    return await DepartmentService.patch(department_id, department)


@router.delete("/{department_id}", response_model=DepartmentRead)
async def delete_department(department_id: int) -> DepartmentRead:
    """Delete a department unless students or teachers still belong to it."""
    return await DepartmentService.delete(department_id)
