"""
Teacher endpoints for API v1.
"""

from typing import List

from fastapi import APIRouter, status

from education_api.app.schemas.teacher import TeacherCreate, TeacherPatch, TeacherRead
from education_api.app.services.teacher_service import TeacherService

router = APIRouter()


@router.post("/", response_model=TeacherRead, status_code=status.HTTP_201_CREATED)
async def create_teacher(teacher: TeacherCreate) -> TeacherRead:
    return await TeacherService.create(teacher)


@router.post("/batch", response_model=List[TeacherRead], status_code=status.HTTP_201_CREATED)
async def create_teachers(teachers: List[TeacherCreate]) -> List[TeacherRead]:
    return await TeacherService.create_batch(teachers)


@router.get("/", response_model=List[TeacherRead])
async def list_teachers() -> List[TeacherRead]:
    return await TeacherService.list_all()


@router.get("/name/{name}", response_model=TeacherRead)
async def get_teacher_by_name(name: str) -> TeacherRead:
    return await TeacherService.get_by_name(name)


@router.get("/degree/{degree}", response_model=List[TeacherRead])
async def list_teachers_by_degree(degree: str) -> List[TeacherRead]:
    """List teachers holding a degree.  Returns ``[]`` when none do."""
    return await TeacherService.list_by_degree(degree)


@router.get("/department/{department_id}", response_model=List[TeacherRead])
async def list_teachers_by_department(department_id: int) -> List[TeacherRead]:
    return await TeacherService.list_by_department_id(department_id)


@router.get("/{teacher_id}", response_model=TeacherRead)
async def get_teacher(teacher_id: int) -> TeacherRead:
    return await TeacherService.get_by_id(teacher_id)


@router.put("/{teacher_id}", response_model=TeacherRead)
async def update_teacher(teacher_id: int, teacher: TeacherCreate) -> TeacherRead:
    return await TeacherService.update(teacher_id, teacher)


@router.patch("/{teacher_id}", response_model=TeacherRead)
async def patch_teacher(teacher_id: int, teacher: TeacherPatch) -> TeacherRead:
    return await TeacherService.patch(teacher_id, teacher)


@router.delete("/{teacher_id}", response_model=TeacherRead)
async def delete_teacher(teacher_id: int) -> TeacherRead:
    return await TeacherService.delete(teacher_id)
