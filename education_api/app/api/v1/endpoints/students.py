"""
Student endpoints for API v1.

Students reference their department by id.  Creating or updating a
student with an email that is already taken responds with 409.
"""

from typing import List

from fastapi import APIRouter, status

from education_api.app.schemas.student import StudentCreate, StudentPatch, StudentRead
from education_api.app.services.student_service import StudentService

router = APIRouter()


@router.post("/", response_model=StudentRead, status_code=status.HTTP_201_CREATED)
async def create_student(student: StudentCreate) -> StudentRead:
    return await StudentService.create(student)


@router.post("/batch", response_model=List[StudentRead], status_code=status.HTTP_201_CREATED)
async def create_students(students: List[StudentCreate]) -> List[StudentRead]:
    return await StudentService.create_batch(students)


@router.get("/", response_model=List[StudentRead])
async def list_students() -> List[StudentRead]:
    return await StudentService.list_all()


@router.get("/name/{name}", response_model=StudentRead)
async def get_student_by_name(name: str) -> StudentRead:
    return await StudentService.get_by_name(name)


@router.get("/email/{email}", response_model=StudentRead)
async def get_student_by_email(email: str) -> StudentRead:
    return await StudentService.get_by_email(email)


@router.get("/department/{department_id}", response_model=List[StudentRead])
async def list_students_by_department(department_id: int) -> List[StudentRead]:
    """List the students of a department, each with department and college."""
    return await StudentService.list_by_department_id(department_id)


@router.get("/{student_id}", response_model=StudentRead)
async def get_student(student_id: int) -> StudentRead:
    return await StudentService.get_by_id(student_id)


@router.put("/{student_id}", response_model=StudentRead)
async def update_student(student_id: int, student: StudentCreate) -> StudentRead:
    return await StudentService.update(student_id, student)


@router.patch("/{student_id}", response_model=StudentRead)
async def patch_student(student_id: int, student: StudentPatch) -> StudentRead:
    return await StudentService.patch(student_id, student)


@router.delete("/{student_id}", response_model=StudentRead)
async def delete_student(student_id: int) -> StudentRead:
    return await StudentService.delete(student_id)
