"""
Top‑level router for version 1 of the API.

This router aggregates the entity routers under a unified prefix.  When
new entities are added, update this file to include their routers.
"""

from fastapi import APIRouter

from .endpoints import colleges, departments, info, students, teachers

router = APIRouter()

router.include_router(colleges.router, prefix="/colleges", tags=["colleges"])
router.include_router(departments.router, prefix="/departments", tags=["departments"])
router.include_router(students.router, prefix="/students", tags=["students"])
router.include_router(teachers.router, prefix="/teachers", tags=["teachers"])
router.include_router(info.router, prefix="/info", tags=["info"])
