"""
College endpoints for API v1.

These routes provide CRUD operations for colleges, the root of the
academic hierarchy.  Errors raised by ``CollegeService`` are translated
into HTTP responses by the handlers in ``api.handlers``.
"""

from typing import List

from fastapi import APIRouter, status

from education_api.app.schemas.college import CollegeCreate, CollegePatch, CollegeRead
from education_api.app.services.college_service import CollegeService

router = APIRouter()


@router.post("/", response_model=CollegeRead, status_code=status.HTTP_201_CREATED)
async def create_college(college: CollegeCreate) -> CollegeRead:
    """Create a new college."""
    return await CollegeService.create(college)


@router.post("/batch", response_model=List[CollegeRead], status_code=status.HTTP_201_CREATED)
async def create_colleges(colleges: List[CollegeCreate]) -> List[CollegeRead]:
    """Create several colleges in one transaction."""
    return await CollegeService.create_batch(colleges)


@router.get("/", response_model=List[CollegeRead])
async def list_colleges() -> List[CollegeRead]:
    """Return all colleges ordered by ID."""
    return await CollegeService.list_all()


@router.get("/name/{name}", response_model=CollegeRead)
async def get_college_by_name(name: str) -> CollegeRead:
    """Look a college up by its exact name.

    If several colleges share the name, the one created first is
    returned.  Raises 404 if none matches.
    """
    return await CollegeService.get_by_name(name)


@router.get("/address/{address}", response_model=CollegeRead)
async def get_college_by_address(address: str) -> CollegeRead:
    return await CollegeService.get_by_address(address)


@router.get("/{college_id}", response_model=CollegeRead)
async def get_college(college_id: int) -> CollegeRead:
    """Retrieve a single college by its ID.  Raises 404 if not found."""
    return await CollegeService.get_by_id(college_id)


@router.put("/{college_id}", response_model=CollegeRead)
async def update_college(college_id: int, college: CollegeCreate) -> CollegeRead:
    """Replace the name and address of a college."""
    return await CollegeService.update(college_id, college)


@router.patch("/{college_id}", response_model=CollegeRead)
async def patch_college(college_id: int, college: CollegePatch) -> CollegeRead:
    """Update only the fields present and non-empty in the body."""
    return await CollegeService.patch(college_id, college)


@router.delete("/{college_id}", response_model=CollegeRead)
async def delete_college(college_id: int) -> CollegeRead:
    """Delete a college and return the removed record.

    Responds with 409 while departments still belong to the college.
    """
    return await CollegeService.delete(college_id)
