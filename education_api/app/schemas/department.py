"""
Pydantic models for department data.

A department points at its college through a nested ``college``
reference.  Requests only need to carry ``{"college": {"id": 1}}``;
responses embed the full college record as stored.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .college import CollegeRead
from .common import Reference, optional_text, require_text


class DepartmentCreate(BaseModel):
    """Schema for creating or fully replacing a department.

    ``college`` is declared optional so that a missing reference reaches
    the service, which rejects it with an invalid-argument error.
    """

    name: str = Field(..., examples=["Computer Science"])
    code: str = Field(..., examples=["CS01"])
    college: Optional[Reference] = Field(None, examples=[{"id": 1}])

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return require_text(v, "Department name", 2, 100)

    @field_validator("code")
    @classmethod
    def validate_code(cls, v: str) -> str:
        return require_text(v, "Department code", 2, 10)


class DepartmentPatch(BaseModel):
    """Schema for patching a department.

    Omitting ``college`` keeps the current association.
    """

    name: Optional[str] = None
    code: Optional[str] = None
    college: Optional[Reference] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: Optional[str]) -> Optional[str]:
        return optional_text(v, "Department name", 2, 100)

    @field_validator("code")
    @classmethod
    def validate_code(cls, v: Optional[str]) -> Optional[str]:
        return optional_text(v, "Department code", 2, 10)


class DepartmentRead(BaseModel):
    """Schema for reading a department together with its college."""

    id: int
    name: str
    code: str
    college: CollegeRead

    model_config = {
        "from_attributes": True,
    }
