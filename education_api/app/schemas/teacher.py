"""
Pydantic models for teacher data.

``degree`` is a free-text qualification label such as ``"Ph.D. CS"``;
several teachers may share the same value.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .common import Reference, optional_text, require_text
from .department import DepartmentRead


class TeacherCreate(BaseModel):
    """Schema for creating or fully replacing a teacher."""

    name: str = Field(..., examples=["Alan Turing"])
    degree: str = Field(..., examples=["Ph.D. CS"])
    department: Optional[Reference] = Field(None, examples=[{"id": 1}])

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return require_text(v, "Teacher name", 2, 100)

    @field_validator("degree")
    @classmethod
    def validate_degree(cls, v: str) -> str:
        return require_text(v, "Teacher degree", 2, 50)


class TeacherPatch(BaseModel):
    """Schema for patching a teacher."""

    name: Optional[str] = None
    degree: Optional[str] = None
    department: Optional[Reference] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: Optional[str]) -> Optional[str]:
        return optional_text(v, "Teacher name", 2, 100)

    @field_validator("degree")
    @classmethod
    def validate_degree(cls, v: Optional[str]) -> Optional[str]:
        return optional_text(v, "Teacher degree", 2, 50)


class TeacherRead(BaseModel):
    """Schema for reading a teacher with the department chain resolved."""

    id: int
    name: str
    degree: str
    department: DepartmentRead

    model_config = {
        "from_attributes": True,
    }
