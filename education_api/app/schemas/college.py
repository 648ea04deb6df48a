"""
Pydantic models for college data.

``CollegeCreate`` is used for single and batch creation as well as for
full updates, ``CollegePatch`` for partial updates and ``CollegeRead``
for responses.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .common import optional_text, require_text


class CollegeCreate(BaseModel):
    """Schema for creating or fully replacing a college."""

    name: str = Field(..., examples=["Tech University"])
    address: str = Field(..., examples=["1 Main St"])

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return require_text(v, "College name", 2, 100)

    @field_validator("address")
    @classmethod
    def validate_address(cls, v: str) -> str:
        return require_text(v, "College address", 5, 255)


class CollegePatch(BaseModel):
    """Schema for patching a college.

    All fields are optional; only non-empty values will be applied.
    """

    name: Optional[str] = None
    address: Optional[str] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: Optional[str]) -> Optional[str]:
        return optional_text(v, "College name", 2, 100)

    @field_validator("address")
    @classmethod
    def validate_address(cls, v: Optional[str]) -> Optional[str]:
        return optional_text(v, "College address", 5, 255)


class CollegeRead(BaseModel):
    """Schema for reading a college from the API."""

    id: int
    name: str
    address: str

    model_config = {
        "from_attributes": True,
    }
