"""
Pydantic models for student data.

Email syntax is checked with pydantic's ``validate_email`` (backed by
the ``email-validator`` package), but the address is stored exactly as
submitted so that lookups by email match what the client sent.
Uniqueness of the address is enforced by the database and reported as a
conflict.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator, validate_email

from .common import Reference, optional_text, require_text
from .department import DepartmentRead


def check_email(value: str) -> str:
    """Reject malformed addresses and return ``value`` unchanged."""
    # validate_email also accepts "Name <addr>"; only bare addresses are stored.
    if "<" in value:
        raise ValueError("value is not a valid email address")
    validate_email(value)
    return value


class StudentCreate(BaseModel):
    """Schema for creating or fully replacing a student."""

    name: str = Field(..., examples=["Ada Lovelace"])
    email: str = Field(..., examples=["ada@example.com"])
    department: Optional[Reference] = Field(None, examples=[{"id": 1}])

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return require_text(v, "Student name", 2, 100)

    @field_validator("email")
    @classmethod
    def validate_email_address(cls, v: str) -> str:
        return check_email(v)


class StudentPatch(BaseModel):
    """Schema for patching a student.

    An empty ``email`` is treated like an absent one; anything else must
    be a valid address.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    department: Optional[Reference] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: Optional[str]) -> Optional[str]:
        return optional_text(v, "Student name", 2, 100)

    @field_validator("email")
    @classmethod
    def validate_email_address(cls, v: Optional[str]) -> Optional[str]:
        if not v:
            return v
        return check_email(v)


class StudentRead(BaseModel):
    """Schema for reading a student with the department chain resolved."""

    id: int
    name: str
    email: str
    department: DepartmentRead

    model_config = {
        "from_attributes": True,
    }
