"""
Validation helpers shared by the entity schemas.

Create and full-update payloads require every text field, while patch
payloads treat ``None`` and the empty string as "leave unchanged" and
only check values that are actually supplied.
"""

from typing import Optional

from pydantic import BaseModel


def require_text(value: str, label: str, min_length: int, max_length: int) -> str:
    if not value or not value.strip():
        raise ValueError(f"{label} is required")
    if not min_length <= len(value) <= max_length:
        raise ValueError(f"{label} must be between {min_length} and {max_length} characters")
    return value


def optional_text(value: Optional[str], label: str, min_length: int, max_length: int) -> Optional[str]:
    if not value:
        return value
    return require_text(value, label, min_length, max_length)


class Reference(BaseModel):
    """Loosely formed pointer to a parent record.

    Only ``id`` is read; any other keys a client sends along are
    dropped, the parent's data always comes from the database.
    """

    id: Optional[int] = None
