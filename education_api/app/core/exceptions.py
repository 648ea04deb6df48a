"""
Error types raised by the service and repository layers.

Services raise these at the point of detection and never recover from
them locally.  The API layer registers one handler per type (see
``api.handlers``) and translates them into HTTP responses.
"""


class EducationError(Exception):
    """Base class for all domain errors of the education API."""

    status_code = 500


class ResourceNotFoundError(EducationError):
    """A requested entity, or a referenced parent entity, does not exist."""

    status_code = 404


class InvalidArgumentError(EducationError):
    """A mandatory parent reference is missing or carries no id."""

    status_code = 400


class ConflictError(EducationError):
    """A uniqueness constraint or a delete guard was violated."""

    status_code = 409
