"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each entity of the academic hierarchy (colleges,
departments, students and teachers) has its own schema module,
repository, service and router under ``api/v1/endpoints``.  Versioning
is handled by grouping routers under the ``api/<version>/`` hierarchy.
"""

from .main import app  # noqa: F401
