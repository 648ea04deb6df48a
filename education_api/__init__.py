"""
Top‑level package for the Education Management API.

This file makes ``education_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``education_api.app.main``.  Tests import the application through
these names, so the marker is required when running them from the
repository root.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
