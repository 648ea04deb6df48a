"""
Service layer abstraction.

Each service encapsulates the policy for one entity of the academic
hierarchy: parent existence checks, partial-update merging and
not-found errors.  API handlers call services and never touch the
repositories directly.
"""
