"""Infrastructure Layer — database, identity provider and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/ or client/
    - All external failures mapped to core/errors.py types

Design Decisions:
    - Thin wrappers over raw clients (ADR: single responsibility)
"""
