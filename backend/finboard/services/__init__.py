"""Services Layer — owner-scoped persistence operations behind the routes.

Invariants:
    - Every query goes through OwnerScope (services/owner_scope.py)
    - Services raise core/errors.py types; routes never build error responses

Design Decisions:
    - Thin routes delegate to repositories (ADR: impureim sandwich)
"""
