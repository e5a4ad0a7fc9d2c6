"""API Layer — FastAPI routes, request dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return {"data": ...} or {"error": ...} envelopes

Design Decisions:
    - Thin routes delegate to services (ADR: impureim sandwich)
"""
