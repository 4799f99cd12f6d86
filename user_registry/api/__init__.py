"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes translate service outcomes to HTTP; they hold no business rules

Design Decisions:
    - Thin routes delegate to UserService (ADR: impureim sandwich)
"""
