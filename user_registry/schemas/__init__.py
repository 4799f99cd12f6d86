"""Pydantic Schemas — request/response shapes for API endpoints.

Invariants:
    - JSON uses camelCase (firstName, birthDate, ...); Python uses snake_case
    - Schemas convert to/from core domain Users; they hold no business rules

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
