"""Infrastructure Layer — database access, persistence gateway, and cross-cutting concerns.

Invariants:
    - Infrastructure implements core/ protocols; it never holds business rules
    - All SQLAlchemy failures are mapped to DatabaseError (core/errors.py)
"""
