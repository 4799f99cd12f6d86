"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: boundary methods are async because implementations do IO,
      but core pure functions never are — UserService orchestrates the async
      calls around the pure logic
"""

from datetime import date
from typing import Protocol

from user_registry.core.domain_types import User, UserId


class UserRepository(Protocol):
    """Contract for User persistence (the Persistence Gateway) — implemented by shell."""
    async def find_by_id(self, user_id: UserId) -> User | None: ...
    async def exists_by_id(self, user_id: UserId) -> bool: ...
    async def save(self, user: User) -> User: ...
    async def delete_by_id(self, user_id: UserId) -> None: ...
    async def find_by_birth_date_between(
        self, date_from: date, date_to: date,
    ) -> list[User]: ...
