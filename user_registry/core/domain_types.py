"""Domain Types — the User entity, identifiers, and explicit outcome types.

Invariants:
    - UserId wraps int — never use a bare int for a user identifier in domain logic
    - A User with id=None has never been persisted
    - Ok/Err and Found/NotFound are the only outcome shapes returned by UserService

Design Decisions:
    - NewType over dataclass wrappers for ids: zero runtime cost, full type-checker support
    - Frozen dataclasses for outcomes: consumed with `match` by the API layer,
      so every failure kind is handled explicitly (ADR: no exceptions as control flow)
    - User is a plain dataclass, not the ORM model: core never touches SQLAlchemy
"""

from dataclasses import dataclass
from datetime import date
from typing import Generic, NewType, TypeVar, Union


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)


# ─── Entity ──────────────────────────────────────────────────────

MUTABLE_USER_FIELDS: tuple[str, ...] = (
    "email", "first_name", "last_name", "birth_date", "address", "phone_number",
)


@dataclass(frozen=True)
class User:
    """User entity. All data fields optional so partial payloads share the type."""
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    birth_date: date | None = None
    address: str | None = None
    phone_number: str | None = None
    id: UserId | None = None


# ─── Outcomes ────────────────────────────────────────────────────

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E


Result = Union[Ok[T], Err[E]]


@dataclass(frozen=True)
class Found(Generic[T]):
    value: T


@dataclass(frozen=True)
class NotFound:
    pass


Lookup = Union[Found[T], NotFound]
