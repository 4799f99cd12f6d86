"""User Schemas — camelCase JSON payloads and responses for /api/users.

Invariants:
    - UserPayload accepts every field as optional: missing fields are reported by
      core.validate_user with the contract messages, not by Pydantic
    - birthDate is an ISO date (YYYY-MM-DD); anything else is a request error
    - Client-supplied id in a payload is ignored (ids are server-assigned)

Design Decisions:
    - One payload schema for POST, PUT and PATCH: the operation decides what a
      None field means (required / overwrite with null / leave unchanged)
    - alias_generator=to_camel with populate_by_name: tests and services can
      build schemas with snake_case names
"""

from datetime import date

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from user_registry.core.domain_types import User


class UserPayload(BaseModel):
    """Incoming user JSON (create, full update, partial update)."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore",
    )

    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    birth_date: date | None = None
    address: str | None = None
    phone_number: str | None = None

    def to_domain(self) -> User:
        return User(
            email=self.email,
            first_name=self.first_name,
            last_name=self.last_name,
            birth_date=self.birth_date,
            address=self.address,
            phone_number=self.phone_number,
        )


class UserResponse(BaseModel):
    """Outgoing user JSON."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    email: str | None
    first_name: str | None
    last_name: str | None
    birth_date: date | None
    address: str | None
    phone_number: str | None

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            birth_date=user.birth_date,
            address=user.address,
            phone_number=user.phone_number,
        )
