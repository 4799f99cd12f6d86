"""User Service — create, update, partial update, delete, and birth-date search.

Invariants:
    - create_user: age check first (when a birth date is given), then field
      validation, then save — ineligible users fail with IneligibleAgeError
      regardless of other field validity
    - update_user / update_partial_user: absent id -> NotFound(), never raises
    - delete_user: absent id -> Err(ResourceNotFoundError)
    - search_users_by_birth_date_range: from > to -> Err(InvalidRangeError)
    - min_age is fixed at construction; "now" comes from the injected clock

Design Decisions:
    - Impureim sandwich: repository IO -> pure core rule -> repository IO
    - Update/partial update do not re-run field validation: partial merges
      keep whatever was stored, full updates are validated at the HTTP boundary
      (ADR: preserve existing relaxation until hardening is confirmed)
    - Not-found asymmetry (NotFound vs ResourceNotFoundError) kept on purpose:
      clients rely on the empty 404 for PUT/PATCH and the message for DELETE
"""

import logging
from dataclasses import replace
from datetime import date, datetime, timezone
from typing import Callable

from user_registry.core.domain_types import (
    Err, Found, Lookup, NotFound, Ok, Result, User, UserId,
)
from user_registry.core.errors import (
    IneligibleAgeError, InvalidRangeError, ResourceNotFoundError,
    ValidationFailedError,
)
from user_registry.core.merge_user import merge_user_fields, replace_user_fields
from user_registry.core.repository_protocols import UserRepository
from user_registry.core.user_eligibility import is_eligible
from user_registry.core.validate_user import validate_user

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class UserService:
    """Domain operations over the User resource."""

    def __init__(
        self,
        repository: UserRepository,
        min_age: int,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.repository = repository
        self.min_age = min_age
        self.clock = clock

    async def create_user(
        self, user: User,
    ) -> Result[User, IneligibleAgeError | ValidationFailedError]:
        """Check eligibility and validity, then persist with a fresh id."""
        now = self.clock()
        if user.birth_date is not None and not is_eligible(
            user.birth_date, now, self.min_age,
        ):
            logger.info(f"Rejected user younger than {self.min_age}")
            return Err(IneligibleAgeError(self.min_age))

        messages = validate_user(user, now)
        if messages:
            return Err(ValidationFailedError(messages))

        saved = await self.repository.save(replace(user, id=None))
        logger.info(f"User {saved.id} created", extra={"user_id": saved.id})
        return Ok(saved)

    async def update_user(self, user_id: UserId, user: User) -> Lookup[User]:
        """Replace every mutable field of an existing user."""
        existing = await self.repository.find_by_id(user_id)
        if existing is None:
            return NotFound()
        saved = await self.repository.save(replace_user_fields(existing, user))
        logger.info(f"User {user_id} updated", extra={"user_id": user_id})
        return Found(saved)

    async def update_partial_user(
        self, user_id: UserId, user: User,
    ) -> Lookup[User]:
        """Overwrite only the fields the caller provided (non-None)."""
        existing = await self.repository.find_by_id(user_id)
        if existing is None:
            return NotFound()
        saved = await self.repository.save(merge_user_fields(existing, user))
        logger.info(
            f"User {user_id} partially updated", extra={"user_id": user_id},
        )
        return Found(saved)

    async def delete_user(
        self, user_id: UserId,
    ) -> Result[None, ResourceNotFoundError]:
        if not await self.repository.exists_by_id(user_id):
            return Err(ResourceNotFoundError(user_id))
        await self.repository.delete_by_id(user_id)
        logger.info(f"User {user_id} deleted", extra={"user_id": user_id})
        return Ok(None)

    async def search_users_by_birth_date_range(
        self, date_from: date, date_to: date,
    ) -> Result[list[User], InvalidRangeError]:
        """Users born within [date_from, date_to], in storage order."""
        if date_from > date_to:
            return Err(InvalidRangeError(date_from, date_to))
        users = await self.repository.find_by_birth_date_between(
            date_from, date_to,
        )
        return Ok(users)
