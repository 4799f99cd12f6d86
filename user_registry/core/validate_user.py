"""User Validation — pure field-level checks on a candidate User.

Invariants:
    - All functions are PURE: no IO, no async, no DB; `now` is always a parameter
    - Every rule runs (no short-circuit) so all violations are reported together
    - Message order is fixed: email, first name, last name, birth date
    - Empty list means valid

Design Decisions:
    - Return list of messages (not exceptions): callers decide whether to wrap
      them in ValidationFailedError (ADR: uniform with other core checks)
    - A birth date is compared at 00:00 UTC of that day, so "today" is in the past
"""

import re
from datetime import date, datetime, time, timezone

from user_registry.core.domain_types import User

EMAIL_PATTERN = re.compile(r"[A-Za-z0-9+_.-]+@.+")

INVALID_EMAIL = "Invalid email address."
FIRST_NAME_REQUIRED = "First name is required."
LAST_NAME_REQUIRED = "Last name is required."
INVALID_BIRTH_DATE = "Invalid birth date or date in the future."


def start_of_day(day: date) -> datetime:
    """Midnight UTC of the given calendar day."""
    return datetime.combine(day, time.min, tzinfo=timezone.utc)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def check_email(email: str | None) -> str | None:
    if _is_blank(email) or not EMAIL_PATTERN.fullmatch(email):
        return INVALID_EMAIL
    return None


def check_first_name(first_name: str | None) -> str | None:
    return FIRST_NAME_REQUIRED if _is_blank(first_name) else None


def check_last_name(last_name: str | None) -> str | None:
    return LAST_NAME_REQUIRED if _is_blank(last_name) else None


def check_birth_date(birth_date: date | None, now: datetime) -> str | None:
    """Birth date must exist and lie strictly before `now`."""
    if birth_date is None or not start_of_day(birth_date) < now:
        return INVALID_BIRTH_DATE
    return None


def validate_user(user: User, now: datetime) -> list[str]:
    """Run every rule and collect messages in a stable order."""
    checks = (
        check_email(user.email),
        check_first_name(user.first_name),
        check_last_name(user.last_name),
        check_birth_date(user.birth_date, now),
    )
    return [message for message in checks if message is not None]
