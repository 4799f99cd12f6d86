"""Age Eligibility — pure age computation against the configured requirement.

Invariants:
    - Age = floor((now - birth day at 00:00 UTC) / 365 days)
    - A future birth date yields a negative age (never eligible for min_age >= 0)

Design Decisions:
    - Fixed 365-day year, not calendar-aware: matches the behavior existing
      clients depend on; leap days can shift eligibility by up to a day per
      4 years (ADR: reproduce as-is until a rule change is authorized)
"""

from datetime import date, datetime, timedelta

from user_registry.core.validate_user import start_of_day

YEAR = timedelta(days=365)


def age_in_years(birth_date: date, now: datetime) -> int:
    return (now - start_of_day(birth_date)) // YEAR


def is_eligible(birth_date: date, now: datetime, min_age: int) -> bool:
    """True when the user is at least `min_age` whole 365-day years old."""
    return age_in_years(birth_date, now) >= min_age
