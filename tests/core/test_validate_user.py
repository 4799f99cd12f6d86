"""User Validation — tests for pure field-level checks.

Tests cover:
    - A fully valid user yields no messages
    - Each missing/blank field yields exactly its message
    - All four defects are reported together, in order
    - Email shape (local-part charset, non-empty domain)
    - Birth date must be strictly before now (today is valid, tomorrow is not)
"""

from datetime import date, datetime, timezone

import pytest

from user_registry.core.domain_types import User
from user_registry.core.validate_user import (
    FIRST_NAME_REQUIRED,
    INVALID_BIRTH_DATE,
    INVALID_EMAIL,
    LAST_NAME_REQUIRED,
    check_birth_date,
    check_email,
    validate_user,
)

NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)


def _valid_user(**overrides) -> User:
    fields = dict(
        email="john.doe@example.com",
        first_name="John",
        last_name="Doe",
        birth_date=date(1990, 5, 17),
    )
    fields.update(overrides)
    return User(**fields)


def test_valid_user_has_no_errors():
    assert validate_user(_valid_user(), NOW) == []


def test_optional_fields_are_not_validated():
    user = _valid_user(address="", phone_number="not a number")
    assert validate_user(user, NOW) == []


@pytest.mark.parametrize("email", [None, "", "   "])
def test_missing_email(email):
    assert validate_user(_valid_user(email=email), NOW) == [INVALID_EMAIL]


@pytest.mark.parametrize("first_name", [None, "", "  "])
def test_missing_first_name(first_name):
    assert validate_user(_valid_user(first_name=first_name), NOW) == [FIRST_NAME_REQUIRED]


@pytest.mark.parametrize("last_name", [None, "", "\t"])
def test_missing_last_name(last_name):
    assert validate_user(_valid_user(last_name=last_name), NOW) == [LAST_NAME_REQUIRED]


def test_missing_birth_date():
    assert validate_user(_valid_user(birth_date=None), NOW) == [INVALID_BIRTH_DATE]


def test_all_defects_reported_in_order():
    user = User(email="nope", birth_date=date(2030, 1, 1))
    assert validate_user(user, NOW) == [
        "Invalid email address.",
        "First name is required.",
        "Last name is required.",
        "Invalid birth date or date in the future.",
    ]


def test_empty_user_reports_everything():
    assert len(validate_user(User(), NOW)) == 4


# ─── email shape ─────────────────────────────────────────────────

@pytest.mark.parametrize("email", [
    "a@x.com",
    "first.last+tag@example.org",
    "under_score-dash@host",
    "A1@b",
])
def test_email_accepts_simple_shapes(email):
    assert check_email(email) is None


@pytest.mark.parametrize("email", [
    "plainaddress",
    "@example.com",
    "user@",
    "us er@example.com",
    "user!x@example.com",
    "user@example.com\n",
])
def test_email_rejects_bad_shapes(email):
    assert check_email(email) == INVALID_EMAIL


# ─── birth date ──────────────────────────────────────────────────

def test_birth_date_today_is_in_the_past():
    assert check_birth_date(NOW.date(), NOW) is None


def test_birth_date_tomorrow_is_rejected():
    assert check_birth_date(date(2024, 6, 16), NOW) == INVALID_BIRTH_DATE


def test_birth_date_at_exact_midnight_is_rejected():
    midnight = datetime(2024, 6, 15, tzinfo=timezone.utc)
    assert check_birth_date(date(2024, 6, 15), midnight) == INVALID_BIRTH_DATE
