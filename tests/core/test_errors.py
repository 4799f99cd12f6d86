"""Error Hierarchy — tests for codes, statuses and contract messages."""

from datetime import date

from user_registry.core.errors import (
    DatabaseError,
    ErrorCategory,
    IneligibleAgeError,
    InvalidRangeError,
    ResourceNotFoundError,
    UserRegistryError,
    ValidationFailedError,
)


def test_validation_failed_response_is_message_list():
    err = ValidationFailedError(["First name is required.", "Last name is required."])
    assert err.http_status == 400
    assert err.code == "VALIDATION_FAILED"
    assert err.to_response() == ["First name is required.", "Last name is required."]


def test_ineligible_age_names_requirement():
    err = IneligibleAgeError(21)
    assert err.http_status == 400
    assert err.min_age == 21
    assert err.to_response() == "User must be at least 21 years old."
    assert err.category == ErrorCategory.BUSINESS_RULE


def test_resource_not_found_message():
    err = ResourceNotFoundError(42)
    assert err.http_status == 404
    assert str(err) == "User not found with ID: 42"


def test_invalid_range_keeps_bounds():
    err = InvalidRangeError(date(2023, 9, 27), date(2023, 9, 20))
    assert err.http_status == 400
    assert err.date_from > err.date_to
    assert err.to_response() == "From date must be before To date."


def test_database_error_is_server_error():
    err = DatabaseError("Connection or operational error", "execute")
    assert err.http_status == 500
    assert err.message == "Database execute failed: Connection or operational error"


def test_all_errors_share_base():
    for err in (
        ValidationFailedError([]), IneligibleAgeError(18),
        InvalidRangeError(date.min, date.min), ResourceNotFoundError(1),
        DatabaseError("x", "y"),
    ):
        assert isinstance(err, UserRegistryError)
