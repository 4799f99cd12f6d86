"""Update Merge Rules — full replacement and partial (non-null) merge.

Invariants:
    - id of the existing user is always preserved
    - Full replace copies every mutable field, None and "" included
    - Partial merge copies a field only when the incoming value is not None;
      "" counts as a provided value
    - Inputs are never mutated; a new User is returned

Design Decisions:
    - Field list lives in domain_types.MUTABLE_USER_FIELDS so both rules
      (and the ORM mapping) agree on what "every mutable field" means
"""

from dataclasses import replace

from user_registry.core.domain_types import MUTABLE_USER_FIELDS, User


def replace_user_fields(existing: User, incoming: User) -> User:
    """PUT semantics: incoming values overwrite wholesale."""
    return replace(
        existing,
        **{name: getattr(incoming, name) for name in MUTABLE_USER_FIELDS},
    )


def merge_user_fields(existing: User, incoming: User) -> User:
    """PATCH semantics: only non-null incoming values overwrite."""
    provided = {
        name: getattr(incoming, name)
        for name in MUTABLE_USER_FIELDS
        if getattr(incoming, name) is not None
    }
    return replace(existing, **provided)
