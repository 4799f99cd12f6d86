"""User Routes — REST surface for the User resource.

Invariants:
    - POST   /api/users              → 201 + Location: /api/users/{id}, empty body
    - PUT    /api/users/{id}         → 200 User JSON | 404 empty | 400 message list
    - PATCH  /api/users/{id}         → 200 User JSON | 404 empty
    - DELETE /api/users/{id}         → 204 | 404 "User not found with ID: {id}"
    - GET    /api/users/search       → 200 User JSON array | 400 when from > to
    - POST and PUT bodies are validated before the service is called

Design Decisions:
    - Service outcomes are matched exhaustively; Err values are raised here and
      rendered by the global UserRegistryError handler (api/error_handlers.py)
    - Boundary validation uses the service clock so "now" is the same notion of
      time the service uses for eligibility
"""

from datetime import date

from fastapi import APIRouter, Depends, Query, Response, status

from user_registry.api.dependencies import get_user_service
from user_registry.core.domain_types import (
    Err, Found, NotFound, Ok, User, UserId,
)
from user_registry.core.errors import ValidationFailedError
from user_registry.core.validate_user import validate_user
from user_registry.schemas.user import UserPayload, UserResponse
from user_registry.services.user_service import UserService

router = APIRouter(prefix="/api/users", tags=["users"])


def require_valid(payload: UserPayload, service: UserService) -> User:
    """Validate a full payload or raise ValidationFailedError (400)."""
    user = payload.to_domain()
    messages = validate_user(user, service.clock())
    if messages:
        raise ValidationFailedError(messages)
    return user


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
async def create_user(
    payload: UserPayload, service: UserService = Depends(get_user_service),
):
    """Create a user; the new resource URI is returned in Location."""
    user = require_valid(payload, service)
    match await service.create_user(user):
        case Ok(value=created):
            return Response(
                status_code=status.HTTP_201_CREATED,
                headers={"Location": f"{router.prefix}/{created.id}"},
            )
        case Err(error=error):
            raise error


@router.get("/search", response_model=list[UserResponse])
async def search_users_by_birth_date_range(
    date_from: date = Query(alias="from"),
    date_to: date = Query(alias="to"),
    service: UserService = Depends(get_user_service),
):
    """Users born within [from, to], both inclusive."""
    match await service.search_users_by_birth_date_range(date_from, date_to):
        case Ok(value=users):
            return [UserResponse.from_domain(u) for u in users]
        case Err(error=error):
            raise error


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: int,
    payload: UserPayload,
    service: UserService = Depends(get_user_service),
):
    """Replace every field of an existing user."""
    user = require_valid(payload, service)
    match await service.update_user(UserId(user_id), user):
        case Found(value=updated):
            return UserResponse.from_domain(updated)
        case NotFound():
            return Response(status_code=status.HTTP_404_NOT_FOUND)


@router.patch("/{user_id}", response_model=UserResponse)
async def update_partial_user(
    user_id: int,
    payload: UserPayload,
    service: UserService = Depends(get_user_service),
):
    """Overwrite only the fields present (non-null) in the body."""
    match await service.update_partial_user(UserId(user_id), payload.to_domain()):
        case Found(value=updated):
            return UserResponse.from_domain(updated)
        case NotFound():
            return Response(status_code=status.HTTP_404_NOT_FOUND)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_user(
    user_id: int, service: UserService = Depends(get_user_service),
):
    match await service.delete_user(UserId(user_id)):
        case Ok():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Err(error=error):
            raise error
