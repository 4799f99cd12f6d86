"""FastAPI Dependencies — per-request wiring of UserService.

Invariants:
    - One UserService per request, bound to that request's AsyncSession
    - The age requirement comes from Settings and is passed explicitly

Design Decisions:
    - get_settings is itself a dependency so tests override it with
      app.dependency_overrides instead of patching environment variables
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from user_registry.config import Settings, get_settings
from user_registry.infrastructure.database import get_db
from user_registry.infrastructure.user_repository import SqlAlchemyUserRepository
from user_registry.services.user_service import UserService


async def get_user_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> UserService:
    return UserService(
        SqlAlchemyUserRepository(db), min_age=settings.age_requirement,
    )
