"""SQLAlchemy User Repository — the Persistence Gateway behind UserService.

Invariants:
    - Implements core.repository_protocols.UserRepository structurally
    - Returns core domain Users, never ORM instances (ORM never leaks into core)
    - save() and delete_by_id() each commit on their own: one call = one transaction
    - find_by_birth_date_between() is inclusive on both ends, ordered by id (storage order)

Design Decisions:
    - save() is insert-or-update keyed on id, like a CRUD repository:
      id=None inserts and assigns an id; a known id updates in place;
      an unknown id inserts a row with that id
"""

from datetime import date

from sqlalchemy import delete, exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from user_registry.core.domain_types import MUTABLE_USER_FIELDS, User, UserId
from user_registry.models.user import User as UserModel


def to_domain(row: UserModel) -> User:
    """Map ORM row -> domain User."""
    return User(
        id=UserId(row.id),
        **{name: getattr(row, name) for name in MUTABLE_USER_FIELDS},
    )


class SqlAlchemyUserRepository:
    """User persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(self, user_id: UserId) -> User | None:
        row = await self.db.get(UserModel, user_id)
        return to_domain(row) if row else None

    async def exists_by_id(self, user_id: UserId) -> bool:
        result = await self.db.execute(
            select(exists().where(UserModel.id == user_id)),
        )
        return bool(result.scalar())

    async def save(self, user: User) -> User:
        """Insert or update; returns the stored user with its id."""
        row = None
        if user.id is not None:
            row = await self.db.get(UserModel, user.id)
        if row is None:
            row = UserModel(id=user.id)
            self.db.add(row)
        for name in MUTABLE_USER_FIELDS:
            setattr(row, name, getattr(user, name))
        await self.db.commit()
        await self.db.refresh(row)
        return to_domain(row)

    async def delete_by_id(self, user_id: UserId) -> None:
        await self.db.execute(delete(UserModel).where(UserModel.id == user_id))
        await self.db.commit()

    async def find_by_birth_date_between(
        self, date_from: date, date_to: date,
    ) -> list[User]:
        result = await self.db.execute(
            select(UserModel)
            .where(UserModel.birth_date.between(date_from, date_to))
            .order_by(UserModel.id),
        )
        return [to_domain(row) for row in result.scalars().all()]
