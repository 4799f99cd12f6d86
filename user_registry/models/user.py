"""User ORM — persists the User entity in the `users` table.

Invariants:
    - id is an autoincrement integer primary key, assigned on first insert
    - Data columns are nullable: validation is an application rule, not a schema rule
      (partial updates may legitimately store values create would reject)
    - birth_date is indexed for the range search

Design Decisions:
    - Column names snake_case; camelCase only exists in the JSON schema layer
"""

from datetime import date

from sqlalchemy import Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from user_registry.db.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    first_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    birth_date: Mapped[date | None] = mapped_column(
        Date, nullable=True, index=True,
    )
    address: Mapped[str | None] = mapped_column(String(500), nullable=True)
    phone_number: Mapped[str | None] = mapped_column(String(50), nullable=True)
