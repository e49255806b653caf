"""SQLAlchemy adapter for user persistence and credential lookups."""

from __future__ import annotations

from datetime import datetime
from typing import Any, cast

import sqlalchemy as sa
from sqlalchemy.engine import CursorResult
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from shop_backend.application.ports.credential_store_port import (
    CredentialRecord,
    CredentialStorePort,
)
from shop_backend.application.ports.user_repository_port import (
    DuplicateUsernameError,
    UserCreateInput,
    UserRecord,
    UserRepositoryPort,
)
from shop_backend.infrastructure.db.metadata import users

_USER_COLUMNS = (
    users.c.user_id,
    users.c.username,
    users.c.email,
    users.c.password_hash,
    users.c.registration_date,
)


class SqlAlchemyUserRepository(UserRepositoryPort, CredentialStorePort):
    """User repository backed by SQLAlchemy async sessions."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def create_user(self, payload: UserCreateInput) -> int:
        """Insert user row and return its numeric id."""

        statement = sa.insert(users).values(
            username=payload.username,
            email=payload.email,
            password_hash=payload.password_hash,
        ).returning(users.c.user_id)

        async with self._session_factory() as session:
            try:
                result = await session.execute(statement)
                await session.commit()
            except IntegrityError as exc:
                await session.rollback()
                raise DuplicateUsernameError(username=payload.username) from exc

        inserted_id = result.scalar_one()
        return int(inserted_id)

    async def get_by_id(self, *, user_id: int) -> UserRecord | None:
        """Return user by id."""

        statement = sa.select(*_USER_COLUMNS).where(users.c.user_id == user_id).limit(1)

        async with self._session_factory() as session:
            result = await session.execute(statement)

        row = result.mappings().first()
        if row is None:
            return None
        return _to_user_record(row)

    async def list_users(self) -> list[UserRecord]:
        """Return every user ordered by id."""

        statement = sa.select(*_USER_COLUMNS).order_by(users.c.user_id.asc())

        async with self._session_factory() as session:
            result = await session.execute(statement)

        return [_to_user_record(row) for row in result.mappings().all()]

    async def update_username(self, *, user_id: int, username: str) -> UserRecord | None:
        """Rename one user; return None when no row matches id."""

        statement = (
            sa.update(users)
            .where(users.c.user_id == user_id)
            .values(username=username)
            .returning(*_USER_COLUMNS)
        )

        async with self._session_factory() as session:
            try:
                result = await session.execute(statement)
                await session.commit()
            except IntegrityError as exc:
                await session.rollback()
                raise DuplicateUsernameError(username=username) from exc

        row = result.mappings().first()
        if row is None:
            return None
        return _to_user_record(row)

    async def delete_user(self, *, user_id: int) -> bool:
        """Delete one user; return False when no row matches id."""

        statement = sa.delete(users).where(users.c.user_id == user_id)

        async with self._session_factory() as session:
            result = cast(CursorResult[Any], await session.execute(statement))
            await session.commit()

        return int(result.rowcount or 0) > 0

    async def get_credentials_by_username(self, *, username: str) -> CredentialRecord | None:
        """Return the username/hash pair used for login verification."""

        statement = sa.select(
            users.c.user_id,
            users.c.username,
            users.c.password_hash,
        ).where(users.c.username == username).limit(1)

        async with self._session_factory() as session:
            result = await session.execute(statement)

        row = result.mappings().first()
        if row is None:
            return None
        return CredentialRecord(
            user_id=int(row["user_id"]),
            username=cast(str, row["username"]),
            password_hash=cast(str, row["password_hash"]),
        )


def _to_user_record(row: sa.RowMapping) -> UserRecord:
    return UserRecord(
        user_id=int(row["user_id"]),
        username=cast(str, row["username"]),
        email=cast(str, row["email"]),
        password_hash=cast(str, row["password_hash"]),
        registration_date=cast(datetime, row["registration_date"]),
    )
