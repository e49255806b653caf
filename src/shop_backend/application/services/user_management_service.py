"""Application service for user account operations."""

from __future__ import annotations

import asyncio
import logging

from shop_backend.application.ports.password_hasher_port import PasswordHasherPort
from shop_backend.application.ports.user_repository_port import (
    UserCreateInput,
    UserRecord,
    UserRepositoryPort,
)
from shop_backend.domain.auth.credentials import (
    normalize_user_email,
    normalize_username,
    validate_user_password,
)

logger = logging.getLogger(__name__)


class UserNotFoundError(LookupError):
    """Raised when a target user cannot be found."""

    def __init__(self, *, user_id: int) -> None:
        super().__init__(f"user not found: {user_id}")
        self.user_id = user_id


class UserManagementService:
    """Expose user listing, creation, rename and removal use-cases."""

    def __init__(
        self,
        *,
        users: UserRepositoryPort,
        password_hasher: PasswordHasherPort,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    async def list_users(self) -> list[UserRecord]:
        return await self._users.list_users()

    async def get_user(self, *, user_id: int) -> UserRecord:
        user = await self._users.get_by_id(user_id=user_id)
        if user is None:
            raise UserNotFoundError(user_id=user_id)
        return user

    async def create_user(self, *, username: str, email: str, password: str) -> int:
        """Hash the plaintext password once off the event loop and persist a new account."""

        normalized_username = normalize_username(username=username)
        normalized_email = normalize_user_email(email=email)
        password_hash = await asyncio.to_thread(
            self._password_hasher.hash_password,
            validate_user_password(password=password),
        )
        payload = UserCreateInput(
            username=normalized_username,
            email=normalized_email,
            password_hash=password_hash,
        )
        user_id = await self._users.create_user(payload)
        logger.info("user_created user_id=%s username=%s", user_id, payload.username)
        return user_id

    async def rename_user(self, *, user_id: int, username: str) -> UserRecord:
        updated = await self._users.update_username(
            user_id=user_id,
            username=normalize_username(username=username),
        )
        if updated is None:
            raise UserNotFoundError(user_id=user_id)
        return updated

    async def delete_user(self, *, user_id: int) -> None:
        deleted = await self._users.delete_user(user_id=user_id)
        if not deleted:
            raise UserNotFoundError(user_id=user_id)
        logger.info("user_deleted user_id=%s", user_id)
