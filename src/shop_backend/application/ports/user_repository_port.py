"""Port for user persistence operations."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol


class DuplicateUsernameError(Exception):
    """Raised when a write would violate username uniqueness."""

    def __init__(self, *, username: str) -> None:
        super().__init__(f"username already exists: {username}")
        self.username = username


@dataclass(frozen=True)
class UserRecord:
    """User persistence model."""

    user_id: int
    username: str
    email: str
    password_hash: str
    registration_date: datetime


@dataclass(frozen=True)
class UserCreateInput:
    """Input payload for inserting one user row."""

    username: str
    email: str
    password_hash: str


class UserRepositoryPort(Protocol):
    """User repository contract."""

    async def create_user(self, payload: UserCreateInput) -> int:
        """Insert user and return its generated id."""

    async def get_by_id(self, *, user_id: int) -> UserRecord | None:
        """Return user by id or None."""

    async def list_users(self) -> list[UserRecord]:
        """Return all users ordered by id."""

    async def update_username(self, *, user_id: int, username: str) -> UserRecord | None:
        """Rename user and return updated row, or None when missing."""

    async def delete_user(self, *, user_id: int) -> bool:
        """Delete user and return whether a row was removed."""
