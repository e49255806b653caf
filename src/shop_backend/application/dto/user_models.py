"""Pydantic models for user HTTP contracts."""

from __future__ import annotations

from datetime import datetime

from pydantic import ConfigDict, Field

from shop_backend.application.dto.common_models import StrictModel
from shop_backend.application.ports.user_repository_port import UserRecord


class UserCreateRequest(StrictModel):
    """HTTP request model for account creation."""

    username: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1)


class UserCreatedResponse(StrictModel):
    """HTTP response model for account creation."""

    user_id: int


class UserRenameRequest(StrictModel):
    """HTTP request model for username update.

    Full user bodies are accepted; only `username` is applied.
    """

    model_config = ConfigDict(extra="ignore")

    username: str = Field(min_length=1, max_length=255)


class UserResponse(StrictModel):
    """Public user representation; the password hash is never exposed."""

    user_id: int
    username: str
    email: str
    registration_date: datetime

    @classmethod
    def from_record(cls, record: UserRecord) -> UserResponse:
        return cls(
            user_id=record.user_id,
            username=record.username,
            email=record.email,
            registration_date=record.registration_date,
        )
