"""Shared normalization helpers for user credential inputs."""

from __future__ import annotations

BCRYPT_MAX_PASSWORD_BYTES = 72


def normalize_username(*, username: str) -> str:
    """Normalize one username and reject blank values."""

    normalized = username.strip()
    if not normalized:
        raise ValueError("username cannot be blank")
    return normalized


def normalize_user_email(*, email: str) -> str:
    """Normalize one user email and reject blank values."""

    normalized = email.strip().lower()
    if not normalized:
        raise ValueError("email cannot be blank")
    return normalized


def validate_user_password(*, password: str) -> str:
    """Reject blank passwords and passwords bcrypt cannot hash losslessly.

    Passwords are stored exactly as supplied; surrounding whitespace is kept.
    """

    if not password.strip():
        raise ValueError("password cannot be blank")
    if len(password.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
        raise ValueError(f"password cannot exceed {BCRYPT_MAX_PASSWORD_BYTES} bytes")
    return password
