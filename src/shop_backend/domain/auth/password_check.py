"""Outcomes of checking a plaintext password against a stored hash."""

from __future__ import annotations

from enum import StrEnum


class PasswordCheck(StrEnum):
    """Supported password verification outcomes."""

    MATCH = "match"
    MISMATCH = "mismatch"
    MALFORMED = "malformed"
