"""Pydantic models for the login contract."""

from __future__ import annotations

from typing import Literal

from shop_backend.application.dto.common_models import StrictModel


class LoginRequest(StrictModel):
    """HTTP request model for username/password login.

    Empty strings are accepted here and rejected by authentication as invalid
    credentials.
    """

    username: str
    password: str


class LoginSuccessResponse(StrictModel):
    """Body returned when credentials match."""

    success: Literal[True] = True
    message: str


class LoginFailureResponse(StrictModel):
    """Body returned for rejected or unverifiable credentials."""

    success: Literal[False] = False
    error: str
