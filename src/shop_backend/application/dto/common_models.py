"""Shared pydantic building blocks for HTTP contracts."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class StrictModel(BaseModel):
    """Base model with strict unknown-field rejection."""

    model_config = ConfigDict(extra="forbid")


class OkResponse(StrictModel):
    """Generic acknowledgement body for state-changing endpoints."""

    ok: bool


class ErrorResponse(StrictModel):
    """Error body shape produced by HTTPException handlers."""

    detail: str
