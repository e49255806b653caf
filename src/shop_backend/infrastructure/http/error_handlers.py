"""Application-wide exception handlers mapping failures to HTTP responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


def install_error_handlers(app: FastAPI) -> None:
    """Register bad-request and storage-failure handlers on the app."""

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        logger.info(
            "request_rejected method=%s path=%s errors=%s",
            request.method,
            request.url.path,
            len(exc.errors()),
        )
        return JSONResponse(status_code=400, content={"detail": _summarize_errors(exc)})

    @app.exception_handler(SQLAlchemyError)
    async def handle_storage_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.exception(
            "storage_error method=%s path=%s",
            request.method,
            request.url.path,
            exc_info=exc,
        )
        return JSONResponse(status_code=500, content={"detail": "internal error"})


def _summarize_errors(exc: RequestValidationError) -> str:
    """Render validation errors as one short `loc: msg` line per problem."""

    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts) or "invalid request"
