"""FastAPI router for the password login endpoint."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from shop_backend.application.dto.auth_models import (
    LoginFailureResponse,
    LoginRequest,
    LoginSuccessResponse,
)
from shop_backend.application.services.auth_service import AuthOutcome, AuthService

LOGIN_SUCCESS_MESSAGE = "Login successful"
LOGIN_INVALID_MESSAGE = "Invalid username or password"
LOGIN_ERROR_MESSAGE = "Login failed"


def build_auth_router(*, auth_service: AuthService) -> APIRouter:
    """Build router exposing the credential check endpoint."""

    router = APIRouter(tags=["auth"])

    @router.post(
        "/login",
        response_model=LoginSuccessResponse,
        responses={401: {"model": LoginFailureResponse}, 500: {"model": LoginFailureResponse}},
    )
    async def login(payload: LoginRequest) -> JSONResponse:
        result = await auth_service.authenticate(
            username=payload.username,
            password=payload.password,
        )

        if result.outcome is AuthOutcome.SUCCESS:
            body = LoginSuccessResponse(message=LOGIN_SUCCESS_MESSAGE)
            return JSONResponse(status_code=200, content=body.model_dump())
        if result.outcome is AuthOutcome.CREDENTIAL_INTEGRITY_ERROR:
            failure = LoginFailureResponse(error=LOGIN_ERROR_MESSAGE)
            return JSONResponse(status_code=500, content=failure.model_dump())

        failure = LoginFailureResponse(error=LOGIN_INVALID_MESSAGE)
        return JSONResponse(status_code=401, content=failure.model_dump())

    return router
