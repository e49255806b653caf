"""FastAPI router for user CRUD endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException

from shop_backend.application.dto.common_models import ErrorResponse, OkResponse
from shop_backend.application.dto.user_models import (
    UserCreatedResponse,
    UserCreateRequest,
    UserRenameRequest,
    UserResponse,
)
from shop_backend.application.ports.user_repository_port import DuplicateUsernameError
from shop_backend.application.services.user_management_service import (
    UserManagementService,
    UserNotFoundError,
)

_NOT_FOUND: dict[int | str, dict[str, Any]] = {404: {"model": ErrorResponse}}
_CREATE_ERRORS: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
}
_UPDATE_ERRORS: dict[int | str, dict[str, Any]] = {
    **_CREATE_ERRORS,
    **_NOT_FOUND,
}


def build_user_router(*, user_service: UserManagementService) -> APIRouter:
    """Build router exposing list/get/create/rename/delete user endpoints."""

    router = APIRouter(prefix="/users", tags=["users"])

    @router.get("", response_model=list[UserResponse])
    async def list_users() -> list[UserResponse]:
        return [UserResponse.from_record(user) for user in await user_service.list_users()]

    @router.get("/{user_id}", response_model=UserResponse, responses=_NOT_FOUND)
    async def get_user(user_id: int) -> UserResponse:
        try:
            user = await user_service.get_user(user_id=user_id)
        except UserNotFoundError as exc:
            raise HTTPException(status_code=404, detail="user not found") from exc
        return UserResponse.from_record(user)

    @router.post(
        "",
        status_code=201,
        response_model=UserCreatedResponse,
        responses=_CREATE_ERRORS,
    )
    async def create_user(payload: UserCreateRequest) -> UserCreatedResponse:
        try:
            user_id = await user_service.create_user(
                username=payload.username,
                email=payload.email,
                password=payload.password,
            )
        except DuplicateUsernameError as exc:
            raise HTTPException(status_code=409, detail="username already exists") from exc
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return UserCreatedResponse(user_id=user_id)

    @router.put("/{user_id}", response_model=UserResponse, responses=_UPDATE_ERRORS)
    async def rename_user(user_id: int, payload: UserRenameRequest) -> UserResponse:
        try:
            user = await user_service.rename_user(user_id=user_id, username=payload.username)
        except UserNotFoundError as exc:
            raise HTTPException(status_code=404, detail="user not found") from exc
        except DuplicateUsernameError as exc:
            raise HTTPException(status_code=409, detail="username already exists") from exc
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return UserResponse.from_record(user)

    @router.delete("/{user_id}", response_model=OkResponse, responses=_NOT_FOUND)
    async def delete_user(user_id: int) -> OkResponse:
        try:
            await user_service.delete_user(user_id=user_id)
        except UserNotFoundError as exc:
            raise HTTPException(status_code=404, detail="user not found") from exc
        return OkResponse(ok=True)

    return router
