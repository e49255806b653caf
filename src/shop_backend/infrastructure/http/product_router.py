"""FastAPI router for product CRUD endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException

from shop_backend.application.dto.common_models import ErrorResponse, OkResponse
from shop_backend.application.dto.product_models import (
    ProductCreatedResponse,
    ProductCreateRequest,
    ProductRenameRequest,
    ProductResponse,
)
from shop_backend.application.services.product_catalog_service import (
    ProductCatalogService,
    ProductNotFoundError,
)

_NOT_FOUND: dict[int | str, dict[str, Any]] = {404: {"model": ErrorResponse}}
_CREATE_ERRORS: dict[int | str, dict[str, Any]] = {400: {"model": ErrorResponse}}
_UPDATE_ERRORS: dict[int | str, dict[str, Any]] = {
    **_CREATE_ERRORS,
    **_NOT_FOUND,
}


def build_product_router(*, product_service: ProductCatalogService) -> APIRouter:
    """Build router exposing list/get/create/rename/delete product endpoints."""

    router = APIRouter(prefix="/products", tags=["products"])

    @router.get("", response_model=list[ProductResponse])
    async def list_products() -> list[ProductResponse]:
        products = await product_service.list_products()
        return [ProductResponse.from_record(product) for product in products]

    @router.get("/{product_id}", response_model=ProductResponse, responses=_NOT_FOUND)
    async def get_product(product_id: int) -> ProductResponse:
        try:
            product = await product_service.get_product(product_id=product_id)
        except ProductNotFoundError as exc:
            raise HTTPException(status_code=404, detail="product not found") from exc
        return ProductResponse.from_record(product)

    @router.post(
        "",
        status_code=201,
        response_model=ProductCreatedResponse,
        responses=_CREATE_ERRORS,
    )
    async def create_product(payload: ProductCreateRequest) -> ProductCreatedResponse:
        try:
            product_id = await product_service.create_product(
                product_name=payload.product_name,
                description=payload.description,
                price=payload.price,
                stock_quantity=payload.stock_quantity,
            )
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return ProductCreatedResponse(product_id=product_id)

    @router.put("/{product_id}", response_model=ProductResponse, responses=_UPDATE_ERRORS)
    async def rename_product(product_id: int, payload: ProductRenameRequest) -> ProductResponse:
        try:
            product = await product_service.rename_product(
                product_id=product_id,
                product_name=payload.product_name,
            )
        except ProductNotFoundError as exc:
            raise HTTPException(status_code=404, detail="product not found") from exc
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return ProductResponse.from_record(product)

    @router.delete("/{product_id}", response_model=OkResponse, responses=_NOT_FOUND)
    async def delete_product(product_id: int) -> OkResponse:
        try:
            await product_service.delete_product(product_id=product_id)
        except ProductNotFoundError as exc:
            raise HTTPException(status_code=404, detail="product not found") from exc
        return OkResponse(ok=True)

    return router
