"""Application service for product catalog operations."""

from __future__ import annotations

from decimal import Decimal

from shop_backend.application.ports.product_repository_port import (
    ProductCreateInput,
    ProductRecord,
    ProductRepositoryPort,
)


class ProductNotFoundError(LookupError):
    """Raised when a target product cannot be found."""

    def __init__(self, *, product_id: int) -> None:
        super().__init__(f"product not found: {product_id}")
        self.product_id = product_id


def normalize_product_name(*, product_name: str) -> str:
    """Normalize one product name and reject blank values."""

    normalized = product_name.strip()
    if not normalized:
        raise ValueError("product_name cannot be blank")
    return normalized


class ProductCatalogService:
    """Expose product listing, creation, rename and removal use-cases."""

    def __init__(self, *, products: ProductRepositoryPort) -> None:
        self._products = products

    async def list_products(self) -> list[ProductRecord]:
        return await self._products.list_products()

    async def get_product(self, *, product_id: int) -> ProductRecord:
        product = await self._products.get_by_id(product_id=product_id)
        if product is None:
            raise ProductNotFoundError(product_id=product_id)
        return product

    async def create_product(
        self,
        *,
        product_name: str,
        description: str,
        price: Decimal,
        stock_quantity: int,
    ) -> int:
        """Validate catalog invariants and persist a new product."""

        if price < 0:
            raise ValueError("price cannot be negative")
        if stock_quantity < 0:
            raise ValueError("stock_quantity cannot be negative")

        return await self._products.create_product(
            ProductCreateInput(
                product_name=normalize_product_name(product_name=product_name),
                description=description,
                price=price,
                stock_quantity=stock_quantity,
            )
        )

    async def rename_product(self, *, product_id: int, product_name: str) -> ProductRecord:
        updated = await self._products.update_product_name(
            product_id=product_id,
            product_name=normalize_product_name(product_name=product_name),
        )
        if updated is None:
            raise ProductNotFoundError(product_id=product_id)
        return updated

    async def delete_product(self, *, product_id: int) -> None:
        deleted = await self._products.delete_product(product_id=product_id)
        if not deleted:
            raise ProductNotFoundError(product_id=product_id)
