"""Port for product persistence operations."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Protocol


@dataclass(frozen=True)
class ProductRecord:
    """Product persistence model."""

    product_id: int
    product_name: str
    description: str
    price: Decimal
    stock_quantity: int
    created_at: datetime


@dataclass(frozen=True)
class ProductCreateInput:
    """Input payload for inserting one product row."""

    product_name: str
    description: str
    price: Decimal
    stock_quantity: int


class ProductRepositoryPort(Protocol):
    """Product repository contract."""

    async def create_product(self, payload: ProductCreateInput) -> int:
        """Insert product and return its generated id."""

    async def get_by_id(self, *, product_id: int) -> ProductRecord | None:
        """Return product by id or None."""

    async def list_products(self) -> list[ProductRecord]:
        """Return all products ordered by id."""

    async def update_product_name(
        self,
        *,
        product_id: int,
        product_name: str,
    ) -> ProductRecord | None:
        """Rename product and return updated row, or None when missing."""

    async def delete_product(self, *, product_id: int) -> bool:
        """Delete product and return whether a row was removed."""
