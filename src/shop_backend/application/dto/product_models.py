"""Pydantic models for product HTTP contracts."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Annotated

from pydantic import ConfigDict, Field, PlainSerializer

from shop_backend.application.dto.common_models import StrictModel
from shop_backend.application.ports.product_repository_port import ProductRecord

Price = Annotated[
    Decimal,
    Field(ge=0, max_digits=10, decimal_places=2),
    PlainSerializer(float, return_type=float, when_used="json"),
]
StockQuantity = Annotated[int, Field(ge=0)]


class ProductCreateRequest(StrictModel):
    """HTTP request model for product creation."""

    product_name: str = Field(min_length=1, max_length=255)
    description: str = ""
    price: Price
    stock_quantity: StockQuantity = 0


class ProductCreatedResponse(StrictModel):
    """HTTP response model for product creation."""

    product_id: int


class ProductRenameRequest(StrictModel):
    """HTTP request model for product name update.

    Full product bodies are accepted; only `product_name` is applied.
    """

    model_config = ConfigDict(extra="ignore")

    product_name: str = Field(min_length=1, max_length=255)


class ProductResponse(StrictModel):
    """Public product representation."""

    product_id: int
    product_name: str
    description: str
    price: Price
    stock_quantity: StockQuantity
    created_at: datetime

    @classmethod
    def from_record(cls, record: ProductRecord) -> ProductResponse:
        return cls(
            product_id=record.product_id,
            product_name=record.product_name,
            description=record.description,
            price=record.price,
            stock_quantity=record.stock_quantity,
            created_at=record.created_at,
        )
