"""SQLAlchemy adapter for product catalog persistence."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, cast

import sqlalchemy as sa
from sqlalchemy.engine import CursorResult
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from shop_backend.application.ports.product_repository_port import (
    ProductCreateInput,
    ProductRecord,
    ProductRepositoryPort,
)
from shop_backend.infrastructure.db.metadata import products

_PRODUCT_COLUMNS = (
    products.c.product_id,
    products.c.product_name,
    products.c.description,
    products.c.price,
    products.c.stock_quantity,
    products.c.created_at,
)


class SqlAlchemyProductRepository(ProductRepositoryPort):
    """Product repository backed by SQLAlchemy async sessions."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def create_product(self, payload: ProductCreateInput) -> int:
        """Insert product row and return its numeric id."""

        statement = sa.insert(products).values(
            product_name=payload.product_name,
            description=payload.description,
            price=payload.price,
            stock_quantity=payload.stock_quantity,
        ).returning(products.c.product_id)

        async with self._session_factory() as session:
            result = await session.execute(statement)
            await session.commit()

        inserted_id = result.scalar_one()
        return int(inserted_id)

    async def get_by_id(self, *, product_id: int) -> ProductRecord | None:
        statement = (
            sa.select(*_PRODUCT_COLUMNS)
            .where(products.c.product_id == product_id)
            .limit(1)
        )

        async with self._session_factory() as session:
            result = await session.execute(statement)

        row = result.mappings().first()
        if row is None:
            return None
        return _to_product_record(row)

    async def list_products(self) -> list[ProductRecord]:
        statement = sa.select(*_PRODUCT_COLUMNS).order_by(products.c.product_id.asc())

        async with self._session_factory() as session:
            result = await session.execute(statement)

        return [_to_product_record(row) for row in result.mappings().all()]

    async def update_product_name(
        self,
        *,
        product_id: int,
        product_name: str,
    ) -> ProductRecord | None:
        """Rename one product; return None when no row matches id."""

        statement = (
            sa.update(products)
            .where(products.c.product_id == product_id)
            .values(product_name=product_name)
            .returning(*_PRODUCT_COLUMNS)
        )

        async with self._session_factory() as session:
            result = await session.execute(statement)
            await session.commit()

        row = result.mappings().first()
        if row is None:
            return None
        return _to_product_record(row)

    async def delete_product(self, *, product_id: int) -> bool:
        """Delete one product; return False when no row matches id."""

        statement = sa.delete(products).where(products.c.product_id == product_id)

        async with self._session_factory() as session:
            result = cast(CursorResult[Any], await session.execute(statement))
            await session.commit()

        return int(result.rowcount or 0) > 0


def _to_product_record(row: sa.RowMapping) -> ProductRecord:
    return ProductRecord(
        product_id=int(row["product_id"]),
        product_name=cast(str, row["product_name"]),
        description=cast(str, row["description"]),
        price=Decimal(str(row["price"])).quantize(Decimal("0.01")),
        stock_quantity=int(row["stock_quantity"]),
        created_at=cast(datetime, row["created_at"]),
    )
