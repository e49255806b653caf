"""SQLAlchemy metadata definitions for shop backend tables."""

from __future__ import annotations

import sqlalchemy as sa

metadata = sa.MetaData()

users = sa.Table(
    "users",
    metadata,
    sa.Column("user_id", sa.Integer(), primary_key=True, autoincrement=True),
    sa.Column("username", sa.String(255), nullable=False),
    sa.Column("email", sa.String(255), nullable=False),
    sa.Column("password_hash", sa.String(255), nullable=False),
    sa.Column(
        "registration_date",
        sa.DateTime(timezone=True),
        nullable=False,
        server_default=sa.text("CURRENT_TIMESTAMP"),
    ),
    sa.UniqueConstraint("username", name="uq_users_username"),
)

products = sa.Table(
    "products",
    metadata,
    sa.Column("product_id", sa.Integer(), primary_key=True, autoincrement=True),
    sa.Column("product_name", sa.String(255), nullable=False),
    sa.Column("description", sa.Text(), nullable=False, server_default=sa.text("''")),
    sa.Column("price", sa.Numeric(10, 2), nullable=False),
    sa.Column("stock_quantity", sa.Integer(), nullable=False, server_default=sa.text("0")),
    sa.Column(
        "created_at",
        sa.DateTime(timezone=True),
        nullable=False,
        server_default=sa.text("CURRENT_TIMESTAMP"),
    ),
    sa.CheckConstraint("price >= 0", name="ck_products_price_non_negative"),
    sa.CheckConstraint("stock_quantity >= 0", name="ck_products_stock_non_negative"),
)
sa.Index("ix_products_product_name", products.c.product_name)
