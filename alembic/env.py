"""Alembic environment configuration."""

from __future__ import annotations

import asyncio
import os
from logging.config import fileConfig
from pathlib import Path

from dotenv import load_dotenv
from sqlalchemy import engine_from_config, pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config

from alembic import context
from shop_backend.infrastructure.db.metadata import metadata

config = context.config

_DEFAULT_ALEMBIC_URL = "sqlite:///./shop.db"

# DATABASE_URL from a local .env only replaces the ini placeholder; URLs set
# programmatically (tests) are left untouched.
load_dotenv(Path(__file__).resolve().parents[1] / ".env")
database_url = os.getenv("DATABASE_URL")
configured_url = config.get_main_option("sqlalchemy.url")
if database_url and configured_url == _DEFAULT_ALEMBIC_URL:
    config.set_main_option("sqlalchemy.url", database_url)

if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)

target_metadata = metadata


def run_migrations_offline() -> None:
    """Run migrations in offline mode."""

    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations in online mode, picking sync or async engine by driver."""

    configured_url = config.get_main_option("sqlalchemy.url") or _DEFAULT_ALEMBIC_URL
    if _is_async_driver_url(configured_url):
        asyncio.run(run_async_migrations())
        return

    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with connectable.connect() as connection:
        do_run_migrations(connection)


def do_run_migrations(connection: Connection) -> None:
    context.configure(connection=connection, target_metadata=target_metadata)
    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    """Create async connection and run migrations synchronously via run_sync."""

    connectable = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


def _is_async_driver_url(url: str) -> bool:
    """Return whether a SQLAlchemy URL uses an async driver."""

    return any(driver in url for driver in ("+asyncpg", "+aiosqlite", "+aiomysql", "+asyncmy"))


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
