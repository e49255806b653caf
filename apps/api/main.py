"""shop-api entrypoint and HTTP route wiring."""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI

from shop_backend.application.services.auth_service import AuthService
from shop_backend.application.services.product_catalog_service import ProductCatalogService
from shop_backend.application.services.user_management_service import UserManagementService
from shop_backend.config.settings import load_settings
from shop_backend.infrastructure.db.product_repository import SqlAlchemyProductRepository
from shop_backend.infrastructure.db.session import create_session_factory
from shop_backend.infrastructure.db.user_repository import SqlAlchemyUserRepository
from shop_backend.infrastructure.http.auth_router import build_auth_router
from shop_backend.infrastructure.http.error_handlers import install_error_handlers
from shop_backend.infrastructure.http.pages_router import build_pages_router
from shop_backend.infrastructure.http.product_router import build_product_router
from shop_backend.infrastructure.http.user_router import build_user_router
from shop_backend.infrastructure.logging import configure_logging
from shop_backend.infrastructure.security.password_hasher import BcryptPasswordHasher

logger = logging.getLogger(__name__)


def create_app(
    *,
    database_url: str | None = None,
    auth_service: AuthService | None = None,
    user_service: UserManagementService | None = None,
    product_service: ProductCatalogService | None = None,
    bcrypt_rounds: int | None = None,
) -> FastAPI:
    """Create FastAPI app for login, user, product and page routes.

    Services that are not injected are built over one shared session factory
    created from `database_url`; settings are only loaded from the environment
    when something required is still missing.
    """

    needs_database = auth_service is None or user_service is None or product_service is None
    if needs_database and (database_url is None or bcrypt_rounds is None):
        settings = load_settings()
        configure_logging(level=settings.log_level)
        if database_url is None:
            database_url = settings.database_url
        if bcrypt_rounds is None:
            bcrypt_rounds = settings.bcrypt_rounds

    if needs_database:
        assert database_url is not None
        assert bcrypt_rounds is not None
        session_factory = create_session_factory(database_url)
        user_repository = SqlAlchemyUserRepository(session_factory)
        password_hasher = BcryptPasswordHasher(rounds=bcrypt_rounds)
        if auth_service is None:
            auth_service = AuthService(
                credentials=user_repository,
                password_hasher=password_hasher,
            )
        if user_service is None:
            user_service = UserManagementService(
                users=user_repository,
                password_hasher=password_hasher,
            )
        if product_service is None:
            product_service = ProductCatalogService(
                products=SqlAlchemyProductRepository(session_factory),
            )

    assert auth_service is not None
    assert user_service is not None
    assert product_service is not None

    app = FastAPI(title="shop-api")
    install_error_handlers(app)
    app.include_router(build_auth_router(auth_service=auth_service))
    app.include_router(build_user_router(user_service=user_service))
    app.include_router(build_product_router(product_service=product_service))
    app.include_router(build_pages_router())

    logger.info("shop_api_app_created")
    return app


def run_asgi_server(*, host: str, port: int) -> None:
    """Run shop-api as a long-lived ASGI process using application factory mode."""

    uvicorn.run(
        "apps.api.main:create_app",
        host=host,
        port=port,
        factory=True,
    )


def main() -> None:
    """Run shop-api runtime process."""

    settings = load_settings()
    configure_logging(level=settings.log_level)
    logger.info("shop_api_starting host=%s port=%s", settings.api_host, settings.api_port)
    run_asgi_server(host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    main()
