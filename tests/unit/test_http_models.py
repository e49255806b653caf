from __future__ import annotations

from datetime import UTC, datetime
from decimal import Decimal

import pytest
from pydantic import ValidationError

from shop_backend.application.dto.auth_models import LoginFailureResponse, LoginRequest
from shop_backend.application.dto.product_models import (
    ProductCreateRequest,
    ProductRenameRequest,
    ProductResponse,
)
from shop_backend.application.dto.user_models import (
    UserCreateRequest,
    UserRenameRequest,
    UserResponse,
)
from shop_backend.application.ports.user_repository_port import UserRecord


def test_login_request_requires_both_fields() -> None:
    with pytest.raises(ValidationError):
        LoginRequest.model_validate({"username": "alice"})


def test_login_request_accepts_empty_strings() -> None:
    request = LoginRequest.model_validate({"username": "", "password": ""})

    assert request.username == ""
    assert request.password == ""


def test_login_request_rejects_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        LoginRequest.model_validate({"username": "alice", "password": "pw", "remember": True})


def test_login_failure_body_shape() -> None:
    body = LoginFailureResponse(error="Invalid username or password").model_dump()

    assert body == {"success": False, "error": "Invalid username or password"}


def test_user_create_request_does_not_accept_password_hash() -> None:
    with pytest.raises(ValidationError):
        UserCreateRequest.model_validate(
            {"username": "alice", "email": "a@example.org", "password_hash": "$2b$..."}
        )


def test_user_response_omits_password_hash() -> None:
    record = UserRecord(
        user_id=1,
        username="alice",
        email="a@example.org",
        password_hash="$2b$12$secret",
        registration_date=datetime(2026, 1, 1, tzinfo=UTC),
    )

    body = UserResponse.from_record(record).model_dump(mode="json")

    assert "password_hash" not in body
    assert body["user_id"] == 1


def test_product_create_request_accepts_json_float_price() -> None:
    payload = ProductCreateRequest.model_validate(
        {"product_name": "Widget", "price": 9.99, "stock_quantity": 10}
    )

    assert payload.price == Decimal("9.99")
    assert payload.description == ""


@pytest.mark.parametrize(
    "overrides",
    [
        {"price": -1},
        {"stock_quantity": -1},
        {"price": "abc"},
        {"stock_quantity": "ten"},
        {"price": 1.234},
    ],
)
def test_product_create_request_rejects_invalid_numbers(overrides: dict[str, object]) -> None:
    body: dict[str, object] = {"product_name": "Widget", "price": 1, "stock_quantity": 1}
    body.update(overrides)

    with pytest.raises(ValidationError):
        ProductCreateRequest.model_validate(body)


def test_product_response_serializes_price_as_json_number() -> None:
    response = ProductResponse(
        product_id=1,
        product_name="Widget",
        description="",
        price=Decimal("9.99"),
        stock_quantity=10,
        created_at=datetime(2026, 1, 1, tzinfo=UTC),
    )

    assert response.model_dump(mode="json")["price"] == 9.99


def test_rename_requests_ignore_other_entity_fields() -> None:
    product = ProductRenameRequest.model_validate(
        {"product_name": "Gadget", "description": "", "price": 1, "stock_quantity": 1}
    )
    user = UserRenameRequest.model_validate(
        {"username": "alicia", "email": "a@example.org", "password_hash": "$2b$..."}
    )

    assert product.model_dump() == {"product_name": "Gadget"}
    assert user.model_dump() == {"username": "alicia"}
