from __future__ import annotations

from pathlib import Path

import sqlalchemy as sa
from alembic.config import Config
from fastapi.testclient import TestClient

from alembic import command
from apps.api.main import create_app
from shop_backend.infrastructure.security.password_hasher import BcryptPasswordHasher

FAST_ROUNDS = 4


def _upgrade_head(tmp_path: Path, filename: str) -> tuple[str, str]:
    db_path = tmp_path / filename
    sync_url = f"sqlite+pysqlite:///{db_path}"
    async_url = f"sqlite+aiosqlite:///{db_path}"

    alembic_config = Config("alembic.ini")
    alembic_config.set_main_option("sqlalchemy.url", sync_url)
    command.upgrade(alembic_config, "head")

    return sync_url, async_url


def _insert_user(connection: sa.Connection, *, username: str, password_hash: str) -> None:
    connection.execute(
        sa.text(
            "INSERT INTO users (username, email, password_hash) "
            "VALUES (:username, :email, :password_hash)"
        ),
        {
            "username": username,
            "email": f"{username}@example.org",
            "password_hash": password_hash,
        },
    )


def _build_client(async_url: str) -> TestClient:
    return TestClient(create_app(database_url=async_url, bcrypt_rounds=FAST_ROUNDS))


def test_user_created_over_http_can_log_in(tmp_path: Path) -> None:
    _, async_url = _upgrade_head(tmp_path, "login_roundtrip.db")

    with _build_client(async_url) as client:
        created = client.post(
            "/users",
            json={"username": "alice", "email": "alice@example.org", "password": "s3cret!"},
        )
        response = client.post("/login", json={"username": "alice", "password": "s3cret!"})

    assert created.status_code == 201
    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Login successful"}


def test_wrong_password_returns_401(tmp_path: Path) -> None:
    sync_url, async_url = _upgrade_head(tmp_path, "login_wrong_password.db")
    hasher = BcryptPasswordHasher(rounds=FAST_ROUNDS)
    with sa.create_engine(sync_url).begin() as connection:
        _insert_user(
            connection,
            username="alice",
            password_hash=hasher.hash_password("correct-password"),
        )

    with _build_client(async_url) as client:
        response = client.post(
            "/login",
            json={"username": "alice", "password": "wrong-password"},
        )

    assert response.status_code == 401
    assert response.json() == {"success": False, "error": "Invalid username or password"}


def test_unknown_username_is_indistinguishable_from_wrong_password(tmp_path: Path) -> None:
    sync_url, async_url = _upgrade_head(tmp_path, "login_unknown_user.db")
    hasher = BcryptPasswordHasher(rounds=FAST_ROUNDS)
    with sa.create_engine(sync_url).begin() as connection:
        _insert_user(connection, username="alice", password_hash=hasher.hash_password("pw"))

    with _build_client(async_url) as client:
        wrong_password = client.post("/login", json={"username": "alice", "password": "nope"})
        unknown_user = client.post("/login", json={"username": "mallory", "password": "nope"})

    assert wrong_password.status_code == unknown_user.status_code == 401
    assert wrong_password.json() == unknown_user.json()
    assert wrong_password.headers["content-type"] == unknown_user.headers["content-type"]


def test_malformed_stored_hash_returns_500_not_401(tmp_path: Path) -> None:
    sync_url, async_url = _upgrade_head(tmp_path, "login_malformed_hash.db")
    with sa.create_engine(sync_url).begin() as connection:
        _insert_user(connection, username="alice", password_hash="not-a-bcrypt-hash")

    with _build_client(async_url) as client:
        response = client.post("/login", json={"username": "alice", "password": "pw"})

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Login failed"}


def test_login_with_missing_field_is_bad_request(tmp_path: Path) -> None:
    _, async_url = _upgrade_head(tmp_path, "login_bad_request.db")

    with _build_client(async_url) as client:
        missing_password = client.post("/login", json={"username": "alice"})
        not_json = client.post(
            "/login",
            content="username=alice",
            headers={"content-type": "application/json"},
        )

    assert missing_password.status_code == 400
    assert "password" in missing_password.json()["detail"]
    assert not_json.status_code == 400


def test_empty_username_or_password_is_rejected_as_invalid_credentials(tmp_path: Path) -> None:
    sync_url, async_url = _upgrade_head(tmp_path, "login_empty_fields.db")
    hasher = BcryptPasswordHasher(rounds=FAST_ROUNDS)
    with sa.create_engine(sync_url).begin() as connection:
        _insert_user(connection, username="alice", password_hash=hasher.hash_password("pw"))

    with _build_client(async_url) as client:
        empty_password = client.post("/login", json={"username": "alice", "password": ""})
        empty_username = client.post("/login", json={"username": "", "password": "pw"})

    for response in (empty_password, empty_username):
        assert response.status_code == 401
        assert response.json() == {"success": False, "error": "Invalid username or password"}
