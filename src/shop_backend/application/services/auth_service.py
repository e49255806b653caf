"""Application authentication service for credential verification."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import StrEnum

from shop_backend.application.ports.credential_store_port import (
    CredentialRecord,
    CredentialStorePort,
)
from shop_backend.application.ports.password_hasher_port import PasswordHasherPort
from shop_backend.domain.auth.password_check import PasswordCheck

logger = logging.getLogger(__name__)

# Hashed once per service so unknown usernames cost one bcrypt verify like known ones.
_DUMMY_PASSWORD = "unknown-user-placeholder-password"


class AuthOutcome(StrEnum):
    """Supported authentication outcomes."""

    SUCCESS = "success"
    INVALID_CREDENTIALS = "invalid_credentials"
    CREDENTIAL_INTEGRITY_ERROR = "credential_integrity_error"


@dataclass(frozen=True)
class AuthResult:
    """Authentication result model."""

    outcome: AuthOutcome
    user_id: int | None = None


class AuthService:
    """Authenticate username/password pairs against stored bcrypt hashes."""

    def __init__(
        self,
        *,
        credentials: CredentialStorePort,
        password_hasher: PasswordHasherPort,
    ) -> None:
        self._credentials = credentials
        self._password_hasher = password_hasher
        self._dummy_hash = password_hasher.hash_password(_DUMMY_PASSWORD)

    async def authenticate(self, *, username: str, password: str) -> AuthResult:
        """Authenticate credentials without revealing whether the username exists."""

        normalized_username = username.strip()
        record: CredentialRecord | None = None
        if normalized_username:
            record = await self._credentials.get_credentials_by_username(
                username=normalized_username
            )

        if record is None:
            await asyncio.to_thread(
                self._password_hasher.verify_password,
                password=password,
                password_hash=self._dummy_hash,
            )
            logger.info(
                "login_failed username=%s reason=unknown_username",
                normalized_username,
            )
            return AuthResult(outcome=AuthOutcome.INVALID_CREDENTIALS)

        check = await asyncio.to_thread(
            self._password_hasher.verify_password,
            password=password,
            password_hash=record.password_hash,
        )
        if check is PasswordCheck.MALFORMED:
            logger.error("login_hash_malformed user_id=%s", record.user_id)
            return AuthResult(
                outcome=AuthOutcome.CREDENTIAL_INTEGRITY_ERROR,
                user_id=record.user_id,
            )
        if check is PasswordCheck.MISMATCH:
            logger.info(
                "login_failed username=%s reason=invalid_credentials",
                normalized_username,
            )
            return AuthResult(outcome=AuthOutcome.INVALID_CREDENTIALS)

        logger.info("login_success user_id=%s", record.user_id)
        return AuthResult(outcome=AuthOutcome.SUCCESS, user_id=record.user_id)
