"""Bcrypt password hasher adapter."""

from __future__ import annotations

import re

import bcrypt

from shop_backend.application.ports.password_hasher_port import PasswordHasherPort
from shop_backend.domain.auth.credentials import BCRYPT_MAX_PASSWORD_BYTES
from shop_backend.domain.auth.password_check import PasswordCheck

DEFAULT_BCRYPT_ROUNDS = 12

# $<variant>$<cost>$<22 chars salt><31 chars digest>
_BCRYPT_HASH_RE = re.compile(r"\$2[aby]\$\d{2}\$[./A-Za-z0-9]{53}")


class BcryptPasswordHasher(PasswordHasherPort):
    """Password hashing adapter using bcrypt."""

    def __init__(self, *, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> None:
        self._rounds = rounds

    def hash_password(self, password: str) -> str:
        encoded = password.encode("utf-8")
        return bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=self._rounds)).decode("utf-8")

    def verify_password(self, *, password: str, password_hash: str) -> PasswordCheck:
        """Check candidate against stored hash, separating corrupt hashes from mismatches."""

        if not is_bcrypt_hash(password_hash):
            return PasswordCheck.MALFORMED

        encoded = password.encode("utf-8")
        if len(encoded) > BCRYPT_MAX_PASSWORD_BYTES:
            return PasswordCheck.MISMATCH

        try:
            matched = bcrypt.checkpw(encoded, password_hash.encode("utf-8"))
        except ValueError:
            return PasswordCheck.MALFORMED
        return PasswordCheck.MATCH if matched else PasswordCheck.MISMATCH


def is_bcrypt_hash(value: str) -> bool:
    """Return whether value has the modular-crypt shape of a bcrypt hash."""

    return _BCRYPT_HASH_RE.fullmatch(value) is not None
