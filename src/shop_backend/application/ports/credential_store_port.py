"""Port for read-only credential lookups used by the login flow."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class CredentialRecord:
    """Username and stored password hash for one user."""

    user_id: int
    username: str
    password_hash: str


class CredentialStorePort(Protocol):
    """Credential store contract."""

    async def get_credentials_by_username(self, *, username: str) -> CredentialRecord | None:
        """Return stored credentials for username or None."""
