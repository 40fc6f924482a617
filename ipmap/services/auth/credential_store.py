"""
Read-only registry of known identities.

Identities are seeded at startup, either from the built-in demo account
or from a JSON file of pre-hashed entries. There is no registration flow
and no mutation after construction.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, List, Optional

from common.auth import PasswordHasher

logger = logging.getLogger(__name__)


# Demo account shipped with the application; hashed when the store is built
DEFAULT_SEED = [
    {
        "id": 1,
        "email": "test@email.com",
        "password": "password123",
        "displayName": "Juan Cruz",
    },
]


@dataclass(frozen=True)
class Identity:
    """A known user and the one-way hash of their secret."""

    id: int
    email: str
    secret_hash: str
    display_name: str

    def public_view(self) -> dict:
        """Fields safe to return to clients."""
        return {"id": self.id, "email": self.email, "name": self.display_name}


class CredentialStore:
    """
    Lookup of identities by email.

    Email matching is exact and case-sensitive: "Test@email.com" does not
    find "test@email.com".
    """

    def __init__(self, identities: Iterable[Identity]):
        """
        Build the store.

        Args:
            identities: Identities to register

        Raises:
            ValueError: If two identities share an email
        """
        by_email = {}
        for identity in identities:
            if identity.email in by_email:
                raise ValueError(f"Duplicate identity email: {identity.email}")
            by_email[identity.email] = identity
        self._by_email = MappingProxyType(by_email)

    def find_by_email(self, email: str) -> Optional[Identity]:
        """Return the identity registered under ``email``, or None."""
        return self._by_email.get(email)

    def __len__(self) -> int:
        return len(self._by_email)

    @classmethod
    def seeded(
        cls,
        hasher: PasswordHasher,
        seed: Optional[List[dict]] = None,
    ) -> "CredentialStore":
        """
        Build a store from plaintext seed entries, hashing each password.

        Args:
            hasher: Hasher used for the stored secrets
            seed: Entries with id, email, password and displayName
        """
        entries = DEFAULT_SEED if seed is None else seed
        identities = [
            Identity(
                id=entry["id"],
                email=entry["email"],
                secret_hash=hasher.hash_password(entry["password"]),
                display_name=entry["displayName"],
            )
            for entry in entries
        ]
        logger.info(f"Seeded credential store with {len(identities)} identities")
        return cls(identities)

    @classmethod
    def from_file(cls, path: str) -> "CredentialStore":
        """
        Build a store from a JSON file of pre-hashed identities.

        The file holds a list of objects with id, email, secretHash and
        displayName. Plaintext passwords are not accepted here.

        Raises:
            ValueError: If the file is not a list of complete identity entries
        """
        raw = json.loads(Path(path).expanduser().read_text(encoding="utf-8"))
        if not isinstance(raw, list):
            raise ValueError(f"{path}: expected a JSON list of identities")

        identities = []
        for index, entry in enumerate(raw):
            try:
                identities.append(
                    Identity(
                        id=int(entry["id"]),
                        email=str(entry["email"]),
                        secret_hash=str(entry["secretHash"]),
                        display_name=str(entry["displayName"]),
                    )
                )
            except (KeyError, TypeError, ValueError) as e:
                raise ValueError(f"{path}: invalid identity at index {index}: {e}")

        logger.info(f"Loaded {len(identities)} identities from {path}")
        return cls(identities)
