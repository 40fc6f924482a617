"""
bcrypt password hashing.

Hashes are produced with a SHA-256 pre-hash (bcrypt only reads the first
72 bytes of its input). Verification also accepts plain bcrypt hashes,
which is what bcryptjs-seeded stores contain.

Example:
    hasher = PasswordHasher(rounds=8)
    stored = hasher.hash_password("password123")
    assert hasher.verify_password("password123", stored)
"""

import base64
import hashlib

import bcrypt as bcrypt_lib


class PasswordHasher:
    """Salted, slow one-way hashing for identity secrets."""

    def __init__(self, rounds: int = 8):
        """
        Initialize the hasher.

        Args:
            rounds: bcrypt cost factor (log2 of the iteration count)
        """
        self.rounds = rounds

    def _prehash_password(self, password: str) -> str:
        """
        Pre-hash password with SHA-256 before bcrypt.

        This handles bcrypt's 72-byte limit and ensures consistent
        behavior across all password lengths.
        """
        sha256_hash = hashlib.sha256(password.encode("utf-8")).digest()
        return base64.b64encode(sha256_hash).decode("utf-8")

    def hash_password(self, password: str) -> str:
        """Hash a password using bcrypt with SHA-256 pre-hashing."""
        prehashed = self._prehash_password(password)
        salt = bcrypt_lib.gensalt(rounds=self.rounds)
        return bcrypt_lib.hashpw(prehashed.encode("utf-8"), salt).decode("utf-8")

    def verify_password(self, password: str, hashed: str) -> bool:
        """
        Verify a password against its hash.

        Supports both pre-hashed and direct bcrypt hashes.
        A malformed hash never verifies.
        """
        hashed_bytes = hashed.encode("utf-8")

        prehashed = self._prehash_password(password)
        try:
            if bcrypt_lib.checkpw(prehashed.encode("utf-8"), hashed_bytes):
                return True
        except ValueError:
            return False

        try:
            return bcrypt_lib.checkpw(password.encode("utf-8"), hashed_bytes)
        except ValueError:
            # Password too long for direct bcrypt - definitely not a match
            return False
