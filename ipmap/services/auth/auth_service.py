"""
Credential verification and session token issuance.
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

from common.auth import PasswordHasher, SessionTokenCodec
from ipmap.services.auth.credential_store import CredentialStore

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid credentials"


class InvalidCredentialsError(ValueError):
    """Unknown email or wrong password. The two cases are indistinguishable."""

    def __init__(self):
        super().__init__(INVALID_CREDENTIALS_MESSAGE)


@dataclass(frozen=True)
class AuthResult:
    """Successful login: the session token and the public user view."""

    token: str
    user: dict


def _now_ms() -> int:
    return int(time.time() * 1000)


class AuthService:
    """
    Verifies email/password pairs against a CredentialStore.

    Stateless: nothing is recorded about issued tokens, so they cannot be
    listed or revoked.
    """

    def __init__(
        self,
        store: CredentialStore,
        hasher: PasswordHasher,
        token_codec: SessionTokenCodec,
        clock: Optional[Callable[[], int]] = None,
    ):
        """
        Initialize AuthService.

        Args:
            store: Registry of known identities
            hasher: Hasher matching the store's secret hashes
            token_codec: Codec for issued session tokens
            clock: Millisecond clock, defaults to wall time
        """
        self._store = store
        self._hasher = hasher
        self._token_codec = token_codec
        self._clock = clock or _now_ms
        # Verified against when the email is unknown so both failures cost one bcrypt check
        self._dummy_hash = hasher.hash_password("invalid-credentials-placeholder")

    def authenticate(self, email: str, password: str) -> AuthResult:
        """
        Verify credentials and issue a session token.

        Args:
            email: Submitted email, matched exactly
            password: Submitted plaintext password

        Returns:
            AuthResult with the token and {id, email, name}

        Raises:
            InvalidCredentialsError: Unknown email or wrong password
        """
        identity = self._store.find_by_email(email)

        if identity is None:
            self._hasher.verify_password(password, self._dummy_hash)
            logger.info("Login rejected: invalid credentials")
            raise InvalidCredentialsError()

        if not self._hasher.verify_password(password, identity.secret_hash):
            logger.info("Login rejected: invalid credentials")
            raise InvalidCredentialsError()

        token = self._token_codec.issue(identity.email, self._clock())
        logger.info(f"Login succeeded for identity {identity.id}")
        return AuthResult(token=token, user=identity.public_view())
