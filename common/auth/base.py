"""
Abstract session token codec interface.

Defines the contract that all session token strategies must implement.
This allows swapping between the unsigned legacy artifact and a signed
JWT without changing the login route.

Example:
    from common.auth import SessionTokenCodec, OpaqueSessionTokenCodec, SignedSessionTokenCodec

    def get_token_codec(settings) -> SessionTokenCodec:
        if settings.TOKEN_SIGNING_SECRET:
            return SignedSessionTokenCodec(secret=settings.TOKEN_SIGNING_SECRET)
        return OpaqueSessionTokenCodec()
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class SessionClaims:
    """Decoded contents of a session token."""

    email: str
    issued_at_ms: int


class SessionTokenCodec(ABC):
    """
    Abstract session token codec.

    Implementations turn an (email, timestamp) pair into an opaque string
    and back.
    """

    #: True when ``decode`` proves the token was issued by this server.
    verifiable: bool = False

    @abstractmethod
    def issue(self, email: str, timestamp_ms: int) -> str:
        """
        Create a session token.

        Args:
            email: Email of the authenticated identity
            timestamp_ms: Issue time in milliseconds since the epoch

        Returns:
            The token string
        """
        pass

    @abstractmethod
    def decode(self, token: str) -> SessionClaims:
        """
        Decode a session token.

        Args:
            token: Token previously returned by ``issue``

        Returns:
            The decoded claims

        Raises:
            ValueError: If the token is malformed, tampered with or expired
        """
        pass
