"""
Session token codecs.

``OpaqueSessionTokenCodec`` produces the artifact the web client has
always received: ``base64("<email>:<millis>")``. It is a reversible
encoding, not a signature, so anyone can mint a token that decodes.

``SignedSessionTokenCodec`` issues an HS256 JWT instead. It is opt-in
(``TOKEN_SIGNING_SECRET``) and changes the token format seen by clients.

Example:
    codec = SignedSessionTokenCodec(secret="your-secret-key", expire_minutes=60)
    token = codec.issue("user@example.com", 1700000000000)
    claims = codec.decode(token)
    print(claims.email)
"""

import base64
import binascii
from datetime import timedelta
from typing import Optional

from jose import jwt, JWTError

from common.auth.base import SessionClaims, SessionTokenCodec


class OpaqueSessionTokenCodec(SessionTokenCodec):
    """Unsigned ``email:timestamp`` artifact, base64 encoded."""

    verifiable = False

    def issue(self, email: str, timestamp_ms: int) -> str:
        raw = f"{email}:{timestamp_ms}".encode("utf-8")
        return base64.b64encode(raw).decode("ascii")

    def decode(self, token: str) -> SessionClaims:
        try:
            raw = base64.b64decode(token.encode("ascii"), validate=True).decode("utf-8")
        except (binascii.Error, UnicodeError) as e:
            raise ValueError(f"Invalid token: {e}")

        # Emails may not contain ':' unquoted, but split from the right anyway
        email, sep, timestamp = raw.rpartition(":")
        if not sep or not email or not (timestamp.isascii() and timestamp.isdigit()):
            raise ValueError("Invalid token: expected '<email>:<timestamp>'")

        return SessionClaims(email=email, issued_at_ms=int(timestamp))


class SignedSessionTokenCodec(SessionTokenCodec):
    """HS256-signed session token, verified on decode."""

    verifiable = True

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expire_minutes: Optional[int] = None,
    ):
        """
        Initialize the signed codec.

        Args:
            secret: Secret key for JWT signing (keep this secure!)
            algorithm: JWT algorithm (default: HS256)
            expire_minutes: Token lifetime; tokens never expire when None
        """
        if not secret:
            raise ValueError("A signing secret is required")
        self.secret = secret
        self.algorithm = algorithm
        self.expire = timedelta(minutes=expire_minutes) if expire_minutes else None

    def issue(self, email: str, timestamp_ms: int) -> str:
        issued_at = timestamp_ms // 1000
        payload = {
            "sub": email,
            "iat": issued_at,
            "iat_ms": timestamp_ms,
        }
        if self.expire is not None:
            payload["exp"] = issued_at + int(self.expire.total_seconds())
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode(self, token: str) -> SessionClaims:
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
            )
        except JWTError as e:
            raise ValueError(f"Invalid token: {e}")

        email = payload.get("sub")
        issued_at_ms = payload.get("iat_ms")
        if not isinstance(email, str) or not isinstance(issued_at_ms, int):
            raise ValueError("Invalid token: missing claims")

        return SessionClaims(email=email, issued_at_ms=issued_at_ms)
