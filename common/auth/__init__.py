"""
Authentication module - Password hashing and pluggable session token codecs.
"""

from common.auth.base import SessionClaims, SessionTokenCodec
from common.auth.password_hasher import PasswordHasher
from common.auth.token_codec import OpaqueSessionTokenCodec, SignedSessionTokenCodec
from common.auth.dependencies import create_auth_dependency

__all__ = [
    "SessionClaims",
    "SessionTokenCodec",
    "PasswordHasher",
    "OpaqueSessionTokenCodec",
    "SignedSessionTokenCodec",
    "create_auth_dependency",
]
