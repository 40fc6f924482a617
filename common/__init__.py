"""
Common library for reusable infrastructure components.

- auth: bcrypt password hashing, session token codecs, FastAPI auth dependency
- utils: HTTP exceptions
- config: Base settings class
- logging: Process-wide logging setup
"""

from common.auth import (
    SessionClaims,
    SessionTokenCodec,
    PasswordHasher,
    OpaqueSessionTokenCodec,
    SignedSessionTokenCodec,
    create_auth_dependency,
)
from common.utils import APIException, UnauthorizedException
from common.config import BaseAppSettings

__all__ = [
    # Auth
    "SessionClaims",
    "SessionTokenCodec",
    "PasswordHasher",
    "OpaqueSessionTokenCodec",
    "SignedSessionTokenCodec",
    "create_auth_dependency",
    # Utils
    "APIException",
    "UnauthorizedException",
    # Config
    "BaseAppSettings",
]
