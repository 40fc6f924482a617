"""
Auth services: credential store and authentication.
"""

from ipmap.services.auth.credential_store import CredentialStore, Identity
from ipmap.services.auth.auth_service import (
    AuthResult,
    AuthService,
    InvalidCredentialsError,
    INVALID_CREDENTIALS_MESSAGE,
)

__all__ = [
    "CredentialStore",
    "Identity",
    "AuthResult",
    "AuthService",
    "InvalidCredentialsError",
    "INVALID_CREDENTIALS_MESSAGE",
]
