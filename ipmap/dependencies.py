"""
FastAPI dependencies for IP Map Navigator.

Provides dependency injection for the auth services.
"""

import logging
from typing import Optional

from common.auth import (
    OpaqueSessionTokenCodec,
    PasswordHasher,
    SessionTokenCodec,
    SignedSessionTokenCodec,
    create_auth_dependency,
)
from ipmap.config import Settings
from ipmap.services.auth import AuthService, CredentialStore

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────
# Global service instances
# ─────────────────────────────────────────────────────────────────

_password_hasher: Optional[PasswordHasher] = None
_credential_store: Optional[CredentialStore] = None
_token_codec: Optional[SessionTokenCodec] = None
_auth_service: Optional[AuthService] = None


# ─────────────────────────────────────────────────────────────────
# Initialization
# ─────────────────────────────────────────────────────────────────

def build_token_codec(settings: Settings) -> SessionTokenCodec:
    """Signed JWTs when a signing secret is configured, otherwise the legacy artifact."""
    if settings.token_signing_enabled():
        return SignedSessionTokenCodec(
            secret=settings.TOKEN_SIGNING_SECRET,
            algorithm=settings.TOKEN_ALGORITHM,
            expire_minutes=settings.TOKEN_EXPIRE_MINUTES,
        )
    logger.warning("TOKEN_SIGNING_SECRET not set: issuing unsigned session tokens")
    return OpaqueSessionTokenCodec()


def init_auth_services(
    settings: Settings,
    credential_store: Optional[CredentialStore] = None,
) -> None:
    """
    Initialize auth services.

    Args:
        settings: Application settings
        credential_store: Prebuilt store; built from settings when omitted
    """
    global _password_hasher, _credential_store, _token_codec, _auth_service

    _password_hasher = PasswordHasher(rounds=settings.BCRYPT_ROUNDS)

    if credential_store is not None:
        _credential_store = credential_store
    elif settings.IDENTITIES_FILE:
        _credential_store = CredentialStore.from_file(settings.IDENTITIES_FILE)
    else:
        _credential_store = CredentialStore.seeded(_password_hasher)

    _token_codec = build_token_codec(settings)

    _auth_service = AuthService(
        store=_credential_store,
        hasher=_password_hasher,
        token_codec=_token_codec,
    )


def init_all_services(settings: Settings) -> None:
    """
    Initialize all services at application startup.

    Args:
        settings: Application settings
    """
    init_auth_services(settings)


def reset_services() -> None:
    """Drop all service instances (application shutdown)."""
    global _password_hasher, _credential_store, _token_codec, _auth_service

    _password_hasher = None
    _credential_store = None
    _token_codec = None
    _auth_service = None


# ─────────────────────────────────────────────────────────────────
# Auth getters
# ─────────────────────────────────────────────────────────────────

def get_credential_store() -> CredentialStore:
    """Get credential store instance."""
    if _credential_store is None:
        raise RuntimeError("Auth services not initialized.")
    return _credential_store


def get_token_codec() -> SessionTokenCodec:
    """Get session token codec instance."""
    if _token_codec is None:
        raise RuntimeError("Auth services not initialized.")
    return _token_codec


def get_auth_service() -> AuthService:
    """Get auth service instance."""
    if _auth_service is None:
        raise RuntimeError("Auth services not initialized.")
    return _auth_service


# Decodes "Authorization: Bearer <token>" with the active codec
require_session = create_auth_dependency(get_token_codec)
