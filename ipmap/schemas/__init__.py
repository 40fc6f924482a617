"""
IP Map Navigator schemas.
"""

from ipmap.schemas.auth import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    PublicUser,
    SessionInfoResponse,
)
from ipmap.schemas.geo import GeoLocation

__all__ = [
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "PublicUser",
    "SessionInfoResponse",
    "GeoLocation",
]
