"""
Pydantic models for Auth request/response validation.

The same models are used by the server routes and to parse the login
response the client persists under the "user" key.
"""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Request body for user login."""
    email: str = Field(..., description="Registered email (exact, case-sensitive match)")
    password: str = Field(..., description="Plaintext password, verified against the stored hash")


class PublicUser(BaseModel):
    """Public view of an identity; never carries the secret hash."""
    id: int
    email: str
    name: str


class LoginResponse(BaseModel):
    """Response for successful authentication."""
    token: str
    user: PublicUser


class SessionInfoResponse(BaseModel):
    """Decoded contents of a presented session token."""
    email: str
    issuedAt: int = Field(..., description="Issue time, milliseconds since the epoch")
    verified: bool = Field(..., description="True when the token signature was checked")


class MessageResponse(BaseModel):
    """Error body used by the auth endpoints."""
    message: str
