"""
FastAPI authentication dependencies.

Provides a factory to create a dependency that extracts a bearer token
and decodes it with any SessionTokenCodec implementation.

Example:
    from common.auth import SignedSessionTokenCodec, create_auth_dependency

    codec = SignedSessionTokenCodec(secret="your-secret")
    get_session_claims = create_auth_dependency(lambda: codec)

    @app.get("/profile")
    async def get_profile(claims: SessionClaims = Depends(get_session_claims)):
        return {"email": claims.email}
"""

from typing import Callable, Optional
from fastapi import Header

from common.auth.base import SessionClaims, SessionTokenCodec
from common.utils.exceptions import UnauthorizedException


def create_auth_dependency(
    get_token_codec: Callable[[], SessionTokenCodec],
    header_name: str = "Authorization",
    scheme: str = "Bearer",
):
    """
    Factory to create FastAPI auth dependencies.

    Args:
        get_token_codec: Callable that returns the SessionTokenCodec instance
        header_name: Header to extract token from (default: Authorization)
        scheme: Auth scheme prefix (default: Bearer)

    Returns:
        A FastAPI dependency function that returns the decoded SessionClaims
    """

    async def get_session_claims(
        authorization: Optional[str] = Header(None, alias=header_name),
    ) -> SessionClaims:
        """
        Extract and decode the session token from the authorization header.

        Raises:
            UnauthorizedException: If token is missing or does not decode
        """
        if not authorization:
            raise UnauthorizedException("Missing authorization header", code="UNAUTHORIZED")

        prefix = f"{scheme} "
        if not authorization.startswith(prefix):
            raise UnauthorizedException(
                f"Invalid authorization scheme. Expected: {scheme}",
                code="INVALID_AUTH_SCHEME",
            )

        token = authorization[len(prefix):].strip()

        if not token:
            raise UnauthorizedException("Token is empty", code="EMPTY_TOKEN")

        codec = get_token_codec()
        try:
            return codec.decode(token)
        except ValueError as e:
            raise UnauthorizedException(str(e), code="INVALID_TOKEN")

    return get_session_claims
