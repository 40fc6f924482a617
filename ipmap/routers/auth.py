"""
FastAPI router for Auth endpoints.

Provides login and session inspection. Logout is client side only:
the server keeps no session state.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from common.auth import SessionClaims, SessionTokenCodec
from common.utils import UnauthorizedException
from ipmap.dependencies import get_auth_service, get_token_codec, require_session
from ipmap.schemas.auth import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    SessionInfoResponse,
)
from ipmap.services.auth import AuthService, InvalidCredentialsError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={401: {"model": MessageResponse}},
)
def login(
    body: LoginRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """
    Login with email and password.

    Unknown email and wrong password both return 401 with the same body.
    Declared sync so the bcrypt check runs in the threadpool.
    """
    try:
        result = auth_service.authenticate(body.email, body.password)
    except InvalidCredentialsError as e:
        raise UnauthorizedException(str(e))

    return LoginResponse(token=result.token, user=result.user)


@router.get(
    "/session",
    response_model=SessionInfoResponse,
    responses={401: {"model": MessageResponse}},
)
async def get_session(
    claims: Annotated[SessionClaims, Depends(require_session)],
    codec: Annotated[SessionTokenCodec, Depends(get_token_codec)],
):
    """
    Decode the presented session token.

    With the unsigned codec this only checks the token's shape; a
    signature is checked only when token signing is configured.
    """
    return SessionInfoResponse(
        email=claims.email,
        issuedAt=claims.issued_at_ms,
        verified=codec.verifiable,
    )
