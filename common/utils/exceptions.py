"""
Custom HTTP exceptions with error codes.

Extends FastAPI's HTTPException so that handlers can raise a typed error
and the application renders ``detail`` as the JSON body.

Example:
    from common.utils import UnauthorizedException

    @router.post("/login")
    async def login(body: LoginRequest):
        raise UnauthorizedException("Invalid credentials")
"""

from typing import Optional, Any, Dict
from fastapi import HTTPException


class APIException(HTTPException):
    """
    Base API exception with error code support.

    Provides consistent error response format across the API.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        code: Optional[str] = None,
        details: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        """
        Create an API exception.

        Args:
            status_code: HTTP status code
            message: Human-readable error message
            code: Machine-readable error code
            details: Additional error details
            headers: Optional response headers
        """
        detail: Dict[str, Any] = {"message": message}

        if code:
            detail["code"] = code

        if details is not None:
            detail["details"] = details

        super().__init__(
            status_code=status_code,
            detail=detail,
            headers=headers,
        )


class UnauthorizedException(APIException):
    """401 Unauthorized - Missing or invalid authentication."""

    def __init__(
        self,
        message: str = "Unauthorized",
        code: Optional[str] = None,
        details: Optional[Any] = None,
    ):
        super().__init__(401, message, code, details)
