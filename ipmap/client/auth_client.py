"""
Client for the login endpoint.
"""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from ipmap.client.errors import LoginFailedError
from ipmap.schemas.auth import LoginResponse

logger = logging.getLogger(__name__)


class AuthClient:
    """Posts credentials to ``/api/login``."""

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    async def login(self, email: str, password: str) -> LoginResponse:
        """
        Exchange credentials for a session.

        Raises:
            LoginFailedError: On 401, any other failure status, a transport
                error or an unexpected body. The user sees one message for all.
        """
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.post(
                    f"{self._base_url}/api/login",
                    json={"email": email, "password": password},
                )
        except httpx.HTTPError as e:
            logger.warning(f"Login request failed: {e}")
            raise LoginFailedError(f"Login request failed: {e}") from e

        if response.status_code != 200:
            logger.info(f"Login rejected with HTTP {response.status_code}")
            raise LoginFailedError(f"Login rejected with HTTP {response.status_code}")

        try:
            return LoginResponse.model_validate_json(response.content)
        except ValidationError as e:
            raise LoginFailedError("Unexpected login response") from e
