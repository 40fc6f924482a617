"""
Geolocation provider client (ipinfo.io compatible).

Wraps ``GET <provider>/geo`` (the caller's own address) and
``GET <provider>/{ip}/geo``. Any transport error, non-2xx status or
payload without a usable ``loc`` becomes a NetworkError. No retries.
"""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from ipmap.client.errors import NetworkError
from ipmap.schemas.geo import GeoLocation

logger = logging.getLogger(__name__)


class GeoLookupClient:
    """Async client for the geolocation provider."""

    def __init__(
        self,
        base_url: str = "https://ipinfo.io",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            base_url: Provider root URL
            timeout: Per-request timeout in seconds
            transport: Custom httpx transport (tests)
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    async def current_location(self) -> GeoLocation:
        """Location of the machine making the request."""
        return await self._get("/geo")

    async def lookup(self, ip: str) -> GeoLocation:
        """Location of ``ip``."""
        return await self._get(f"/{ip}/geo")

    async def _get(self, path: str) -> GeoLocation:
        url = f"{self._base_url}{path}"
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.get(url)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning(f"Geo provider returned {e.response.status_code} for {path}")
            raise NetworkError(f"Provider returned HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.warning(f"Geo provider request failed for {path}: {e}")
            raise NetworkError(f"Provider request failed: {e}") from e

        try:
            return GeoLocation.model_validate_json(response.content)
        except ValidationError as e:
            logger.warning(f"Geo provider payload unusable for {path}: {e.error_count()} errors")
            raise NetworkError("Provider returned an unusable payload") from e
