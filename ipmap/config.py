"""
IP Map Navigator application settings.

Extends the base settings with server and client specific configuration.
"""

from typing import Optional
from common.config import BaseAppSettings


class Settings(BaseAppSettings):
    """IP Map Navigator settings."""

    # ==========================================================================
    # Credential Store
    # ==========================================================================
    # JSON file of pre-hashed identities; the built-in demo identity is used when unset
    IDENTITIES_FILE: Optional[str] = None

    # ==========================================================================
    # Static Frontend
    # ==========================================================================
    # Built SPA directory served in production (index.html fallback)
    STATIC_DIR: str = "dist"

    # ==========================================================================
    # Client Settings
    # ==========================================================================
    # Base URL of this API as seen by the client
    API_BASE_URL: str = "http://localhost:8000"
    API_TIMEOUT_SECONDS: float = 10.0

    # Geolocation provider (ipinfo.io compatible)
    GEO_PROVIDER_URL: str = "https://ipinfo.io"
    GEO_TIMEOUT_SECONDS: float = 10.0

    # Local client state ("user" and "history" keys)
    CLIENT_STATE_PATH: str = "~/.ipmap/state.json"

    # Transient notices are dismissed after this many seconds
    NOTICE_DISMISS_SECONDS: float = 3.0

    def serve_static(self) -> bool:
        """Static files are only served in production, as the dev server proxies /api."""
        return self.is_production()


# Global settings instance
settings = Settings()
