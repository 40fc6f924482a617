"""
Base settings class for environment configuration.

Uses Pydantic Settings for automatic environment variable loading.
Extend this class for application-specific settings.

Example:
    from common.config import BaseAppSettings

    class Settings(BaseAppSettings):
        # App-specific settings
        GEO_PROVIDER_URL: str = "https://ipinfo.io"

    settings = Settings()
    print(settings.PORT)
"""

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseAppSettings(BaseSettings):
    """
    Base settings class with common configuration options.

    Automatically loads values from environment variables.
    Extend this class for application-specific settings.
    """

    # ==========================================================================
    # Authentication Settings
    # ==========================================================================
    # bcrypt cost factor for hashing seeded secrets
    BCRYPT_ROUNDS: int = 8

    # Session token signing. When unset, tokens are the unsigned
    # base64("<email>:<millis>") artifacts the web client expects.
    TOKEN_SIGNING_SECRET: Optional[str] = None
    TOKEN_ALGORITHM: str = "HS256"
    TOKEN_EXPIRE_MINUTES: Optional[int] = None

    # ==========================================================================
    # Server Settings
    # ==========================================================================
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False
    ENVIRONMENT: str = "development"  # development, staging, production
    LOG_LEVEL: str = "INFO"

    # CORS Settings
    CORS_ORIGINS: str = "*"  # Comma-separated origins or "*"
    CORS_ALLOW_CREDENTIALS: bool = True

    # ==========================================================================
    # Pydantic Settings Configuration
    # ==========================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="allow",  # Allow app-specific settings
        case_sensitive=True,
    )

    def get_cors_origins(self) -> list:
        """Parse CORS_ORIGINS into a list."""
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.ENVIRONMENT.lower() == "production"

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.ENVIRONMENT.lower() == "development"

    def token_signing_enabled(self) -> bool:
        """True when session tokens are issued as signed JWTs."""
        return bool(self.TOKEN_SIGNING_SECRET)

    def validate_required(self) -> None:
        """
        Validate that required settings are configured.

        Raises:
            ValueError: If required settings are missing or inconsistent
        """
        errors = []

        if not 4 <= self.BCRYPT_ROUNDS <= 31:
            errors.append("BCRYPT_ROUNDS must be between 4 and 31")

        if self.TOKEN_EXPIRE_MINUTES is not None and not self.token_signing_enabled():
            errors.append("TOKEN_EXPIRE_MINUTES requires TOKEN_SIGNING_SECRET")

        if self.TOKEN_EXPIRE_MINUTES is not None and self.TOKEN_EXPIRE_MINUTES <= 0:
            errors.append("TOKEN_EXPIRE_MINUTES must be positive")

        if self.is_production() and self.CORS_ORIGINS == "*" and self.CORS_ALLOW_CREDENTIALS:
            errors.append("CORS_ORIGINS must be explicit in production when credentials are allowed")

        if errors:
            raise ValueError("Configuration errors:\n- " + "\n- ".join(errors))
