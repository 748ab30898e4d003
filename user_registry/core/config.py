# Standard library imports
import os
from typing import Final, List, Optional
from dotenv import load_dotenv


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Load environment variables from .env file
        load_dotenv()

        # Application Metadata
        self.app_title: Final[str] = os.getenv("APP_TITLE", "User Registry API")
        self.app_version: Final[str] = os.getenv("APP_VERSION", "1.0.0")

        # Logging Configuration
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()

        # Store Configuration
        # Wrap the in-memory store in a lock when it is shared by request threads
        self.store_thread_safe: Final[bool] = os.getenv(
            "STORE_THREAD_SAFE", "true"
        ).lower() in ("true", "1", "yes")

        # CORS Configuration (comma separated, e.g. "http://localhost:3000,https://example.com")
        self.cors_allow_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
            if origin.strip()
        ]


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
