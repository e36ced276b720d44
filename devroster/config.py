"""Configuration management using environment variables"""
import os
from typing import List

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./devroster.db"
DEFAULT_IMAGE_URL = "https://avatars.githubusercontent.com/u/45007745?v=4"


class Settings:
    """Application settings - only what the roster needs"""

    def __init__(self):
        # Environment
        self.environment = os.getenv("ENVIRONMENT", "development")

        # Server configuration
        self.host = os.getenv("HOST", "0.0.0.0")
        self.port = int(os.getenv("PORT", "8000"))

        # Database configuration (SQLite by default - any async SQLAlchemy URL works)
        if self.environment == "production":
            self.database_url = self._get_required("DATABASE_URL")
        else:
            self.database_url = os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)

        # CORS origins (comma-separated list)
        self.cors_origins = os.getenv("CORS_ORIGINS", "")

        # Form defaults
        self.default_image_url = os.getenv("DEFAULT_IMAGE_URL", DEFAULT_IMAGE_URL)
        self.default_skill_rating = int(os.getenv("DEFAULT_SKILL_RATING", "55"))

        # REST client (used by the CLI)
        self.api_base_url = os.getenv("API_BASE_URL", "http://localhost:8000")
        self.client_timeout = float(os.getenv("CLIENT_TIMEOUT", "10.0"))  # seconds

        # Logging
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def cors_origin_list(self) -> List[str]:
        """CORS_ORIGINS split on commas, blanks dropped"""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    def _get_required(self, key: str) -> str:
        """Get required environment variable or raise error."""
        value = os.getenv(key, "").strip()
        if not value:
            raise ValueError(
                f"Missing required environment variable: {key}. "
                f"Required in production mode."
            )
        return value


# Global settings instance
settings = Settings()
