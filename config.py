"""
config.py

Centralized configuration management using pydantic-settings.
All modules must import settings from this file.
Direct os.getenv() calls are prohibited elsewhere.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application-wide settings loaded from environment variables and .env."""

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Comma-separated list; "*" allows every origin
    cors_origins: str = "*"

    # Logging
    log_level: str = "INFO"

    # Placeholder device seeded at startup for manual testing
    seed_default_device: bool = True
    default_device_id: str = "VX0dFVvmu1QSpQdvj1p74iyfx9n1"
    default_latitude: float = 14.5995
    default_longitude: float = 120.9842
    default_rssi: int = -90

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
