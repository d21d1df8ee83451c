from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Spotify Artist Stats Gateway"
    route_prefix: str = "/spotify"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 10101
    shutdown_grace_seconds: float = 5.0  # Keep serving this long after a signal
    shutdown_timeout_seconds: int = 60   # Deadline for in-flight requests

    # Spotify API (static bearer token, no refresh)
    spotify_api_token: str = Field(min_length=1)
    spotify_api_base_url: str = "https://api.spotify.com/v1"
    spotify_request_timeout: float = 15.0


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
